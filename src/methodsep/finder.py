"""MethodSeparatorFinder - Main public interface for separator detection.

Provides three detection methods:
- find(): Strict detection, raises on invalid input
- find_safe(): Safe detection, returns None on failure
- find_with_metadata(): Full result with debugging info
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from methodsep.config import SeparatorConfig
from methodsep.exceptions import InvalidInputError, SeparatorError, SourceReadError
from methodsep.pipeline.annotator import SourceAnnotator
from methodsep.pipeline.normalizer import Normalizer
from methodsep.pipeline.scanner import LineClassifier, SeparatorMark, SeparatorScanner

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FindResult:
    """Full detection result with metadata.

    Attributes:
        marks: Lines that receive a separator, in ascending order.
        line_count: Number of lines in the normalized source.
        bom_stripped: Whether a byte-order mark was removed.
        success: Whether detection ran.
        error: Error if detection failed, None otherwise.
        path: Source file, for results of scan_file().
    """

    marks: tuple[SeparatorMark, ...]
    line_count: int
    bom_stripped: bool
    success: bool
    error: SeparatorError | None
    path: Path | None = None

    @property
    def line_indexes(self) -> tuple[int, ...]:
        """Zero-based line indexes that receive a separator."""
        return tuple(mark.line_index for mark in self.marks)


class MethodSeparatorFinder:
    """Main class for locating method separators in C++ source.

    The detection pipeline:
    1. Normalize text (byte-order mark, line endings)
    2. Scan every line, classifying the line after it
    3. Optionally annotate the source with comment rules

    Example:
        finder = MethodSeparatorFinder()

        # Strict detection (raises on invalid input)
        lines = finder.find(source_text)

        # Safe detection (returns None on failure)
        lines = finder.find_safe(source_text)

        # Full metadata
        result = finder.find_with_metadata(source_text)
    """

    def __init__(
        self,
        config: SeparatorConfig | None = None,
        classifier: LineClassifier | None = None,
    ) -> None:
        """Initialize the finder.

        Args:
            config: Settings for file reading and annotation.
            classifier: Replacement decision function for a trimmed line.
        """
        self._config = config or SeparatorConfig()
        self._normalizer = Normalizer()
        self._scanner = SeparatorScanner(classifier) if classifier else SeparatorScanner()
        self._annotator = SourceAnnotator(
            comment_prefix=self._config.comment_prefix,
            rule_char=self._config.rule_char,
            rule_width=self._config.rule_width,
        )

    @property
    def config(self) -> SeparatorConfig:
        """The active configuration."""
        return self._config

    def find(self, source_text: str) -> tuple[int, ...]:
        """Find the lines that receive a separator.

        Args:
            source_text: C++ source text.

        Returns:
            Zero-based line indexes, ascending.

        Raises:
            InvalidInputError: If the input is not a string.
        """
        result = self.find_with_metadata(source_text)

        if result.error is not None:
            raise result.error

        return result.line_indexes

    def find_safe(self, source_text: str) -> tuple[int, ...] | None:
        """Find separator lines, returning None on any failure.

        Args:
            source_text: C++ source text.

        Returns:
            Zero-based line indexes, or None if detection failed.
        """
        try:
            result = self.find_with_metadata(source_text)
            return result.line_indexes if result.success else None
        except Exception:
            logger.exception("Unexpected error during separator detection")
            return None

    def find_with_metadata(self, source_text: str) -> FindResult:
        """Find separator lines with full metadata.

        Args:
            source_text: C++ source text.

        Returns:
            FindResult with marks and debugging info.
        """
        if not isinstance(source_text, str):
            return FindResult(
                marks=(),
                line_count=0,
                bom_stripped=False,
                success=False,
                error=InvalidInputError(
                    message=f"Expected str, got {type(source_text).__name__}"
                ),
            )

        normalized = self._normalizer.normalize(source_text)
        scan = self._scanner.scan(normalized)

        return FindResult(
            marks=scan.marks,
            line_count=normalized.line_count,
            bom_stripped=normalized.bom_stripped,
            success=True,
            error=None,
        )

    def annotate(self, source_text: str) -> str:
        """Insert comment rules above every detected definition.

        Args:
            source_text: C++ source text.

        Returns:
            Annotated source text with normalized line endings.

        Raises:
            InvalidInputError: If the input is not a string.
        """
        if not isinstance(source_text, str):
            raise InvalidInputError(message=f"Expected str, got {type(source_text).__name__}")

        normalized = self._normalizer.normalize(source_text)
        scan = self._scanner.scan(normalized)
        return self._annotator.annotate(normalized, scan).text

    def read_source(self, path: Path | str) -> str:
        """Read a source file with the configured encoding.

        Raises:
            SourceReadError: If the file cannot be read or decoded, or the
                configured encoding is unknown.
        """
        path = Path(path)
        try:
            return path.read_text(encoding=self._config.encoding)
        except UnicodeDecodeError as exc:
            raise SourceReadError(
                message=f"Cannot decode as {self._config.encoding}", path=path
            ) from exc
        except LookupError as exc:
            raise SourceReadError(
                message=f"Unknown encoding: {self._config.encoding}", path=path
            ) from exc
        except OSError as exc:
            raise SourceReadError(message=exc.strerror or str(exc), path=path) from exc

    def scan_file(self, path: Path | str) -> FindResult:
        """Find separator lines in a source file.

        Args:
            path: C++ source file.

        Returns:
            FindResult with ``path`` set.

        Raises:
            SourceReadError: If the file cannot be read or decoded.
        """
        path = Path(path)
        result = self.find_with_metadata(self.read_source(path))
        logger.debug("%s: %d separators", path, len(result.marks))

        return FindResult(
            marks=result.marks,
            line_count=result.line_count,
            bom_stripped=result.bom_stripped,
            success=result.success,
            error=result.error,
            path=path,
        )

    def iter_source_files(self, root: Path | str) -> Iterator[Path]:
        """Yield C++ source files under a directory, sorted by path.

        A file path is yielded as is, whatever its suffix.

        Args:
            root: Directory to walk, or a single file.

        Raises:
            SourceReadError: If root is neither a file nor a directory.
        """
        root = Path(root)
        if root.is_file():
            yield root
            return
        if not root.is_dir():
            raise SourceReadError(message="No such file or directory", path=root)

        extensions = frozenset(self._config.extensions)
        for path in sorted(root.rglob("*")):
            if path.is_file() and path.suffix.lower() in extensions:
                yield path
