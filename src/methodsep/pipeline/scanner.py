"""Separator scanning over a source buffer.

Walks a range of lines and, for each one, looks one line ahead: when the next
line is classified as a function definition, a separator belongs above it.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from methodsep.patterns.definitions import is_function_definition_line
from methodsep.pipeline.normalizer import NormalizedSource

logger = logging.getLogger(__name__)

LineClassifier = Callable[[str], bool]
LineAccessor = Callable[[int], str]


@dataclass(frozen=True, slots=True)
class SeparatorMark:
    """A line that receives a separator above it.

    Attributes:
        line_index: Zero-based buffer line of the detected definition.
        text: The trimmed line text that was classified.
    """

    line_index: int
    text: str


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Result of scanning a range of lines.

    Attributes:
        marks: Separator marks ordered by line index.
        lines_inspected: Number of lookahead lines passed to the classifier.
        start: First line number of the scanned range (after clamping).
        end: Last line number of the scanned range (after clamping).
    """

    marks: tuple[SeparatorMark, ...]
    lines_inspected: int
    start: int
    end: int

    @property
    def line_indexes(self) -> tuple[int, ...]:
        """Line indexes that receive a separator."""
        return tuple(mark.line_index for mark in self.marks)


class SeparatorScanner:
    """Finds the lines that start a function definition.

    For every line number n in the scanned range, line n + 1 is trimmed and
    passed to the classifier. A positive result marks line n + 1, except when
    n is the first line of the buffer: definitions on buffer lines 0 and 1
    never get a separator, since there is nothing above them to separate.
    """

    def __init__(self, classifier: LineClassifier = is_function_definition_line) -> None:
        """Initialize the scanner.

        Args:
            classifier: Decision function taking one trimmed line.
        """
        self._classifier = classifier

    def scan(
        self,
        source: NormalizedSource,
        start: int = 0,
        end: int | None = None,
    ) -> ScanResult:
        """Scan a range of lines for separator positions.

        Args:
            source: Output from the Normalizer component.
            start: First line number to consider (clamped to 0).
            end: Last line number to consider, inclusive. Defaults to the
                last line of the buffer; clamped to it.

        Returns:
            ScanResult with marks in ascending line order.
        """
        return self.scan_lines(source.line_count, source.lines.__getitem__, start, end)

    def scan_lines(
        self,
        line_count: int,
        line_text: LineAccessor,
        start: int = 0,
        end: int | None = None,
    ) -> ScanResult:
        """Scan a range of lines read on demand.

        Only the lookahead lines of the range are fetched, so a host can
        pass its own buffer accessor instead of copying the whole buffer.

        Args:
            line_count: Number of lines in the buffer.
            line_text: Returns the text of a line by zero-based index.
            start: First line number to consider (clamped to 0).
            end: Last line number to consider, inclusive. Defaults to the
                last line of the buffer; clamped to it.

        Returns:
            ScanResult with marks in ascending line order.
        """
        last_line = line_count - 1
        start = max(start, 0)
        end = last_line if end is None else min(end, last_line)

        marks: list[SeparatorMark] = []
        inspected = 0

        for line_number in range(start, end + 1):
            next_index = line_number + 1
            if next_index >= line_count:
                break

            next_text = line_text(next_index).strip()
            inspected += 1
            if not self._classifier(next_text):
                continue

            if line_number - 1 < 0:
                continue

            marks.append(SeparatorMark(line_index=next_index, text=next_text))

        logger.debug(
            "Scanned lines %d-%d: %d inspected, %d separators",
            start,
            end,
            inspected,
            len(marks),
        )

        return ScanResult(
            marks=tuple(marks),
            lines_inspected=inspected,
            start=start,
            end=end,
        )
