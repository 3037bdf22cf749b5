"""Render separators into source text as comment rules.

Used where there is no drawing surface (batch scans, diffs, terminals): each
marked line gets a rule such as ``// -----`` inserted above it.
"""

from dataclasses import dataclass

from methodsep.pipeline.normalizer import NormalizedSource
from methodsep.pipeline.scanner import ScanResult

DEFAULT_COMMENT_PREFIX = "//"
DEFAULT_RULE_CHAR = "-"
DEFAULT_RULE_WIDTH = 78


@dataclass(frozen=True, slots=True)
class AnnotatedSource:
    """Source text with separator rules inserted.

    Attributes:
        lines: All lines, rules included.
        text: Lines joined with newlines.
        separator_count: Number of rules inserted by this pass.
    """

    lines: tuple[str, ...]
    text: str
    separator_count: int


class SourceAnnotator:
    """Inserts comment rules above marked lines.

    A rule takes the indentation of the line it precedes. Annotating already
    annotated text adds nothing: when the line directly above a marked line
    is already the rule, it is kept as is.
    """

    def __init__(
        self,
        comment_prefix: str = DEFAULT_COMMENT_PREFIX,
        rule_char: str = DEFAULT_RULE_CHAR,
        rule_width: int = DEFAULT_RULE_WIDTH,
    ) -> None:
        """Initialize the annotator.

        Args:
            comment_prefix: Line comment marker of the target language.
            rule_char: Character repeated to draw the rule.
            rule_width: Total width of the rule, prefix included.
        """
        self._comment_prefix = comment_prefix
        self._rule_char = rule_char
        self._rule_width = rule_width

    @property
    def rule(self) -> str:
        """The rule text, without indentation."""
        fill = max(self._rule_width - len(self._comment_prefix) - 1, 1)
        return f"{self._comment_prefix} {self._rule_char * fill}"

    def annotate(self, source: NormalizedSource, scan: ScanResult) -> AnnotatedSource:
        """Insert a rule above every marked line.

        Args:
            source: The normalized buffer that was scanned.
            scan: Output from the SeparatorScanner component.

        Returns:
            AnnotatedSource with rules inserted.
        """
        marked = set(scan.line_indexes)
        rule = self.rule
        output: list[str] = []
        inserted = 0

        for index, text in enumerate(source.lines):
            if index in marked:
                previous = source.lines[index - 1].strip() if index > 0 else ""
                if previous != rule:
                    indent = text[: len(text) - len(text.lstrip())]
                    output.append(f"{indent}{rule}")
                    inserted += 1
            output.append(text)

        return AnnotatedSource(
            lines=tuple(output),
            text="\n".join(output),
            separator_count=inserted,
        )
