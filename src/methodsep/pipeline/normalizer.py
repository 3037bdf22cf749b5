"""Text normalization for C++ source buffers.

Handles:
- Line ending normalization
- Byte-order mark removal
"""

from dataclasses import dataclass

_BYTE_ORDER_MARK = "\ufeff"


@dataclass(frozen=True, slots=True)
class NormalizedSource:
    """Result of normalizing a source buffer.

    Attributes:
        lines: Tuple of lines (without line endings). Never empty.
        text: Full normalized text with newlines.
        bom_stripped: Whether a leading byte-order mark was removed.
    """

    lines: tuple[str, ...]
    text: str
    bom_stripped: bool

    @property
    def line_count(self) -> int:
        """Number of lines in the buffer."""
        return len(self.lines)


class Normalizer:
    """Normalizes source text for downstream scanning.

    Applies the following transformations:
    1. Byte-order mark removal (optional)
    2. Line ending normalization (CRLF/CR → LF)

    Line contents are otherwise left untouched, including indentation and
    trailing whitespace; the scanner trims lines itself.
    """

    def __init__(self, *, strip_bom: bool = True) -> None:
        """Initialize the normalizer.

        Args:
            strip_bom: If True, remove a leading U+FEFF byte-order mark.
        """
        self._strip_bom = strip_bom

    def normalize(self, text: str) -> NormalizedSource:
        """Normalize source text.

        An empty buffer still has one (empty) line, as in an editor.

        Args:
            text: Raw source text.

        Returns:
            NormalizedSource with normalized lines and text.
        """
        bom_stripped = False
        if self._strip_bom and text.startswith(_BYTE_ORDER_MARK):
            text = text[len(_BYTE_ORDER_MARK) :]
            bom_stripped = True

        # Normalize line endings: CRLF and CR to LF
        text = text.replace("\r\n", "\n").replace("\r", "\n")

        return NormalizedSource(
            lines=tuple(text.split("\n")),
            text=text,
            bom_stripped=bom_stripped,
        )
