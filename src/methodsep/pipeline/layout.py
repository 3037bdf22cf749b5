"""Layout change bookkeeping.

An editor reports the lines it laid out anew after a scroll, resize or edit.
Separators are recomputed over the span between the first and last of them.
"""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LineRange:
    """An inclusive span of line numbers.

    Attributes:
        start: First line number in the span.
        end: Last line number in the span (inclusive).
    """

    start: int
    end: int

    def __len__(self) -> int:
        return max(0, self.end - self.start + 1)

    def __contains__(self, line_number: object) -> bool:
        return isinstance(line_number, int) and self.start <= line_number <= self.end


def changed_line_range(line_numbers: Iterable[int]) -> LineRange | None:
    """Compute the span covered by new or reformatted lines.

    Args:
        line_numbers: Buffer line numbers of the lines that were laid out.
            Order and duplicates do not matter.

    Returns:
        The inclusive range from the smallest to the largest number, or None
        if no lines were reported.
    """
    start: int | None = None
    end: int | None = None
    for number in line_numbers:
        if start is None or number < start:
            start = number
        if end is None or number > end:
            end = number

    if start is None or end is None:
        return None
    return LineRange(start=start, end=end)


@dataclass(frozen=True, slots=True)
class LayoutChange:
    """A single layout-changed notification.

    Attributes:
        lines: Buffer line numbers of the new or reformatted lines.
    """

    lines: tuple[int, ...]

    @property
    def range(self) -> LineRange | None:
        """Span to recompute, or None if nothing was laid out."""
        return changed_line_range(self.lines)
