"""Separator placement relative to a rendered line.

The rule spans the viewport horizontally from the line's left edge and sits
a few pixels above the line's top edge.
"""

from dataclasses import dataclass

from methodsep.exceptions import InvalidInputError

DEFAULT_COLOR = "DarkSlateGray"
DEFAULT_THICKNESS = 2.0
DEFAULT_OFFSET = 2.0


@dataclass(frozen=True, slots=True)
class LineBounds:
    """Rendered position of a line, in view coordinates.

    Attributes:
        left: X coordinate of the line's left edge.
        top: Y coordinate of the line's top edge.
    """

    left: float
    top: float


@dataclass(frozen=True, slots=True)
class SeparatorStyle:
    """Visual style of a separator.

    Attributes:
        color: Stroke colour name understood by the host.
        thickness: Stroke thickness in pixels.
        offset: Distance in pixels between the rule and the line's top edge.
    """

    color: str = DEFAULT_COLOR
    thickness: float = DEFAULT_THICKNESS
    offset: float = DEFAULT_OFFSET


DEFAULT_STYLE = SeparatorStyle()


@dataclass(frozen=True, slots=True)
class SeparatorLine:
    """A horizontal rule ready to hand to a drawing surface."""

    x1: float
    x2: float
    y1: float
    y2: float
    color: str
    thickness: float


def place_separator(
    bounds: LineBounds,
    viewport_width: float,
    style: SeparatorStyle = DEFAULT_STYLE,
) -> SeparatorLine:
    """Place a separator above a rendered line.

    Args:
        bounds: Position of the line the separator goes above.
        viewport_width: Visible width of the view.
        style: Colour, thickness and vertical offset.

    Returns:
        The separator line.

    Raises:
        InvalidInputError: If the viewport width or thickness is negative.
    """
    if viewport_width < 0:
        raise InvalidInputError(message=f"Negative viewport width: {viewport_width}")
    if style.thickness < 0:
        raise InvalidInputError(message=f"Negative separator thickness: {style.thickness}")

    y = bounds.top - style.offset
    return SeparatorLine(
        x1=bounds.left,
        x2=bounds.left + viewport_width,
        y1=y,
        y2=y,
        color=style.color,
        thickness=style.thickness,
    )
