"""Host-agnostic method separator adornment.

Any editor can drive separators by exposing its view through ``TextView``
and its overlay surface through ``AdornmentLayer``, then forwarding each
layout-changed notification to ``MethodSeparatorAdornment.on_layout_changed``.
"""

import logging
from collections.abc import Iterable
from typing import Protocol

from methodsep.pipeline.geometry import (
    DEFAULT_STYLE,
    LineBounds,
    SeparatorLine,
    SeparatorStyle,
    place_separator,
)
from methodsep.pipeline.layout import changed_line_range
from methodsep.pipeline.scanner import SeparatorScanner

logger = logging.getLogger(__name__)


class TextView(Protocol):
    """The part of an editor view the adornment reads from."""

    @property
    def line_count(self) -> int:
        """Number of lines in the current snapshot."""
        ...

    @property
    def viewport_width(self) -> float:
        """Visible width of the view."""
        ...

    def line_text(self, index: int) -> str:
        """Text of a snapshot line, without its line break."""
        ...

    def line_bounds(self, index: int) -> LineBounds | None:
        """Rendered bounds of a line, or None if it is not laid out."""
        ...


class AdornmentLayer(Protocol):
    """The overlay surface separators are drawn on."""

    def add_adornment(self, line_index: int, separator: SeparatorLine) -> None:
        """Attach a separator to a line, moving with the text."""
        ...


class MethodSeparatorAdornment:
    """Draws a separator above every detected function definition in a view.

    Example:
        adornment = MethodSeparatorAdornment(view, layer)
        view.on_layout_changed(adornment.on_layout_changed)
        ...
        adornment.dispose()  # when the view closes
    """

    def __init__(
        self,
        view: TextView,
        layer: AdornmentLayer,
        scanner: SeparatorScanner | None = None,
        style: SeparatorStyle = DEFAULT_STYLE,
    ) -> None:
        """Initialize the adornment.

        Args:
            view: Editor view to read lines and geometry from.
            layer: Overlay layer that receives the separators.
            scanner: Scanner to use; defaults to the built-in classifier.
            style: Drawing style for the separators.
        """
        self._view = view
        self._layer = layer
        self._scanner = scanner or SeparatorScanner()
        self._style = style
        self._disposed = False

    @property
    def is_disposed(self) -> bool:
        """Whether the adornment has been detached from its view."""
        return self._disposed

    def on_layout_changed(self, changed_lines: Iterable[int]) -> int:
        """Recompute separators for the lines the view laid out.

        Args:
            changed_lines: Buffer line numbers of new or reformatted lines.

        Returns:
            Number of separators added to the layer.
        """
        if self._disposed:
            return 0

        line_range = changed_line_range(changed_lines)
        if line_range is None:
            return 0

        scan = self._scanner.scan_lines(
            self._view.line_count,
            self._view.line_text,
            line_range.start,
            line_range.end,
        )

        placed = 0
        for mark in scan.marks:
            bounds = self._view.line_bounds(mark.line_index)
            if bounds is None:
                continue
            separator = place_separator(bounds, self._view.viewport_width, self._style)
            self._layer.add_adornment(mark.line_index, separator)
            placed += 1

        logger.debug(
            "Layout change %d-%d: placed %d separators",
            line_range.start,
            line_range.end,
            placed,
        )
        return placed

    def dispose(self) -> None:
        """Detach from the view; later layout changes are ignored."""
        self._disposed = True

    def __enter__(self) -> "MethodSeparatorAdornment":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()
