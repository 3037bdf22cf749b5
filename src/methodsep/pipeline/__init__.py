"""Pipeline components for method separator detection."""

from methodsep.pipeline.annotator import AnnotatedSource, SourceAnnotator
from methodsep.pipeline.geometry import (
    DEFAULT_STYLE,
    LineBounds,
    SeparatorLine,
    SeparatorStyle,
    place_separator,
)
from methodsep.pipeline.layout import LayoutChange, LineRange, changed_line_range
from methodsep.pipeline.normalizer import NormalizedSource, Normalizer
from methodsep.pipeline.scanner import ScanResult, SeparatorMark, SeparatorScanner

__all__ = [
    "AnnotatedSource",
    "DEFAULT_STYLE",
    "LayoutChange",
    "LineBounds",
    "LineRange",
    "NormalizedSource",
    "Normalizer",
    "ScanResult",
    "SeparatorLine",
    "SeparatorMark",
    "SeparatorScanner",
    "SeparatorStyle",
    "SourceAnnotator",
    "changed_line_range",
    "place_separator",
]
