"""methodsep - Detect C++ function definitions to draw method separators."""

from methodsep.adornment import AdornmentLayer, MethodSeparatorAdornment, TextView
from methodsep.config import SeparatorConfig, load_config
from methodsep.exceptions import (
    InvalidConfigError,
    InvalidInputError,
    SeparatorError,
    SourceReadError,
)
from methodsep.finder import FindResult, MethodSeparatorFinder
from methodsep.patterns.definitions import is_function_definition_line
from methodsep.pipeline import (
    AnnotatedSource,
    LayoutChange,
    LineBounds,
    LineRange,
    NormalizedSource,
    Normalizer,
    ScanResult,
    SeparatorLine,
    SeparatorMark,
    SeparatorScanner,
    SeparatorStyle,
    SourceAnnotator,
    changed_line_range,
    place_separator,
)

classify = is_function_definition_line

__version__ = "0.1.0"

__all__ = [
    "AdornmentLayer",
    "AnnotatedSource",
    "FindResult",
    "InvalidConfigError",
    "InvalidInputError",
    "LayoutChange",
    "LineBounds",
    "LineRange",
    "MethodSeparatorAdornment",
    "MethodSeparatorFinder",
    "NormalizedSource",
    "Normalizer",
    "ScanResult",
    "SeparatorConfig",
    "SeparatorError",
    "SeparatorLine",
    "SeparatorMark",
    "SeparatorScanner",
    "SeparatorStyle",
    "SourceAnnotator",
    "SourceReadError",
    "TextView",
    "changed_line_range",
    "classify",
    "is_function_definition_line",
    "load_config",
    "place_separator",
]
