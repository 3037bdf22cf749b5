"""Configuration loading for batch scanning and annotation.

Settings live in an optional YAML file::

    extensions: [.cpp, .h]
    encoding: utf-8
    annotate:
      comment_prefix: "//"
      rule_char: "="
      rule_width: 100
    style:
      color: SteelBlue
      thickness: 1
      offset: 3
"""

import codecs
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from methodsep.exceptions import InvalidConfigError
from methodsep.pipeline.annotator import (
    DEFAULT_COMMENT_PREFIX,
    DEFAULT_RULE_CHAR,
    DEFAULT_RULE_WIDTH,
)
from methodsep.pipeline.geometry import SeparatorStyle

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "methodsep.yaml"

DEFAULT_EXTENSIONS: tuple[str, ...] = (
    ".cpp",
    ".cc",
    ".cxx",
    ".c++",
    ".h",
    ".hh",
    ".hpp",
    ".hxx",
    ".inl",
    ".ipp",
)

_TOP_LEVEL_KEYS = frozenset({"extensions", "encoding", "annotate", "style"})
_ANNOTATE_KEYS = frozenset({"comment_prefix", "rule_char", "rule_width"})
_STYLE_KEYS = frozenset({"color", "thickness", "offset"})


@dataclass(frozen=True, slots=True)
class SeparatorConfig:
    """Settings shared by the finder and the scripts.

    Attributes:
        extensions: File suffixes treated as C++ sources (lowercase, with dot).
        encoding: Text encoding used to read source files.
        comment_prefix: Line comment marker used for annotation rules.
        rule_char: Character repeated to draw annotation rules.
        rule_width: Total width of annotation rules.
        style: Drawing style for rendered separators.
    """

    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    encoding: str = "utf-8"
    comment_prefix: str = DEFAULT_COMMENT_PREFIX
    rule_char: str = DEFAULT_RULE_CHAR
    rule_width: int = DEFAULT_RULE_WIDTH
    style: SeparatorStyle = field(default_factory=SeparatorStyle)


def load_config(path: Path | str | None = None) -> SeparatorConfig:
    """Load configuration from YAML.

    Args:
        path: Configuration file. If None, ``methodsep.yaml`` in the working
            directory is used when present, defaults otherwise.

    Returns:
        The loaded configuration.

    Raises:
        InvalidConfigError: If the file is missing (explicit path only),
            unparsable, or holds unknown keys or wrongly typed values.
    """
    if path is None:
        candidate = Path(DEFAULT_CONFIG_FILENAME)
        if not candidate.exists():
            return SeparatorConfig()
        path = candidate

    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as exc:
        raise InvalidConfigError(message="Configuration file not found", path=path) from exc
    except yaml.YAMLError as exc:
        raise InvalidConfigError(message=f"Invalid YAML: {exc}", path=path) from exc

    logger.debug("Loaded configuration from %s", path)
    try:
        return config_from_dict({} if data is None else data)
    except InvalidConfigError as exc:
        raise InvalidConfigError(message=exc.message, path=path) from exc


def config_from_dict(data: Any) -> SeparatorConfig:
    """Build a configuration from parsed YAML data.

    Args:
        data: Mapping as produced by ``yaml.safe_load``.

    Returns:
        The configuration, with defaults for absent keys.

    Raises:
        InvalidConfigError: On unknown keys or wrongly typed values.
    """
    _check_mapping(data, _TOP_LEVEL_KEYS, "configuration")

    extensions = DEFAULT_EXTENSIONS
    if "extensions" in data:
        raw = data["extensions"]
        if not isinstance(raw, list) or not all(isinstance(ext, str) for ext in raw):
            raise InvalidConfigError(message="'extensions' must be a list of strings")
        extensions = tuple(_normalize_extension(ext) for ext in raw)

    encoding = data.get("encoding", "utf-8")
    if not isinstance(encoding, str):
        raise InvalidConfigError(message="'encoding' must be a string")
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise InvalidConfigError(message=f"Unknown encoding: {encoding}") from exc

    annotate = data.get("annotate")
    if annotate is None:
        annotate = {}
    _check_mapping(annotate, _ANNOTATE_KEYS, "annotate")
    comment_prefix = annotate.get("comment_prefix", DEFAULT_COMMENT_PREFIX)
    rule_char = annotate.get("rule_char", DEFAULT_RULE_CHAR)
    rule_width = annotate.get("rule_width", DEFAULT_RULE_WIDTH)
    if not isinstance(comment_prefix, str) or not comment_prefix:
        raise InvalidConfigError(message="'annotate.comment_prefix' must be a non-empty string")
    if not isinstance(rule_char, str) or len(rule_char) != 1:
        raise InvalidConfigError(message="'annotate.rule_char' must be a single character")
    if isinstance(rule_width, bool) or not isinstance(rule_width, int) or rule_width <= 0:
        raise InvalidConfigError(message="'annotate.rule_width' must be a positive integer")

    style_data = data.get("style")
    if style_data is None:
        style_data = {}
    _check_mapping(style_data, _STYLE_KEYS, "style")
    defaults = SeparatorStyle()
    color = style_data.get("color", defaults.color)
    if not isinstance(color, str):
        raise InvalidConfigError(message="'style.color' must be a string")
    style = SeparatorStyle(
        color=color,
        thickness=_number(style_data, "thickness", defaults.thickness),
        offset=_number(style_data, "offset", defaults.offset),
    )

    return SeparatorConfig(
        extensions=extensions,
        encoding=encoding,
        comment_prefix=comment_prefix,
        rule_char=rule_char,
        rule_width=rule_width,
        style=style,
    )


def _check_mapping(data: Any, allowed: frozenset[str], section: str) -> None:
    """Reject non-mappings and unknown keys."""
    if not isinstance(data, dict):
        raise InvalidConfigError(message=f"'{section}' must be a mapping")
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise InvalidConfigError(message=f"Unknown keys in '{section}': {', '.join(map(str, unknown))}")


def _number(data: dict, key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        raise InvalidConfigError(message=f"'style.{key}' must be a non-negative number")
    return float(value)


def _normalize_extension(extension: str) -> str:
    extension = extension.strip().lower()
    if not extension.startswith("."):
        extension = f".{extension}"
    return extension
