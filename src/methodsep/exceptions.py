"""Exceptions for methodsep separator detection."""

from dataclasses import dataclass
from pathlib import Path


class SeparatorError(Exception):
    """Base exception for all separator detection errors."""

    pass


@dataclass
class InvalidInputError(SeparatorError):
    """Input is not valid for processing.

    Raised when:
    - Source text is not a string
    - Geometry parameters are negative
    """

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class SourceReadError(SeparatorError):
    """A source file could not be read or decoded.

    Attributes:
        message: Description of the error.
        path: The file that failed to load.
    """

    message: str
    path: Path

    def __str__(self) -> str:
        return f"{self.message} ({self.path})"


@dataclass
class InvalidConfigError(SeparatorError):
    """Configuration file is malformed or holds unsupported values.

    Attributes:
        message: Description of the error.
        path: The configuration file, or None for in-memory data.
    """

    message: str
    path: Path | None = None

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message} ({self.path})"
