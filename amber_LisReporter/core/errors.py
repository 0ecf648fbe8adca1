# amber_LisReporter/core/errors.py
"""Error kinds raised by the report pipeline."""
from __future__ import annotations


class RelisError(Exception):
    """Base error; anything derived from it aborts the run with status 1."""


class ArgumentError(RelisError, ValueError):
    """Missing or unusable command-line input."""


class FileSystemError(RelisError, OSError):
    """A matched file or the summary file could not be read or written."""


class PatternError(RelisError, RuntimeError):
    """The field/value regex failed to compile."""


class ValueFormatError(RelisError, ValueError):
    """A captured value is not a valid float."""


class GlobError(RelisError, ValueError):
    """The file-name pattern is empty or malformed."""


class ConfigurationError(RelisError, ValueError):
    """The YAML configuration could not be loaded."""


__all__ = [
    "RelisError",
    "ArgumentError",
    "FileSystemError",
    "PatternError",
    "ValueFormatError",
    "GlobError",
    "ConfigurationError",
]
