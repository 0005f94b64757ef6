"""Exceptions raised by flatenv.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery

Usage:
    from flatenv.exceptions import (
        FlatenvError,
        ConfigurationError,
        SourceUnavailableError,
        MalformedSourceError,
        UnsupportedFormatError,
    )
"""

from flatenv.exceptions.base import (
    ConfigurationError,
    FlatenvError,
    MalformedSourceError,
    SourceUnavailableError,
    UnsupportedFormatError,
)

__all__ = [
    "FlatenvError",
    "ConfigurationError",
    "SourceUnavailableError",
    "MalformedSourceError",
    "UnsupportedFormatError",
]
