"""Base exception classes for flatenv.

All flatenv exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery
"""

from typing import Any, Dict, Optional


class FlatenvError(Exception):
    """Base exception for all flatenv errors.

    Attributes:
        code: Machine-readable error code (e.g., "MALFORMED_SOURCE")
        message: Human-readable error message
        details: Optional additional context for debugging/recovery
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error string."""
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(FlatenvError):
    """Base for configuration loading errors."""

    pass


class SourceUnavailableError(ConfigurationError):
    """Raised when a configuration file exists but cannot be read.

    A missing file is not an error; loaders treat it as an empty source.
    """

    def __init__(self, path: str, cause: BaseException):
        super().__init__(
            code="SOURCE_UNAVAILABLE",
            message=f"failed to read config file {path}",
            details={"path": path, "cause": str(cause)},
        )
        self.path = path
        self.cause = cause


class MalformedSourceError(ConfigurationError):
    """Raised when a JSON/YAML document cannot be parsed into a mapping."""

    def __init__(self, path: str, format: str, cause: Any):
        super().__init__(
            code="MALFORMED_SOURCE",
            message=f"failed to parse {format} config {path}",
            details={"path": path, "format": format, "cause": str(cause)},
        )
        self.path = path
        self.format = format
        self.cause = cause


class UnsupportedFormatError(ConfigurationError):
    """Raised when no parser is registered for a configuration format."""

    def __init__(self, path: str, format: Any):
        super().__init__(
            code="UNSUPPORTED_FORMAT",
            message=f"unsupported config format for file: {path}",
            details={"path": path, "format": str(format)},
        )
        self.path = path
        self.format = format
