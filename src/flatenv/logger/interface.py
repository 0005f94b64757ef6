"""
Logger interface for flatenv.

Loaders accept any implementation of this contract, so host applications
can route flatenv's messages into their own logging setup.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract base class for the logging interface.

    Keyword arguments passed to each method are structured context
    (e.g. ``path=...``, ``keys=3``) and are rendered by the implementation.

    Example:
        class PrintLogger(Logger):
            def info(self, message: str, **kwargs: Any) -> None:
                print(f"INFO: {message} {kwargs}")
            # ... implement other methods
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical message."""
        pass

    @abstractmethod
    def get_session_id(self) -> str:
        """Get the current session ID.

        Returns:
            The unique session identifier for this logger instance.
        """
        pass
