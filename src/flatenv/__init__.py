"""flatenv - load .env, JSON and YAML files into flat environment-style keys.

This package provides:
- config: Format detection, parsing, flattening and store writing
- exceptions: Exception classes with structured error info
- logger: Structured logging with optional JSON output
"""

__version__ = "1.0.0"

from flatenv.config import (
    ConfigFormat,
    ConfigHandle,
    EnvironStore,
    KeyValueStore,
    MemoryStore,
    detect_format,
    get_all,
    get_bool,
    get_int,
    get_str,
    load_config_file,
    load_env_file,
    must_load_config_file,
    must_load_env_file,
)
from flatenv.exceptions import (
    ConfigurationError,
    FlatenvError,
    MalformedSourceError,
    SourceUnavailableError,
    UnsupportedFormatError,
)
from flatenv.logger import Logger, StructuredLogger, create_logger, get_logger

__all__ = [
    "__version__",
    # Config
    "ConfigHandle",
    "ConfigFormat",
    "detect_format",
    "KeyValueStore",
    "EnvironStore",
    "MemoryStore",
    "load_config_file",
    "must_load_config_file",
    "load_env_file",
    "must_load_env_file",
    "get_str",
    "get_int",
    "get_bool",
    "get_all",
    # Exceptions
    "FlatenvError",
    "ConfigurationError",
    "SourceUnavailableError",
    "MalformedSourceError",
    "UnsupportedFormatError",
    # Logger
    "Logger",
    "StructuredLogger",
    "create_logger",
    "get_logger",
]
