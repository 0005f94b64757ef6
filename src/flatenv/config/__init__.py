"""Configuration loading for flatenv.

Loads one .env, .json, .yml or .yaml file, flattens nested structure into
``SECTION_KEY`` style names and writes the result into a key/value store
(the process environment by default).

Example:
    from flatenv.config import ConfigHandle, load_config_file, get_str

    # Tracked handle with reload support
    config = ConfigHandle("config.yaml")
    config.get_int("SERVER_PORT", 8080)

    # One-shot load into os.environ
    load_config_file(".env")
    get_str("API_KEY")
"""

from flatenv.config.flatten import (
    FlatMapping,
    canonicalize_keys,
    flatten,
    stringify,
    to_store_key,
)
from flatenv.config.formats import ConfigFormat, detect_format
from flatenv.config.functions import (
    get_all,
    get_bool,
    get_int,
    get_str,
    load_config_file,
    load_env_file,
    must_load_config_file,
    must_load_env_file,
)
from flatenv.config.handle import ConfigHandle
from flatenv.config.parsers import (
    PARSERS,
    EnvParser,
    FormatParser,
    JsonParser,
    YamlParser,
    parse_source,
)
from flatenv.config.pipeline import load_flat_mapping
from flatenv.config.settings import LoaderSettings, resolve_source_path
from flatenv.config.stores import EnvironStore, KeyValueStore, MemoryStore
from flatenv.config.values import (
    BooleanNode,
    MappingNode,
    Node,
    NumberNode,
    SequenceNode,
    StringNode,
)
from flatenv.config.writer import NamespaceWriter, OverridePolicy

__all__ = [
    # Handle
    "ConfigHandle",
    # Module-level loaders and accessors
    "load_config_file",
    "must_load_config_file",
    "load_env_file",
    "must_load_env_file",
    "get_str",
    "get_int",
    "get_bool",
    "get_all",
    # Formats and parsing
    "ConfigFormat",
    "detect_format",
    "FormatParser",
    "EnvParser",
    "JsonParser",
    "YamlParser",
    "PARSERS",
    "parse_source",
    "load_flat_mapping",
    # Value tree
    "Node",
    "StringNode",
    "NumberNode",
    "BooleanNode",
    "SequenceNode",
    "MappingNode",
    # Flattening
    "FlatMapping",
    "flatten",
    "stringify",
    "to_store_key",
    "canonicalize_keys",
    # Stores and writing
    "KeyValueStore",
    "EnvironStore",
    "MemoryStore",
    "NamespaceWriter",
    "OverridePolicy",
    # Settings
    "LoaderSettings",
    "resolve_source_path",
]
