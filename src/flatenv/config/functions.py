"""Module-level loaders and accessors.

These work like ``ConfigHandle`` without tracking what was written, for
scripts that load one file at startup and never reload it.

Example:
    from flatenv.config import load_config_file, get_int

    load_config_file("settings.yaml")
    port = get_int("SERVER_PORT", 8080)
"""

from pathlib import Path
from typing import Dict, Optional, Union

from flatenv.config import accessors
from flatenv.config.flatten import FlatMapping
from flatenv.config.formats import ConfigFormat, detect_format
from flatenv.config.handle import initial_policy
from flatenv.config.pipeline import load_flat_mapping
from flatenv.config.settings import resolve_source_path
from flatenv.config.stores import EnvironStore, KeyValueStore
from flatenv.config.writer import NamespaceWriter
from flatenv.exceptions import ConfigurationError
from flatenv.logger import get_logger

PathLike = Union[str, Path]


def _store(store: Optional[KeyValueStore]) -> KeyValueStore:
    return EnvironStore() if store is None else store


def _load(
    path: Optional[PathLike],
    format: Optional[ConfigFormat],
    store: Optional[KeyValueStore],
) -> FlatMapping:
    source = resolve_source_path(path)
    if format is None:
        format = detect_format(source)
    flat = load_flat_mapping(source, format)
    writer = NamespaceWriter(_store(store))
    written = writer.apply(flat, initial_policy(format))
    get_logger("flatenv").debug(
        "Config file applied", path=source, format=format.value, written=len(written)
    )
    return written


def _fail_loudly(kind: str, err: ConfigurationError) -> SystemExit:
    get_logger("flatenv").critical(f"Failed to load {kind}, exiting", error_code=err.code)
    return SystemExit(f"failed to load {kind}: {err}")


def load_config_file(
    path: Optional[PathLike] = None,
    store: Optional[KeyValueStore] = None,
) -> FlatMapping:
    """Load a .env, .json, .yml or .yaml file into the store.

    Env files keep values that are already set; JSON and YAML files
    overwrite them.

    Returns:
        The pairs that were written

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    return _load(path, None, store)


def must_load_config_file(
    path: Optional[PathLike] = None,
    store: Optional[KeyValueStore] = None,
) -> FlatMapping:
    """``load_config_file`` that raises SystemExit on failure."""
    try:
        return load_config_file(path, store)
    except ConfigurationError as err:
        raise _fail_loudly("config file", err) from err


def load_env_file(
    path: Optional[PathLike] = None,
    store: Optional[KeyValueStore] = None,
) -> FlatMapping:
    """Load a file as ``KEY=VALUE`` lines, whatever its extension.

    Values that are already set in the store are kept.
    """
    return _load(path, ConfigFormat.ENV, store)


def must_load_env_file(
    path: Optional[PathLike] = None,
    store: Optional[KeyValueStore] = None,
) -> FlatMapping:
    """``load_env_file`` that raises SystemExit on failure."""
    try:
        return load_env_file(path, store)
    except ConfigurationError as err:
        raise _fail_loudly("env file", err) from err


def get_str(key: str, default: Optional[str] = None, store: Optional[KeyValueStore] = None) -> str:
    return accessors.get_str(_store(store), key, default)


def get_int(key: str, default: Optional[int] = None, store: Optional[KeyValueStore] = None) -> int:
    return accessors.get_int(_store(store), key, default)


def get_bool(
    key: str, default: Optional[bool] = None, store: Optional[KeyValueStore] = None
) -> bool:
    return accessors.get_bool(_store(store), key, default)


def get_all(store: Optional[KeyValueStore] = None) -> Dict[str, str]:
    return accessors.get_all(_store(store))


__all__ = [
    "load_config_file",
    "must_load_config_file",
    "load_env_file",
    "must_load_env_file",
    "get_str",
    "get_int",
    "get_bool",
    "get_all",
]
