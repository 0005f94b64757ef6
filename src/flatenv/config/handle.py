"""ConfigHandle: one configuration source loaded into a key/value store.

Example:
    from flatenv.config import ConfigHandle

    config = ConfigHandle("config.yaml")   # loads immediately
    host = config.get_str("DATABASE_HOST", "localhost")
    port = config.get_int("DATABASE_PORT", 5432)

    config.reload()                        # pick up file changes
    config.set_file("other.json")          # switch sources
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Union

from flatenv.config import accessors
from flatenv.config.flatten import FlatMapping
from flatenv.config.formats import ConfigFormat, detect_format
from flatenv.config.pipeline import load_flat_mapping
from flatenv.config.settings import LoaderSettings, resolve_source_path
from flatenv.config.stores import EnvironStore, KeyValueStore
from flatenv.config.writer import NamespaceWriter, OverridePolicy
from flatenv.exceptions import ConfigurationError
from flatenv.logger import Logger, get_logger


def initial_policy(format: ConfigFormat) -> OverridePolicy:
    """Override policy for the first load of a source.

    Env files never replace values that are already set, so real
    environment variables win. Structured files always overwrite.
    """
    if format is ConfigFormat.ENV:
        return OverridePolicy.PRESERVE_EXISTING
    return OverridePolicy.OVERWRITE


class ConfigHandle:
    """Tracks a configuration source and the keys it wrote into a store.

    The handle remembers exactly which keys its last successful load
    wrote, so ``reload`` and ``set_file`` can remove them before loading
    again. Keys that were already set and kept under first-definition-wins
    are not recorded and are never removed by the handle.

    Attributes:
        last_error: Error swallowed by the loading constructor, if any
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        *,
        store: Optional[KeyValueStore] = None,
        logger: Optional[Logger] = None,
        settings: Optional[LoaderSettings] = None,
        autoload: bool = True,
    ) -> None:
        """Create a handle and, by default, load it.

        Args:
            path: Configuration file (default: resolved from settings)
            store: Store to write into (default: the process environment)
            logger: Logger for load events (default: get_logger("flatenv"))
            settings: Loader settings used to resolve a missing path
            autoload: Load immediately. A failure is logged and kept in
                ``last_error`` instead of being raised.
        """
        self._source_path = resolve_source_path(path, settings)
        self._format = detect_format(self._source_path)
        self._store: KeyValueStore = EnvironStore() if store is None else store
        self._logger = logger or get_logger("flatenv")
        self._writer = NamespaceWriter(self._store, self._logger)
        self._loaded = False
        self._last_written: FlatMapping = {}
        self.last_error: Optional[ConfigurationError] = None

        if autoload:
            try:
                self.load()
            except ConfigurationError as err:
                self.last_error = err
                self._logger.warning(
                    "Config load failed",
                    path=self._source_path,
                    error_code=err.code,
                    error=err.message,
                )

    @property
    def source_path(self) -> str:
        return self._source_path

    @property
    def format(self) -> ConfigFormat:
        return self._format

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def store(self) -> KeyValueStore:
        return self._store

    @property
    def last_written(self) -> FlatMapping:
        """Copy of the pairs written by the most recent successful load."""
        return dict(self._last_written)

    def load(self) -> None:
        """Load the source into the store.

        Does nothing if the handle is already loaded. On failure the
        handle stays unloaded and the error propagates.

        Raises:
            ConfigurationError: If the source cannot be read or parsed
        """
        if self._loaded:
            return
        self._load(initial_policy(self._format))

    def reload(self) -> None:
        """Remove the keys written by the last load and load again.

        Reloading always overwrites, so a changed env file updates values
        that the first load wrote.

        Raises:
            ConfigurationError: If the source cannot be read or parsed
        """
        self._reset()
        self._load(OverridePolicy.OVERWRITE)

    def set_file(self, path: Union[str, Path]) -> None:
        """Switch to another source, removing the old source's keys first.

        Raises:
            ConfigurationError: If the new source cannot be read or parsed
        """
        self._reset()
        self._source_path = str(path)
        self._format = detect_format(self._source_path)
        self._load(OverridePolicy.OVERWRITE)

    def must_load(self) -> None:
        """Load the source or terminate the process.

        Raises:
            SystemExit: If loading fails
        """
        try:
            self.load()
        except ConfigurationError as err:
            self._logger.critical(
                "Config load failed, exiting", path=self._source_path, error_code=err.code
            )
            raise SystemExit(f"failed to load config file: {err}") from err

    def all(self) -> Dict[str, str]:
        """Snapshot of the whole store, not only this handle's keys."""
        return accessors.get_all(self._store)

    def get_str(self, key: str, default: Optional[str] = None) -> str:
        return accessors.get_str(self._store, key, default)

    def get_int(self, key: str, default: Optional[int] = None) -> int:
        return accessors.get_int(self._store, key, default)

    def get_bool(self, key: str, default: Optional[bool] = None) -> bool:
        return accessors.get_bool(self._store, key, default)

    def _reset(self) -> None:
        self._writer.unapply(self._last_written)
        self._logger.debug(
            "Removed previously loaded keys", path=self._source_path, keys=len(self._last_written)
        )
        self._last_written = {}
        self._loaded = False

    def _load(self, policy: OverridePolicy) -> None:
        flat = load_flat_mapping(self._source_path, self._format)
        self._last_written = self._writer.apply(flat, policy)
        self._loaded = True
        self.last_error = None
        self._logger.info(
            "Config loaded",
            path=self._source_path,
            format=self._format.value,
            policy=policy.value,
            keys=len(flat),
            written=len(self._last_written),
        )

    def __repr__(self) -> str:
        return (
            f"ConfigHandle(source_path={self._source_path!r}, "
            f"format={self._format.value}, loaded={self._loaded})"
        )


__all__ = ["ConfigHandle", "initial_policy"]
