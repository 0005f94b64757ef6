"""Writing flat mappings into a key/value store."""

from enum import Enum
from typing import Mapping, Optional

from flatenv.config.flatten import FlatMapping
from flatenv.config.stores import KeyValueStore
from flatenv.logger import Logger, get_logger


class OverridePolicy(str, Enum):
    """How ``NamespaceWriter.apply`` treats keys that are already set.

    PRESERVE_EXISTING: keep the current value (first definition wins), so
        real environment variables take precedence over an env file.
    OVERWRITE: always write, so structured files and reloads can change
        values that were set before.
    """

    PRESERVE_EXISTING = "preserve_existing"
    OVERWRITE = "overwrite"


class NamespaceWriter:
    """Applies flat mappings to a store and removes them again."""

    def __init__(self, store: KeyValueStore, logger: Optional[Logger] = None) -> None:
        self.store = store
        self._logger = logger or get_logger("flatenv")

    def apply(self, flat: Mapping[str, str], policy: OverridePolicy) -> FlatMapping:
        """Write every pair of ``flat`` into the store.

        Args:
            flat: Store key -> value pairs
            policy: Override policy for keys that are already set

        Returns:
            The pairs that were actually written. Under PRESERVE_EXISTING
            keys that were already set are left out, and so are keys the
            store rejects (e.g. an environment name containing "=").
        """
        written: FlatMapping = {}
        for key, value in flat.items():
            if policy is OverridePolicy.PRESERVE_EXISTING and self.store.contains(key):
                continue
            try:
                self.store.set(key, value)
            except ValueError as err:
                self._logger.warning("Skipped key rejected by store", key=key, reason=str(err))
                continue
            written[key] = value
        return written

    def unapply(self, previous: Mapping[str, str]) -> None:
        """Remove every key of ``previous`` from the store."""
        for key in previous:
            self.store.unset(key)


__all__ = ["OverridePolicy", "NamespaceWriter"]
