"""Typed accessors over a key/value store.

A missing key and an empty value are treated the same: both fall back to
the supplied default, or to the type's zero value when no default is given.
"""

import re
from typing import Dict, Optional

from flatenv.config.stores import KeyValueStore

_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")

TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
FALSE_VALUES = frozenset({"false", "0", "no", "off"})


def get_str(store: KeyValueStore, key: str, default: Optional[str] = None) -> str:
    """Get a string value, or ``default`` ("" if omitted)."""
    value = store.get(key)
    if value:
        return value
    return "" if default is None else default


def get_int(store: KeyValueStore, key: str, default: Optional[int] = None) -> int:
    """Get an integer value.

    Only an optional sign followed by ASCII digits is accepted; anything
    else (whitespace, underscores, decimals) falls back to ``default``
    (0 if omitted).
    """
    value = store.get(key)
    if value and _DECIMAL_INT.fullmatch(value):
        return int(value)
    return 0 if default is None else default


def get_bool(store: KeyValueStore, key: str, default: Optional[bool] = None) -> bool:
    """Get a boolean value.

    Accepts true/1/yes/on and false/0/no/off, case-insensitively and
    ignoring surrounding whitespace. Anything else falls back to
    ``default`` (False if omitted).
    """
    value = store.get(key)
    if value:
        normalized = value.strip().lower()
        if normalized in TRUE_VALUES:
            return True
        if normalized in FALSE_VALUES:
            return False
    return False if default is None else default


def get_all(store: KeyValueStore) -> Dict[str, str]:
    """Snapshot of every key in the store."""
    return store.snapshot()


__all__ = ["TRUE_VALUES", "FALSE_VALUES", "get_str", "get_int", "get_bool", "get_all"]
