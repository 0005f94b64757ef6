"""Configuration file format detection."""

from enum import Enum
from pathlib import Path
from typing import Union


class ConfigFormat(str, Enum):
    """Supported configuration source formats."""

    ENV = "env"
    JSON = "json"
    YAML = "yaml"

    @property
    def structured(self) -> bool:
        """True for formats that can nest (JSON, YAML)."""
        return self is not ConfigFormat.ENV


_EXTENSIONS = {
    ".json": ConfigFormat.JSON,
    ".yml": ConfigFormat.YAML,
    ".yaml": ConfigFormat.YAML,
}


def detect_format(path: Union[str, Path]) -> ConfigFormat:
    """Detect the configuration format from a file extension.

    The extension is compared case-insensitively. Anything that is not a
    JSON or YAML extension, including no extension at all, is treated as
    an env file.

    Examples:
        detect_format("app.json")  -> ConfigFormat.JSON
        detect_format("a.YML")     -> ConfigFormat.YAML
        detect_format(".env")      -> ConfigFormat.ENV
        detect_format("notes.txt") -> ConfigFormat.ENV
    """
    return _EXTENSIONS.get(Path(path).suffix.lower(), ConfigFormat.ENV)


__all__ = ["ConfigFormat", "detect_format"]
