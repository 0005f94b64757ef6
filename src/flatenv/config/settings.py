"""Settings for the loader itself, read from the process environment."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import find_dotenv

DEFAULT_SOURCE = ".env"


@dataclass
class LoaderSettings:
    """Loader configuration

    Attributes:
        config_file: Default configuration source used when no explicit
            path is given (default: None, meaning search for .env)
    """

    config_file: Optional[Path] = None

    def __post_init__(self):
        # Convert string path to Path object
        if isinstance(self.config_file, str):
            self.config_file = Path(self.config_file)

    @classmethod
    def from_env(cls, prefix: str = "FLATENV") -> "LoaderSettings":
        """Load loader settings from environment variables

        Args:
            prefix: Environment variable prefix

        Environment variables:
            {prefix}_CONFIG_FILE: Default configuration source
        """
        config_file = os.environ.get(f"{prefix}_CONFIG_FILE")
        return cls(config_file=Path(config_file) if config_file else None)


def resolve_source_path(
    path: Optional[Union[str, Path]] = None,
    settings: Optional[LoaderSettings] = None,
) -> str:
    """Resolve the configuration source to load.

    Precedence: explicit path, {prefix}_CONFIG_FILE, the nearest .env found
    walking up from the current directory, then a literal ".env".
    """
    if path is not None:
        return str(path)

    settings = settings or LoaderSettings.from_env()
    if settings.config_file is not None:
        return str(settings.config_file)

    return find_dotenv(DEFAULT_SOURCE, usecwd=True) or DEFAULT_SOURCE


__all__ = ["DEFAULT_SOURCE", "LoaderSettings", "resolve_source_path"]
