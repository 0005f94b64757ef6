"""Shared fixtures for flatenv tests."""

from pathlib import Path
from typing import Any, Callable, List, Tuple

import pytest

from flatenv.config import MemoryStore
from flatenv.logger import Logger


class RecordingLogger(Logger):
    """Logger that keeps every call for assertions."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, dict]] = []

    def _record(self, level: str, message: str, **kwargs: Any) -> None:
        self.records.append((level, message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._record("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._record("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._record("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._record("ERROR", message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._record("CRITICAL", message, **kwargs)

    def get_session_id(self) -> str:
        return "recording"

    def levels(self) -> List[str]:
        return [level for level, _, _ in self.records]


@pytest.fixture(autouse=True)
def _isolate_loader_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's FLATENV_* variables out of the tests."""
    for name in ("FLATENV_CONFIG_FILE", "FLATENV_LOG_LEVEL", "FLATENV_LOG_FILE", "FLATENV_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a config file under tmp_path and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
