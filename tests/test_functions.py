"""Tests for the module-level loaders and accessors."""

import os
from unittest.mock import patch

import pytest

from flatenv.config import (
    MemoryStore,
    get_all,
    get_bool,
    get_int,
    get_str,
    load_config_file,
    load_env_file,
    must_load_config_file,
    must_load_env_file,
)
from flatenv.exceptions import MalformedSourceError


class TestLoadConfigFile:
    """Tests for load_config_file"""

    def test_json_into_store(self, write_config, store):
        path = write_config(
            "global_test.json",
            '{"global_test": "success", "global_port": 3000, "global_debug": false}',
        )
        written = load_config_file(path, store)

        assert written == {
            "GLOBAL_TEST": "success",
            "GLOBAL_PORT": "3000",
            "GLOBAL_DEBUG": "false",
        }
        assert get_str("GLOBAL_TEST", store=store) == "success"
        assert get_int("GLOBAL_PORT", store=store) == 3000
        assert get_bool("GLOBAL_DEBUG", True, store=store) is False

    def test_env_file_keeps_existing_values(self, write_config):
        store = MemoryStore({"KEY": "preexisting"})
        written = load_config_file(write_config("app.env", "KEY=fromfile\nNEW=1\n"), store)

        assert written == {"NEW": "1"}
        assert store.get("KEY") == "preexisting"

    def test_yaml_overwrites_existing_values(self, write_config):
        store = MemoryStore({"KEY": "preexisting"})
        load_config_file(write_config("app.yaml", "key: fromfile\n"), store)
        assert store.get("KEY") == "fromfile"

    def test_missing_file(self, tmp_path, store):
        assert load_config_file(tmp_path / "nope.json", store) == {}

    def test_errors_propagate(self, write_config, store):
        with pytest.raises(MalformedSourceError):
            load_config_file(write_config("bad.json", "{"), store)

    def test_writes_process_environment_by_default(self, write_config):
        path = write_config("app.json", '{"flatenv_fn": {"default": "yes"}}')
        with patch.dict(os.environ, {}, clear=False):
            load_config_file(path)
            assert os.environ["FLATENV_FN_DEFAULT"] == "yes"
            assert get_str("FLATENV_FN_DEFAULT") == "yes"
            assert get_all()["FLATENV_FN_DEFAULT"] == "yes"


class TestLoadEnvFile:
    """Tests for load_env_file"""

    def test_parses_any_extension_as_env(self, write_config, store):
        path = write_config("settings.json", "NAME=demo\n")
        assert load_env_file(path, store) == {"NAME": "demo"}

    def test_first_definition_wins(self, write_config):
        store = MemoryStore({"NAME": "preexisting"})
        load_env_file(write_config("settings.txt", "NAME=demo\n"), store)
        assert store.get("NAME") == "preexisting"

    def test_default_path_from_working_directory(self, tmp_path, store, monkeypatch):
        (tmp_path / ".env").write_text("FROM_CWD=1\n")
        monkeypatch.chdir(tmp_path)
        assert load_env_file(store=store) == {"FROM_CWD": "1"}


class TestMustLoad:
    """Tests for the fail-loudly module functions"""

    def test_must_load_config_file_exits(self, write_config, store):
        with pytest.raises(SystemExit) as exc_info:
            must_load_config_file(write_config("bad.yaml", "a: [\n"), store)
        assert "failed to load config file" in str(exc_info.value.code)

    def test_must_load_env_file_exits(self, tmp_path, store):
        with pytest.raises(SystemExit) as exc_info:
            must_load_env_file(tmp_path, store)
        assert "failed to load env file" in str(exc_info.value.code)
        assert "SOURCE_UNAVAILABLE" in str(exc_info.value.code)

    def test_must_load_success_returns_written(self, write_config, store):
        assert must_load_config_file(write_config("a.env", "A=1\n"), store) == {"A": "1"}
        assert must_load_env_file(write_config("b.env", "B=2\n"), store) == {"B": "2"}


class TestGlobalAccessors:
    """Tests for the process-environment accessors"""

    def test_read_process_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("FLATENV_ACCESSOR_STR", "hello")
        monkeypatch.setenv("FLATENV_ACCESSOR_INT", "17")
        monkeypatch.setenv("FLATENV_ACCESSOR_BOOL", "on")

        assert get_str("FLATENV_ACCESSOR_STR") == "hello"
        assert get_int("FLATENV_ACCESSOR_INT") == 17
        assert get_bool("FLATENV_ACCESSOR_BOOL") is True

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("FLATENV_ACCESSOR_MISSING", raising=False)
        assert get_str("FLATENV_ACCESSOR_MISSING", "fallback") == "fallback"
        assert get_int("FLATENV_ACCESSOR_MISSING", 5) == 5
        assert get_bool("FLATENV_ACCESSOR_MISSING", True) is True
