"""Tests for filesort.config — TOML loading, env overrides, registry."""
from unittest.mock import patch

import pytest

from filesort import config as config_mod
from filesort.config import _deep_merge, load_config


@pytest.fixture(autouse=True)
def reset_singletons():
    config_mod._config = None
    config_mod._registry = None
    yield
    config_mod._config = None
    config_mod._registry = None


class TestDeepMerge:
    def test_nested_values_merged(self):
        base = {"server": {"url": "a"}, "cli": {"progress": True}}
        result = _deep_merge(base, {"cli": {"progress": False}})
        assert result == {"server": {"url": "a"}, "cli": {"progress": False}}

    def test_base_not_mutated(self):
        base = {"cli": {"progress": True}}
        _deep_merge(base, {"cli": {"progress": False}})
        assert base["cli"]["progress"] is True


class TestLoadConfig:
    def test_defaults_when_no_file(self, tmp_path):
        env = {"FILESORT_CONFIG_PATH": str(tmp_path / "missing.config")}
        with patch.dict("os.environ", env, clear=True):
            cfg = load_config()
        assert cfg["server"]["url"] == "http://localhost:8766"
        assert cfg["cli"]["progress"] is True
        assert cfg["categories"] == {}

    def test_file_overrides_defaults(self, tmp_path):
        path = tmp_path / ".filesort.config"
        path.write_text(
            '[server]\nurl = "http://nas:8766"\n\n[cli]\nprogress = false\n'
        )
        with patch.dict("os.environ", {"FILESORT_CONFIG_PATH": str(path)}, clear=True):
            cfg = load_config()
        assert cfg["server"]["url"] == "http://nas:8766"
        assert cfg["cli"]["progress"] is False

    def test_env_overrides_file(self, tmp_path):
        path = tmp_path / ".filesort.config"
        path.write_text('[server]\nurl = "http://nas:8766"\n')
        env = {"FILESORT_CONFIG_PATH": str(path), "FILESORT_SERVER": "http://env:9000"}
        with patch.dict("os.environ", env, clear=True):
            cfg = load_config()
        assert cfg["server"]["url"] == "http://env:9000"

    def test_home_config_used_without_env(self, tmp_path):
        (tmp_path / ".filesort.config").write_text('[cli]\nprogress = false\n')
        with patch.dict("os.environ", {}, clear=True), \
             patch("pathlib.Path.home", return_value=tmp_path):
            cfg = load_config()
        assert cfg["cli"]["progress"] is False

    def test_defaults_not_shared_between_loads(self, tmp_path):
        env = {"FILESORT_CONFIG_PATH": str(tmp_path / "missing.config"),
               "FILESORT_SERVER": "http://env:9000"}
        with patch.dict("os.environ", env, clear=True):
            load_config()
        with patch.dict("os.environ", {"FILESORT_CONFIG_PATH": env["FILESORT_CONFIG_PATH"]}, clear=True):
            cfg = load_config()
        assert cfg["server"]["url"] == "http://localhost:8766"


class TestGetRegistry:
    def test_categories_section_extends_registry(self, tmp_path):
        path = tmp_path / ".filesort.config"
        path.write_text('[categories]\nini = "CONFIGURATION"\n".LOG" = "LOGS"\n')
        with patch.dict("os.environ", {"FILESORT_CONFIG_PATH": str(path)}, clear=True):
            registry = config_mod.get_registry()
        assert registry["ini"] == "CONFIGURATION"
        assert registry["log"] == "LOGS"
        assert registry["pdf"] == "DOCUMENTS_REPOSITORY"

    def test_registry_built_once(self, tmp_path):
        env = {"FILESORT_CONFIG_PATH": str(tmp_path / "missing.config")}
        with patch.dict("os.environ", env, clear=True):
            assert config_mod.get_registry() is config_mod.get_registry()
