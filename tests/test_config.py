"""Unit tests for configuration management."""

from __future__ import annotations

import json

import pytest

from taskseed.config import (
    Config,
    ConfigManager,
    DatabaseConfig,
    get_config_manager,
)
from taskseed.errors import ConfigurationError


@pytest.fixture
def manager(tmp_path) -> ConfigManager:
    return ConfigManager("test", config_dir=tmp_path / "cfg")


class TestDefaults:
    def test_default_config(self, manager):
        config = manager.config
        assert config.database.driver == "sqlite"
        assert config.database.path is None
        assert config.database.port == 5432
        assert config.database.connect_retries == 2
        assert config.generator.count == 22
        assert config.generator.seed is None
        assert config.generator.with_users is False
        assert config.output.format == "table"

    def test_no_file_written_until_saved(self, manager):
        _ = manager.config
        assert not manager.config_file.exists()

    def test_default_dir_from_platformdirs(self, isolated_dirs):
        manager = ConfigManager()
        assert manager.config_file == isolated_dirs / "config" / "default.json"


class TestLoadSave:
    def test_round_trip(self, manager):
        manager.set("database.path", "/data/tasks.db")
        reloaded = ConfigManager("test", config_dir=manager.config_dir)
        assert reloaded.config.database.path == "/data/tasks.db"

    def test_partial_file_fills_defaults(self, manager):
        manager.config_dir.mkdir(parents=True)
        manager.config_file.write_text(json.dumps({"generator": {"count": 5}}))
        assert manager.config.generator.count == 5
        assert manager.config.output.format == "table"

    def test_corrupted_file_raises(self, manager):
        manager.config_dir.mkdir(parents=True)
        manager.config_file.write_text("{not json")
        with pytest.raises(ConfigurationError, match="Cannot read"):
            manager.load_config()

    def test_invalid_values_raise(self, manager):
        manager.config_dir.mkdir(parents=True)
        manager.config_file.write_text(json.dumps({"database": {"port": 0}}))
        with pytest.raises(ConfigurationError, match="Invalid config"):
            manager.load_config()

    def test_unknown_driver_raises(self, manager):
        manager.config_dir.mkdir(parents=True)
        manager.config_file.write_text(json.dumps({"database": {"driver": "oracle"}}))
        with pytest.raises(ConfigurationError):
            manager.load_config()


class TestGetSet:
    def test_get_dotted_key(self, manager):
        assert manager.get("database.port") == 5432

    def test_get_unknown_key(self, manager):
        assert manager.get("database.nope") is None
        assert manager.get("database.port.deeper") is None

    def test_set_and_get(self, manager):
        manager.set("generator.seed", 42)
        assert manager.get("generator.seed") == 42

    def test_set_unknown_key_raises(self, manager):
        with pytest.raises(ConfigurationError, match="Unknown"):
            manager.set("database.colour", "blue")
        with pytest.raises(ConfigurationError, match="Unknown"):
            manager.set("nosection.key", 1)

    def test_set_invalid_value_raises(self, manager):
        with pytest.raises(ConfigurationError, match="Invalid value"):
            manager.set("database.port", 70000)
        assert manager.get("database.port") == 5432

    def test_reset_single_key(self, manager):
        manager.set("generator.count", 3)
        manager.reset("generator.count")
        assert manager.get("generator.count") == 22

    def test_reset_all(self, manager):
        manager.set("generator.count", 3)
        manager.set("output.format", "json")
        manager.reset()
        assert manager.config == Config()

    def test_reset_unknown_key_raises(self, manager):
        with pytest.raises(ConfigurationError):
            manager.reset("generator.nope")


class TestDatabaseConfig:
    def test_sqlite_complete(self):
        DatabaseConfig(path="tasks.db").check_complete()

    def test_sqlite_without_path(self):
        with pytest.raises(ConfigurationError):
            DatabaseConfig().check_complete()

    def test_postgresql_with_url(self):
        DatabaseConfig(driver="postgresql", url="postgresql://u@h/db").check_complete()

    def test_postgresql_with_parameters(self):
        DatabaseConfig(driver="postgresql", name="db", user="u").check_complete()

    def test_describe_hides_credentials(self):
        config = DatabaseConfig(
            driver="postgresql", host="h", port=1, name="db", user="u", password="secret"
        )
        assert config.describe() == "postgresql://h:1/db"
        url_config = DatabaseConfig(driver="postgresql", url="postgresql://u:secret@h/db")
        assert "secret" not in url_config.describe()


class TestGetConfigManager:
    def test_cached_per_profile(self):
        assert get_config_manager("a") is get_config_manager("a")

    def test_new_manager_for_other_profile(self):
        first = get_config_manager("a")
        second = get_config_manager("b")
        assert first is not second
        assert second.profile == "b"
