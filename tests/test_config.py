"""
Tests for the telehost configuration manager.
"""

import logging

import pytest

from telehost import Config
from telehost.Config import ConfigManager, ConfigType, CONFIG_SCHEMA
from telehost.Config.schema import get_schema_by_key


def _clear_env(monkeypatch):
    """Remove every schema variable for the test, restoring on teardown."""
    for field in CONFIG_SCHEMA:
        # setenv first so teardown deletes whatever load_dotenv adds
        monkeypatch.setenv(field.env_var, "")
        monkeypatch.delenv(field.env_var)


class TestSchema:
    """Tests for the config schema."""

    def test_schema_keys(self):
        keys = [f.key for f in CONFIG_SCHEMA]

        assert "TELEHOST_LOG_LEVEL" in keys
        assert "TELEHOST_SUB_ID" in keys

    def test_env_var_defaults_to_key(self):
        field = get_schema_by_key("TELEHOST_LOCALE")
        assert field.env_var == "TELEHOST_LOCALE"

    def test_unknown_key(self):
        assert get_schema_by_key("NOPE") is None

    def test_schema_to_dict_groups_by_category(self):
        schema = Config.get_schema()

        assert set(schema) == {"logging", "context", "telephony"}
        assert schema["telephony"][0]["type"] in {t.value for t in ConfigType}


class TestConfigManager:
    """Tests for ConfigManager value resolution."""

    def test_defaults(self, monkeypatch, tmp_path):
        _clear_env(monkeypatch)
        manager = ConfigManager(env_file=tmp_path / "missing.env")

        assert manager.get("TELEHOST_LOG_LEVEL") == "INFO"
        assert manager.get("TELEHOST_LOCALE") == "zh_TW"
        assert manager.get("TELEHOST_OP_PACKAGE_NAME") == "test"
        assert manager.get("TELEHOST_SUB_ID") == 1
        assert manager.get("TELEHOST_WIRED_HEADSET_ON") is False

    def test_environment_variables(self, monkeypatch, tmp_path):
        _clear_env(monkeypatch)
        monkeypatch.setenv("TELEHOST_SUB_ID", "3")
        monkeypatch.setenv("TELEHOST_WIRED_HEADSET_ON", "yes")

        manager = ConfigManager(env_file=tmp_path / "missing.env")

        assert manager.get("TELEHOST_SUB_ID") == 3
        assert manager.get("TELEHOST_WIRED_HEADSET_ON") is True

    def test_env_file(self, monkeypatch, tmp_path):
        _clear_env(monkeypatch)
        env_file = tmp_path / ".env"
        env_file.write_text("TELEHOST_LOCALE=fr_FR\n")

        manager = ConfigManager(env_file=env_file)

        assert manager.get("TELEHOST_LOCALE") == "fr_FR"

    def test_environment_beats_env_file(self, monkeypatch, tmp_path):
        _clear_env(monkeypatch)
        monkeypatch.setenv("TELEHOST_LOCALE", "de_DE")
        env_file = tmp_path / ".env"
        env_file.write_text("TELEHOST_LOCALE=fr_FR\n")

        manager = ConfigManager(env_file=env_file)

        assert manager.get("TELEHOST_LOCALE") == "de_DE"

    def test_overrides_beat_environment(self, monkeypatch):
        monkeypatch.setenv("TELEHOST_OP_PACKAGE_NAME", "from-env")

        manager = ConfigManager(overrides={"TELEHOST_OP_PACKAGE_NAME": "from-override"})

        assert manager.get("TELEHOST_OP_PACKAGE_NAME") == "from-override"

    def test_invalid_integer_falls_back(self, caplog):
        manager = ConfigManager(overrides={"TELEHOST_SUB_ID": "not-a-number"})

        assert manager.get("TELEHOST_SUB_ID") == 1
        assert "Invalid value for TELEHOST_SUB_ID" in caplog.text

    def test_unknown_override_warns(self, caplog):
        ConfigManager(overrides={"TELEHOST_NOPE": 1})
        assert "TELEHOST_NOPE" in caplog.text

    def test_set(self, config):
        assert config.set("TELEHOST_SUB_ID", "9") is True
        assert config.get("TELEHOST_SUB_ID") == 9
        assert config.set("NOPE", 1) is False

    def test_get_all(self, config):
        values = config.get_all()
        assert values["TELEHOST_LOCALE"] == "zh_TW"
        assert len(values) == len(CONFIG_SCHEMA)

    def test_validate(self, config):
        is_valid, errors = config.validate()
        assert is_valid is True
        assert errors == []

    def test_unknown_option_falls_back(self, caplog):
        """A value outside the declared options should use the default."""
        manager = ConfigManager(overrides={"TELEHOST_LOG_LEVEL": "LOUD"})

        assert manager.get("TELEHOST_LOG_LEVEL") == "INFO"
        assert "Invalid value for TELEHOST_LOG_LEVEL" in caplog.text
        assert manager.validate() == (True, [])

    def test_option_case_is_normalized(self):
        manager = ConfigManager(overrides={"TELEHOST_LOG_LEVEL": "debug"})
        assert manager.get("TELEHOST_LOG_LEVEL") == "DEBUG"

    def test_empty_environment_variable_is_unset(self, monkeypatch, tmp_path):
        """An empty variable should fall back to the default, not to an empty string."""
        _clear_env(monkeypatch)
        monkeypatch.setenv("TELEHOST_LOG_LEVEL", "")
        monkeypatch.setenv("TELEHOST_SUB_ID", "")

        manager = ConfigManager(env_file=tmp_path / "missing.env")

        assert manager.get("TELEHOST_LOG_LEVEL") == "INFO"
        assert manager.get("TELEHOST_SUB_ID") == 1


class TestGlobalManager:
    """Tests for the module-level manager."""

    def test_get_manager_is_cached(self):
        assert Config.get_manager() is Config.get_manager()

    def test_reload_replaces_manager(self):
        first = Config.get_manager()
        Config.reload()
        assert Config.get_manager() is not first

    def test_module_get(self, monkeypatch):
        monkeypatch.setenv("TELEHOST_OP_PACKAGE_NAME", "module-level")
        Config.reload()

        assert Config.get("TELEHOST_OP_PACKAGE_NAME") == "module-level"
        assert Config.get_all()["TELEHOST_OP_PACKAGE_NAME"] == "module-level"
        assert Config.validate()[0] is True

    def test_global_manager_applies_log_level(self, monkeypatch):
        """Creating the global manager sets the telehost logger level once."""
        root = logging.getLogger("telehost")
        previous = root.level
        monkeypatch.setenv("TELEHOST_LOG_LEVEL", "warning")
        try:
            Config.reload()
            assert root.level == logging.WARNING
        finally:
            root.setLevel(previous)
