"""
telehost Configuration Manager.

Schema-driven settings for the harness. Priority order:
1. Explicit overrides passed to ConfigManager
2. Environment variables (a .env file is loaded first if present)
3. Schema defaults
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from dotenv import load_dotenv

from telehost.shared.gate import GateLogger

from telehost.Config.schema import (
    CONFIG_SCHEMA,
    ConfigField,
    ConfigType,
    ConfigCategory,
    get_schema_by_key,
    schema_to_dict,
)

_log = GateLogger.get("Config")


class ConfigManager:
    """Resolves harness settings from overrides, environment and defaults."""

    def __init__(
        self,
        env_file: Optional[Union[str, Path]] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ):
        self._env_file = Path(env_file) if env_file else None
        self._overrides = dict(overrides or {})
        self._cache: Dict[str, Any] = {}
        self._load()

    def _load(self):
        """Load configuration from all sources."""
        # Existing environment variables win over the .env file
        if self._env_file is not None:
            load_dotenv(self._env_file, override=False)
        else:
            load_dotenv(override=False)

        for field in CONFIG_SCHEMA:
            if field.key in self._overrides:
                value = self._overrides[field.key]
            else:
                value = os.environ.get(field.env_var)

            # An empty variable counts as unset
            if value is None or value == "":
                value = field.default

            self._cache[field.key] = self._convert_type(value, field)

        unknown = set(self._overrides) - {f.key for f in CONFIG_SCHEMA}
        if unknown:
            _log.warning(f"Ignoring unknown config keys: {sorted(unknown)}")

    def _convert_type(self, value: Any, field: ConfigField) -> Any:
        """Convert value to the field's type, falling back to its default."""
        if value is None:
            return None

        try:
            if field.config_type == ConfigType.INTEGER:
                return int(value)
            elif field.config_type == ConfigType.BOOLEAN:
                if isinstance(value, bool):
                    return value
                return str(value).lower() in ("true", "1", "yes", "on")
            elif field.options:
                for option in field.options:
                    if str(value).upper() == option.upper():
                        return option
                raise ValueError(f"not one of {field.options}")
            else:
                return str(value)
        except (ValueError, TypeError):
            _log.warning(f"Invalid value for {field.key}: {value!r}, using default")
            return field.default

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        return self._cache.get(key, default)

    def set(self, key: str, value: Any) -> bool:
        """
        Set a configuration value for this manager only.

        Returns:
            False if the key is not part of the schema
        """
        field = get_schema_by_key(key)
        if not field:
            return False

        self._cache[key] = self._convert_type(value, field)
        return True

    def get_all(self) -> Dict[str, Any]:
        """Get all configuration values."""
        return {field.key: self._cache.get(field.key) for field in CONFIG_SCHEMA}

    def validate(self) -> Tuple[bool, List[str]]:
        """
        Validate configuration.

        Returns:
            (is_valid, list of error messages)
        """
        errors = []

        for field in CONFIG_SCHEMA:
            value = self._cache.get(field.key)

            if value is None:
                errors.append(f"Config missing: {field.key}")
                continue

            if field.options and str(value).upper() not in field.options:
                errors.append(f"Invalid option for {field.key}: {value}")

        return len(errors) == 0, errors


# Global instance
_manager: Optional[ConfigManager] = None


def get_manager() -> ConfigManager:
    """Get or create the global ConfigManager, applying its log level once."""
    global _manager
    if _manager is None:
        _manager = ConfigManager()
        GateLogger.set_level(_manager.get("TELEHOST_LOG_LEVEL"))
    return _manager


def reload(env_file: Optional[Union[str, Path]] = None):
    """Rebuild the global ConfigManager from the environment."""
    global _manager
    _manager = ConfigManager(env_file=env_file)
    GateLogger.set_level(_manager.get("TELEHOST_LOG_LEVEL"))


def get(key: str, default: Any = None) -> Any:
    """Get a config value."""
    return get_manager().get(key, default)


def get_all() -> Dict[str, Any]:
    """Get all config values."""
    return get_manager().get_all()


def validate() -> Tuple[bool, List[str]]:
    """Validate configuration."""
    return get_manager().validate()


def get_schema() -> Dict:
    """Get schema as dict."""
    return schema_to_dict()


__all__ = [
    "ConfigManager",
    "ConfigField",
    "ConfigType",
    "ConfigCategory",
    "CONFIG_SCHEMA",
    "get_manager",
    "reload",
    "get",
    "get_all",
    "validate",
    "get_schema",
]
