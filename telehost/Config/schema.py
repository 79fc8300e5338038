"""
Configuration schema for telehost.

Every tunable of the harness is declared here once, with its type,
default and environment variable.
"""

from enum import Enum
from typing import Optional, List, Any
from dataclasses import dataclass


class ConfigType(Enum):
    """Configuration value types."""
    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"


class ConfigCategory(Enum):
    """Configuration categories for grouping."""
    LOGGING = "logging"
    CONTEXT = "context"
    TELEPHONY = "telephony"


@dataclass
class ConfigField:
    """Definition of a configuration field."""
    key: str
    description: str
    config_type: ConfigType
    category: ConfigCategory
    default: Any = None
    env_var: str = None          # Override env var name (defaults to key)
    options: List[str] = None    # For enumerated types

    def __post_init__(self):
        if self.env_var is None:
            self.env_var = self.key


# ==================== Schema Definition ====================

CONFIG_SCHEMA: List[ConfigField] = [
    # === Logging ===
    ConfigField(
        key="TELEHOST_LOG_LEVEL",
        description="Log level for the telehost logger tree",
        config_type=ConfigType.STRING,
        category=ConfigCategory.LOGGING,
        default="INFO",
        options=["DEBUG", "INFO", "WARNING", "ERROR"],
    ),

    # === Context ===
    ConfigField(
        key="TELEHOST_LOCALE",
        description="Locale reported by the fake resource configuration",
        config_type=ConfigType.STRING,
        category=ConfigCategory.CONTEXT,
        default="zh_TW",
    ),
    ConfigField(
        key="TELEHOST_OP_PACKAGE_NAME",
        description="Package name the application context reports for app-ops",
        config_type=ConfigType.STRING,
        category=ConfigCategory.CONTEXT,
        default="test",
    ),

    # === Telephony ===
    ConfigField(
        key="TELEHOST_SUB_ID",
        description="Subscription id returned for every phone account",
        config_type=ConfigType.INTEGER,
        category=ConfigCategory.TELEPHONY,
        default=1,
    ),
    ConfigField(
        key="TELEHOST_WIRED_HEADSET_ON",
        description="Whether the fake audio manager reports a wired headset",
        config_type=ConfigType.BOOLEAN,
        category=ConfigCategory.TELEPHONY,
        default=False,
    ),
]


def get_schema_by_key(key: str) -> Optional[ConfigField]:
    """Get schema field by key."""
    for field in CONFIG_SCHEMA:
        if field.key == key:
            return field
    return None


def get_schema_by_category(category: ConfigCategory) -> List[ConfigField]:
    """Get all fields in a category."""
    return [f for f in CONFIG_SCHEMA if f.category == category]


def schema_to_dict() -> dict:
    """Convert schema to a dict grouped by category."""
    result = {}
    for cat in ConfigCategory:
        fields = get_schema_by_category(cat)
        result[cat.value] = [
            {
                "key": f.key,
                "description": f.description,
                "type": f.config_type.value,
                "default": f.default,
                "options": f.options,
            }
            for f in fields
        ]
    return result
