"""
Pytest configuration and fixtures for telehost tests.
"""

import sys
from pathlib import Path
from typing import Any, List, Optional, Tuple

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from telehost import Config
from telehost.ContextGate import ComponentContextHolder
from telehost.ServiceGate import ComponentName, ServiceGate


class RecordingConnection:
    """ServiceConnection that records callbacks in the order they arrive."""

    def __init__(self, events: Optional[List[Tuple[Any, ...]]] = None):
        self.events = events if events is not None else []

    def on_service_connected(self, name, binder):
        self.events.append(("connected", name, binder))

    def on_service_disconnected(self, name):
        self.events.append(("disconnected", name))


class FakeService:
    """Service endpoint with a distinct binder object."""

    def __init__(self, label: str):
        self.label = label
        self.binder = object()

    def as_binder(self):
        return self.binder


@pytest.fixture
def config() -> Config.ConfigManager:
    """ConfigManager pinned to schema defaults."""
    return Config.ConfigManager(overrides={
        "TELEHOST_LOG_LEVEL": "INFO",
        "TELEHOST_LOCALE": "zh_TW",
        "TELEHOST_OP_PACKAGE_NAME": "test",
        "TELEHOST_SUB_ID": 1,
        "TELEHOST_WIRED_HEADSET_ON": False,
    })


@pytest.fixture
def holder(config) -> ComponentContextHolder:
    return ComponentContextHolder(config=config)


@pytest.fixture
def gate() -> ServiceGate:
    return ServiceGate()


@pytest.fixture
def component_x() -> ComponentName:
    return ComponentName(package_name="com.example.x", class_name="com.example.x.XService")


@pytest.fixture
def component_y() -> ComponentName:
    return ComponentName(package_name="com.example.y", class_name="com.example.y.YService")


@pytest.fixture
def service_x() -> FakeService:
    return FakeService("x")


@pytest.fixture
def service_y() -> FakeService:
    return FakeService("y")


@pytest.fixture
def connection() -> RecordingConnection:
    return RecordingConnection()


@pytest.fixture(autouse=True)
def reset_module_state():
    """Reset module-level state between tests."""
    yield
    Config._manager = None


@pytest.fixture
def make_connection():
    """Factory for RecordingConnection, optionally sharing an event list."""
    return RecordingConnection


@pytest.fixture
def make_service():
    """Factory for FakeService."""
    return FakeService
