"""
telehost - a hollow platform context for testing telecom services.

Tests register fake connection and in-call services, hand the hollow
context to the code under test, and observe the bind/unbind protocol
it drives.
"""

__version__ = "0.1.0"

from telehost import Config
from telehost.ServiceGate import (
    ComponentName,
    DuplicateBindingError,
    Intent,
    NoSuchBindingError,
    Permission,
    ServiceAction,
    ServiceGate,
    ServiceGateError,
    ServiceInfo,
    UnknownServiceError,
)
from telehost.ContextGate import ComponentContextHolder

__all__ = [
    "Config",
    "ComponentContextHolder",
    "ComponentName",
    "DuplicateBindingError",
    "Intent",
    "NoSuchBindingError",
    "Permission",
    "ServiceAction",
    "ServiceGate",
    "ServiceGateError",
    "ServiceInfo",
    "UnknownServiceError",
]
