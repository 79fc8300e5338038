"""
Shared utilities for telehost.
"""

from telehost.shared.gate import (
    GateLogger,
    GateErrorHandler,
    build_health_status,
    get_logger,
)

__all__ = [
    "GateLogger",
    "GateErrorHandler",
    "build_health_status",
    "get_logger",
]
