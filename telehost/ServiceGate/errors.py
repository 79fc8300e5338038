"""
ServiceGate errors.

Every error here is a setup or protocol mistake in the calling test and is
raised synchronously to it.
"""

from __future__ import annotations

from typing import Any, Optional

from telehost.ServiceGate.models import ComponentName


class ServiceGateError(RuntimeError):
    """Base class for service registry and binding errors."""


class DuplicateBindingError(ServiceGateError):
    """bind() was called with a connection that already has a live session."""

    def __init__(self, connection: Any):
        self.connection = connection
        super().__init__(f"ServiceConnection already bound: {connection!r}")


class UnknownServiceError(ServiceGateError):
    """bind() targeted a component with no registered service."""

    def __init__(self, component: Optional[ComponentName]):
        self.component = component
        super().__init__(f"ServiceConnection not found: {component}")


class NoSuchBindingError(ServiceGateError):
    """unbind() was called with a connection that has no live session."""

    def __init__(self, connection: Any):
        self.connection = connection
        super().__init__(f"ServiceConnection not found: {connection!r}")


__all__ = [
    "ServiceGateError",
    "DuplicateBindingError",
    "UnknownServiceError",
    "NoSuchBindingError",
]
