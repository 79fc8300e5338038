"""
ServiceGate Binding Session Manager.

Simulates the platform's bind/unbind lifecycle. Each connection holds at most
one session, and the connect/disconnect callbacks run inline, before bind()
or unbind() returns, so tests observe a fixed call order.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from telehost.shared.gate import GateLogger
from telehost.ServiceGate.directory import ComponentDirectory
from telehost.ServiceGate.errors import (
    DuplicateBindingError,
    NoSuchBindingError,
    UnknownServiceError,
)
from telehost.ServiceGate.models import BindingSession, ComponentName, Intent

_log = GateLogger.get("ServiceGate.Binding")


@runtime_checkable
class ServiceConnection(Protocol):
    """Callbacks a caller supplies when binding a service."""

    def on_service_connected(self, name: ComponentName, binder: Any) -> None:
        ...

    def on_service_disconnected(self, name: Optional[ComponentName]) -> None:
        ...


def as_binder(service: Any) -> Any:
    """The binder handed to on_service_connected for a registered service."""
    to_binder = getattr(service, "as_binder", None)
    if callable(to_binder):
        return to_binder()
    return service


class BindingSessionManager:
    """Owns the live session table. Reads the directory, never writes it."""

    def __init__(self, directory: ComponentDirectory):
        self._directory = directory
        self._sessions: Dict[int, BindingSession] = {}

    def bind(self, connection: ServiceConnection, intent: Intent, flags: int = 0) -> bool:
        """
        Bind `connection` to the component named by `intent`.

        Args:
            connection: Caller's connection; also the session key
            intent: Must carry an explicit component
            flags: Accepted for signature compatibility, ignored

        Returns:
            True once on_service_connected has run

        Raises:
            DuplicateBindingError: connection already has a session
            UnknownServiceError: no service registered for the component
        """
        if id(connection) in self._sessions:
            _log.warning(f"Rejecting second bind on {connection!r}")
            raise DuplicateBindingError(connection)

        component = intent.component
        service = self._directory.lookup_handle(component)
        if service is None:
            _log.warning(f"No service registered for {component}")
            raise UnknownServiceError(component)

        self._sessions[id(connection)] = BindingSession(
            connection=connection,
            component=component,
            service=service,
        )
        try:
            connection.on_service_connected(component, as_binder(service))
        except Exception:
            # A failed bind leaves no session behind
            self._sessions.pop(id(connection), None)
            raise
        _log.debug(f"Bound {component.flatten_to_string()}")
        return True

    def bind_as_user(
        self,
        connection: ServiceConnection,
        intent: Intent,
        flags: int = 0,
        user: Any = None,
    ) -> bool:
        # Users are not modelled
        return self.bind(connection, intent, flags)

    def unbind(self, connection: ServiceConnection) -> None:
        """
        Close the session held by `connection` and notify it.

        Raises:
            NoSuchBindingError: connection has no session
        """
        session = self._sessions.pop(id(connection), None)
        if session is None:
            _log.warning(f"Rejecting unbind of unknown connection {connection!r}")
            raise NoSuchBindingError(connection)

        component = self._directory.lookup_identity(session.service)
        _log.debug(f"Unbound {session.component.flatten_to_string()}")
        connection.on_service_disconnected(component)

    def is_bound(self, connection: Any) -> bool:
        return id(connection) in self._sessions

    def get_session(self, connection: Any) -> Optional[BindingSession]:
        return self._sessions.get(id(connection))

    def sessions(self) -> List[BindingSession]:
        return list(self._sessions.values())

    def __len__(self) -> int:
        return len(self._sessions)


__all__ = ["ServiceConnection", "BindingSessionManager", "as_binder"]
