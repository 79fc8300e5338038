"""
ServiceGate - fake service registry and binding simulator.

## Usage

```python
from telehost.ServiceGate import ServiceGate, ComponentName, Intent, ServiceAction

gate = ServiceGate()
name = ComponentName(package_name="com.example", class_name="com.example.FakeCallService")
gate.register_service(ServiceAction.CONNECTION_SERVICE, name, fake_service, permission="...")

gate.query_by_action(ServiceAction.CONNECTION_SERVICE)   # [ServiceInfo(...)]
gate.bind(connection, Intent.for_component(name))        # on_service_connected fires
gate.unbind(connection)                                  # on_service_disconnected fires
```
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional

from telehost.shared.gate import build_health_status
from telehost.ServiceGate.binding import (
    BindingSessionManager,
    ServiceConnection,
    as_binder,
)
from telehost.ServiceGate.directory import ActionLike, ComponentDirectory
from telehost.ServiceGate.errors import (
    DuplicateBindingError,
    NoSuchBindingError,
    ServiceGateError,
    UnknownServiceError,
)
from telehost.ServiceGate.models import (
    BindingSession,
    ComponentName,
    Intent,
    Permission,
    ResolveInfo,
    ServiceAction,
    ServiceInfo,
)
from telehost.ServiceGate.resolver import IntentResolver


class ServiceGate:
    """Directory, resolver and binding manager wired to one another."""

    def __init__(self):
        self.directory = ComponentDirectory()
        self.resolver = IntentResolver(self.directory)
        self.bindings = BindingSessionManager(self.directory)

    def register_service(
        self,
        action: ActionLike,
        component: ComponentName,
        service: Any,
        permission: Optional[str] = None,
        package_name: Optional[str] = None,
        class_name: Optional[str] = None,
    ) -> ServiceInfo:
        """Register `service` under `component` for `action` and return its descriptor."""
        if isinstance(permission, Permission):
            permission = permission.value
        service_info = ServiceInfo(
            permission=permission,
            package_name=package_name or component.package_name,
            name=class_name or component.class_name,
        )
        self.directory.register(action, component, service, service_info)
        return service_info

    def resolve(self, action: Optional[ActionLike], flags: int = 0) -> Iterator[ResolveInfo]:
        return self.resolver.resolve(action, flags)

    def query_by_action(self, action: ActionLike, flags: int = 0) -> List[ServiceInfo]:
        return self.resolver.query_by_action(action, flags)

    def bind(self, connection: ServiceConnection, intent: Intent, flags: int = 0) -> bool:
        return self.bindings.bind(connection, intent, flags)

    def unbind(self, connection: ServiceConnection) -> None:
        self.bindings.unbind(connection)

    def get_health_status(self) -> Dict[str, Any]:
        return build_health_status(
            gate_name="ServiceGate",
            initialized=True,
            dependencies=[],
            checks={"directory_ready": True},
            details={
                "registered_components": len(self.directory),
                "actions": self.directory.actions(),
                "live_sessions": len(self.bindings),
            },
        )


__all__ = [
    "ServiceGate",
    # Core components
    "ComponentDirectory",
    "IntentResolver",
    "BindingSessionManager",
    "ServiceConnection",
    "as_binder",
    # Models
    "BindingSession",
    "ComponentName",
    "Intent",
    "Permission",
    "ResolveInfo",
    "ServiceAction",
    "ServiceInfo",
    # Errors
    "ServiceGateError",
    "DuplicateBindingError",
    "NoSuchBindingError",
    "UnknownServiceError",
]
