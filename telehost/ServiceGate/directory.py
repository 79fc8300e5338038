"""
ServiceGate Component Directory.

Maps component identities to the fake services registered under them, and
actions to the components advertising them.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from telehost.shared.gate import GateLogger
from telehost.ServiceGate.models import ComponentName, ServiceInfo

_log = GateLogger.get("ServiceGate.Directory")

ActionLike = Union[str, Enum]


def _action_key(action: ActionLike) -> str:
    if isinstance(action, Enum):
        return str(action.value)
    return action


class ComponentDirectory:
    """
    In-memory registry of fake services.

    Registrations are permanent for the life of the directory. Registering the
    same component twice under one action lists it twice.
    """

    def __init__(self):
        self._components_by_action: Dict[str, List[ComponentName]] = {}
        self._service_by_component: Dict[ComponentName, Any] = {}
        self._info_by_component: Dict[ComponentName, ServiceInfo] = {}
        # Keyed by id() so fakes need not be hashable; values keep the
        # service alive alongside its component.
        self._component_by_service: Dict[int, tuple[Any, ComponentName]] = {}

    def register(
        self,
        action: ActionLike,
        component: ComponentName,
        service: Any,
        service_info: ServiceInfo,
    ) -> None:
        """Advertise `component` under `action` and record its service and descriptor."""
        key = _action_key(action)
        self._components_by_action.setdefault(key, []).append(component)
        self._service_by_component[component] = service
        self._info_by_component[component] = service_info
        self._component_by_service[id(service)] = (service, component)
        _log.debug(f"Registered {component.flatten_to_string()} for {key}")

    def lookup_handle(self, component: Optional[ComponentName]) -> Optional[Any]:
        if component is None:
            return None
        return self._service_by_component.get(component)

    def lookup_descriptor(self, component: ComponentName) -> Optional[ServiceInfo]:
        return self._info_by_component.get(component)

    def lookup_identity(self, service: Any) -> Optional[ComponentName]:
        entry = self._component_by_service.get(id(service))
        if entry is None or entry[0] is not service:
            return None
        return entry[1]

    def identities_for_action(self, action: Optional[ActionLike]) -> List[ComponentName]:
        """Components advertising `action`, in registration order."""
        if action is None:
            return []
        return list(self._components_by_action.get(_action_key(action), []))

    def actions(self) -> List[str]:
        return list(self._components_by_action)

    def __contains__(self, component: object) -> bool:
        return component in self._service_by_component

    def __len__(self) -> int:
        return len(self._service_by_component)


__all__ = ["ComponentDirectory"]
