"""
ServiceGate Models.

Identity, descriptor and discovery types shared by the directory, the
resolver and the binding manager.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ServiceAction(str, Enum):
    """Actions advertised by the two kinds of telecom services."""

    CONNECTION_SERVICE = "android.telecom.ConnectionService"
    IN_CALL_SERVICE = "android.telecom.InCallService"


class Permission(str, Enum):
    """Permissions a caller must hold to bind each kind of service."""

    BIND_CONNECTION_SERVICE = "android.permission.BIND_CONNECTION_SERVICE"
    BIND_INCALL_SERVICE = "android.permission.BIND_INCALL_SERVICE"


class ComponentName(BaseModel):
    """Identity of a registered service: owning package plus class name."""

    model_config = ConfigDict(frozen=True)

    package_name: str = Field(description="Owning package, e.g. com.android.phone")
    class_name: str = Field(description="Fully qualified service class name")

    def flatten_to_string(self) -> str:
        return f"{self.package_name}/{self.class_name}"

    def flatten_to_short_string(self) -> str:
        """Like flatten_to_string(), with the package prefix of the class dropped."""
        class_name = self.class_name
        if class_name.startswith(self.package_name + "."):
            class_name = class_name[len(self.package_name):]
        return f"{self.package_name}/{class_name}"

    @classmethod
    def unflatten_from_string(cls, text: str) -> Optional["ComponentName"]:
        """Parse "pkg/cls" (or "pkg/.cls"); None if there is no separator."""
        package_name, sep, class_name = text.partition("/")
        if not sep or not package_name or not class_name:
            return None
        if class_name.startswith("."):
            class_name = package_name + class_name
        return cls(package_name=package_name, class_name=class_name)

    def __str__(self) -> str:
        return f"ComponentInfo{{{self.flatten_to_string()}}}"


class ServiceInfo(BaseModel):
    """Static metadata attached to a component when it is registered."""

    model_config = ConfigDict(frozen=True)

    permission: Optional[str] = Field(default=None, description="Permission required to bind")
    package_name: str
    name: str = Field(description="Service class name")

    def to_dict(self) -> dict:
        return self.model_dump()


class ResolveInfo(BaseModel):
    """One discovery result: a registered component and its descriptor."""

    service_info: Optional[ServiceInfo] = None
    component: ComponentName


class Intent(BaseModel):
    """A bind or query request naming an action and/or an explicit component."""

    model_config = ConfigDict(frozen=True)

    action: Optional[str] = None
    component: Optional[ComponentName] = None

    @classmethod
    def for_component(cls, component: ComponentName) -> "Intent":
        return cls(component=component)

    @classmethod
    def for_action(cls, action: str) -> "Intent":
        return cls(action=action)


@dataclass(frozen=True, slots=True)
class BindingSession:
    """A live bind: the caller's connection and the service it reached."""

    connection: Any
    component: ComponentName
    service: Any


__all__ = [
    "ServiceAction",
    "Permission",
    "ComponentName",
    "ServiceInfo",
    "ResolveInfo",
    "Intent",
    "BindingSession",
]
