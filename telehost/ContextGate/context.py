"""
ContextGate contexts.

ComponentContextHolder builds the context a platform would hand to a
system-instantiated component. The context itself is hollow; its
application context carries the service registry, the package manager and
the manager stand-ins.
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

from telehost import Config
from telehost.shared.gate import GateErrorHandler, GateLogger, build_health_status
from telehost.ContextGate.stubs import (
    FakeAudioManager,
    FakeContentResolver,
    FakePackageManager,
    FakeResources,
    FakeTelephonyManager,
    ResourceLookup,
    SystemService,
    SystemServiceLocator,
)
from telehost.ServiceGate import (
    ComponentName,
    Intent,
    Permission,
    ServiceAction,
    ServiceConnection,
    ServiceGate,
    ServiceInfo,
)
from telehost.ServiceGate.directory import ActionLike

_log = GateLogger.get("ContextGate")


class TestApplicationContext:
    """Application context backed by a ServiceGate and the stub managers."""

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        services: ServiceGate,
        resources: FakeResources,
        audio_manager: FakeAudioManager,
        telephony_manager: FakeTelephonyManager,
        op_package_name: str = "test",
        system_service_locator: Optional[SystemServiceLocator] = None,
    ):
        self._services = services
        self._resources = resources
        self._audio_manager = audio_manager
        self._telephony_manager = telephony_manager
        self._op_package_name = op_package_name
        self._system_service_locator = system_service_locator
        self._package_manager = FakePackageManager(services.resolver)

    def get_application_context(self) -> "TestApplicationContext":
        return self

    def get_package_manager(self) -> FakePackageManager:
        return self._package_manager

    # -- binding ----------------------------------------------------------

    def bind_service(
        self, intent: Intent, connection: ServiceConnection, flags: int = 0
    ) -> bool:
        return self._services.bind(connection, intent, flags)

    def bind_service_as_user(
        self,
        intent: Intent,
        connection: ServiceConnection,
        flags: int = 0,
        user: Any = None,
    ) -> bool:
        return self._services.bindings.bind_as_user(connection, intent, flags, user)

    def unbind_service(self, connection: ServiceConnection) -> None:
        self._services.unbind(connection)

    # -- lookups ----------------------------------------------------------

    def get_system_service(self, name: str) -> Optional[Any]:
        """
        Look up a platform manager by name.

        An injected locator is asked first; a non-None answer from it wins.
        Otherwise "audio" and "phone" map to the stand-ins and anything else
        to None.
        """
        if self._system_service_locator is not None:
            located = self._system_service_locator(name)
            if located is not None:
                return located

        if name == SystemService.AUDIO:
            return self._audio_manager
        if name == SystemService.TELEPHONY:
            return self._telephony_manager
        return None

    def get_resources(self) -> FakeResources:
        return self._resources

    def get_op_package_name(self) -> str:
        return self._op_package_name

    @GateErrorHandler.wrap("ContextGate", "get_files_dir", reraise=True)
    def get_files_dir(self) -> Path:
        return Path(tempfile.gettempdir())

    def get_content_resolver(self) -> FakeContentResolver:
        return FakeContentResolver(self)

    # -- broadcasts (not captured) -----------------------------------------

    def register_receiver(self, receiver: Any, intent_filter: Any) -> None:
        return None

    def send_broadcast(self, intent: Intent, receiver_permission: Optional[str] = None) -> None:
        _log.debug(f"Dropped broadcast {intent.action}")


class HollowContext:
    """Context handed to the component under test. Everything goes through the application context."""

    def __init__(self, application_context: TestApplicationContext):
        self._application_context = application_context

    def get_application_context(self) -> TestApplicationContext:
        return self._application_context


class ComponentContextHolder:
    """
    Owns a hollow context and the application context behind it.

    Tests register fake services here, then pass get_test_double() to the
    code under test.

    Args:
        config: Settings; defaults to the global ConfigManager
        resource_lookup: Fallback for string resources not set with put_resource()
        system_service_locator: Consulted before the built-in system services
    """

    def __init__(
        self,
        config: Optional[Config.ConfigManager] = None,
        resource_lookup: Optional[ResourceLookup] = None,
        system_service_locator: Optional[SystemServiceLocator] = None,
    ):
        self._config = config or Config.get_manager()

        self.services = ServiceGate()
        self.resources = FakeResources(
            locale=self._config.get("TELEHOST_LOCALE", "zh_TW"),
            lookup=resource_lookup,
        )
        self.audio_manager = FakeAudioManager(
            wired_headset_on=self._config.get("TELEHOST_WIRED_HEADSET_ON", False),
        )
        self.telephony_manager = FakeTelephonyManager(
            sub_id=self._config.get("TELEHOST_SUB_ID", 1),
        )

        self._application_context = TestApplicationContext(
            services=self.services,
            resources=self.resources,
            audio_manager=self.audio_manager,
            telephony_manager=self.telephony_manager,
            op_package_name=self._config.get("TELEHOST_OP_PACKAGE_NAME", "test"),
            system_service_locator=system_service_locator,
        )
        self._context = HollowContext(self._application_context)

    def get_test_double(self) -> HollowContext:
        return self._context

    @property
    def application_context(self) -> TestApplicationContext:
        return self._application_context

    # -- registration ------------------------------------------------------

    def add_connection_service(self, component: ComponentName, service: Any) -> ServiceInfo:
        return self.register_action(
            ServiceAction.CONNECTION_SERVICE,
            component,
            service,
            Permission.BIND_CONNECTION_SERVICE,
        )

    def add_in_call_service(self, component: ComponentName, service: Any) -> ServiceInfo:
        return self.register_action(
            ServiceAction.IN_CALL_SERVICE,
            component,
            service,
            Permission.BIND_INCALL_SERVICE,
        )

    def register_action(
        self,
        action: ActionLike,
        component: ComponentName,
        service: Any,
        permission: Optional[str] = None,
        package_name: Optional[str] = None,
        class_name: Optional[str] = None,
    ) -> ServiceInfo:
        info = self.services.register_service(
            action, component, service, permission, package_name, class_name
        )
        _log.info(f"Added service {component.flatten_to_short_string()}")
        return info

    # -- discovery and binding --------------------------------------------

    def query_by_action(self, action: ActionLike, flags: int = 0) -> List[ServiceInfo]:
        return self.services.query_by_action(action, flags)

    def bind(
        self, connection: ServiceConnection, component: ComponentName, flags: int = 0
    ) -> bool:
        return self._application_context.bind_service(
            Intent.for_component(component), connection, flags
        )

    def unbind(self, connection: ServiceConnection) -> None:
        self._application_context.unbind_service(connection)

    # -- resources ---------------------------------------------------------

    def put_resource(self, resource_id: int, value: str) -> None:
        self.resources.put_string(resource_id, value)

    set_resource_value = put_resource

    def get_health_status(self) -> Dict[str, Any]:
        services = self.services.get_health_status()
        return build_health_status(
            gate_name="ContextGate",
            initialized=True,
            dependencies=["ServiceGate"],
            checks={"service_gate": services["healthy"]},
            details=services["details"],
        )


__all__ = ["TestApplicationContext", "HollowContext", "ComponentContextHolder"]
