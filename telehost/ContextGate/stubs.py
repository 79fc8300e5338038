"""
ContextGate stand-ins for platform managers.

These carry fixed answers only. Anything a test needs beyond them is
injected into ComponentContextHolder as an override function.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel

from telehost.ServiceGate import Intent, IntentResolver, ResolveInfo

ResourceLookup = Callable[[int], Optional[str]]
SystemServiceLocator = Callable[[str], Optional[Any]]


class SystemService(str, Enum):
    """Names accepted by get_system_service()."""

    AUDIO = "audio"
    TELEPHONY = "phone"


class Configuration(BaseModel):
    """Resource configuration; only the locale is modelled."""

    locale: str = "zh_TW"


class FakeResources:
    """String resources set by the test, then the injected lookup, then None."""

    def __init__(self, locale: str = "zh_TW", lookup: Optional[ResourceLookup] = None):
        self._strings: Dict[int, str] = {}
        self._lookup = lookup
        self._configuration = Configuration(locale=locale)

    def put_string(self, resource_id: int, value: str) -> None:
        self._strings[resource_id] = value

    def get_string(self, resource_id: int) -> Optional[str]:
        if resource_id in self._strings:
            return self._strings[resource_id]
        if self._lookup is not None:
            return self._lookup(resource_id)
        return None

    def get_configuration(self) -> Configuration:
        return self._configuration


class FakeAudioManager:
    def __init__(self, wired_headset_on: bool = False):
        self._wired_headset_on = wired_headset_on

    def is_wired_headset_on(self) -> bool:
        return self._wired_headset_on


class FakeTelephonyManager:
    def __init__(self, sub_id: int = 1):
        self._sub_id = sub_id

    def get_sub_id_for_phone_account(self, phone_account: Any) -> int:
        return self._sub_id


class FakeContentResolver:
    """A content resolver with no providers behind it."""

    def __init__(self, context: Any):
        self.context = context

    def acquire_provider(self, name: str) -> None:
        return None

    def release_provider(self, provider: Any) -> bool:
        return False

    def acquire_unstable_provider(self, name: str) -> None:
        return None

    def release_unstable_provider(self, provider: Any) -> bool:
        return False

    def unstable_provider_died(self, provider: Any) -> None:
        pass


class FakePackageManager:
    """Package manager whose service queries go to the intent resolver."""

    def __init__(self, resolver: IntentResolver):
        self._resolver = resolver

    def query_intent_services(self, intent: Intent, flags: int = 0) -> List[ResolveInfo]:
        return self._resolver.query_intent_services(intent, flags)

    def query_intent_services_as_user(
        self, intent: Intent, flags: int = 0, user_id: int = 0
    ) -> List[ResolveInfo]:
        return self._resolver.query_intent_services_as_user(intent, flags, user_id)


__all__ = [
    "ResourceLookup",
    "SystemServiceLocator",
    "SystemService",
    "Configuration",
    "FakeResources",
    "FakeAudioManager",
    "FakeTelephonyManager",
    "FakeContentResolver",
    "FakePackageManager",
]
