"""
ServiceGate Intent Resolver.

Answers "which registered components handle this action".
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from telehost.shared.gate import GateLogger
from telehost.ServiceGate.directory import ActionLike, ComponentDirectory
from telehost.ServiceGate.models import Intent, ResolveInfo, ServiceInfo

_log = GateLogger.get("ServiceGate.Resolver")


class IntentResolver:
    """Resolves actions against a ComponentDirectory. Flags are accepted but never filter."""

    def __init__(self, directory: ComponentDirectory):
        self._directory = directory

    def resolve(self, action: Optional[ActionLike], flags: int = 0) -> Iterator[ResolveInfo]:
        """Yield one ResolveInfo per component registered under `action`."""
        for component in self._directory.identities_for_action(action):
            yield ResolveInfo(
                service_info=self._directory.lookup_descriptor(component),
                component=component,
            )

    def query_intent_services(self, intent: Intent, flags: int = 0) -> List[ResolveInfo]:
        results = list(self.resolve(intent.action, flags))
        _log.debug(f"Resolved {intent.action} to {len(results)} service(s)")
        return results

    def query_intent_services_as_user(
        self, intent: Intent, flags: int = 0, user_id: int = 0
    ) -> List[ResolveInfo]:
        # Users are not modelled
        return self.query_intent_services(intent, flags)

    def query_by_action(self, action: ActionLike, flags: int = 0) -> List[ServiceInfo]:
        """Descriptors of every component registered under `action`."""
        return [
            info.service_info
            for info in self.resolve(action, flags)
            if info.service_info is not None
        ]


__all__ = ["IntentResolver"]
