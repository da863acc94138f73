"""People lookup service resolving the active finder through a registry."""

from __future__ import annotations

from enum import Enum

from poeaa_registry.core.logging import get_logger
from poeaa_registry.core.models import PersonLookupResult
from poeaa_registry.core.ports import PersonFinderPort
from poeaa_registry.services.registry import Registry
from poeaa_registry.services.thread_registry import ThreadLocalRegistry

logger = get_logger(__name__)


class RegistryScope(str, Enum):
    """Which registry a caller resolves its services from."""

    GLOBAL = "global"
    THREAD = "thread"


def resolve_person_finder(scope: RegistryScope = RegistryScope.GLOBAL) -> PersonFinderPort:
    """Return the person finder held by the registry for ``scope``."""
    if scope is RegistryScope.THREAD:
        return ThreadLocalRegistry.get_instance().person_finder
    return Registry.get_instance().person_finder


def set_person_finder(
    finder: PersonFinderPort, scope: RegistryScope = RegistryScope.GLOBAL
) -> None:
    """Swap ``finder`` into the current registry instance for ``scope``."""
    if scope is RegistryScope.THREAD:
        ThreadLocalRegistry.get_instance().person_finder = finder
    else:
        Registry.get_instance().person_finder = finder


def find_person(
    last_name: str, scope: RegistryScope = RegistryScope.GLOBAL
) -> PersonLookupResult:
    """Look up ``last_name`` with the finder registered for ``scope``.

    Args:
        last_name: Surname to resolve; surrounding whitespace is ignored.
        scope: Registry to resolve the finder from.

    Returns:
        The finder's lookup result. Not-found is a result, not an error.

    Raises:
        ValueError: If ``last_name`` is empty.
    """
    surname = (last_name or "").strip()
    if not surname:
        raise ValueError("Last name cannot be empty")

    finder = resolve_person_finder(scope)
    result = finder.find_by_last_name(surname)
    logger.info(
        "person lookup completed",
        extra={
            "event": "person_lookup",
            "scope": scope.value,
            "last_name": surname,
            "found": result.found,
        },
    )
    return result


def reinitialize(scope: RegistryScope = RegistryScope.GLOBAL) -> None:
    """Replace the registry instance for ``scope`` with a fresh default one."""
    if scope is RegistryScope.THREAD:
        ThreadLocalRegistry.initialize()
    else:
        Registry.initialize()


def registry_tag(scope: RegistryScope = RegistryScope.GLOBAL) -> str | None:
    """Return the thread tag for thread scope, ``None`` for the global registry."""
    if scope is RegistryScope.THREAD:
        return ThreadLocalRegistry.get_instance().tag
    return None


__all__ = [
    "RegistryScope",
    "find_person",
    "registry_tag",
    "reinitialize",
    "resolve_person_finder",
    "set_person_finder",
]
