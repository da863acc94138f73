"""Thread-scoped registry: one person finder holder per thread."""

from __future__ import annotations

import threading
from typing import Optional

from poeaa_registry.adapters.person_finders import build_person_finder
from poeaa_registry.core.exceptions import UninitializedRegistryError
from poeaa_registry.core.logging import get_logger
from poeaa_registry.core.ports import PersonFinderPort

logger = get_logger(__name__)


def current_thread_tag() -> str:
    """Return the identity tag for the calling thread."""
    return str(threading.get_ident())


class ThreadLocalRegistry:
    """Per-thread holder of the person finder, tagged with its creating thread.

    Each thread sees its own instance, created lazily on first access. The tag
    is fixed at construction and only serves to prove isolation.
    """

    def __init__(self, tag: str) -> None:
        self._tag = tag
        self._person_finder: PersonFinderPort = build_person_finder()

    @property
    def tag(self) -> str:
        """Identifier of the thread that created this instance."""
        return self._tag

    @property
    def person_finder(self) -> PersonFinderPort:
        """The finder held for the owning thread."""
        return self._person_finder

    @person_finder.setter
    def person_finder(self, finder: PersonFinderPort) -> None:
        logger.debug("thread registry %s finder replaced with %r", self._tag, finder)
        self._person_finder = finder

    @classmethod
    def initialize(cls) -> None:
        """Store a fresh instance in the calling thread's slot only."""
        fresh = cls(tag=current_thread_tag())
        _slot.instance = fresh
        logger.info("thread registry reinitialized for thread %s", fresh.tag)

    @classmethod
    def get_instance(cls) -> "ThreadLocalRegistry":
        """Return the calling thread's instance, creating it on first access.

        Raises:
            UninitializedRegistryError: If the slot is empty after lazy
                population. This indicates a broken invariant, not a
                recoverable condition.
        """
        instance = getattr(_slot, "instance", None)
        if instance is None:
            raise UninitializedRegistryError(
                f"Thread registry slot is empty for thread {current_thread_tag()}"
            )
        return instance

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tag={self._tag!r}, person_finder={self._person_finder!r})"


class _RegistrySlot(threading.local):  # pylint: disable=too-few-public-methods
    """Per-thread storage; ``__init__`` runs once in each thread that touches it."""

    def __init__(self) -> None:
        super().__init__()
        self.instance: Optional[ThreadLocalRegistry] = ThreadLocalRegistry(
            tag=current_thread_tag()
        )


_slot = _RegistrySlot()


__all__ = ["ThreadLocalRegistry", "current_thread_tag"]
