"""Process-wide registry holding the active person finder.

Exactly one :class:`Registry` is reachable at any time. The slot is populated
at import with the configured default finder, so :meth:`Registry.get_instance`
never fails. :meth:`Registry.initialize` swaps in a brand new instance; callers
still holding the previous one keep a working but detached object.

The slot is guarded by a lock. Replacement instances are built before the lock
is taken and published with a single assignment, so readers observe either
the old or the new instance, never a partially built one.
"""

from __future__ import annotations

import threading
from typing import ClassVar

from poeaa_registry.adapters.person_finders import build_person_finder
from poeaa_registry.core.logging import get_logger
from poeaa_registry.core.ports import PersonFinderPort

logger = get_logger(__name__)


class Registry:
    """Process-wide holder of the person finder service.

    Obtain the live registry through :meth:`get_instance`; only :meth:`initialize`
    publishes new instances. Constructing one directly yields a detached
    registry that the process-wide slot never sees.
    """

    _instance: ClassVar["Registry"]
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._person_finder: PersonFinderPort = build_person_finder()

    @property
    def person_finder(self) -> PersonFinderPort:
        """The finder shared by every caller of :meth:`get_instance`."""
        return self._person_finder

    @person_finder.setter
    def person_finder(self, finder: PersonFinderPort) -> None:
        logger.debug("global registry finder replaced with %r", finder)
        self._person_finder = finder

    @classmethod
    def initialize(cls) -> None:
        """Replace the registry wholesale with a fresh default instance."""
        fresh = cls()
        with cls._lock:
            cls._instance = fresh
        logger.info("global registry reinitialized with %r", fresh.person_finder)

    @classmethod
    def get_instance(cls) -> "Registry":
        """Return the registry currently in the process-wide slot."""
        with cls._lock:
            return cls._instance


Registry._instance = Registry()  # pylint: disable=protected-access


__all__ = ["Registry"]
