"""Protocol definitions for lookup adapters."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import Protocol, runtime_checkable

from poeaa_registry.core.models import PersonLookupResult


@runtime_checkable
class PersonFinderPort(Protocol):
    """Port resolving a surname to a person record."""

    def find_by_last_name(self, last_name: str) -> PersonLookupResult:
        """Return a found result for ``last_name`` or an explicit not-found."""
        ...


__all__ = ["PersonFinderPort"]
