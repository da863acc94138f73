"""Reference person finder implementations and the configured-variant factory."""

from __future__ import annotations

from poeaa_registry.core.config import settings
from poeaa_registry.core.exceptions import UnknownPersonFinderError
from poeaa_registry.core.models import Person, PersonLookupResult
from poeaa_registry.core.ports import PersonFinderPort

ALWAYS = "always"
NEVER = "never"
PERSON_FINDER_KINDS = (ALWAYS, NEVER)


class AlwaysFindingPersonFinder:
    """Finder that resolves every surname, fabricating a first name."""

    def __init__(self, first_name: str = "John") -> None:
        self.first_name = first_name

    def find_by_last_name(self, last_name: str) -> PersonLookupResult:
        """Return a found result pairing ``first_name`` with ``last_name``."""
        person = Person(first_name=self.first_name, last_name=last_name)
        return PersonLookupResult.found_person(person)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(first_name={self.first_name!r})"


class NeverFindingPersonFinder:
    """Finder that reports every surname as not found."""

    def find_by_last_name(self, last_name: str) -> PersonLookupResult:
        """Return the not-found result for ``last_name``."""
        return PersonLookupResult.not_found(last_name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def build_person_finder(kind: str | None = None) -> PersonFinderPort:
    """Return a fresh finder for ``kind``, defaulting to the configured variant.

    Raises:
        UnknownPersonFinderError: If ``kind`` names no known variant.
    """
    selected = (kind if kind is not None else settings.PERSON_FINDER).strip().lower()
    if selected == ALWAYS:
        return AlwaysFindingPersonFinder(first_name=settings.DEFAULT_FIRST_NAME)
    if selected == NEVER:
        return NeverFindingPersonFinder()
    raise UnknownPersonFinderError(
        f"Unknown person finder {selected!r}; expected one of {', '.join(PERSON_FINDER_KINDS)}"
    )


__all__ = [
    "AlwaysFindingPersonFinder",
    "NeverFindingPersonFinder",
    "PERSON_FINDER_KINDS",
    "build_person_finder",
]
