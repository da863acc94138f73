"""Infrastructure adapter exports."""

from poeaa_registry.core.exceptions import UnknownPersonFinderError  # noqa: F401

from .person_finders import (
    PERSON_FINDER_KINDS,
    AlwaysFindingPersonFinder,
    NeverFindingPersonFinder,
    build_person_finder,
)

__all__ = [
    "AlwaysFindingPersonFinder",
    "NeverFindingPersonFinder",
    "PERSON_FINDER_KINDS",
    "build_person_finder",
    "UnknownPersonFinderError",
]
