"""Tests for core data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from poeaa_registry.core import models


def test_found_person_carries_the_record() -> None:
    """Found results expose the person and echo its surname."""
    person = models.Person(first_name="John", last_name="Doe")
    result = models.PersonLookupResult.found_person(person)

    assert result.found is True
    assert result.person == person
    assert result.last_name == "Doe"


def test_not_found_has_no_person() -> None:
    """Not-found results never carry a record."""
    result = models.PersonLookupResult.not_found("Doe")

    assert result.found is False
    assert result.person is None
    assert result.last_name == "Doe"


def test_lookup_result_rejects_inconsistent_variants() -> None:
    """A result cannot be both found and empty, or not-found with a person."""
    person = models.Person(first_name="John", last_name="Doe")

    with pytest.raises(ValidationError):
        models.PersonLookupResult(last_name="Doe", found=True)
    with pytest.raises(ValidationError):
        models.PersonLookupResult(last_name="Doe", found=False, person=person)
    with pytest.raises(ValidationError):
        models.PersonLookupResult(last_name="Smith", found=True, person=person)


def test_person_is_immutable_and_requires_names() -> None:
    """Person records are frozen value objects with non-empty names."""
    person = models.Person(first_name="John", last_name="Doe")

    with pytest.raises(ValidationError):
        person.first_name = "Jane"  # type: ignore[misc]
    with pytest.raises(ValidationError):
        models.Person(first_name="", last_name="Doe")
