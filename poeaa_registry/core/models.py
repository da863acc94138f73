"""Core domain models shared across layers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Person(BaseModel):
    """A person record as returned by a person finder."""

    model_config = ConfigDict(frozen=True)

    first_name: str = Field(..., min_length=1, description="Given name")
    last_name: str = Field(..., description="Surname")


class PersonLookupResult(BaseModel):
    """Outcome of a surname lookup: either a found person or not-found.

    Callers must check ``found`` before touching ``person``.
    """

    model_config = ConfigDict(frozen=True)

    last_name: str = Field(..., description="The surname that was looked up")
    found: bool = Field(..., description="Whether a person was found")
    person: Person | None = Field(default=None, description="The person when found")

    @model_validator(mode="after")
    def check_consistency(self) -> "PersonLookupResult":
        if self.found and self.person is None:
            raise ValueError("found lookup results must carry a person")
        if not self.found and self.person is not None:
            raise ValueError("not-found lookup results cannot carry a person")
        if self.person is not None and self.person.last_name != self.last_name:
            raise ValueError("person last name does not match the queried surname")
        return self

    @classmethod
    def found_person(cls, person: Person) -> "PersonLookupResult":
        """Build a found result for ``person``."""
        return cls(last_name=person.last_name, found=True, person=person)

    @classmethod
    def not_found(cls, last_name: str) -> "PersonLookupResult":
        """Build a not-found result for ``last_name``."""
        return cls(last_name=last_name, found=False)


__all__ = ["Person", "PersonLookupResult"]
