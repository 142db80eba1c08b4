"""
Pydantic schemas for person endpoints.

JSON uses camelCase keys (`firstName`, `lastName`).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .domain import Person


class CreatePersonRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Optional here so the router can answer 400 instead of a 422 body error.
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")


class PersonResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")

    @classmethod
    def from_person(cls, person: Person) -> PersonResponse:
        return cls(id=int(person.id), first_name=person.first_name, last_name=person.last_name)
