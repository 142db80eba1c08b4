"""
Person entity and search criteria.

Criteria fields are normalized once, by `field_filter`, into either
`Unconstrained` or `Equals`; nothing downstream deals with raw nullable
strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Person:
    """
    A stored person, or one about to be stored when `id` is None.

    Values are kept exactly as given: no trimming, no case change, no checks.
    """

    id: int | None
    first_name: str
    last_name: str


@dataclass(frozen=True)
class Unconstrained:
    pass


@dataclass(frozen=True)
class Equals:
    # Already lowercased.
    value: str


FieldFilter = Union[Unconstrained, Equals]


def field_filter(raw: str | None) -> FieldFilter:
    if not raw:
        return Unconstrained()
    return Equals(raw.lower())


@dataclass(frozen=True)
class PersonCriteria:
    first_name: FieldFilter = Unconstrained()
    last_name: FieldFilter = Unconstrained()

    @classmethod
    def from_values(cls, first_name: str | None = "", last_name: str | None = "") -> PersonCriteria:
        return cls(first_name=field_filter(first_name), last_name=field_filter(last_name))
