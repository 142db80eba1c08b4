"""
Person persistence (raw SQL).

The executor is injected; in the app it is the `core.db` module.
Column names (`first_name`, `last_name`) are mapped to entity attributes only
in this module.
"""

from __future__ import annotations

from typing import Any

from core.db import QueryExecutor

from .domain import Equals, FieldFilter, Person, PersonCriteria


def row_to_person(row: dict[str, Any]) -> Person:
    return Person(row["id"], row["first_name"], row["last_name"])


def person_to_params(person: Person) -> tuple[str, str]:
    return person.first_name, person.last_name


def _filter_param(field: FieldFilter) -> str | None:
    # NULL means "no constraint" in the filter query.
    if isinstance(field, Equals):
        return field.value
    return None


def criteria_to_params(criteria: PersonCriteria) -> tuple[str | None, str | None]:
    return _filter_param(criteria.first_name), _filter_param(criteria.last_name)


class PersonRepository:
    def __init__(self, executor: QueryExecutor) -> None:
        self.db = executor

    async def create(self, person: Person) -> Person:
        rows = await self.db.fetch_all(
            """
            INSERT INTO person (first_name, last_name)
            VALUES ($1, $2)
            RETURNING id, first_name, last_name
            """,
            *person_to_params(person),
        )
        if not rows:
            raise RuntimeError("Failed to insert person.")
        return row_to_person(rows[0])

    async def find_by_filter(self, criteria: PersonCriteria) -> list[Person]:
        rows = await self.db.fetch_all(
            """
            SELECT id, first_name, last_name
            FROM person
            WHERE ($1::text IS NULL OR lower(first_name) = $1)
              AND ($2::text IS NULL OR lower(last_name) = $2)
            """,
            *criteria_to_params(criteria),
        )
        return [row_to_person(r) for r in rows]

    async def find_by_id(self, person_id: int) -> Person | None:
        rows = await self.db.fetch_all(
            """
            SELECT id, first_name, last_name
            FROM person
            WHERE id = $1
            """,
            person_id,
        )
        if not rows:
            return None
        return row_to_person(rows[0])
