"""
Person use cases.

No validation and no error handling here: callers check required fields,
and storage errors propagate as raised.
"""

from __future__ import annotations

import logging

from .domain import Person, PersonCriteria
from .repository import PersonRepository

logger = logging.getLogger(__name__)


class PersonService:
    def __init__(self, repository: PersonRepository) -> None:
        self.repository = repository

    async def create(self, first_name: str, last_name: str) -> Person:
        person = await self.repository.create(Person(None, first_name, last_name))
        logger.info("person_created id=%s", person.id)
        return person

    async def search(self, first_name: str | None = "", last_name: str | None = "") -> list[Person]:
        criteria = PersonCriteria.from_values(first_name or "", last_name or "")
        return await self.repository.find_by_filter(criteria)

    async def get_by_id(self, person_id: int) -> Person | None:
        return await self.repository.find_by_id(person_id)
