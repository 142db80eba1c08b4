"""
Person API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from core import db

from . import schemas
from .repository import PersonRepository
from .service import PersonService

router = APIRouter(prefix="/person")


def get_person_service() -> PersonService:
    return PersonService(PersonRepository(db))


@router.post(
    "/create",
    status_code=status.HTTP_201_CREATED,
    response_model=schemas.PersonResponse,
)
async def create_person(
    payload: schemas.CreatePersonRequest,
    person_service: PersonService = Depends(get_person_service),
) -> schemas.PersonResponse:
    if not payload.first_name or not payload.last_name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="firstName and lastName are required",
        )

    person = await person_service.create(payload.first_name, payload.last_name)
    return schemas.PersonResponse.from_person(person)


@router.post("/list", response_model=list[schemas.PersonResponse])
async def list_people(
    first_name: str = Query(default="", alias="firstName"),
    last_name: str = Query(default="", alias="lastName"),
    person_service: PersonService = Depends(get_person_service),
) -> list[schemas.PersonResponse]:
    people = await person_service.search(first_name, last_name)
    return [schemas.PersonResponse.from_person(p) for p in people]


@router.get("/{person_id}", response_model=schemas.PersonResponse)
async def get_person(
    person_id: int,
    person_service: PersonService = Depends(get_person_service),
) -> schemas.PersonResponse:
    person = await person_service.get_by_id(person_id)
    if person is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Person not found")
    return schemas.PersonResponse.from_person(person)
