# tests/people/test_people_domain.py
from __future__ import annotations

import dataclasses

import pytest

from people.domain import Equals, Person, PersonCriteria, Unconstrained, field_filter


def test_person_keeps_values_verbatim():
    p = Person(None, "  ada ", "LOVELACE")
    assert p.id is None
    assert p.first_name == "  ada "
    assert p.last_name == "LOVELACE"


def test_person_equality_is_structural():
    assert Person(1, "Ada", "Lovelace") == Person(1, "Ada", "Lovelace")
    assert Person(1, "Ada", "Lovelace") != Person(2, "Ada", "Lovelace")
    assert Person(None, "Ada", "Lovelace") != Person(1, "Ada", "Lovelace")


def test_person_is_immutable():
    p = Person(1, "Ada", "Lovelace")
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.first_name = "Grace"  # type: ignore[misc]


@pytest.mark.parametrize("raw", ["", None])
def test_field_filter_empty_or_missing_is_unconstrained(raw):
    assert field_filter(raw) == Unconstrained()


@pytest.mark.parametrize("raw", ["JOHN", "John", "john"])
def test_field_filter_lowercases(raw):
    assert field_filter(raw) == Equals("john")


def test_field_filter_does_not_trim():
    # Whitespace is a value, not an absence.
    assert field_filter(" ") == Equals(" ")


def test_criteria_fields_are_independent():
    criteria = PersonCriteria.from_values("John", "")
    assert criteria.first_name == Equals("john")
    assert criteria.last_name == Unconstrained()


def test_criteria_defaults_to_unconstrained():
    assert PersonCriteria() == PersonCriteria.from_values()
    assert PersonCriteria.from_values(None, None) == PersonCriteria(Unconstrained(), Unconstrained())
