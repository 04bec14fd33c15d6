"""Pytest fixtures shared across test modules."""

import pytest

from community_roots.models import Gender, Person


def make_person(pid, first_name, gender, father=None, mother=None, spouse=None, last_name="Verma"):
    return Person(
        id=pid,
        first_name=first_name,
        last_name=last_name,
        gender=gender,
        father_id=father,
        mother_id=mother,
        spouse_id=spouse,
    )


@pytest.fixture
def nuclear_family():
    """A (father), B (mother, spouse pointer to A), C (their son)."""
    return [
        make_person("A", "Anil", Gender.MALE),
        make_person("B", "Bina", Gender.FEMALE, spouse="A"),
        make_person("C", "Chetan", Gender.MALE, father="A", mother="B"),
    ]


@pytest.fixture
def extended_family():
    """
    Three generations around Arjun (c).

    g1 Ram + g2 Sita -> f Mohan, u Sohan, a Radha
    mg Shyam -> m Geeta, mb Vijay
    f Mohan + m Geeta -> c Arjun, s Priya
    u Sohan + ua Kamla -> cz Ravi
    """
    return [
        make_person("g1", "Ram", Gender.MALE),
        make_person("g2", "Sita", Gender.FEMALE, spouse="g1"),
        make_person("mg", "Shyam", Gender.MALE),
        make_person("f", "Mohan", Gender.MALE, father="g1", mother="g2", spouse="m"),
        make_person("m", "Geeta", Gender.FEMALE, father="mg"),
        make_person("u", "Sohan", Gender.MALE, father="g1", mother="g2", spouse="ua"),
        make_person("ua", "Kamla", Gender.FEMALE),
        make_person("a", "Radha", Gender.FEMALE, father="g1"),
        make_person("mb", "Vijay", Gender.MALE, father="mg"),
        make_person("c", "Arjun", Gender.MALE, father="f", mother="m"),
        make_person("s", "Priya", Gender.FEMALE, father="f", mother="m"),
        make_person("cz", "Ravi", Gender.MALE, father="u", mother="ua"),
    ]


@pytest.fixture
def loner():
    return make_person("z", "Zoya", Gender.FEMALE, last_name="Khan")


@pytest.fixture
def person_factory():
    return make_person
