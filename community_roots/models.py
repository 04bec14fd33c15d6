"""Data models for the family lineage."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class Gender(str, Enum):
    """Recorded gender of a person."""
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class Person(BaseModel):
    """
    A member of the community lineage.

    Relations are back-references by id only: ``father_id``, ``mother_id``
    and ``spouse_id`` point at other records and carry no ownership.
    Serialized with camelCase keys (``firstName``, ``fatherId``) so files
    written by the browser app load as-is.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    first_name: str
    middle_name: Optional[str] = None
    last_name: str = ""
    gender: Gender = Gender.OTHER
    dob: Optional[str] = None
    current_location: Optional[str] = None
    place_of_birth: Optional[str] = None
    ancestral_home: Optional[str] = None
    gotra: Optional[str] = None
    profession: Optional[str] = None
    bio: Optional[str] = None
    photo: Optional[str] = None
    father_id: Optional[str] = None
    mother_id: Optional[str] = None
    spouse_id: Optional[str] = None
    is_living: bool = True
    education: Optional[str] = None
    hobbies: Optional[str] = None
    achievements: Optional[str] = None

    @field_validator("father_id", "mother_id", "spouse_id", mode="before")
    @classmethod
    def _blank_reference(cls, value):
        """Treat empty-string references as unset."""
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    @property
    def full_name(self) -> str:
        """First, middle and last name, skipping empty parts."""
        return full_name(self)

    def to_json(self) -> dict:
        """Serialize with camelCase keys, dropping unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def full_name(person: Optional[Person]) -> str:
    """Display name for a person, or an empty string."""
    if person is None:
        return ""
    parts = [person.first_name, person.middle_name, person.last_name]
    return " ".join(p for p in parts if p)
