"""Shared data models for graph operations."""

from dataclasses import dataclass
from enum import Enum


class Relation(str, Enum):
    """Labels of the derived kinship edges."""
    FATHER = "Father"
    MOTHER = "Mother"
    CHILD = "Child"
    SPOUSE = "Spouse"
    SIBLING = "Sibling"


@dataclass(frozen=True)
class PathStep:
    """One hop of a kinship path: who we reach and through which relation."""
    person_id: str
    relation: Relation

    def to_dict(self) -> dict:
        return {"personId": self.person_id, "relation": self.relation.value}


# Neighbor edges share the shape of a path step.
Edge = PathStep
