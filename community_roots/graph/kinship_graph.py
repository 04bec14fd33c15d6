"""Kinship graph computed on demand over a person snapshot."""

import logging
from typing import Iterable, Optional, Sequence

from community_roots.graph.models import Edge, PathStep, Relation
from community_roots.models import Person

logger = logging.getLogger(__name__)


class KinshipGraph:
    """
    Adjacency view over one snapshot of the lineage.

    Nothing is materialized except an id index; every neighbor query scans
    the snapshot for reverse relations (children, reverse spouse links,
    siblings). Build a new instance per query.

    Usage:
        graph = KinshipGraph(people)
        graph.neighbors("3")
        graph.find_path("3", "10")
    """

    def __init__(self, people: Iterable[Person]):
        self.people: Sequence[Person] = tuple(people)
        self._by_id: dict[str, Person] = {}
        for person in self.people:
            # First record wins on duplicate ids
            self._by_id.setdefault(person.id, person)

    def __contains__(self, person_id: str) -> bool:
        return person_id in self._by_id

    def __len__(self) -> int:
        return len(self.people)

    def get_person(self, person_id: str) -> Optional[Person]:
        return self._by_id.get(person_id)

    # ─────────────────────────────────────────
    # Relation lookups
    # ─────────────────────────────────────────

    def parents(self, person_id: str) -> list[Edge]:
        """Father and mother edges of a person, in that order."""
        person = self.get_person(person_id)
        if person is None:
            return []
        edges = []
        if person.father_id:
            edges.append(Edge(person.father_id, Relation.FATHER))
        if person.mother_id:
            edges.append(Edge(person.mother_id, Relation.MOTHER))
        return edges

    def spouses(self, person_id: str) -> list[Edge]:
        """Spouse edges from the person's own pointer and from records pointing back."""
        person = self.get_person(person_id)
        if person is None:
            return []
        edges = []
        if person.spouse_id:
            edges.append(Edge(person.spouse_id, Relation.SPOUSE))
        for other in self.people:
            if other.id != person_id and other.spouse_id == person_id:
                edges.append(Edge(other.id, Relation.SPOUSE))
        return edges

    def children(self, person_id: str) -> list[Edge]:
        """Everyone whose father or mother is this person."""
        if person_id not in self:
            return []
        return [
            Edge(other.id, Relation.CHILD)
            for other in self.people
            if other.id != person_id
            and (other.father_id == person_id or other.mother_id == person_id)
        ]

    def siblings(self, person_id: str) -> list[Edge]:
        """Full and half siblings: anyone sharing a recorded father or mother."""
        person = self.get_person(person_id)
        if person is None or not (person.father_id or person.mother_id):
            return []
        return [
            Edge(other.id, Relation.SIBLING)
            for other in self.people
            if other.id != person_id
            and (
                (person.father_id and other.father_id == person.father_id)
                or (person.mother_id and other.mother_id == person.mother_id)
            )
        ]

    def neighbors(self, person_id: str) -> list[Edge]:
        """
        All neighbor edges of a person.

        Enumeration order is fixed: Father, Mother, Spouse (own pointer,
        then reverse pointers), Child, Sibling, each in snapshot order.
        A pair ``(neighbor, relation)`` appears at most once; a neighbor
        reached through two different relations appears once per relation.

        Args:
            person_id: Person to expand. Unknown ids have no neighbors.

        Returns:
            Ordered list of unique edges.
        """
        edges = (
            self.parents(person_id)
            + self.spouses(person_id)
            + self.children(person_id)
            + self.siblings(person_id)
        )
        return list(dict.fromkeys(edges))

    def find_path(
        self, start_id: str, end_id: str, max_hops: Optional[int] = None
    ) -> Optional[list[PathStep]]:
        from community_roots.graph.path_resolver import bfs_path

        return bfs_path(self, start_id, end_id, max_hops=max_hops)


def neighbors(people: Iterable[Person], person_id: str) -> list[Edge]:
    """Neighbor edges of ``person_id`` within a fresh snapshot of ``people``."""
    edges = KinshipGraph(people).neighbors(person_id)
    logger.debug("neighbors(%s): %d edges", person_id, len(edges))
    return edges
