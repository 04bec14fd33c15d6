"""Storage capability shared by all lineage backends."""

import logging
from abc import ABC, abstractmethod
from typing import Iterable

from community_roots.models import Person
from community_roots.storage.seed import initial_people

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """A lineage backend could not complete a read or write."""


class LineageStore(ABC):
    """Load and save the whole lineage as one snapshot."""

    @abstractmethod
    def read(self) -> list[Person]:
        """Stored lineage; raises StoreError when it cannot be read."""

    @abstractmethod
    def save(self, people: Iterable[Person]) -> None:
        ...

    def load(self) -> list[Person]:
        """Stored lineage, or the bootstrap lineage when it cannot be read."""
        try:
            return self.read()
        except StoreError as e:
            logger.error("%s; using bootstrap lineage", e)
            return initial_people()

    def upsert(self, people: Iterable[Person]) -> list[Person]:
        """
        Merge records by id into the stored lineage and save it.

        Reads strictly: a failed read raises StoreError rather than merging
        into the bootstrap lineage and overwriting the real records.
        """
        merged = {p.id: p for p in self.read()}
        for person in people:
            if person.id in merged:
                current = merged[person.id].model_dump()
                current.update(person.model_dump(exclude_unset=True))
                merged[person.id] = Person(**current)
            else:
                merged[person.id] = person
        result = list(merged.values())
        self.save(result)
        return result

    def close(self) -> None:
        """Release any connections held by the backend."""
