"""Local JSON file store for the lineage."""

import json
from pathlib import Path
from typing import Iterable, Optional

from pydantic import ValidationError

from community_roots.config import settings
from community_roots.models import Person
from community_roots.storage.base import LineageStore, StoreError
from community_roots.storage.seed import initial_people


class LocalStore(LineageStore):
    """Lineage kept as a JSON array in a single file."""

    def __init__(self, path: Optional[str] = None):
        self.path = Path(path or settings.storage.local_path)

    def read(self) -> list[Person]:
        """Saved lineage; the bootstrap lineage when nothing has been saved yet."""
        if not self.path.exists():
            return initial_people()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return [Person.model_validate(item) for item in data]
        except (OSError, ValueError, TypeError, ValidationError) as e:
            raise StoreError(f"Could not read lineage from {self.path}: {e}") from e

    def save(self, people: Iterable[Person]) -> None:
        payload = [p.to_json() for p in people]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as e:
            raise StoreError(f"Could not write lineage to {self.path}: {e}") from e
