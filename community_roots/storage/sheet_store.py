"""Spreadsheet-backed store: one CSV row per person."""

import csv
from pathlib import Path
from typing import Iterable, Optional

from pydantic import ValidationError

from community_roots.config import settings
from community_roots.models import Person
from community_roots.storage.base import LineageStore, StoreError
from community_roots.storage.seed import initial_people

# Sheet columns in display order
COLUMNS = [
    "id", "firstName", "middleName", "lastName", "gender", "dob",
    "currentLocation", "placeOfBirth", "ancestralHome", "gotra", "profession",
    "bio", "photo", "fatherId", "motherId", "spouseId", "isLiving",
    "education", "hobbies", "achievements",
]


class SheetStore(LineageStore):
    """Lineage kept in a CSV sheet with a camelCase header row."""

    def __init__(self, path: Optional[str] = None):
        self.path = Path(path or settings.storage.sheet_path)

    def _row_to_person(self, row: dict) -> Person:
        data = {k: v for k, v in row.items() if k in COLUMNS and v not in (None, "")}
        if "isLiving" in data:
            data["isLiving"] = data["isLiving"].strip().lower() in ("true", "1", "yes")
        return Person.model_validate(data)

    def read(self) -> list[Person]:
        if not self.path.exists():
            return initial_people()
        try:
            with open(self.path, newline="", encoding="utf-8") as f:
                return [self._row_to_person(row) for row in csv.DictReader(f)]
        except (OSError, UnicodeDecodeError, csv.Error, ValidationError) as e:
            raise StoreError(f"Could not read sheet {self.path}: {e}") from e

    def save(self, people: Iterable[Person]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", newline="", encoding="utf-8") as f:
                writer = csv.DictWriter(f, fieldnames=COLUMNS)
                writer.writeheader()
                for person in people:
                    writer.writerow(person.to_json())
        except OSError as e:
            raise StoreError(f"Could not write sheet {self.path}: {e}") from e
