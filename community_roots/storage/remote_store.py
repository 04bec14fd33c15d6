"""HTTP store talking to the shared heritage API."""

from typing import Iterable, Optional

import httpx
from pydantic import ValidationError

from community_roots.config import settings
from community_roots.models import Person
from community_roots.storage.base import LineageStore, StoreError

API_PATH = "/api/heritage"


class RemoteStore(LineageStore):
    """Lineage served by a remote ``/api/heritage`` endpoint."""

    def __init__(self, base_url: Optional[str] = None, client: Optional[httpx.Client] = None):
        self.base_url = (base_url or settings.storage.remote_url).rstrip("/")
        self.client = client or httpx.Client(timeout=settings.storage.timeout_seconds)

    def read(self) -> list[Person]:
        try:
            response = self.client.get(f"{self.base_url}{API_PATH}")
            response.raise_for_status()
            return [Person.model_validate(item) for item in response.json()]
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            raise StoreError(f"Connection lost to community database: {e}") from e

    def save(self, people: Iterable[Person]) -> None:
        payload = {"people": [p.to_json() for p in people]}
        try:
            response = self.client.post(f"{self.base_url}{API_PATH}", json=payload)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise StoreError(f"Could not sync lineage to {self.base_url}: {e}") from e

    def close(self) -> None:
        self.client.close()
