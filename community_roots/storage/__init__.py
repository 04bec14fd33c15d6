"""Lineage storage backends."""

from typing import Optional

from community_roots.config import Settings, settings as default_settings
from community_roots.storage.base import LineageStore, StoreError
from community_roots.storage.local_store import LocalStore
from community_roots.storage.remote_store import RemoteStore
from community_roots.storage.sheet_store import SheetStore


def get_store(settings: Optional[Settings] = None) -> LineageStore:
    """The one backend selected by ``storage.backend``."""
    storage = (settings or default_settings).storage
    if storage.backend == "local":
        return LocalStore(storage.local_path)
    if storage.backend == "remote":
        return RemoteStore(storage.remote_url)
    if storage.backend == "sheet":
        return SheetStore(storage.sheet_path)
    raise ValueError(f"Unknown storage backend: {storage.backend}")


__all__ = [
    "LineageStore",
    "StoreError",
    "LocalStore",
    "RemoteStore",
    "SheetStore",
    "get_store",
]
