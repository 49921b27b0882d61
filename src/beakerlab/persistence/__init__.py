"""Persistence helpers for BeakerLab."""

from beakerlab.persistence.base import Persister
from beakerlab.persistence.sqlite_store import (
    SQLitePersister,
    connect,
    ensure_schema,
    load_snapshots,
    save_snapshot,
)

__all__ = [
    "Persister",
    "SQLitePersister",
    "connect",
    "ensure_schema",
    "load_snapshots",
    "save_snapshot",
]
