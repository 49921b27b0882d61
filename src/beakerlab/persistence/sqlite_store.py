"""SQLite persistence helpers for BeakerLab."""

from __future__ import annotations

import json
import sqlite3
from pathlib import Path
from typing import Any, Mapping

from beakerlab.models import VesselSummary

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS vessel_snapshot (
  id INTEGER PRIMARY KEY,
  vessel_id TEXT NOT NULL,
  volume REAL NOT NULL,
  ph REAL NOT NULL,
  color TEXT NOT NULL,
  components JSON,
  saved_utc TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%fZ', 'now'))
);
CREATE INDEX IF NOT EXISTS idx_vessel_snapshot_vessel
  ON vessel_snapshot (vessel_id, id);
"""


def connect(project_file: str | Path) -> sqlite3.Connection:
    """Open (and create) a .labproj SQLite file."""
    path = Path(project_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    connection = sqlite3.connect(path)
    return connection


def ensure_schema(connection: sqlite3.Connection) -> None:
    connection.executescript(SCHEMA_SQL)
    connection.commit()


def save_snapshot(
    connection: sqlite3.Connection,
    vessel_id: str,
    summary: VesselSummary,
) -> int:
    """Persist a vessel readout and return its row ID.

    The timestamp is assigned by the database, not by the caller.
    """
    cursor = connection.execute(
        "INSERT INTO vessel_snapshot (vessel_id, volume, ph, color, components)"
        " VALUES (?, ?, ?, ?, ?)",
        (
            vessel_id,
            float(summary.volume),
            float(summary.ph),
            summary.color,
            _json_dumps(dict(summary.components)),
        ),
    )
    connection.commit()
    return int(cursor.lastrowid)


def load_snapshots(
    connection: sqlite3.Connection,
    vessel_id: str | None = None,
) -> list[dict[str, Any]]:
    """Return saved snapshots oldest first, optionally for one vessel."""
    query = "SELECT id, vessel_id, volume, ph, color, components, saved_utc FROM vessel_snapshot"
    params: tuple[object, ...] = ()
    if vessel_id is not None:
        query += " WHERE vessel_id = ?"
        params = (vessel_id,)
    query += " ORDER BY id"

    rows = []
    for row in connection.execute(query, params):
        rows.append(
            {
                "id": row[0],
                "vessel_id": row[1],
                "volume": row[2],
                "ph": row[3],
                "color": row[4],
                "components": json.loads(row[5]) if row[5] else {},
                "saved_utc": row[6],
            }
        )
    return rows


class SQLitePersister:
    """Persister writing one snapshot row per save."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection
        ensure_schema(connection)

    def save(self, vessel_id: str, summary: VesselSummary) -> None:
        save_snapshot(self.connection, vessel_id, summary)


def _json_dumps(payload: Mapping[str, object]) -> str:
    return json.dumps(payload, ensure_ascii=False)
