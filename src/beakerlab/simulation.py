"""Pour scripts and fixed-cadence pour generation."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping

import numpy as np

from beakerlab.bench import Bench
from beakerlab.constants import POUR_INTERVAL_MS, POUR_UNIT_ML
from beakerlab.errors import PourScriptError
from beakerlab.models import VesselSummary


@dataclass(frozen=True)
class PourEvent:
    vessel_id: str
    chemical_id: str
    amount: float = POUR_UNIT_ML


def _parse_event(index: int, data: Any) -> PourEvent:
    if not isinstance(data, Mapping):
        raise PourScriptError(f"Pour #{index} must be an object")
    try:
        return PourEvent(
            vessel_id=str(data["vessel"]),
            chemical_id=str(data["chemical"]),
            amount=float(data.get("amount", POUR_UNIT_ML)),
        )
    except KeyError as exc:
        raise PourScriptError(f"Pour #{index} is missing {exc.args[0]!r}") from exc
    except (TypeError, ValueError) as exc:
        raise PourScriptError(f"Pour #{index}: {exc}") from exc


def parse_pour_script(data: Any) -> list[PourEvent]:
    if not isinstance(data, Mapping) or not isinstance(data.get("pours"), list):
        raise PourScriptError('A pour script needs a "pours" list')
    return [_parse_event(i, entry) for i, entry in enumerate(data["pours"])]


def load_pour_script(path: str | Path) -> list[PourEvent]:
    """Read ``{"pours": [{"vessel": ..., "chemical": ..., "amount": ...}, ...]}``."""
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except OSError as exc:
        raise PourScriptError(f"Cannot read {path}: {exc.strerror or exc}") from exc
    except json.JSONDecodeError as exc:
        raise PourScriptError(f"{path}: {exc}") from exc
    return parse_pour_script(data)


def cadence_events(
    vessel_id: str,
    chemical_id: str,
    duration_ms: float,
    interval_ms: float = POUR_INTERVAL_MS,
    amount: float = POUR_UNIT_ML,
) -> list[PourEvent]:
    """Events for holding an instrument over a vessel for ``duration_ms``.

    One pour of ``amount`` fires each time a full ``interval_ms`` has elapsed.
    """
    if interval_ms <= 0:
        raise ValueError("interval_ms must be positive")
    ticks = np.arange(interval_ms, duration_ms + 1e-9, interval_ms)
    return [PourEvent(vessel_id, chemical_id, amount) for _ in ticks]


def replay(bench: Bench, events: Iterable[PourEvent]) -> Dict[str, VesselSummary]:
    """Apply ``events`` in order and return the final readout of each touched vessel."""
    finals: Dict[str, VesselSummary] = {}
    for event in events:
        finals[event.vessel_id] = bench.pour(event.vessel_id, event.chemical_id, event.amount)
    return finals
