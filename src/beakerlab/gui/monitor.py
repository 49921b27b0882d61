"""Reaction monitor helpers for the GUI layer."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from beakerlab.bench import Bench
from beakerlab.models import VesselSummary


@dataclass(frozen=True)
class PourInputs:
    vessel_id: str
    chemical_id: str
    amount: float


@dataclass
class PourLog:
    """Readouts of one vessel, in pour order."""

    vessel_id: str
    readouts: list[VesselSummary] = field(default_factory=list)

    def record(self, summary: VesselSummary) -> None:
        self.readouts.append(summary)

    def ph_series(self) -> tuple[np.ndarray, np.ndarray]:
        index = np.arange(1, len(self.readouts) + 1)
        return index, np.array([r.ph for r in self.readouts], dtype=float)

    def volume_series(self) -> tuple[np.ndarray, np.ndarray]:
        index = np.arange(1, len(self.readouts) + 1)
        return index, np.array([r.volume for r in self.readouts], dtype=float)


class MonitorSession:
    """Pours from the window and keeps a log per vessel for plotting."""

    def __init__(self, bench: Bench) -> None:
        self.bench = bench
        self.logs: dict[str, PourLog] = {}

    def pour(self, inputs: PourInputs) -> VesselSummary:
        summary = self.bench.pour(inputs.vessel_id, inputs.chemical_id, inputs.amount)
        self.log_for(inputs.vessel_id).record(summary)
        return summary

    def log_for(self, vessel_id: str) -> PourLog:
        if vessel_id not in self.logs:
            self.logs[vessel_id] = PourLog(vessel_id)
        return self.logs[vessel_id]
