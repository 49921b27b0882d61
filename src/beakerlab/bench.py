"""Lab bench: routes pours through the engine and out to an optional persister."""

from __future__ import annotations

import logging

from beakerlab.mixing import MixingEngine
from beakerlab.models import VesselSummary
from beakerlab.persistence import Persister

logger = logging.getLogger(__name__)


class Bench:
    def __init__(self, engine: MixingEngine, persister: Persister | None = None) -> None:
        self.engine = engine
        self.persister = persister

    def pour(self, vessel_id: str, chemical_id: str, amount: float) -> VesselSummary:
        """Pour and return the readout. Persistence failures are logged, never raised."""
        summary = self.engine.pour(vessel_id, chemical_id, amount)
        if self.persister is not None:
            try:
                self.persister.save(vessel_id, summary)
            except Exception:
                logger.warning("Could not persist readout for %s", vessel_id, exc_info=True)
        return summary

    def summarize(self, vessel_id: str) -> VesselSummary:
        return self.engine.summarize(vessel_id)

    def hazards(self, vessel_id: str) -> list[str]:
        """Hazard texts of the listed chemicals present in ``vessel_id``, in pour order."""
        reference = self.engine.reference
        if reference is None:
            return []
        hazards: list[str] = []
        for chemical_id, _amount in self.summarize(vessel_id).components:
            descriptor = reference.lookup(chemical_id)
            if descriptor is not None and descriptor.hazard and descriptor.hazard not in hazards:
                hazards.append(descriptor.hazard)
        return hazards
