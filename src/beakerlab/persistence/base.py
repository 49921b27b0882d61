"""Persister capability interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from beakerlab.models import VesselSummary


@runtime_checkable
class Persister(Protocol):
    def save(self, vessel_id: str, summary: VesselSummary) -> None:
        """Store a vessel readout. Implementations may raise; callers treat it as best-effort."""
        ...
