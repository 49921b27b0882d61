"""Beaker mixing engine.

This module keeps the simulated composition of every vessel on the bench and
turns it into a reaction readout. Each pour adds an amount of one chemical to
one vessel; after every pour the engine recomputes:

- Volume: the sum of all poured amounts (ml).
- pH: a linear clamp on the excess of strong acid over strong base.
- Color: the last matching color rule, evaluated in a fixed order.

Vessels are created lazily on their first pour and are never removed.
"""

from __future__ import annotations

import logging
import math
import threading
from typing import Dict, Literal, Sequence

from beakerlab.chemistry import (
    DEFAULT_COLOR_RULES,
    ColorRule,
    LinearPHModel,
    PHModel,
    derive_color,
)
from beakerlab.constants import COLOR_WATER
from beakerlab.errors import InvalidPourError, UnknownChemicalError
from beakerlab.models import VesselState, VesselSummary
from beakerlab.reference import ReferenceTable

logger = logging.getLogger(__name__)

UnknownPolicy = Literal["accept", "warn", "reject"]
UNKNOWN_POLICIES = ("accept", "warn", "reject")


class MixingEngine:
    """Single source of truth for per-vessel composition.

    Args:
        reference: Optional reference table. Without one, every chemical id is
            treated as known.
        ph_model: pH heuristic. Defaults to ``LinearPHModel()``.
        color_rules: Ordered color rules; the last matching one wins.
        unknown_chemicals: What to do with ids missing from ``reference``:
            ``"accept"`` accumulates them as inert volume, ``"warn"`` does the
            same but logs a warning, ``"reject"`` raises ``UnknownChemicalError``.
    """

    def __init__(
        self,
        reference: ReferenceTable | None = None,
        ph_model: PHModel | None = None,
        color_rules: Sequence[ColorRule] = DEFAULT_COLOR_RULES,
        unknown_chemicals: UnknownPolicy = "accept",
    ) -> None:
        if unknown_chemicals not in UNKNOWN_POLICIES:
            raise ValueError(f"Unknown chemical policy: {unknown_chemicals}")
        self.reference = reference
        self.ph_model = ph_model or LinearPHModel()
        self.color_rules = tuple(color_rules)
        self.unknown_chemicals = unknown_chemicals

        self._vessels: Dict[str, VesselState] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def pour(self, vessel_id: str, chemical_id: str, amount: float) -> VesselSummary:
        """Add ``amount`` ml of ``chemical_id`` to ``vessel_id`` and return the new readout."""
        if not isinstance(vessel_id, str) or not vessel_id:
            raise InvalidPourError("Vessel id must be a non-empty string")
        amount = _validate_amount(amount)
        self._check_chemical(chemical_id)

        state, lock = self._vessel(vessel_id)
        with lock:
            state.add(chemical_id, amount)
            state.ph = self.ph_model.ph(state.components)
            state.color = derive_color(state.components, self.color_rules, COLOR_WATER)
            summary = VesselSummary.from_state(vessel_id, state)

        logger.debug(
            "Poured %g ml %s into %s: volume=%.1f pH=%.2f color=%s",
            amount, chemical_id, vessel_id, summary.volume, summary.ph, summary.color,
        )
        return summary

    def summarize(self, vessel_id: str) -> VesselSummary:
        """Return the readout for ``vessel_id``; a never-poured vessel reads as empty water."""
        with self._registry_lock:
            state = self._vessels.get(vessel_id)
            lock = self._locks.get(vessel_id)
        if state is None or lock is None:
            return VesselSummary.empty(vessel_id)
        with lock:
            return VesselSummary.from_state(vessel_id, state)

    def vessel_ids(self) -> list[str]:
        with self._registry_lock:
            return list(self._vessels)

    def __contains__(self, vessel_id: object) -> bool:
        return vessel_id in self._vessels

    def _vessel(self, vessel_id: str) -> tuple[VesselState, threading.Lock]:
        with self._registry_lock:
            state = self._vessels.get(vessel_id)
            if state is None:
                state = self._vessels[vessel_id] = VesselState()
                self._locks[vessel_id] = threading.Lock()
                logger.debug("Created vessel %s", vessel_id)
            return state, self._locks[vessel_id]

    def _check_chemical(self, chemical_id: str) -> None:
        if self.reference is None or chemical_id in self.reference:
            return
        if self.unknown_chemicals == "reject":
            raise UnknownChemicalError(chemical_id)
        if self.unknown_chemicals == "warn":
            logger.warning("Unknown chemical %r poured; treating it as inert", chemical_id)
        else:
            logger.debug("Unknown chemical %r treated as inert", chemical_id)


def _validate_amount(amount: float) -> float:
    try:
        value = float(amount)
    except (TypeError, ValueError) as exc:
        raise InvalidPourError(f"Pour amount must be a number, got {amount!r}") from exc
    if not math.isfinite(value) or value <= 0:
        raise InvalidPourError(f"Pour amount must be positive and finite, got {amount!r}")
    return value
