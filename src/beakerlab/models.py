"""Data structures for chemicals and vessels."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from beakerlab.constants import COLOR_WATER, NEUTRAL_PH


@dataclass(frozen=True)
class ChemicalDescriptor:
    identifier: str
    name: str
    formula: str
    density: float  # g/ml
    molar_mass: float  # g/mol
    hazard: str = ""


@dataclass
class VesselState:
    """Running composition of a single vessel.

    The volume is derived from the components so that it can never drift from
    their sum.
    """

    components: Dict[str, float] = field(default_factory=dict)
    ph: float = NEUTRAL_PH
    color: str = COLOR_WATER

    @property
    def volume(self) -> float:
        return sum(self.components.values())

    def add(self, chemical_id: str, amount: float) -> None:
        self.components[chemical_id] = self.components.get(chemical_id, 0.0) + amount



def _format_amount(amount: float) -> str:
    # Whole amounts print without a trailing ".0"; others keep every digit.
    if float(amount).is_integer():
        return str(int(amount))
    return repr(float(amount))

@dataclass(frozen=True)
class VesselSummary:
    """Immutable reaction readout for one vessel."""

    vessel_id: str
    volume: float
    ph: float
    color: str
    components: Tuple[Tuple[str, float], ...] = ()

    @classmethod
    def from_state(cls, vessel_id: str, state: VesselState) -> VesselSummary:
        return cls(
            vessel_id=vessel_id,
            volume=state.volume,
            ph=state.ph,
            color=state.color,
            components=tuple(state.components.items()),
        )

    @classmethod
    def empty(cls, vessel_id: str) -> VesselSummary:
        return cls(vessel_id=vessel_id, volume=0.0, ph=NEUTRAL_PH, color=COLOR_WATER)

    def to_dict(self) -> Dict[str, object]:
        return {
            "vessel_id": self.vessel_id,
            "volume": round(self.volume, 1),
            "ph": round(self.ph, 2),
            "color": self.color,
            "components": dict(self.components),
        }

    def as_text(self) -> str:
        """Render the monitor readout shown next to the bench."""
        parts = ", ".join(f"{name}:{_format_amount(amount)}" for name, amount in self.components)
        return (
            "Reaction Monitor:\n"
            f"Volume: {self.volume:.1f} ml\n"
            f"pH ~ {self.ph:.2f}\n"
            f"Components: {parts}"
        )
