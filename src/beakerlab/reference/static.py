"""Static chemical reference tables."""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from beakerlab.errors import ReferenceTableError
from beakerlab.models import ChemicalDescriptor
from beakerlab.reference.base import ReferenceTable

REQUIRED_FIELDS = ("name", "formula", "density", "molar_mass")


class StaticReferenceTable(ReferenceTable):
    """Reference table backed by a fixed mapping, frozen at construction."""

    def __init__(self, descriptors: Mapping[str, ChemicalDescriptor]):
        self._descriptors = MappingProxyType(dict(descriptors))

    def lookup(self, chemical_id: str) -> ChemicalDescriptor | None:
        return self._descriptors.get(chemical_id)

    def identifiers(self) -> Iterator[str]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)


def _parse_descriptor(identifier: str, data: Any) -> ChemicalDescriptor:
    if not isinstance(data, Mapping):
        raise ReferenceTableError(f"Entry {identifier!r} must be an object")
    missing = [key for key in REQUIRED_FIELDS if key not in data]
    if missing:
        raise ReferenceTableError(
            f"Entry {identifier!r} is missing {', '.join(missing)}"
        )
    try:
        return ChemicalDescriptor(
            identifier=identifier,
            name=str(data["name"]),
            formula=str(data["formula"]),
            density=float(data["density"]),
            molar_mass=float(data["molar_mass"]),
            hazard=str(data.get("hazard", "")),
        )
    except (TypeError, ValueError) as exc:
        raise ReferenceTableError(f"Entry {identifier!r}: {exc}") from exc


def load_reference_table(path: str | Path) -> StaticReferenceTable:
    """Load a JSON table of the form ``{id: {name, formula, density, molar_mass, hazard}}``."""
    try:
        with open(path, "r") as f:
            raw = json.load(f)
    except OSError as exc:
        raise ReferenceTableError(f"Cannot read {path}: {exc.strerror or exc}") from exc
    except json.JSONDecodeError as exc:
        raise ReferenceTableError(f"{path}: {exc}") from exc

    if not isinstance(raw, Mapping):
        raise ReferenceTableError(f"{path}: top level must be an object")

    return StaticReferenceTable(
        {identifier: _parse_descriptor(identifier, entry) for identifier, entry in raw.items()}
    )


_BUILTIN = (
    ChemicalDescriptor("water", "Distilled Water", "H2O", 1.000, 18.015, ""),
    ChemicalDescriptor(
        "hcl", "Hydrochloric Acid (1 M)", "HCl", 1.018, 36.46,
        "Corrosive. Causes skin burns and eye damage.",
    ),
    ChemicalDescriptor(
        "naoh", "Sodium Hydroxide (1 M)", "NaOH", 1.040, 40.00,
        "Corrosive. Causes severe skin burns and eye damage.",
    ),
    ChemicalDescriptor(
        "phenolph", "Phenolphthalein Indicator", "C20H14O4", 0.800, 318.32,
        "Flammable solvent. Suspected carcinogen.",
    ),
    ChemicalDescriptor(
        "agno3", "Silver Nitrate (0.1 M)", "AgNO3", 1.013, 169.87,
        "Oxidizer. Stains skin, causes eye damage.",
    ),
    ChemicalDescriptor(
        "silver", "Silver Nitrate (0.1 M)", "AgNO3", 1.013, 169.87,
        "Oxidizer. Stains skin, causes eye damage.",
    ),
    ChemicalDescriptor("salt", "Sodium Chloride Solution", "NaCl", 1.070, 58.44, ""),
)


def default_reference_table() -> StaticReferenceTable:
    """Built-in table covering the chemicals that drive the readout."""
    return StaticReferenceTable({d.identifier: d for d in _BUILTIN})
