"""Exception hierarchy for BeakerLab."""

from __future__ import annotations


class BeakerLabError(Exception):
    """Base class for all BeakerLab errors."""


class InvalidPourError(BeakerLabError, ValueError):
    """A pour was requested with an empty vessel id or a non-positive amount."""


class UnknownChemicalError(BeakerLabError, KeyError):
    """A chemical id is not in the reference table and the engine rejects unknowns."""

    def __init__(self, chemical_id: str) -> None:
        super().__init__(chemical_id)
        self.chemical_id = chemical_id

    def __str__(self) -> str:
        return f"Unknown chemical: {self.chemical_id!r}"


class ReferenceTableError(BeakerLabError, ValueError):
    pass


class PourScriptError(BeakerLabError, ValueError):
    pass
