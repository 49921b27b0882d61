"""Base interface for chemical reference tables."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

from beakerlab.models import ChemicalDescriptor


class ReferenceTable(ABC):
    """Abstract read-only lookup of chemical descriptors by identifier."""

    @abstractmethod
    def lookup(self, chemical_id: str) -> ChemicalDescriptor | None:
        """Return the descriptor for ``chemical_id`` or None if it is not listed."""
        pass

    @abstractmethod
    def identifiers(self) -> Iterator[str]:
        """Iterate over every listed chemical identifier."""
        pass

    def __contains__(self, chemical_id: object) -> bool:
        return isinstance(chemical_id, str) and self.lookup(chemical_id) is not None
