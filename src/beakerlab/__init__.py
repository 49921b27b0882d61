"""BeakerLab core package."""

from beakerlab.bench import Bench
from beakerlab.chemistry import LinearPHModel, derive_color
from beakerlab.mixing import MixingEngine
from beakerlab.models import ChemicalDescriptor, VesselSummary
from beakerlab.reference import default_reference_table, load_reference_table

__all__ = [
    "Bench",
    "LinearPHModel",
    "derive_color",
    "MixingEngine",
    "ChemicalDescriptor",
    "VesselSummary",
    "default_reference_table",
    "load_reference_table",
]
