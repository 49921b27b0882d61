from .base import ReferenceTable
from .static import StaticReferenceTable, default_reference_table, load_reference_table

__all__ = [
    "ReferenceTable",
    "StaticReferenceTable",
    "default_reference_table",
    "load_reference_table",
]
