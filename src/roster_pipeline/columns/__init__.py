"""
Columns Package - Field Descriptors and Collation.

Columns are declared once per list view and carry the accessor,
comparison strategy, search and export behaviour of a field.
"""

from roster_pipeline.columns.collation import natural_key, text_key
from roster_pipeline.columns.descriptors import Column, ColumnKind

__all__ = [
    "Column",
    "ColumnKind",
    "natural_key",
    "text_key",
]
