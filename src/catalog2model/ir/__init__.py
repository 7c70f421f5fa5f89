"""Intermediate representation: catalog rows, model and diagnostics."""

from .diagnostics import (
    Catalog2ModelError,
    Diagnostic,
    NamingExhaustionError,
    UnrecognizedTypeError,
)
from .model import Column, Entity, Index, IndexColumn, IntrospectionResult, Relation
from .rows import CatalogSnapshot, ColumnRow, ForeignKeyRow, IndexRow, TableRow

__all__ = [
    "Catalog2ModelError",
    "Diagnostic",
    "NamingExhaustionError",
    "UnrecognizedTypeError",
    "Column",
    "Entity",
    "Index",
    "IndexColumn",
    "IntrospectionResult",
    "Relation",
    "CatalogSnapshot",
    "ColumnRow",
    "ForeignKeyRow",
    "IndexRow",
    "TableRow",
]
