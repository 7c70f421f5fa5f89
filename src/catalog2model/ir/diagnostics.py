"""Diagnostics and exceptions raised while building the model."""

from typing import Any, Dict, Literal
from pydantic import BaseModel, Field

UNRECOGNIZED_TYPE = "UNRECOGNIZED_TYPE"
DANGLING_RELATION = "DANGLING_RELATION"
COMPOSITE_KEY_REDUCED = "COMPOSITE_KEY_REDUCED"


class Diagnostic(BaseModel):
    """A recoverable problem found while building or checking the model."""

    code: str  # e.g., "UNRECOGNIZED_TYPE", "DANGLING_RELATION"
    severity: Literal["warning", "info"] = "warning"
    location: str  # e.g., "table_name" or "table_name.column_name"
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)


class Catalog2ModelError(Exception):
    """Base class for catalog2model errors."""


class UnrecognizedTypeError(Catalog2ModelError):
    """An engine type string has no semantic mapping."""

    def __init__(self, sql_type: str):
        self.sql_type = sql_type
        super().__init__(f"Unknown column type: {sql_type}")


class NamingExhaustionError(Catalog2ModelError):
    """No free name was found for a synthesized column.

    This is an internal invariant breach, never a consequence of bad input.
    """

    def __init__(self, base_name: str, entity_name: str, attempts: int):
        self.base_name = base_name
        self.entity_name = entity_name
        self.attempts = attempts
        super().__init__(
            f"No free column name for '{base_name}' in entity '{entity_name}' "
            f"after {attempts} attempts"
        )
