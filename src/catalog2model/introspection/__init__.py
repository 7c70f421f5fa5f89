"""Catalog-to-model normalization and relation inference."""

from .assembler import attach_columns, attach_indexes, build_entities, portable_default
from .naming import pluralize, resolve_name
from .pipeline import introspect, introspect_snapshot
from .relations import RelationTemp, group_constraints, infer_relations
from .types import TypeMapper, normalize_sql_type

__all__ = [
    "attach_columns",
    "attach_indexes",
    "build_entities",
    "portable_default",
    "pluralize",
    "resolve_name",
    "introspect",
    "introspect_snapshot",
    "RelationTemp",
    "group_constraints",
    "infer_relations",
    "TypeMapper",
    "normalize_sql_type",
]
