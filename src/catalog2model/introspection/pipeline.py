"""Introspection pipeline: catalog rows in, entity-relationship model out."""

from typing import Iterable, List, Optional
from catalog2model.config.logging import get_logger
from catalog2model.config.settings import Settings, get_settings
from catalog2model.ir.diagnostics import Diagnostic
from catalog2model.ir.model import IntrospectionResult
from catalog2model.ir.rows import (
    CatalogSnapshot,
    ColumnRow,
    ForeignKeyRow,
    IndexRow,
    TableRow,
)
from .assembler import attach_columns, attach_indexes, build_entities
from .relations import infer_relations
from .types import TypeMapper

logger = get_logger(__name__)


def introspect(
    tables: Iterable[TableRow],
    columns: Iterable[ColumnRow] = (),
    indexes: Iterable[IndexRow] = (),
    foreign_keys: Iterable[ForeignKeyRow] = (),
    settings: Optional[Settings] = None,
    mapper: Optional[TypeMapper] = None,
) -> IntrospectionResult:
    """
    Build the entity-relationship model of one schema.

    Stages run strictly in order: entities, columns, indexes, relations.
    The entity list is created here and owned by this call only.

    Args:
        tables: Table rows
        columns: Column rows
        indexes: Index rows sorted by index name, column position
        foreign_keys: Foreign-key rows sorted by owner table, constraint name,
            column position
        settings: Settings to use (global settings by default)
        mapper: Type mapper (Oracle mapping by default)

    Returns:
        IntrospectionResult with the entities and all diagnostics

    Raises:
        NamingExhaustionError: If a synthesized column cannot be named
    """
    settings = settings or get_settings()
    diagnostics: List[Diagnostic] = []

    entities = build_entities(tables)
    entities = attach_columns(
        entities,
        columns,
        mapper=mapper,
        diagnostics=diagnostics,
        keep_quoted_defaults=settings.keep_quoted_defaults,
    )
    entities = attach_indexes(entities, indexes)
    entities = infer_relations(
        entities,
        foreign_keys,
        diagnostics=diagnostics,
        plural_suffix=settings.plural_suffix,
    )

    warnings = [d for d in diagnostics if d.severity == "warning"]
    if warnings:
        logger.warning(
            f"Introspection finished with {len(warnings)} warnings "
            f"({len(diagnostics)} diagnostics)"
        )
    else:
        logger.info(f"Introspection finished: {len(entities)} entities")

    return IntrospectionResult(entities=entities, diagnostics=diagnostics)


def introspect_snapshot(
    snapshot: CatalogSnapshot,
    settings: Optional[Settings] = None,
    mapper: Optional[TypeMapper] = None,
) -> IntrospectionResult:
    """Run introspect() on all row sets of a snapshot."""
    return introspect(
        snapshot.tables,
        snapshot.columns,
        snapshot.indexes,
        snapshot.foreign_keys,
        settings=settings,
        mapper=mapper,
    )
