"""Assembly of entities, columns and indexes from flat catalog rows."""

from typing import Iterable, List, Optional
from catalog2model.config.logging import get_logger
from catalog2model.ir.diagnostics import (
    UNRECOGNIZED_TYPE,
    Diagnostic,
    UnrecognizedTypeError,
)
from catalog2model.ir.model import Column, Entity, Index, IndexColumn
from catalog2model.ir.rows import ColumnRow, IndexRow, TableRow
from .reporting import report
from .types import TypeMapper, normalize_sql_type, parse_type_parameters

logger = get_logger(__name__)


def build_entities(table_rows: Iterable[TableRow]) -> List[Entity]:
    """
    Create one empty entity per distinct table name.

    Args:
        table_rows: Table rows in any order

    Returns:
        Entities in first-seen order
    """
    entities: List[Entity] = []
    seen = set()
    for row in table_rows:
        if row.name in seen:
            continue
        seen.add(row.name)
        entities.append(Entity(name=row.name))
    logger.debug(f"Built {len(entities)} entities")
    return entities


def portable_default(raw_default: Optional[str], keep_quoted: bool = False) -> Optional[str]:
    """Return the column default, or None when it is absent or quoted.

    A default containing a double quote references an identifier or an engine
    expression and is not carried into the model unless keep_quoted is set.
    """
    if not raw_default:
        return None
    if '"' in raw_default and not keep_quoted:
        return None
    return raw_default


def build_column(row: ColumnRow, mapper: TypeMapper, keep_quoted_defaults: bool = False) -> Column:
    """
    Build a model column from one catalog column row.

    Raises:
        UnrecognizedTypeError: If the row's type has no semantic mapping
    """
    sql_type = normalize_sql_type(row.raw_type)
    semantic_type = mapper.map(sql_type)
    params = parse_type_parameters(row.raw_type)

    column = Column(
        name=row.name,
        sql_type=sql_type,
        semantic_type=semantic_type,
        nullable=row.nullable == "Y",
        is_generated=row.is_identity == "YES",
        is_unique=row.unique_constraint_count > 0,
        default=portable_default(row.raw_default, keep_quoted_defaults),
    )

    if mapper.has_precision(sql_type):
        precision = row.precision
        scale = row.scale
        # Fall back to the declared parameters when the catalog leaves them empty
        if precision is None and params:
            precision = params[0]
        if scale is None and len(params) > 1:
            scale = params[1]
        elif scale is None and len(params) == 1:
            # NUMBER(p) declares scale 0
            scale = 0
        column.numeric_precision = precision
        column.numeric_scale = scale

    if mapper.has_length(sql_type):
        length = row.length if row.length is not None else (params[0] if params else None)
        column.length = length if length is not None and length > 0 else None

    return column


def attach_columns(
    entities: List[Entity],
    column_rows: Iterable[ColumnRow],
    mapper: Optional[TypeMapper] = None,
    diagnostics: Optional[List[Diagnostic]] = None,
    keep_quoted_defaults: bool = False,
) -> List[Entity]:
    """
    Append catalog columns to their entities in catalog order.

    Columns whose type has no semantic mapping are dropped and reported.

    Args:
        entities: Entities from build_entities
        column_rows: Column rows of all tables
        mapper: Type mapper (Oracle mapping by default)
        diagnostics: Run-owned list receiving UNRECOGNIZED_TYPE entries
        keep_quoted_defaults: Keep defaults that contain a double quote

    Returns:
        The same entity list
    """
    mapper = mapper or TypeMapper()
    rows = list(column_rows)

    for entity in entities:
        for row in (r for r in rows if r.table == entity.name):
            try:
                column = build_column(row, mapper, keep_quoted_defaults)
            except UnrecognizedTypeError as e:
                report(
                    diagnostics,
                    UNRECOGNIZED_TYPE,
                    f"{entity.name}.{row.name}",
                    f"{entity.name}.{row.name}: {e}; column dropped",
                    details={
                        "table": entity.name,
                        "column": row.name,
                        "raw_type": row.raw_type,
                        "sql_type": e.sql_type,
                    },
                )
                continue
            entity.columns.append(column)

    return entities


def attach_indexes(entities: List[Entity], index_rows: Iterable[IndexRow]) -> List[Entity]:
    """
    Group index rows into indexes of their entities.

    Rows must already be sorted by index name, then column position. The
    first row of an index decides its uniqueness and primary-key flags.

    Args:
        entities: Entities from build_entities
        index_rows: Index column rows of all tables

    Returns:
        The same entity list
    """
    rows = list(index_rows)

    for entity in entities:
        by_name = {idx.name: idx for idx in entity.indexes}
        for row in (r for r in rows if r.table == entity.name):
            index = by_name.get(row.index_name)
            if index is None:
                index = Index(
                    name=row.index_name,
                    is_unique=row.uniqueness == "UNIQUE",
                    is_primary_key=row.is_primary_key == 1,
                )
                entity.indexes.append(index)
                by_name[index.name] = index
            index.columns.append(IndexColumn(name=row.column_name))

    return entities
