"""Inference of typed relations from foreign-key constraint rows.

Each foreign key yields two Relation records: the owner side on the
constrained column, and a reciprocal side on a synthesized navigation column
added to the referenced entity. A foreign key whose column is also covered by
a unique index models a one-to-one association; otherwise many-to-one.

Only the first column pair of a constraint drives inference. Composite keys
are kept whole in RelationTemp but reduced to their first pair here.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional
from catalog2model.config.logging import get_logger
from catalog2model.ir.diagnostics import (
    COMPOSITE_KEY_REDUCED,
    DANGLING_RELATION,
    Diagnostic,
)
from catalog2model.ir.model import (
    INVERSE_RELATION_TYPE,
    Column,
    Entity,
    Relation,
)
from catalog2model.ir.rows import ForeignKeyRow
from .naming import resolve_name
from .reporting import report

logger = get_logger(__name__)

# Catalog views expose no update rule
DEFAULT_UPDATE_ACTION = "NO ACTION"


@dataclass
class RelationTemp:
    """All column pairs of one foreign-key constraint."""

    constraint_name: str
    owner_table: str
    referenced_table: str
    action_on_delete: str
    action_on_update: str = DEFAULT_UPDATE_ACTION
    owner_columns: List[str] = field(default_factory=list)
    referenced_columns: List[str] = field(default_factory=list)


def group_constraints(fk_rows: Iterable[ForeignKeyRow]) -> List[RelationTemp]:
    """
    Fold foreign-key rows into one RelationTemp per constraint.

    Args:
        fk_rows: Rows sorted by owner table, constraint name, column position

    Returns:
        RelationTemps in first-seen order, column pairs in arrival order
    """
    by_constraint: Dict[str, RelationTemp] = {}
    for row in fk_rows:
        temp = by_constraint.get(row.constraint_name)
        if temp is None:
            temp = RelationTemp(
                constraint_name=row.constraint_name,
                owner_table=row.owner_table,
                referenced_table=row.referenced_table,
                action_on_delete=row.delete_rule,
            )
            by_constraint[row.constraint_name] = temp
        temp.owner_columns.append(row.owner_column)
        temp.referenced_columns.append(row.referenced_column)
    return list(by_constraint.values())


def _find_entity(entities: List[Entity], name: str) -> Optional[Entity]:
    return next((e for e in entities if e.name == name), None)


def _dangling(diagnostics, temp: RelationTemp, missing: str) -> None:
    report(
        diagnostics,
        DANGLING_RELATION,
        f"{temp.owner_table}.{temp.owner_columns[0]}",
        f"Relation {temp.constraint_name} between tables {temp.owner_table} and "
        f"{temp.referenced_table} didn't find {missing}; relation dropped",
        details={
            "constraint": temp.constraint_name,
            "owner_table": temp.owner_table,
            "owner_column": temp.owner_columns[0],
            "referenced_table": temp.referenced_table,
            "referenced_column": temp.referenced_columns[0],
            "missing": missing,
        },
    )


def infer_relation(
    entities: List[Entity],
    temp: RelationTemp,
    diagnostics: Optional[List[Diagnostic]] = None,
    plural_suffix: str = "s",
) -> Optional[Column]:
    """
    Infer the relation of one constraint and attach both of its sides.

    Args:
        entities: Assembled entities (mutated in place)
        temp: Grouped constraint
        diagnostics: Run-owned list receiving DANGLING_RELATION entries
        plural_suffix: Marker for collection-valued navigation columns

    Returns:
        The synthesized column, or None if the relation was dropped
    """
    owner_entity = _find_entity(entities, temp.owner_table)
    if owner_entity is None:
        _dangling(diagnostics, temp, f"entity {temp.owner_table}")
        return None
    referenced_entity = _find_entity(entities, temp.referenced_table)
    if referenced_entity is None:
        _dangling(diagnostics, temp, f"entity {temp.referenced_table}")
        return None

    owner_column = owner_entity.column(temp.owner_columns[0])
    if owner_column is None:
        _dangling(diagnostics, temp, f"column {temp.owner_table}.{temp.owner_columns[0]}")
        return None
    referenced_column = referenced_entity.column(temp.referenced_columns[0])
    if referenced_column is None:
        _dangling(
            diagnostics,
            temp,
            f"column {temp.referenced_table}.{temp.referenced_columns[0]}",
        )
        return None

    if len(temp.owner_columns) > 1:
        report(
            diagnostics,
            COMPOSITE_KEY_REDUCED,
            f"{temp.owner_table}.{owner_column.name}",
            f"Relation {temp.constraint_name} has {len(temp.owner_columns)} column pairs; "
            f"only {temp.owner_table}.{owner_column.name} -> "
            f"{temp.referenced_table}.{referenced_column.name} is modeled",
            details={
                "constraint": temp.constraint_name,
                "owner_columns": list(temp.owner_columns),
                "referenced_columns": list(temp.referenced_columns),
            },
            severity="info",
        )

    is_one_to_one = owner_entity.has_unique_index_on(owner_column.name)
    relation_type = "OneToOne" if is_one_to_one else "ManyToOne"

    navigation_name = resolve_name(
        owner_entity.name.lower(),
        is_collection=not is_one_to_one,
        existing_names=referenced_entity.column_names(),
        plural_suffix=plural_suffix,
        entity_name=referenced_entity.name,
    )

    owner_column.relations.append(
        Relation(
            owner_table=owner_entity.name,
            owner_column=owner_column.name,
            related_table=referenced_entity.name,
            related_column=referenced_column.name,
            relation_type=relation_type,
            is_owner=True,
            action_on_delete=temp.action_on_delete,
            action_on_update=temp.action_on_update,
            inverse_column=navigation_name,
            constraint_name=temp.constraint_name,
        )
    )

    navigation = Column(
        name=navigation_name,
        semantic_type="unknown",
        is_synthesized=True,
        relations=[
            Relation(
                owner_table=referenced_entity.name,
                owner_column=referenced_column.name,
                related_table=owner_entity.name,
                related_column=owner_column.name,
                relation_type=INVERSE_RELATION_TYPE[relation_type],
                is_owner=False,
                action_on_delete=temp.action_on_delete,
                action_on_update=temp.action_on_update,
                inverse_column=owner_column.name,
                constraint_name=temp.constraint_name,
            )
        ],
    )
    referenced_entity.columns.append(navigation)
    logger.debug(
        f"{owner_entity.name}.{owner_column.name} -> {referenced_entity.name}."
        f"{referenced_column.name}: {relation_type}, navigation '{navigation_name}'"
    )
    return navigation


def infer_relations(
    entities: List[Entity],
    fk_rows: Iterable[ForeignKeyRow],
    diagnostics: Optional[List[Diagnostic]] = None,
    plural_suffix: str = "s",
) -> List[Entity]:
    """
    Attach relations for every foreign-key constraint.

    A constraint that cannot be resolved is reported and skipped; the others
    are still processed.

    Args:
        entities: Entities with columns and indexes attached
        fk_rows: Rows sorted by owner table, constraint name, column position
        diagnostics: Run-owned diagnostic list
        plural_suffix: Marker for collection-valued navigation columns

    Returns:
        The same entity list
    """
    temps = group_constraints(fk_rows)
    inferred = 0
    for temp in temps:
        if infer_relation(entities, temp, diagnostics, plural_suffix) is not None:
            inferred += 1
    logger.info(f"Inferred {inferred} of {len(temps)} relations")
    return entities
