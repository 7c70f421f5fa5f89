"""Structural checks of a finished entity-relationship model."""

from collections import Counter
from typing import Dict, List, Tuple
from catalog2model.config.logging import get_logger
from .diagnostics import Diagnostic
from .model import INVERSE_RELATION_TYPE, Entity, Relation

logger = get_logger(__name__)

MODEL_DUPLICATE_ENTITY = "MODEL_DUPLICATE_ENTITY"
MODEL_DUPLICATE_COLUMN = "MODEL_DUPLICATE_COLUMN"
MODEL_UNPAIRED_RELATION = "MODEL_UNPAIRED_RELATION"
MODEL_CARDINALITY_MISMATCH = "MODEL_CARDINALITY_MISMATCH"


def _relation_key(rel: Relation) -> Tuple[str, str, str, str]:
    return (rel.owner_table, rel.owner_column, rel.related_table, rel.related_column)


def validate_model(entities: List[Entity]) -> List[Diagnostic]:
    """
    Validate model invariants.

    Checks entity name uniqueness, column name uniqueness per entity, and
    that every relation has a mirrored partner of the inverse cardinality.

    Args:
        entities: Entities of an introspection result

    Returns:
        List of Diagnostic objects (empty if validation passes)
    """
    issues: List[Diagnostic] = []

    for name, count in Counter(e.name for e in entities).items():
        if count > 1:
            issues.append(
                Diagnostic(
                    code=MODEL_DUPLICATE_ENTITY,
                    location=name,
                    message=f"{name}: entity name used {count} times",
                    details={"entity": name, "count": count},
                )
            )

    relations: Dict[Tuple[str, str, str, str], List[Relation]] = {}
    for entity in entities:
        for name, count in Counter(entity.column_names()).items():
            if count > 1:
                issues.append(
                    Diagnostic(
                        code=MODEL_DUPLICATE_COLUMN,
                        location=f"{entity.name}.{name}",
                        message=f"{entity.name}: column '{name}' used {count} times",
                        details={"entity": entity.name, "column": name, "count": count},
                    )
                )
        for column in entity.columns:
            for rel in column.relations:
                relations.setdefault(_relation_key(rel), []).append(rel)

    for key, rels in relations.items():
        owner_table, owner_column, related_table, related_column = key
        mirrored = relations.get((related_table, related_column, owner_table, owner_column), [])
        for rel in rels:
            partner = next((m for m in mirrored if m.is_owner != rel.is_owner), None)
            if partner is None:
                issues.append(
                    Diagnostic(
                        code=MODEL_UNPAIRED_RELATION,
                        location=f"{owner_table}.{owner_column}",
                        message=f"{owner_table}.{owner_column} -> {related_table}."
                        f"{related_column} has no reciprocal relation",
                        details={"relation": rel.model_dump()},
                    )
                )
                continue
            if INVERSE_RELATION_TYPE[rel.relation_type] != partner.relation_type:
                issues.append(
                    Diagnostic(
                        code=MODEL_CARDINALITY_MISMATCH,
                        location=f"{owner_table}.{owner_column}",
                        message=f"{owner_table}.{owner_column}: {rel.relation_type} "
                        f"paired with {partner.relation_type}",
                        details={
                            "relation_type": rel.relation_type,
                            "partner_type": partner.relation_type,
                        },
                    )
                )

    if issues:
        logger.warning(f"Model validation found {len(issues)} issues")
    else:
        logger.info("Model validation passed")

    return issues
