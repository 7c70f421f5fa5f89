"""Collision-free names for synthesized navigation columns."""

from typing import Collection
from catalog2model.ir.diagnostics import NamingExhaustionError


def pluralize(name: str, suffix: str = "s") -> str:
    """Append the plural suffix unless the name already ends with it."""
    if not suffix or name.endswith(suffix):
        return name
    return name + suffix


def resolve_name(
    base_name: str,
    is_collection: bool,
    existing_names: Collection[str],
    plural_suffix: str = "s",
    entity_name: str = "",
) -> str:
    """
    Pick a column name that does not collide with existing columns.

    The candidate is the base name, pluralized for collection-valued columns.
    On collision, numeric suffixes are tried from 2 upwards.

    Args:
        base_name: Name to start from (lowercased owner entity name)
        is_collection: Whether the column holds many related rows
        existing_names: Column names already present on the target entity
        plural_suffix: Marker appended for collections
        entity_name: Target entity, used in the error message only

    Returns:
        The first free candidate

    Raises:
        NamingExhaustionError: If every candidate within the bound is taken
    """
    taken = set(existing_names)
    candidate = pluralize(base_name, plural_suffix) if is_collection else base_name
    if candidate not in taken:
        return candidate

    # One more candidate than there are taken names: one must be free
    bound = len(taken) + 2
    for i in range(2, bound + 1):
        name = f"{candidate}{i}"
        if name not in taken:
            return name

    raise NamingExhaustionError(candidate, entity_name, bound - 1)
