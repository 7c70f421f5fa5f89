"""Mapping of engine-native column types to portable semantic types."""

import re
from typing import FrozenSet, List, Mapping, Optional

from catalog2model.ir.diagnostics import UnrecognizedTypeError
from catalog2model.ir.model import SemanticType

# Parenthesized numeric parameters: "(10)", "(10,2)", "( 6 )"
_TYPE_PARAMS_RE = re.compile(r"\(\s*(\d+)\s*(?:,\s*(-?\d+)\s*)?\)")
_WHITESPACE_RE = re.compile(r"\s+")

ORACLE_TYPES: Mapping[str, SemanticType] = {
    "char": "string",
    "nchar": "string",
    "varchar": "string",
    "varchar2": "string",
    "nvarchar2": "string",
    "long": "string",
    "clob": "string",
    "nclob": "string",
    # no portable interval type
    "interval year to month": "string",
    "interval day to second": "string",
    "raw": "binary",
    "long raw": "binary",
    "blob": "binary",
    "bfile": "binary",
    "number": "number",
    "numeric": "number",
    "float": "number",
    "dec": "number",
    "decimal": "number",
    "integer": "number",
    "int": "number",
    "smallint": "number",
    "real": "number",
    "double precision": "number",
    "binary_float": "number",
    "binary_double": "number",
    "rowid": "number",
    "urowid": "number",
    "date": "date",
    "timestamp": "date",
    "timestamp with time zone": "date",
    "timestamp with local time zone": "date",
    "boolean": "boolean",
}

ORACLE_TYPES_WITH_PRECISION: FrozenSet[str] = frozenset(
    {"number", "numeric", "float", "dec", "decimal"}
)

ORACLE_TYPES_WITH_LENGTH: FrozenSet[str] = frozenset(
    {"char", "nchar", "varchar", "varchar2", "nvarchar2", "raw"}
)


def normalize_sql_type(raw_type: str) -> str:
    """Strip parenthesized parameters and lowercase an engine type string.

    >>> normalize_sql_type("TIMESTAMP(6) WITH TIME ZONE")
    'timestamp with time zone'
    """
    stripped = _TYPE_PARAMS_RE.sub("", raw_type)
    return _WHITESPACE_RE.sub(" ", stripped).strip().lower()


def parse_type_parameters(raw_type: str) -> List[int]:
    """Return the integers of the first parenthesized suffix, if any."""
    match = _TYPE_PARAMS_RE.search(raw_type)
    if not match:
        return []
    return [int(g) for g in match.groups() if g is not None]


class TypeMapper:
    """Maps normalized sql types to semantic types for one engine."""

    def __init__(
        self,
        types: Optional[Mapping[str, SemanticType]] = None,
        with_precision: Optional[FrozenSet[str]] = None,
        with_length: Optional[FrozenSet[str]] = None,
    ):
        self.types = dict(ORACLE_TYPES if types is None else types)
        self.with_precision = (
            ORACLE_TYPES_WITH_PRECISION if with_precision is None else with_precision
        )
        self.with_length = ORACLE_TYPES_WITH_LENGTH if with_length is None else with_length

    def map(self, sql_type: str) -> SemanticType:
        """
        Map a normalized sql type to its semantic type.

        Raises:
            UnrecognizedTypeError: If the type has no mapping
        """
        try:
            return self.types[sql_type]
        except KeyError:
            raise UnrecognizedTypeError(sql_type) from None

    def has_precision(self, sql_type: str) -> bool:
        return sql_type in self.with_precision

    def has_length(self, sql_type: str) -> bool:
        return sql_type in self.with_length
