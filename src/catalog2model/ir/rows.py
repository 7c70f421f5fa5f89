"""Raw catalog rows as delivered by a catalog reader.

Field names are snake_case. Each field also accepts the upper-case label the
catalog views use, so rows fetched straight from the dictionary views validate
without renaming.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class _CatalogRow(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class TableRow(_CatalogRow):
    """One table of the schema."""

    name: str = Field(alias="TABLE_NAME")


class ColumnRow(_CatalogRow):
    """One column of one table."""

    table: str = Field(alias="TABLE_NAME")
    name: str = Field(alias="COLUMN_NAME")
    raw_default: Optional[str] = Field(default=None, alias="DATA_DEFAULT")
    nullable: str = Field(default="Y", alias="NULLABLE")  # "Y" / "N"
    raw_type: str = Field(alias="DATA_TYPE")
    length: Optional[int] = Field(default=None, alias="DATA_LENGTH")
    precision: Optional[int] = Field(default=None, alias="DATA_PRECISION")
    scale: Optional[int] = Field(default=None, alias="DATA_SCALE")
    is_identity: str = Field(default="NO", alias="IDENTITY_COLUMN")  # "YES" / "NO"
    unique_constraint_count: int = Field(default=0, alias="IS_UNIQUE")


class IndexRow(_CatalogRow):
    """One column of one index."""

    table: str = Field(alias="TABLE_NAME")
    index_name: str = Field(alias="INDEX_NAME")
    column_name: str = Field(alias="COLUMN_NAME")
    uniqueness: str = Field(default="NONUNIQUE", alias="UNIQUENESS")
    is_primary_key: int = Field(default=0, alias="ISPRIMARYKEY")


class ForeignKeyRow(_CatalogRow):
    """One column pair of one foreign-key constraint."""

    owner_table: str = Field(alias="OWNER_TABLE_NAME")
    owner_column_position: int = Field(default=1, alias="OWNER_POSITION")
    owner_column: str = Field(alias="OWNER_COLUMN_NAME")
    referenced_table: str = Field(alias="CHILD_TABLE_NAME")
    referenced_column: str = Field(alias="CHILD_COLUMN_NAME")
    delete_rule: str = Field(default="NO ACTION", alias="DELETE_RULE")
    constraint_name: str = Field(alias="CONSTRAINT_NAME")


class CatalogSnapshot(BaseModel):
    """All row sets of one schema, in the order the engine consumes them.

    Index rows must be sorted by (index name, column position) and foreign-key
    rows by (owner table, constraint name, owner column position).
    """

    tables: List[TableRow] = Field(default_factory=list)
    columns: List[ColumnRow] = Field(default_factory=list)
    indexes: List[IndexRow] = Field(default_factory=list)
    foreign_keys: List[ForeignKeyRow] = Field(default_factory=list)
