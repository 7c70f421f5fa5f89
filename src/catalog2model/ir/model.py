"""Entity-relationship model reverse-engineered from catalog metadata."""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field
from .diagnostics import Diagnostic

SemanticType = Literal[
    "string",
    "number",
    "boolean",
    "date",
    "binary",
    "unknown",
]

RelationType = Literal["OneToOne", "ManyToOne", "OneToMany"]

# Reciprocal side of each owner-side cardinality
INVERSE_RELATION_TYPE = {
    "OneToOne": "OneToOne",
    "ManyToOne": "OneToMany",
    "OneToMany": "ManyToOne",
}


class Relation(BaseModel):
    """One directed half of an association between two columns."""

    owner_table: str
    owner_column: str
    related_table: str
    related_column: str
    relation_type: RelationType
    is_owner: bool
    action_on_delete: str = "NO ACTION"
    action_on_update: str = "NO ACTION"
    inverse_column: Optional[str] = None  # column on related_table holding the paired relation
    constraint_name: Optional[str] = None


class Column(BaseModel):
    """A column of an entity, either from the catalog or synthesized."""

    name: str
    sql_type: Optional[str] = None  # None only for synthesized columns
    semantic_type: SemanticType
    nullable: bool = True
    is_generated: bool = False
    is_unique: bool = False
    default: Optional[str] = None
    numeric_precision: Optional[int] = None
    numeric_scale: Optional[int] = None
    length: Optional[int] = None
    is_synthesized: bool = False
    relations: List[Relation] = Field(default_factory=list)


class IndexColumn(BaseModel):
    """A column reference inside an index."""

    name: str


class Index(BaseModel):
    """An index of an entity with its columns in position order."""

    name: str
    is_unique: bool = False
    is_primary_key: bool = False
    columns: List[IndexColumn] = Field(default_factory=list)


class Entity(BaseModel):
    """The model's representation of one table."""

    name: str
    columns: List[Column] = Field(default_factory=list)
    indexes: List[Index] = Field(default_factory=list)

    def column(self, name: str) -> Optional[Column]:
        for col in self.columns:
            if col.name == name:
                return col
        return None

    def column_names(self) -> List[str]:
        return [col.name for col in self.columns]

    def index(self, name: str) -> Optional[Index]:
        for idx in self.indexes:
            if idx.name == name:
                return idx
        return None

    def has_unique_index_on(self, column_name: str) -> bool:
        """True when the column participates in any unique index."""
        return any(
            idx.is_unique and any(ic.name == column_name for ic in idx.columns)
            for idx in self.indexes
        )


class IntrospectionResult(BaseModel):
    """Finished model of one introspection run plus what was dropped on the way."""

    entities: List[Entity] = Field(default_factory=list)
    diagnostics: List[Diagnostic] = Field(default_factory=list)

    def entity(self, name: str) -> Optional[Entity]:
        for ent in self.entities:
            if ent.name == name:
                return ent
        return None

    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == "warning"]
