"""catalog2model: reverse-engineer catalog metadata into an entity-relationship model."""

__version__ = "0.1.0"
