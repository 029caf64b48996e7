"""Field projection system.

Projections turn domain records into flat, JSON-safe dicts using declarative
field maps, coercing timestamps, enums and other values on the way out.
"""

from marketplace.projections.engine import FieldMap, FieldMapping, ensure_field_map, project
from marketplace.projections.records import (
    AttributeRecord,
    FieldNotFoundError,
    FieldReadable,
    MappingRecord,
    as_record,
)
from marketplace.projections.registry import FieldMapRegistry
from marketplace.projections.values import coerce_value, format_timestamp

__all__ = [
    "AttributeRecord",
    "FieldMap",
    "FieldMapRegistry",
    "FieldMapping",
    "FieldNotFoundError",
    "FieldReadable",
    "MappingRecord",
    "as_record",
    "coerce_value",
    "ensure_field_map",
    "format_timestamp",
    "project",
]
