"""Field projection engine.

A projection turns a record into a flat, serialization-ready dict by reading
the source fields named in a field map and coercing each value.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from marketplace.config import settings
from marketplace.projections.records import as_record
from marketplace.projections.values import ProjectedValue, TimestampPrecision, coerce_value


@dataclass(frozen=True)
class FieldMapping:
    """Maps a source field on a record to a key in the projected output.

    Args:
        output_key: Key emitted in the projected dict.
        source_field: Field name read from the record.
    """

    output_key: str
    source_field: str


@dataclass(frozen=True)
class FieldMap:
    """Ordered, duplicate-free declaration of the fields a projection emits."""

    mappings: tuple[FieldMapping, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for mapping in self.mappings:
            if mapping.output_key in seen:
                raise ValueError(f"Duplicate output key in field map: {mapping.output_key!r}")
            seen.add(mapping.output_key)

    @classmethod
    def from_dict(cls, fields: Mapping[str, str]) -> "FieldMap":
        """Build a field map from an ``{output_key: source_field}`` mapping."""
        return cls(tuple(FieldMapping(key, source) for key, source in fields.items()))

    def __iter__(self) -> Iterator[FieldMapping]:
        return iter(self.mappings)

    def __len__(self) -> int:
        return len(self.mappings)

    def output_keys(self) -> list[str]:
        return [m.output_key for m in self.mappings]

    def merge(self, other: "FieldMap | Mapping[str, str]") -> "FieldMap":
        """Return a new map with ``other``'s fields appended after these."""
        other = ensure_field_map(other)
        return FieldMap(self.mappings + other.mappings)


def ensure_field_map(fields: FieldMap | Mapping[str, str]) -> FieldMap:
    """Accept either a FieldMap or a plain mapping."""
    if fields is None:
        raise TypeError("field_map must not be None")
    if isinstance(fields, FieldMap):
        return fields
    return FieldMap.from_dict(fields)


def project(
    record: Any,
    field_map: FieldMap | Mapping[str, str],
    *,
    precision: TimestampPrecision | None = None,
) -> dict[str, ProjectedValue]:
    """Project a record through a field map.

    Args:
        record: Object, mapping or FieldReadable to read fields from.
        field_map: Output key to source field declarations, in output order.
        precision: Timestamp precision. Defaults to the configured setting.

    Returns:
        New dict with exactly the field map's keys, in order.

    Raises:
        TypeError: If field_map is None.
        FieldNotFoundError: If the record lacks a declared source field.
            No partial output is returned.
    """
    fields = ensure_field_map(field_map)
    if not fields:
        return {}

    if precision is None:
        precision = settings.timestamp_precision

    source = as_record(record)
    output: dict[str, ProjectedValue] = {}
    for mapping in fields:
        output[mapping.output_key] = coerce_value(source.read(mapping.source_field), precision)
    return output
