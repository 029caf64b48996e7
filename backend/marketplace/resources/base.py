"""Base resource types.

A resource pairs one record with a field map. Rendering projects the mapped
fields through the projection engine and merges in the resource's computed
fields (flags, nested resources, derived strings).
"""

from collections.abc import Iterable, Mapping
from typing import Any, ClassVar

from sqlalchemy import inspect

from marketplace.projections import FieldMap, project


def is_loaded(record: Any, relationship: str) -> bool:
    """Return True if ``relationship`` is populated without a database round trip."""
    return relationship not in inspect(record).unloaded


class JsonResource:
    """Renders a single record as a JSON-safe dict.

    Subclasses set ``fields`` and override ``computed()``. Computed keys win
    over projected keys with the same name.
    """

    fields: ClassVar[FieldMap] = FieldMap()

    def __init__(self, record: Any, *, viewer: Any = None):
        self.record = record
        self.viewer = viewer

    def projected(self) -> dict[str, Any]:
        return project(self.record, self.fields)

    def computed(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Render the record, or ``{}`` when there is no record."""
        if self.record is None:
            return {}
        return {**self.projected(), **self.computed()}

    @classmethod
    def make(cls, record: Any, *, viewer: Any = None) -> dict[str, Any] | None:
        """Render a possibly-missing related record, keeping None as None."""
        if record is None:
            return None
        return cls(record, viewer=viewer).to_dict()

    @classmethod
    def collection(
        cls,
        records: Iterable[Any],
        *,
        viewer: Any = None,
        meta: Mapping[str, Any] | None = None,
    ) -> "ResourceCollection":
        return ResourceCollection(cls, records, viewer=viewer, meta=meta)


class ResourceCollection:
    """Renders many records with one resource type inside a ``data`` envelope."""

    def __init__(
        self,
        resource_cls: type[JsonResource],
        records: Iterable[Any],
        *,
        viewer: Any = None,
        meta: Mapping[str, Any] | None = None,
    ):
        self.resource_cls = resource_cls
        self.records = list(records)
        self.viewer = viewer
        self.meta = dict(meta) if meta else None

    def __len__(self) -> int:
        return len(self.records)

    def to_list(self) -> list[dict[str, Any]]:
        return [self.resource_cls(record, viewer=self.viewer).to_dict() for record in self.records]

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"data": self.to_list()}
        if self.meta:
            payload["meta"] = self.meta
        return payload
