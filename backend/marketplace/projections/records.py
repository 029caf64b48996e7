"""Record accessors.

The projection engine never inspects domain objects directly. It reads each
source field through a ``FieldReadable``, so ORM models, dataclasses and plain
mappings can all be projected with the same field maps.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from inspect import getattr_static
from typing import Any


class FieldNotFoundError(LookupError):
    """Raised when a declared source field cannot be read from a record.

    This is a mismatch between a field map and the record type it is applied
    to, not a user error.
    """

    def __init__(self, field: str, record_type: str):
        self.field = field
        self.record_type = record_type
        super().__init__(f"Field '{field}' not found on {record_type}")


class FieldReadable(ABC):
    """Anything that can supply a field value by name.

    Custom accessors opt in by subclassing or with ``FieldReadable.register()``.
    Having a ``read`` attribute is not enough: records routinely carry a
    ``read`` flag or column of their own.
    """

    @abstractmethod
    def read(self, field_name: str) -> Any:
        """Return the value of ``field_name`` or raise FieldNotFoundError."""


class AttributeRecord(FieldReadable):
    """Reads fields as attributes (SQLAlchemy models, dataclasses, objects).

    Whether a field exists is decided without running it, so an AttributeError
    raised inside a property propagates instead of reading as a missing field.
    """

    __slots__ = ("_obj",)

    def __init__(self, obj: Any):
        self._obj = obj

    def read(self, field_name: str) -> Any:
        try:
            getattr_static(self._obj, field_name)
        except AttributeError:
            # Attributes served by __getattr__ are invisible to getattr_static
            try:
                return getattr(self._obj, field_name)
            except AttributeError:
                raise FieldNotFoundError(field_name, type(self._obj).__name__) from None
        return getattr(self._obj, field_name)

    def __repr__(self) -> str:
        return f"<AttributeRecord({self._obj!r})>"


class MappingRecord(FieldReadable):
    """Reads fields as keys of a mapping."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any]):
        self._data = data

    def read(self, field_name: str) -> Any:
        try:
            return self._data[field_name]
        except KeyError:
            raise FieldNotFoundError(field_name, type(self._data).__name__) from None

    def __repr__(self) -> str:
        return f"<MappingRecord({self._data!r})>"


def as_record(obj: Any) -> FieldReadable:
    """Wrap ``obj`` in the accessor matching its shape.

    Registered ``FieldReadable`` accessors are returned unchanged.
    """
    if isinstance(obj, FieldReadable):
        return obj
    if isinstance(obj, Mapping):
        return MappingRecord(obj)
    return AttributeRecord(obj)
