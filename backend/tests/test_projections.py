"""Tests for the field projection engine and field map registry."""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from marketplace.config import settings
from marketplace.projections import (
    FieldMap,
    FieldMapping,
    FieldMapRegistry,
    FieldNotFoundError,
    project,
)

USER_FIELDS = {"name": "name", "createdAt": "created_at", "isActive": "is_active"}


def _alice() -> dict:
    return {
        "name": "Alice",
        "created_at": datetime(2024, 1, 15, 10, 0, 0, tzinfo=timezone.utc),
        "is_active": True,
    }


class TestProject:
    """Tests for project()."""

    def test_projects_user_record(self):
        """Timestamps become ISO strings, booleans pass through."""
        assert project(_alice(), USER_FIELDS, precision="milliseconds") == {
            "name": "Alice",
            "createdAt": "2024-01-15T10:00:00.000Z",
            "isActive": True,
        }

    def test_empty_field_map_yields_empty_output(self):
        """An empty map never reads the record."""
        assert project(_alice(), {}) == {}
        assert project(object(), FieldMap()) == {}

    def test_none_field_map_rejected(self):
        with pytest.raises(TypeError):
            project(_alice(), None)

    def test_missing_field_raises_without_partial_output(self):
        """A field map that does not match the record fails the whole call."""
        fields = {"name": "name", "nickname": "nickname", "isActive": "is_active"}

        with pytest.raises(FieldNotFoundError) as exc_info:
            project(_alice(), fields)

        assert exc_info.value.field == "nickname"
        assert exc_info.value.record_type == "dict"

    def test_output_keys_match_field_map_in_order(self):
        fields = {"isActive": "is_active", "name": "name", "createdAt": "created_at"}

        output = project(_alice(), fields)

        assert list(output) == ["isActive", "name", "createdAt"]

    def test_same_source_field_under_two_keys(self):
        """Output keys are unique but source fields may repeat."""
        output = project(_alice(), {"name": "name", "displayName": "name"})
        assert output == {"name": "Alice", "displayName": "Alice"}

    def test_repeated_calls_are_identical(self):
        record = _alice()
        assert project(record, USER_FIELDS) == project(record, USER_FIELDS)

    def test_returns_fresh_dict(self):
        record = _alice()
        first = project(record, USER_FIELDS)
        first["name"] = "changed"
        assert project(record, USER_FIELDS)["name"] == "Alice"

    def test_reads_attributes_from_objects(self):
        record = SimpleNamespace(**_alice())
        assert project(record, USER_FIELDS)["createdAt"].startswith("2024-01-15T10:00:00")

    def test_null_and_boolean_values_are_not_stringified(self):
        record = {"name": None, "created_at": None, "is_active": False}

        output = project(record, USER_FIELDS)

        assert output == {"name": None, "createdAt": None, "isActive": False}

    def test_precision_defaults_to_setting(self, monkeypatch):
        monkeypatch.setattr(settings, "timestamp_precision", "seconds")
        assert project(_alice(), USER_FIELDS)["createdAt"] == "2024-01-15T10:00:00Z"

    def test_accepts_field_map_value(self):
        fields = FieldMap((FieldMapping("name", "name"),))
        assert project(_alice(), fields) == {"name": "Alice"}


class TestFieldMap:
    """Tests for FieldMap."""

    def test_from_dict_preserves_order(self):
        fields = FieldMap.from_dict({"b": "b_field", "a": "a_field"})
        assert fields.output_keys() == ["b", "a"]
        assert len(fields) == 2

    def test_duplicate_output_keys_rejected(self):
        with pytest.raises(ValueError, match="Duplicate output key"):
            FieldMap((FieldMapping("name", "name"), FieldMapping("name", "display_name")))

    def test_merge_appends_fields(self):
        base = FieldMap.from_dict({"name": "name"})

        merged = base.merge({"email": "email"})

        assert merged.output_keys() == ["name", "email"]
        assert base.output_keys() == ["name"]

    def test_merge_rejects_overlapping_keys(self):
        base = FieldMap.from_dict({"name": "name"})
        with pytest.raises(ValueError):
            base.merge({"name": "display_name"})


class TestFieldMapRegistry:
    """Tests for FieldMapRegistry."""

    def setup_method(self):
        """Start each test from an empty registry, restoring it afterwards."""
        self._saved = FieldMapRegistry.all_maps()
        FieldMapRegistry._clear_for_testing()

    def teardown_method(self):
        FieldMapRegistry._clear_for_testing()
        for name, fields in self._saved.items():
            FieldMapRegistry.register(name, fields)

    def test_register_and_get(self):
        registered = FieldMapRegistry.register("user", USER_FIELDS)

        retrieved = FieldMapRegistry.get("user")
        assert retrieved is registered
        assert retrieved.output_keys() == ["name", "createdAt", "isActive"]

    def test_has(self):
        FieldMapRegistry.register("user", USER_FIELDS)

        assert FieldMapRegistry.has("user") is True
        assert FieldMapRegistry.has("NonExistent") is False

    def test_register_conflicting_map_rejected(self):
        FieldMapRegistry.register("user", USER_FIELDS)

        with pytest.raises(ValueError):
            FieldMapRegistry.register("user", {"name": "display_name"})

        assert FieldMapRegistry.require("user").output_keys() == ["name", "createdAt", "isActive"]

    def test_register_equal_map_again_is_allowed(self):
        first = FieldMapRegistry.register("user", USER_FIELDS)

        assert FieldMapRegistry.register("user", dict(USER_FIELDS)) == first

    def test_get_nonexistent_returns_none(self):
        assert FieldMapRegistry.get("NonExistent") is None

    def test_require_nonexistent_raises(self):
        with pytest.raises(KeyError):
            FieldMapRegistry.require("NonExistent")

    def test_all_maps_returns_copy(self):
        FieldMapRegistry.register("user", USER_FIELDS)

        maps = FieldMapRegistry.all_maps()
        maps.clear()

        assert FieldMapRegistry.has("user")


def test_resource_field_maps_are_registered():
    """Importing the resources package registers every output shape."""
    import marketplace.resources  # noqa: F401

    for name in (
        "role",
        "user",
        "seller_profile",
        "seller_availability",
        "image",
        "category",
        "listing",
        "listing_card",
        "listing_detail",
        "appointment",
    ):
        assert FieldMapRegistry.has(name), name
