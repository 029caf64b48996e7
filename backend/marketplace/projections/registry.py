"""Field map registry.

Each output shape ("user", "role", "listing_card", ...) has one static field
map. Resources look their map up here instead of each carrying a private copy,
so a shape can be inspected and tested on its own.
"""

from collections.abc import Mapping

from marketplace.projections.engine import FieldMap, ensure_field_map

# Module-level storage (not class-level to avoid shared mutable state)
_registry_maps: dict[str, FieldMap] = {}


class FieldMapRegistry:
    """Registry of field maps by output shape name."""

    @classmethod
    def register(cls, name: str, field_map: FieldMap | Mapping[str, str]) -> FieldMap:
        """Register a field map.

        Args:
            name: Output shape name (e.g., 'user').
            field_map: The field map, or a plain ``{output_key: source_field}`` dict.

        Returns:
            The registered FieldMap.

        Raises:
            ValueError: If a different map is already registered under ``name``.
                Registering an equal map again is a no-op.
        """
        fields = ensure_field_map(field_map)
        existing = _registry_maps.get(name)
        if existing is not None and existing != fields:
            raise ValueError(f"A different field map is already registered for '{name}'")
        _registry_maps[name] = fields
        return fields

    @classmethod
    def get(cls, name: str) -> FieldMap | None:
        """Get the field map for a shape, or None if not registered."""
        return _registry_maps.get(name)

    @classmethod
    def require(cls, name: str) -> FieldMap:
        """Get the field map for a shape.

        Raises:
            KeyError: If no map is registered under ``name``.
        """
        try:
            return _registry_maps[name]
        except KeyError:
            raise KeyError(f"No field map registered for '{name}'") from None

    @classmethod
    def has(cls, name: str) -> bool:
        return name in _registry_maps

    @classmethod
    def all_maps(cls) -> dict[str, FieldMap]:
        """Get all registered field maps.

        Returns:
            Dictionary mapping shape names to field maps.
        """
        return _registry_maps.copy()

    @classmethod
    def _clear_for_testing(cls) -> None:
        """Clear all registered maps. Internal use in tests only."""
        _registry_maps.clear()
