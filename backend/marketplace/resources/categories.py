"""Category resource.

Parent, children and the ancestry keys (depth, breadcrumb, path) are rendered
only from relationships already loaded on the record, so rendering never
triggers a lazy load and works on detached instances.
"""

from typing import Any, ClassVar

from marketplace.models.category import Category
from marketplace.projections import FieldMapRegistry
from marketplace.resources.base import JsonResource, is_loaded

CATEGORY_FIELDS = FieldMapRegistry.register(
    "category",
    {
        "name": "name",
        "slug": "slug",
        "description": "description",
        "icon": "icon",
        "color": "color",
        "sortOrder": "sort_order",
        "isActive": "is_active",
        "isFeatured": "is_featured",
        "metaTitle": "meta_title",
        "metaDescription": "meta_description",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    },
)


def loaded_path(category: Category) -> list[Category] | None:
    """Categories from the root down to ``category``.

    Returns None when some ancestor has not been loaded.
    """
    path = [category]
    node = category
    while True:
        if is_loaded(node, "parent"):
            parent = node.parent
        elif node.parent_id is None:
            parent = None
        else:
            return None
        if parent is None:
            return path
        path.insert(0, parent)
        node = parent


def breadcrumb(path: list[Category]) -> str:
    return " > ".join(category.name for category in path)


class CategoryResource(JsonResource):
    fields = CATEGORY_FIELDS
    record: Category
    include_relations: ClassVar[bool] = True

    def computed(self) -> dict[str, Any]:
        category = self.record
        parent_loaded = is_loaded(category, "parent")
        children_loaded = is_loaded(category, "children")
        path = loaded_path(category)

        data: dict[str, Any] = {
            "id": category.id,
            "parentId": category.parent_id,
            "isRoot": path is not None and len(path) == 1,
        }
        if path is not None:
            data["depth"] = len(path) - 1
            data["breadcrumb"] = breadcrumb(path)
            data["pathNames"] = [c.name for c in path]
        data["attributes"] = category.attributes or {}
        data["requiredAttributes"] = category.required_attributes()

        if not self.include_relations:
            return data
        if parent_loaded:
            data["parent"] = NestedCategoryResource.make(category.parent)
        if children_loaded:
            data["children"] = NestedCategoryResource.collection(category.children).to_list()
        return data


class NestedCategoryResource(CategoryResource):
    """Category rendered inside another category, without its own relations."""

    include_relations = False
