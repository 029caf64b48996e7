"""Image resource."""

from typing import Any

from marketplace.models.image import Image
from marketplace.projections import FieldMapRegistry
from marketplace.resources.base import JsonResource

IMAGE_FIELDS = FieldMapRegistry.register(
    "image",
    {
        "fileName": "file_name",
        "originalName": "original_name",
        "path": "file_path",
        "url": "url",
        "size": "file_size",
        "mimeType": "mime_type",
        "width": "width",
        "height": "height",
        "altText": "alt_text",
        "sortOrder": "sort_order",
        "isPrimary": "is_primary",
        "isActive": "is_active",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    },
)


class ImageResource(JsonResource):
    fields = IMAGE_FIELDS
    record: Image

    def computed(self) -> dict[str, Any]:
        image = self.record
        metadata = image.image_metadata or {}
        data: dict[str, Any] = {
            "id": image.id,
            "type": image.type.value if image.type is not None else None,
            "formattedSize": image.formatted_size(),
            "dimensions": image.dimensions(),
            "isImage": image.is_image(),
        }
        # Only present when the upload pipeline recorded them
        if metadata.get("thumbnails"):
            data["thumbnails"] = metadata["thumbnails"]
        if metadata:
            data["metadata"] = metadata
        return data
