"""Read-model <-> domain entity mapping."""

from cardfile.application.dtos.text_material import TextMaterialResult
from cardfile.domain.entities.text_material import TextMaterialEntity


def to_entity(material: TextMaterialResult) -> TextMaterialEntity:
    """Build the mutable domain entity from a stored read-model (version carried for the store's lock)."""
    return TextMaterialEntity(
        id=material.id,
        title=material.title,
        content=material.content,
        author_id=material.author_id,
        category_id=material.category_id,
        approval_status=material.approval_status,
        date_published=material.date_published,
        reject_message=material.reject_message,
        version=material.version,
    )
