"""ORM models. Importing this package registers every table on Base.metadata."""

from cardfile.infrastructure.persistence.models.text_material import TextMaterial
from cardfile.infrastructure.persistence.models.text_material_category import (
    TextMaterialCategory,
)
from cardfile.infrastructure.persistence.models.user import AppUser

__all__ = ["AppUser", "TextMaterial", "TextMaterialCategory"]
