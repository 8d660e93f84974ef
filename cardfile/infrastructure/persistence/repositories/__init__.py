"""Persistence repositories. Re-exports for dependency injection."""

from cardfile.infrastructure.persistence.repositories.base import BaseRepository
from cardfile.infrastructure.persistence.repositories.text_material_category_repo import (
    TextMaterialCategoryRepository,
)
from cardfile.infrastructure.persistence.repositories.text_material_repo import (
    TextMaterialRepository,
)
from cardfile.infrastructure.persistence.repositories.unit_of_work import SqlUnitOfWork
from cardfile.infrastructure.persistence.repositories.user_directory import UserDirectory

__all__ = [
    "BaseRepository",
    "SqlUnitOfWork",
    "TextMaterialCategoryRepository",
    "TextMaterialRepository",
    "UserDirectory",
]
