"""TextMaterialCategory repository (Postgres). Returns application DTOs."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cardfile.application.dtos.text_material import CategoryResult
from cardfile.infrastructure.persistence.models.text_material_category import (
    TextMaterialCategory,
)
from cardfile.infrastructure.persistence.repositories.base import BaseRepository


class TextMaterialCategoryRepository(BaseRepository[TextMaterialCategory]):
    """Category lookup by title."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, TextMaterialCategory)

    async def get_by_title(self, title: str) -> CategoryResult | None:
        result = await self._guard(
            self.db.execute(
                select(TextMaterialCategory).where(TextMaterialCategory.title == title)
            ),
            "get_by_title",
        )
        row = result.scalar_one_or_none()
        return CategoryResult(id=row.id, title=row.title) if row else None
