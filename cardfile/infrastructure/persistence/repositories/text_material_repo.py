"""TextMaterial repository (Postgres). Returns application DTOs with author/category resolved."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload
from sqlalchemy.orm.exc import StaleDataError

from cardfile.application.dtos.text_material import TextMaterialCriteria, TextMaterialResult
from cardfile.domain.enums import ApprovalStatus
from cardfile.domain.exceptions import (
    ConcurrencyConflictException,
    ResourceNotFoundException,
    StorageException,
)
from cardfile.infrastructure.persistence.models.text_material import TextMaterial
from cardfile.infrastructure.persistence.repositories.base import BaseRepository
from cardfile.shared.utils.datetime import ensure_utc, utc_now

if TYPE_CHECKING:
    from cardfile.domain.entities.text_material import TextMaterialEntity

_WITH_RELATED = (joinedload(TextMaterial.author), joinedload(TextMaterial.category))


def _to_result(m: TextMaterial) -> TextMaterialResult:
    """Map ORM TextMaterial (related rows loaded) to TextMaterialResult."""
    return TextMaterialResult(
        id=m.id,
        title=m.title,
        content=m.content,
        author_id=m.author_id,
        author_name=m.author.username if m.author is not None else None,
        category_id=m.category_id,
        category_title=m.category.title if m.category is not None else None,
        approval_status=ApprovalStatus(m.approval_status),
        date_published=ensure_utc(m.date_published),
        reject_message=m.reject_message,
        version=m.version,
    )


class TextMaterialRepository(BaseRepository[TextMaterial]):
    """Text material store backed by SQLAlchemy.

    Concurrency is delegated to the version column: commit compares the
    caller's version with the stored one, and the UPDATE itself is guarded
    by version_id_col. Conflicts surface as ConcurrencyConflictException
    and are not retried.
    """

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, TextMaterial)

    async def _load(self, material_id: int, *, refresh: bool = False) -> TextMaterial | None:
        stmt = select(TextMaterial).options(*_WITH_RELATED).where(TextMaterial.id == material_id)
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self._guard(self.db.execute(stmt), "load")
        return result.scalar_one_or_none()

    async def fetch(self, criteria: TextMaterialCriteria) -> list[TextMaterialResult]:
        stmt = select(TextMaterial).options(*_WITH_RELATED).order_by(TextMaterial.id.asc())
        if criteria.author_id is not None:
            stmt = stmt.where(TextMaterial.author_id == criteria.author_id)
        if criteria.approval_statuses is not None:
            stmt = stmt.where(
                TextMaterial.approval_status.in_(
                    [s.value for s in criteria.approval_statuses]
                )
            )
        result = await self._guard(self.db.execute(stmt), "fetch")
        return [_to_result(m) for m in result.scalars().all()]

    async def get_by_id(self, material_id: int) -> TextMaterialResult | None:
        row = await self._load(material_id)
        return _to_result(row) if row else None

    async def commit(self, entity: TextMaterialEntity) -> TextMaterialResult:
        row = await self._load(entity.id)
        if row is None:
            raise ResourceNotFoundException("text_material", entity.id)
        if row.version != entity.version:
            raise ConcurrencyConflictException("text_material", entity.id)
        row.title = entity.title
        row.content = entity.content
        row.category_id = entity.category_id
        row.approval_status = entity.approval_status.value
        row.reject_message = entity.reject_message
        try:
            await self.db.flush()
        except StaleDataError as e:
            raise ConcurrencyConflictException("text_material", entity.id) from e
        except SQLAlchemyError as e:
            raise StorageException(f"TextMaterial commit failed: {e.__class__.__name__}") from e
        refreshed = await self._load(entity.id, refresh=True)
        if refreshed is None:
            raise ResourceNotFoundException("text_material", entity.id)
        return _to_result(refreshed)

    async def create(
        self,
        title: str,
        content: str,
        author_id: str,
        category_id: int | None,
    ) -> TextMaterialResult:
        row = TextMaterial(
            title=title,
            content=content,
            author_id=author_id,
            category_id=category_id,
            approval_status=ApprovalStatus.PENDING.value,
            date_published=utc_now(),
        )
        created = await super().create(row)
        loaded = await self._load(created.id, refresh=True)
        if loaded is None:
            raise ResourceNotFoundException("text_material", created.id)
        return _to_result(loaded)

    async def delete(self, material_id: int) -> bool:
        row = await super().get_by_id(material_id)
        if row is None:
            return False
        await super().delete(row)
        return True
