"""Base repository: primary-key lookup, create, delete, and store-error mapping."""

from collections.abc import Awaitable
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cardfile.domain.exceptions import StorageException
from cardfile.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)
R = TypeVar("R")


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, create, delete.

    Driver and ORM failures surface as StorageException so the application
    layer never sees SQLAlchemy types.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def _guard(self, awaitable: Awaitable[R], operation: str) -> R:
        """Await a store call, mapping SQLAlchemyError to StorageException."""
        try:
            return await awaitable
        except SQLAlchemyError as e:
            raise StorageException(
                f"{self.model.__name__} {operation} failed: {e.__class__.__name__}"
            ) from e

    async def get_by_id(self, entity_id: Any) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self._guard(
            self.db.execute(select(self.model).where(model.id == entity_id)),
            "get_by_id",
        )
        return result.scalar_one_or_none()

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and return it with generated columns loaded."""
        self.db.add(obj)
        await self._guard(self.db.flush(), "create")
        await self._guard(self.db.refresh(obj), "create")
        return obj

    async def delete(self, obj: ModelType) -> None:
        """Delete the record."""
        await self._guard(self.db.delete(obj), "delete")
        await self._guard(self.db.flush(), "delete")
