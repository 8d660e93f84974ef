"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs or domain entities only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from cardfile.application.dtos.caller import NotificationRecipient
    from cardfile.application.dtos.text_material import (
        CategoryResult,
        TextMaterialCriteria,
        TextMaterialResult,
    )
    from cardfile.domain.entities.text_material import TextMaterialEntity


# Text material store
class ITextMaterialRepository(Protocol):
    """Protocol for the text material store (DIP).

    fetch returns a consistent snapshot with author and category resolved.
    Write methods raise ConcurrencyConflictException when the version token
    no longer matches and StorageException on store failure.
    """

    async def fetch(self, criteria: TextMaterialCriteria) -> list[TextMaterialResult]:
        """Return materials matching the store-level criteria, in insertion (id) order."""

    async def get_by_id(self, material_id: int) -> TextMaterialResult | None:
        """Return material by id with related references resolved, or None."""

    async def commit(self, entity: TextMaterialEntity) -> TextMaterialResult:
        """Persist a mutated entity guarded by entity.version; return the stored read-model."""

    async def create(
        self,
        title: str,
        content: str,
        author_id: str,
        category_id: int | None,
    ) -> TextMaterialResult:
        """Insert a new PENDING material; the store assigns id and date_published."""

    async def delete(self, material_id: int) -> bool:
        """Delete by id. Returns False when no such material exists."""


# Category lookup
class ICategoryRepository(Protocol):
    """Protocol for resolving text material categories."""

    async def get_by_title(self, title: str) -> CategoryResult | None:
        """Return category with this exact title, or None."""


# User directory (external user store)
class IUserDirectory(Protocol):
    """Protocol for looking up the author of a material for notifications."""

    async def get_recipient(self, user_id: str) -> NotificationRecipient | None:
        """Return username, email and notification preference, or None if the user is gone."""


# Unit of work
class IUnitOfWork(Protocol):
    """Protocol for making the writes of one request durable.

    Services await commit() before any side effect that announces the change.
    """

    async def commit(self) -> None:
        """Make pending writes durable. Raises StorageException on failure."""
