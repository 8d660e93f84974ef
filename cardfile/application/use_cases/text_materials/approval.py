"""Approval workflow: approve / reject a text material, then notify its author."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cardfile.application.use_cases.text_materials.mapping import to_entity
from cardfile.domain.exceptions import ResourceNotFoundException

if TYPE_CHECKING:
    from cardfile.application.dtos.text_material import TextMaterialResult
    from cardfile.application.interfaces.repositories import (
        ITextMaterialRepository,
        IUnitOfWork,
    )
    from cardfile.application.use_cases.text_materials.notifications import (
        AuthorNotificationDispatcher,
    )
    from cardfile.domain.entities.text_material import TextMaterialEntity

logger = logging.getLogger(__name__)


class TextMaterialApprovalService:
    """Executes approval transitions.

    Order is load -> transition -> commit -> notify. When a unit of work is
    given it is committed before the author hears about the change. Commit
    failures (ConcurrencyConflictException, StorageException) propagate and
    nothing is sent; notification failures are swallowed by the dispatcher.
    Callers must already hold the Manager role (enforced at the API layer).
    """

    def __init__(
        self,
        material_repo: ITextMaterialRepository,
        notifications: AuthorNotificationDispatcher | None = None,
        unit_of_work: IUnitOfWork | None = None,
    ) -> None:
        self.material_repo = material_repo
        self.notifications = notifications
        self.unit_of_work = unit_of_work

    async def approve(self, material_id: int) -> TextMaterialResult:
        """Mark the material APPROVED. Raises ResourceNotFoundException if id does not resolve."""
        entity = await self._load(material_id)
        entity.approve()
        committed = await self.material_repo.commit(entity)
        await self._complete()
        logger.info("Text material %s approved", material_id)
        if self.notifications is not None:
            await self.notifications.approved(committed)
        return committed

    async def reject(
        self, material_id: int, reason: str | None = None
    ) -> TextMaterialResult:
        """Mark the material REJECTED with an optional reason. Raises ResourceNotFoundException if id does not resolve."""
        entity = await self._load(material_id)
        entity.reject(reason)
        committed = await self.material_repo.commit(entity)
        await self._complete()
        logger.info("Text material %s rejected", material_id)
        if self.notifications is not None:
            await self.notifications.rejected(committed, reason)
        return committed

    async def _complete(self) -> None:
        if self.unit_of_work is not None:
            await self.unit_of_work.commit()

    async def _load(self, material_id: int) -> TextMaterialEntity:
        material = await self.material_repo.get_by_id(material_id)
        if material is None:
            raise ResourceNotFoundException("text_material", material_id)
        return to_entity(material)
