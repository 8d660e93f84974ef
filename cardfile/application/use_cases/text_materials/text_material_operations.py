"""Text material authoring: create, update, delete."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cardfile.application.use_cases.text_materials.mapping import to_entity
from cardfile.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)

if TYPE_CHECKING:
    from cardfile.application.dtos.caller import CallerContext
    from cardfile.application.dtos.text_material import (
        TextMaterialCreate,
        TextMaterialResult,
        TextMaterialUpdate,
    )
    from cardfile.application.interfaces.repositories import (
        ICategoryRepository,
        ITextMaterialRepository,
        IUnitOfWork,
    )
    from cardfile.application.use_cases.text_materials.notifications import (
        AuthorNotificationDispatcher,
    )

logger = logging.getLogger(__name__)


class TextMaterialService:
    """Create, edit and delete text materials.

    New materials always start PENDING. Editing and deleting are allowed for
    the author and for managers. Editing keeps the approval status. Writes
    are committed through the unit of work, when given, before the author
    is notified.
    """

    def __init__(
        self,
        material_repo: ITextMaterialRepository,
        category_repo: ICategoryRepository,
        notifications: AuthorNotificationDispatcher | None = None,
        unit_of_work: IUnitOfWork | None = None,
    ) -> None:
        self.material_repo = material_repo
        self.category_repo = category_repo
        self.notifications = notifications
        self.unit_of_work = unit_of_work

    async def create(
        self, caller: CallerContext, data: TextMaterialCreate
    ) -> TextMaterialResult:
        """Create a PENDING material authored by data.author_id; notify the author."""
        if not caller.is_authenticated:
            raise AuthenticationException("Authentication required to create text materials")
        if data.author_id != caller.user_id and not caller.is_manager:
            raise AuthorizationException("text_material", "create_for_other_author")
        title = (data.title or "").strip()
        if not title:
            raise ValidationException("Title is required", field="title")
        category_id = await self._resolve_category(data.category_title)
        created = await self.material_repo.create(
            title=title,
            content=data.content,
            author_id=data.author_id,
            category_id=category_id,
        )
        await self._complete()
        logger.info("Text material %s created by %s", created.id, data.author_id)
        if self.notifications is not None:
            await self.notifications.created(created)
        return created

    async def update(
        self,
        caller: CallerContext,
        material_id: int,
        data: TextMaterialUpdate,
    ) -> TextMaterialResult:
        """Update title, content and/or category. Raises ResourceNotFoundException, AuthorizationException."""
        material = await self._get_for_write(caller, material_id, "update")
        entity = to_entity(material)
        if data.title is not None:
            entity.title = data.title.strip()
        if data.content is not None:
            entity.content = data.content
        if data.category_title is not None:
            entity.category_id = await self._resolve_category(data.category_title)
        entity.validate()
        updated = await self.material_repo.commit(entity)
        await self._complete()
        return updated

    async def delete(self, caller: CallerContext, material_id: int) -> None:
        """Delete the material and notify its author."""
        material = await self._get_for_write(caller, material_id, "delete")
        deleted = await self.material_repo.delete(material_id)
        if not deleted:
            raise ResourceNotFoundException("text_material", material_id)
        await self._complete()
        logger.info("Text material %s deleted by %s", material_id, caller.user_id)
        if self.notifications is not None:
            await self.notifications.deleted(material)

    async def _complete(self) -> None:
        if self.unit_of_work is not None:
            await self.unit_of_work.commit()

    async def _get_for_write(
        self, caller: CallerContext, material_id: int, action: str
    ) -> TextMaterialResult:
        if not caller.is_authenticated:
            raise AuthenticationException()
        material = await self.material_repo.get_by_id(material_id)
        if material is None:
            raise ResourceNotFoundException("text_material", material_id)
        if material.author_id != caller.user_id and not caller.is_manager:
            raise AuthorizationException("text_material", action)
        return material

    async def _resolve_category(self, category_title: str | None) -> int | None:
        if not category_title:
            return None
        category = await self.category_repo.get_by_title(category_title)
        if category is None:
            raise ValidationException(
                f"Category not found: {category_title}", field="category_title"
            )
        return category.id
