"""Text material query use case: visibility -> filter -> sort -> page in one call."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cardfile.application.dtos.pagination import PagedResult
from cardfile.application.dtos.text_material import (
    TextMaterialCriteria,
    TextMaterialQuery,
    TextMaterialResult,
)
from cardfile.application.services.pagination import paginate, validate_page
from cardfile.application.services.text_material_filters import apply_filters
from cardfile.application.services.text_material_sorting import (
    sort_materials,
    validate_sort_keys,
)
from cardfile.application.services.visibility_policy import (
    can_view,
    effective_approval_statuses,
)
from cardfile.domain.enums import VisibilityContext
from cardfile.domain.exceptions import ResourceNotFoundException

if TYPE_CHECKING:
    from cardfile.application.dtos.caller import CallerContext
    from cardfile.application.interfaces.repositories import ITextMaterialRepository

logger = logging.getLogger(__name__)


class TextMaterialQueryService:
    """Single responsibility: role-aware listing and lookup of text materials.

    Stateless apart from its collaborators; build one per request. Every
    parameter is validated before the store is read, so a bad sort key or
    page never yields a partial result.
    """

    def __init__(
        self,
        material_repo: ITextMaterialRepository,
        default_page_size: int = 10,
        max_page_size: int = 50,
    ) -> None:
        self.material_repo = material_repo
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size

    def resolve_page_size(self, requested: int | None) -> int:
        """Default when absent, capped at max_page_size. Non-positive values pass through to validation."""
        if requested is None:
            return self.default_page_size
        return min(requested, self.max_page_size)

    async def query(
        self, caller: CallerContext, params: TextMaterialQuery
    ) -> PagedResult[TextMaterialResult]:
        """List materials visible to the caller in the public catalog."""
        return await self._run(caller, params, VisibilityContext.CATALOG, author_id=None)

    async def list_by_author(
        self,
        caller: CallerContext,
        author_id: str,
        params: TextMaterialQuery,
    ) -> PagedResult[TextMaterialResult]:
        """List one author's materials.

        Authors see their own materials in every status; anyone else gets the
        catalog rules for their role.
        """
        context = (
            VisibilityContext.OWN
            if caller.user_id is not None and caller.user_id == author_id
            else VisibilityContext.CATALOG
        )
        return await self._run(caller, params, context, author_id=author_id)

    async def get_by_id(
        self, caller: CallerContext, material_id: int
    ) -> TextMaterialResult:
        """Return one material; raise ResourceNotFoundException if absent or not visible to the caller."""
        material = await self.material_repo.get_by_id(material_id)
        if material is None or not self._is_visible(caller, material):
            raise ResourceNotFoundException("text_material", material_id)
        return material

    def _is_visible(self, caller: CallerContext, material: TextMaterialResult) -> bool:
        if caller.user_id is not None and caller.user_id == material.author_id:
            return True
        return can_view(caller.role, material.approval_status)

    async def _run(
        self,
        caller: CallerContext,
        params: TextMaterialQuery,
        context: VisibilityContext,
        author_id: str | None,
    ) -> PagedResult[TextMaterialResult]:
        page_size = self.resolve_page_size(params.page_size)
        validate_page(params.page_number, page_size)
        validate_sort_keys(params.order_by)

        statuses = effective_approval_statuses(
            caller.role, params.approval_status, context
        )
        snapshot = await self.material_repo.fetch(
            TextMaterialCriteria(author_id=author_id, approval_statuses=statuses)
        )
        filtered = apply_filters(snapshot, params, statuses, author_id=author_id)
        ordered = sort_materials(filtered, params.order_by)
        page = paginate(ordered, params.page_number, page_size)
        logger.debug(
            "Text material query role=%s context=%s statuses=%s matched=%d page=%d/%d",
            caller.role.value,
            context.value,
            sorted(s.value for s in statuses),
            page.total_count,
            page.current_page,
            page.total_pages,
        )
        return page
