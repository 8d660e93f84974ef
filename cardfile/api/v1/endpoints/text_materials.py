"""Text materials API: thin routes delegating to the text material use cases."""

import json
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from cardfile.api.v1.dependencies import (
    get_approval_service,
    get_caller_context,
    get_text_material_query,
    get_text_material_query_service,
    get_text_material_service,
    require_authenticated,
    require_manager,
)
from cardfile.application.dtos.caller import CallerContext
from cardfile.application.dtos.pagination import PagedResult
from cardfile.application.dtos.text_material import (
    TextMaterialCreate,
    TextMaterialQuery,
    TextMaterialResult,
    TextMaterialUpdate,
)
from cardfile.application.use_cases.text_materials import (
    TextMaterialApprovalService,
    TextMaterialQueryService,
    TextMaterialService,
)
from cardfile.core.config import get_settings
from cardfile.core.limiter import limit_reviews, limit_writes
from cardfile.schemas.text_material import (
    PageMeta,
    RejectRequest,
    TextMaterialCreateRequest,
    TextMaterialListResponse,
    TextMaterialResponse,
    TextMaterialUpdateRequest,
)

router = APIRouter()


def _page_response(
    response: Response, page: PagedResult[TextMaterialResult]
) -> TextMaterialListResponse:
    """Body with items + meta; the same metadata goes into the pagination header."""
    response.headers[get_settings().pagination_header] = json.dumps(page.metadata())
    return TextMaterialListResponse(
        items=[TextMaterialResponse.model_validate(m) for m in page.items],
        meta=PageMeta(
            total_count=page.total_count,
            page_size=page.page_size,
            current_page=page.current_page,
            total_pages=page.total_pages,
            has_next=page.has_next,
            has_previous=page.has_previous,
        ),
    )


@router.get("", response_model=TextMaterialListResponse)
async def list_text_materials(
    response: Response,
    caller: Annotated[CallerContext, Depends(get_caller_context)],
    params: Annotated[TextMaterialQuery, Depends(get_text_material_query)],
    query_svc: Annotated[TextMaterialQueryService, Depends(get_text_material_query_service)],
):
    """List text materials visible to the caller (filtered, sorted, paged)."""
    page = await query_svc.query(caller, params)
    return _page_response(response, page)


@router.get("/by-author/{author_id}", response_model=TextMaterialListResponse)
async def list_text_materials_by_author(
    author_id: str,
    response: Response,
    caller: Annotated[CallerContext, Depends(get_caller_context)],
    params: Annotated[TextMaterialQuery, Depends(get_text_material_query)],
    query_svc: Annotated[TextMaterialQueryService, Depends(get_text_material_query_service)],
):
    """List one author's materials. Authors see their own in every status."""
    page = await query_svc.list_by_author(caller, author_id, params)
    return _page_response(response, page)


@router.get("/{material_id}", response_model=TextMaterialResponse)
async def get_text_material(
    material_id: int,
    caller: Annotated[CallerContext, Depends(get_caller_context)],
    query_svc: Annotated[TextMaterialQueryService, Depends(get_text_material_query_service)],
):
    """Get a text material by id; 404 when absent or not visible to the caller."""
    material = await query_svc.get_by_id(caller, material_id)
    return TextMaterialResponse.model_validate(material)


@router.post("", response_model=TextMaterialResponse, status_code=201)
@limit_writes
async def create_text_material(
    request: Request,
    body: TextMaterialCreateRequest,
    caller: Annotated[CallerContext, Depends(require_authenticated)],
    svc: Annotated[TextMaterialService, Depends(get_text_material_service)],
):
    """Create a text material (status PENDING). author_id defaults to the caller."""
    created = await svc.create(
        caller,
        TextMaterialCreate(
            title=body.title,
            content=body.content,
            author_id=body.author_id or caller.user_id,
            category_title=body.category_title,
        ),
    )
    return TextMaterialResponse.model_validate(created)


@router.put("/{material_id}", response_model=TextMaterialResponse)
@limit_writes
async def update_text_material(
    request: Request,
    material_id: int,
    body: TextMaterialUpdateRequest,
    caller: Annotated[CallerContext, Depends(require_authenticated)],
    svc: Annotated[TextMaterialService, Depends(get_text_material_service)],
):
    """Update title, content or category (author or manager)."""
    updated = await svc.update(
        caller,
        material_id,
        TextMaterialUpdate(
            title=body.title,
            content=body.content,
            category_title=body.category_title,
        ),
    )
    return TextMaterialResponse.model_validate(updated)


@router.delete("/{material_id}", status_code=204)
@limit_writes
async def delete_text_material(
    request: Request,
    material_id: int,
    caller: Annotated[CallerContext, Depends(require_authenticated)],
    svc: Annotated[TextMaterialService, Depends(get_text_material_service)],
):
    """Delete a text material (author or manager)."""
    await svc.delete(caller, material_id)
    return Response(status_code=204)


@router.put("/{material_id}/approve", status_code=204)
@limit_reviews
async def approve_text_material(
    request: Request,
    material_id: int,
    _: Annotated[CallerContext, Depends(require_manager)],
    svc: Annotated[TextMaterialApprovalService, Depends(get_approval_service)],
):
    """Approve a text material (Manager)."""
    await svc.approve(material_id)
    return Response(status_code=204)


@router.put("/{material_id}/reject", status_code=204)
@limit_reviews
async def reject_text_material(
    request: Request,
    material_id: int,
    _: Annotated[CallerContext, Depends(require_manager)],
    svc: Annotated[TextMaterialApprovalService, Depends(get_approval_service)],
    body: RejectRequest | None = None,
):
    """Reject a text material with an optional reason (Manager)."""
    await svc.reject(material_id, body.reject_message if body else None)
    return Response(status_code=204)
