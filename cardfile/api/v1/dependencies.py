"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the caller identity, the storage ports and
the text material use cases. Routes depend only on these dependencies,
not on infrastructure directly.

When database_backend is 'memory', every port is served by the process-wide
InMemoryCatalog on app.state. When it is 'postgres', repositories share one
SQLAlchemy session per request (transactional for writes).
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from datetime import datetime
from typing import Annotated

from fastapi import Depends, Query, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from cardfile.application.dtos.caller import CallerContext
from cardfile.application.dtos.text_material import TextMaterialQuery
from cardfile.application.interfaces.repositories import (
    ICategoryRepository,
    ITextMaterialRepository,
    IUnitOfWork,
    IUserDirectory,
)
from cardfile.application.services.text_material_sorting import parse_order_by
from cardfile.application.use_cases.text_materials import (
    AuthorNotificationDispatcher,
    TextMaterialApprovalService,
    TextMaterialQueryService,
    TextMaterialService,
)
from cardfile.core.config import get_settings
from cardfile.domain.enums import ApprovalStatus, Role
from cardfile.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ValidationException,
)
from cardfile.infrastructure.persistence.database import session_scope
from cardfile.infrastructure.persistence.memory_store import (
    InMemoryCatalog,
    InMemoryUnitOfWork,
)
from cardfile.infrastructure.persistence.repositories import (
    SqlUnitOfWork,
    TextMaterialCategoryRepository,
    TextMaterialRepository,
    UserDirectory,
)
from cardfile.infrastructure.security.jwt import roles_from_claims, verify_token
from cardfile.infrastructure.services import (
    EmailTextMaterialNotifier,
    LogOnlyNotificationService,
)
from cardfile.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_http_bearer = HTTPBearer(auto_error=False)


# ---- Caller identity ----


def _roles_from_names(names: list[str]) -> frozenset[Role]:
    roles = set()
    for name in names:
        try:
            roles.add(Role(name))
        except ValueError:
            logger.debug("Ignoring unknown role claim %r", name)
    return frozenset(roles) or frozenset({Role.USER})


async def get_caller_context(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> CallerContext:
    """Caller from the JWT if present and valid; otherwise an anonymous User."""
    if not credentials:
        return CallerContext()
    try:
        payload = verify_token(credentials.credentials)
    except ValueError as e:
        logger.info("Rejected bearer token: %s", e)
        return CallerContext()
    names = roles_from_claims(payload, get_settings().roles_claim)
    return CallerContext(user_id=str(payload["sub"]), roles=_roles_from_names(names))


async def require_authenticated(
    caller: Annotated[CallerContext, Depends(get_caller_context)],
) -> CallerContext:
    """Return the caller; raise 401 if anonymous."""
    if not caller.is_authenticated:
        raise AuthenticationException("Not authenticated")
    return caller


async def require_manager(
    caller: Annotated[CallerContext, Depends(require_authenticated)],
) -> CallerContext:
    """Return the caller; raise 403 unless they hold Manager (or Admin)."""
    if not caller.is_manager:
        raise AuthorizationException("text_material", "review")
    return caller


# ---- Storage ports ----


@dataclass(frozen=True)
class Stores:
    """Storage ports bound to one request."""

    materials: ITextMaterialRepository
    categories: ICategoryRepository
    users: IUserDirectory
    unit_of_work: IUnitOfWork


def get_catalog(request: Request) -> InMemoryCatalog:
    """Process-wide in-memory catalog (created on first use if lifespan did not run)."""
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        catalog = InMemoryCatalog()
        request.app.state.catalog = catalog
    return catalog


@asynccontextmanager
async def _stores(request: Request, *, transactional: bool) -> AsyncIterator[Stores]:
    if get_settings().database_backend == "memory":
        catalog = get_catalog(request)
        yield Stores(
            materials=catalog,
            categories=catalog,
            users=catalog,
            unit_of_work=InMemoryUnitOfWork(),
        )
        return
    async with session_scope(transactional=transactional) as db:
        yield Stores(
            materials=TextMaterialRepository(db),
            categories=TextMaterialCategoryRepository(db),
            users=UserDirectory(db),
            unit_of_work=SqlUnitOfWork(db),
        )


async def get_stores(request: Request) -> AsyncIterator[Stores]:
    """Ports for read endpoints (no transaction)."""
    async with _stores(request, transactional=False) as stores:
        yield stores


async def get_stores_for_write(request: Request) -> AsyncIterator[Stores]:
    """Ports for write endpoints.

    Services commit through stores.unit_of_work before notifying; anything
    left uncommitted is committed when the request succeeds.
    """
    async with _stores(request, transactional=True) as stores:
        yield stores


# ---- Use cases ----


def _build_notifications(stores: Stores) -> AuthorNotificationDispatcher | None:
    settings = get_settings()
    if not settings.notifications_enabled:
        return None
    return AuthorNotificationDispatcher(
        user_directory=stores.users,
        notifier=EmailTextMaterialNotifier(
            LogOnlyNotificationService(sender=settings.notification_sender)
        ),
    )


def get_text_material_query_service(
    stores: Annotated[Stores, Depends(get_stores)],
) -> TextMaterialQueryService:
    """Role-aware listing and lookup (composition root)."""
    settings = get_settings()
    return TextMaterialQueryService(
        stores.materials,
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
    )


def get_text_material_service(
    stores: Annotated[Stores, Depends(get_stores_for_write)],
) -> TextMaterialService:
    """Create / update / delete (composition root)."""
    return TextMaterialService(
        stores.materials,
        stores.categories,
        notifications=_build_notifications(stores),
        unit_of_work=stores.unit_of_work,
    )


def get_approval_service(
    stores: Annotated[Stores, Depends(get_stores_for_write)],
) -> TextMaterialApprovalService:
    """Approve / reject (composition root)."""
    return TextMaterialApprovalService(
        stores.materials,
        notifications=_build_notifications(stores),
        unit_of_work=stores.unit_of_work,
    )


# ---- Query parameters ----


def _parse_statuses(codes: list[int] | None) -> frozenset[ApprovalStatus]:
    if not codes:
        return frozenset()
    try:
        return frozenset(ApprovalStatus(code) for code in codes)
    except ValueError as e:
        raise ValidationException(
            f"approvalStatus must be one of {ApprovalStatus.values()}",
            field="approvalStatus",
        ) from e


def get_text_material_query(
    filter_from_date: Annotated[datetime | None, Query(alias="filterFromDate")] = None,
    filter_to_date: Annotated[datetime | None, Query(alias="filterToDate")] = None,
    search_title: Annotated[str | None, Query(alias="searchTitle")] = None,
    search_category: Annotated[str | None, Query(alias="searchCategory")] = None,
    search_author: Annotated[str | None, Query(alias="searchAuthor")] = None,
    approval_status: Annotated[list[int] | None, Query(alias="approvalStatus")] = None,
    order_by: Annotated[str | None, Query(alias="orderBy")] = None,
    page_number: Annotated[int, Query(alias="pageNumber")] = 1,
    page_size: Annotated[int | None, Query(alias="pageSize")] = None,
) -> TextMaterialQuery:
    """Listing parameters in the web client's camelCase names.

    orderBy is "field [asc|desc]" clauses separated by commas. Bad sort
    fields and bad page values are rejected with 400 before any read.
    """
    return TextMaterialQuery(
        filter_from_date=filter_from_date,
        filter_to_date=filter_to_date,
        search_title=search_title or None,
        search_category=search_category or None,
        search_author=search_author or None,
        approval_status=_parse_statuses(approval_status),
        order_by=parse_order_by(order_by),
        page_number=page_number,
        page_size=page_size,
    )
