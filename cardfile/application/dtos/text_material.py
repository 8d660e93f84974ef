"""DTOs for text material use cases (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime

from cardfile.domain.enums import ApprovalStatus, SortDirection, SortField


@dataclass(frozen=True)
class TextMaterialResult:
    """Text material read-model with author and category resolved (not lazy).

    author_name / category_title are None when the related row no longer
    exists; substring filters then exclude the material instead of failing.
    """

    id: int
    title: str
    content: str
    author_id: str
    author_name: str | None
    category_id: int | None
    category_title: str | None
    approval_status: ApprovalStatus
    date_published: datetime
    reject_message: str | None = None
    version: int = 1


@dataclass(frozen=True)
class TextMaterialCreate:
    """Input for creating a text material (write-model). Status is always PENDING on create."""

    title: str
    content: str
    author_id: str
    category_title: str | None = None


@dataclass(frozen=True)
class TextMaterialUpdate:
    """Partial update of the editable fields. None means unchanged."""

    title: str | None = None
    content: str | None = None
    category_title: str | None = None


@dataclass(frozen=True)
class SortKey:
    """One ordering key: closed field set x direction."""

    field: SortField
    direction: SortDirection = SortDirection.ASC


@dataclass(frozen=True)
class TextMaterialQuery:
    """Request-scoped listing parameters supplied by the caller.

    approval_status empty means "role default". page_size None means the
    configured default.
    """

    filter_from_date: datetime | None = None
    filter_to_date: datetime | None = None
    search_title: str | None = None
    search_category: str | None = None
    search_author: str | None = None
    approval_status: frozenset[ApprovalStatus] = field(default_factory=frozenset)
    order_by: tuple[SortKey, ...] = ()
    page_number: int = 1
    page_size: int | None = None


@dataclass(frozen=True)
class TextMaterialCriteria:
    """Store-level pre-filter. The query pipeline re-applies every predicate on the snapshot."""

    author_id: str | None = None
    approval_statuses: frozenset[ApprovalStatus] | None = None


@dataclass(frozen=True)
class CategoryResult:
    """Text material category read-model."""

    id: int
    title: str
