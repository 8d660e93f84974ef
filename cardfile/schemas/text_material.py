"""Text material API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from cardfile.domain.enums import ApprovalStatus


class TextMaterialCreateRequest(BaseModel):
    """Request body for creating a text material.

    author_id defaults to the caller; only managers may author on behalf of others.
    """

    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(default="")
    category_title: str | None = Field(default=None, max_length=100)
    author_id: str | None = None


class TextMaterialUpdateRequest(BaseModel):
    """Request body for PUT (fields left out are unchanged)."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    content: str | None = None
    category_title: str | None = Field(default=None, max_length=100)


class RejectRequest(BaseModel):
    """Request body for PUT /{id}/reject.

    Accepts the web client's camelCase key (rejectMessage) as well as reject_message.
    """

    model_config = ConfigDict(populate_by_name=True)

    reject_message: str | None = Field(
        default=None, max_length=500, alias="rejectMessage"
    )


class TextMaterialResponse(BaseModel):
    """Text material as returned by the API (author and category resolved)."""

    model_config = ConfigDict(from_attributes=True)

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


class PageMeta(BaseModel):
    """Page metadata; also sent in the X-Pagination header."""

    total_count: int
    page_size: int
    current_page: int
    total_pages: int
    has_next: bool
    has_previous: bool


class TextMaterialListResponse(BaseModel):
    """One page of text materials with its metadata."""

    items: list[TextMaterialResponse]
    meta: PageMeta
