"""Pydantic request/response schemas for the HTTP API."""

from cardfile.schemas.health import HealthResponse
from cardfile.schemas.text_material import (
    PageMeta,
    RejectRequest,
    TextMaterialCreateRequest,
    TextMaterialListResponse,
    TextMaterialResponse,
    TextMaterialUpdateRequest,
)

__all__ = [
    "HealthResponse",
    "PageMeta",
    "RejectRequest",
    "TextMaterialCreateRequest",
    "TextMaterialListResponse",
    "TextMaterialResponse",
    "TextMaterialUpdateRequest",
]
