"""Application DTOs (no ORM dependency)."""

from cardfile.application.dtos.caller import CallerContext, NotificationRecipient
from cardfile.application.dtos.pagination import PagedResult
from cardfile.application.dtos.text_material import (
    CategoryResult,
    SortKey,
    TextMaterialCreate,
    TextMaterialCriteria,
    TextMaterialQuery,
    TextMaterialResult,
    TextMaterialUpdate,
)

__all__ = [
    "CallerContext",
    "CategoryResult",
    "NotificationRecipient",
    "PagedResult",
    "SortKey",
    "TextMaterialCreate",
    "TextMaterialCriteria",
    "TextMaterialQuery",
    "TextMaterialResult",
    "TextMaterialUpdate",
]
