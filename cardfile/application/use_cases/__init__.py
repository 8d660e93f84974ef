"""Application use cases: one entry point per workflow."""

from cardfile.application.use_cases.text_materials import (
    AuthorNotificationDispatcher,
    TextMaterialApprovalService,
    TextMaterialQueryService,
    TextMaterialService,
)

__all__ = [
    "AuthorNotificationDispatcher",
    "TextMaterialApprovalService",
    "TextMaterialQueryService",
    "TextMaterialService",
]
