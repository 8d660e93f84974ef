"""Text material use cases: query (read), approval workflow, authoring (write)."""

from cardfile.application.use_cases.text_materials.approval import (
    TextMaterialApprovalService,
)
from cardfile.application.use_cases.text_materials.notifications import (
    AuthorNotificationDispatcher,
)
from cardfile.application.use_cases.text_materials.query import TextMaterialQueryService
from cardfile.application.use_cases.text_materials.text_material_operations import (
    TextMaterialService,
)

__all__ = [
    "AuthorNotificationDispatcher",
    "TextMaterialApprovalService",
    "TextMaterialQueryService",
    "TextMaterialService",
]
