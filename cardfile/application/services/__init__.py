"""Application services: visibility policy, filtering, sorting, pagination."""

from cardfile.application.services.pagination import paginate, validate_page
from cardfile.application.services.text_material_filters import apply_filters
from cardfile.application.services.text_material_sorting import (
    parse_order_by,
    sort_materials,
)
from cardfile.application.services.visibility_policy import (
    can_view,
    effective_approval_statuses,
)

__all__ = [
    "apply_filters",
    "can_view",
    "effective_approval_statuses",
    "paginate",
    "parse_order_by",
    "sort_materials",
    "validate_page",
]
