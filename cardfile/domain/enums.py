"""Domain enumerations for CardFile.

Enums represent fixed sets of domain values (approval status, caller role,
sortable fields).
"""

from enum import Enum, IntEnum


class ApprovalStatus(IntEnum):
    """Editorial status of a text material.

    Integer values are the wire codes used by the web client
    (``approvalStatus=0&approvalStatus=1``) and the stored column value.
    """

    PENDING = 0
    APPROVED = 1
    REJECTED = 2

    @classmethod
    def values(cls) -> list[int]:
        """Return all valid status codes."""
        return [status.value for status in cls]


class Role(str, Enum):
    """Caller roles. Anonymous callers are treated as USER."""

    USER = "User"
    MANAGER = "Manager"
    ADMIN = "Admin"


class SortField(str, Enum):
    """Fields exposed for ordering text material listings."""

    TITLE = "title"
    CATEGORY = "category"
    DATE_PUBLISHED = "datePublished"


class SortDirection(str, Enum):
    """Sort direction for a single sort key."""

    ASC = "asc"
    DESC = "desc"


class VisibilityContext(str, Enum):
    """Where a listing is shown; selects the default approval-status rules.

    CATALOG is the public list of all materials. OWN is an author's own
    materials (home page), where the author sees every status.
    """

    CATALOG = "catalog"
    OWN = "own"
