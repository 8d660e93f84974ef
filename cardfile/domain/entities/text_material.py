"""Text material domain entity.

Carries the approval state machine: Pending (initial) -> Approved | Rejected.
Independent of persistence; the store commits the mutated entity.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime

from cardfile.domain.enums import ApprovalStatus
from cardfile.domain.exceptions import ValidationException

logger = logging.getLogger(__name__)

TERMINAL_STATUSES = frozenset({ApprovalStatus.APPROVED, ApprovalStatus.REJECTED})


@dataclass
class TextMaterialEntity:
    """Domain entity for a text material awaiting or past editorial review.

    Transitions do not require the current status to be PENDING: a rejected
    material may be approved again, and vice versa. Leaving a terminal
    status is logged so such re-decisions are visible in the logs.
    """

    id: int
    title: str
    content: str
    author_id: str
    category_id: int | None
    approval_status: ApprovalStatus
    date_published: datetime
    reject_message: str | None = None
    version: int = field(default=1)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate text material rules. Raises ValidationException if invalid."""
        if not self.title or not self.title.strip():
            raise ValidationException("Title is required", field="title")
        if not self.author_id:
            raise ValidationException("Author is required", field="author_id")
        if self.approval_status != ApprovalStatus.REJECTED and self.reject_message:
            raise ValidationException(
                "Reject message is only allowed on rejected materials",
                field="reject_message",
            )

    def approve(self) -> None:
        """Set status to APPROVED and clear any previous reject message."""
        self._log_redecision(ApprovalStatus.APPROVED)
        self.approval_status = ApprovalStatus.APPROVED
        self.reject_message = None

    def reject(self, reason: str | None = None) -> None:
        """Set status to REJECTED and store the reason (may be None).

        Args:
            reason: Human-readable reason shown to the author.
        """
        self._log_redecision(ApprovalStatus.REJECTED)
        self.approval_status = ApprovalStatus.REJECTED
        self.reject_message = reason

    def _log_redecision(self, target: ApprovalStatus) -> None:
        if self.approval_status in TERMINAL_STATUSES:
            logger.info(
                "Text material %s moves from terminal status %s to %s",
                self.id,
                self.approval_status.name,
                target.name,
            )
