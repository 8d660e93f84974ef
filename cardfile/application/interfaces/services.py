"""Service interfaces (ports) for the application layer.

Protocols define contracts for notification delivery (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from cardfile.application.dtos.caller import NotificationRecipient
    from cardfile.application.dtos.text_material import TextMaterialResult


# Notification transport (SMTP, queue, or log-only)
class INotificationService(Protocol):
    """Protocol for sending notifications (e.g. email) to a list of recipients."""

    async def send(
        self,
        to_emails: list[str],
        subject: str,
        body: str,
    ) -> None:
        """Send notification to the given addresses. No-op or log if not configured."""


# Author notifications for text material lifecycle
class ITextMaterialNotifier(Protocol):
    """Protocol for telling an author what happened to their text material.

    Implementations may raise; callers log and swallow failures.
    """

    async def notify_created(
        self, recipient: NotificationRecipient, material: TextMaterialResult
    ) -> None:
        """Material was created and is pending review."""

    async def notify_approved(
        self, recipient: NotificationRecipient, material: TextMaterialResult
    ) -> None:
        """Material was approved."""

    async def notify_rejected(
        self,
        recipient: NotificationRecipient,
        material: TextMaterialResult,
        reason: str | None,
    ) -> None:
        """Material was rejected, with optional reason."""

    async def notify_deleted(
        self, recipient: NotificationRecipient, material: TextMaterialResult
    ) -> None:
        """Material was deleted."""
