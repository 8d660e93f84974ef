"""Text material notifications: email composition and a log-only transport."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cardfile.shared.telemetry.logging import get_logger
from cardfile.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from cardfile.application.dtos.caller import NotificationRecipient
    from cardfile.application.dtos.text_material import TextMaterialResult
    from cardfile.application.interfaces.services import INotificationService

logger = get_logger(__name__)


class LogOnlyNotificationService:
    """INotificationService implementation that logs instead of sending email.

    Use when no SMTP is configured. Production can swap in an SMTP or queue-based implementation.
    """

    def __init__(self, sender: str = "no-reply@cardfile.local") -> None:
        self.sender = sender

    async def send(
        self,
        to_emails: list[str],
        subject: str,
        body: str,
    ) -> None:
        """Log the notification; no actual email sent."""
        recipients = list(to_emails or [])
        subject_preview = (subject or "")[:80]
        if not recipients:
            logger.info(
                "Notify: no recipients, skipping send (subject=%r)",
                subject_preview,
            )
            return
        logger.info(
            "Notify: would send to %d recipients from %s (subject=%r)",
            len(recipients),
            self.sender,
            subject_preview,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Notify recipients: %s (at %s)",
                recipients,
                utc_now().isoformat(),
            )
        logger.debug("Notify body (first 500 chars): %s", (body or "")[:500])


class EmailTextMaterialNotifier:
    """ITextMaterialNotifier that writes one email per event to the author.

    Delivery goes through an INotificationService; exceptions from it
    propagate to the dispatcher, which logs and swallows them.
    """

    def __init__(self, transport: INotificationService) -> None:
        self.transport = transport

    async def notify_created(
        self, recipient: NotificationRecipient, material: TextMaterialResult
    ) -> None:
        body = (
            f"Hello {recipient.username}. "
            f"You have just created a new text material with title '{material.title}'. "
            "Currently its approval status is PENDING. "
            "We will let you know when it's approved or rejected."
        )
        await self.transport.send([recipient.email], "Text material created", body)

    async def notify_approved(
        self, recipient: NotificationRecipient, material: TextMaterialResult
    ) -> None:
        body = (
            f"Hello {recipient.username}. "
            f"Your text material '{material.title}' was approved."
        )
        await self.transport.send([recipient.email], "Text material approved", body)

    async def notify_rejected(
        self,
        recipient: NotificationRecipient,
        material: TextMaterialResult,
        reason: str | None,
    ) -> None:
        body = (
            f"Hello {recipient.username}. "
            f"Your text material '{material.title}' was rejected.\n"
            f"Reason: {reason or 'not specified'}"
        )
        await self.transport.send([recipient.email], "Text material rejected", body)

    async def notify_deleted(
        self, recipient: NotificationRecipient, material: TextMaterialResult
    ) -> None:
        body = (
            f"Hello {recipient.username}. "
            f"Your text material '{material.title}' was deleted."
        )
        await self.transport.send([recipient.email], "Text material deleted", body)
