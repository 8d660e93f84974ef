"""Best-effort author notifications for text material lifecycle events.

Runs after the store commit. Any failure (user lookup or delivery) is
logged and swallowed: the committed change is the durable fact.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cardfile.application.dtos.caller import NotificationRecipient
    from cardfile.application.dtos.text_material import TextMaterialResult
    from cardfile.application.interfaces.repositories import IUserDirectory
    from cardfile.application.interfaces.services import ITextMaterialNotifier

logger = logging.getLogger(__name__)


class AuthorNotificationDispatcher:
    """Resolves the author of a material and hands the event to the notifier.

    Authors who opted out (receive_notifications False) are skipped.
    """

    def __init__(
        self,
        user_directory: IUserDirectory,
        notifier: ITextMaterialNotifier,
    ) -> None:
        self.user_directory = user_directory
        self.notifier = notifier

    async def created(self, material: TextMaterialResult) -> bool:
        return await self._dispatch(
            "created", material, lambda r: self.notifier.notify_created(r, material)
        )

    async def approved(self, material: TextMaterialResult) -> bool:
        return await self._dispatch(
            "approved", material, lambda r: self.notifier.notify_approved(r, material)
        )

    async def rejected(self, material: TextMaterialResult, reason: str | None) -> bool:
        return await self._dispatch(
            "rejected",
            material,
            lambda r: self.notifier.notify_rejected(r, material, reason),
        )

    async def deleted(self, material: TextMaterialResult) -> bool:
        return await self._dispatch(
            "deleted", material, lambda r: self.notifier.notify_deleted(r, material)
        )

    async def _dispatch(
        self,
        event: str,
        material: TextMaterialResult,
        send: Callable[[NotificationRecipient], Awaitable[None]],
    ) -> bool:
        """Return True when the notifier accepted the message."""
        try:
            recipient = await self.user_directory.get_recipient(material.author_id)
            if recipient is None:
                logger.warning(
                    "Skipping %s notification for text material %s: author %s not found",
                    event,
                    material.id,
                    material.author_id,
                )
                return False
            if not recipient.receive_notifications:
                logger.debug(
                    "Author %s opted out of notifications (text material %s %s)",
                    recipient.user_id,
                    material.id,
                    event,
                )
                return False
            await send(recipient)
        except Exception:
            logger.exception(
                "Failed to send %s notification for text material %s", event, material.id
            )
            return False
        return True
