"""User directory (Postgres): author lookup for notifications."""

from sqlalchemy.ext.asyncio import AsyncSession

from cardfile.application.dtos.caller import NotificationRecipient
from cardfile.infrastructure.persistence.models.user import AppUser
from cardfile.infrastructure.persistence.repositories.base import BaseRepository


class UserDirectory(BaseRepository[AppUser]):
    """Read-only view of app_user for notification recipients."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, AppUser)

    async def get_recipient(self, user_id: str) -> NotificationRecipient | None:
        user = await self.get_by_id(user_id)
        if user is None:
            return None
        return NotificationRecipient(
            user_id=user.id,
            username=user.username,
            email=user.email,
            receive_notifications=user.receive_notifications,
        )
