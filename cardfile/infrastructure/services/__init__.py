"""Infrastructure services: notification delivery."""

from cardfile.infrastructure.services.notification_service import (
    EmailTextMaterialNotifier,
    LogOnlyNotificationService,
)

__all__ = ["EmailTextMaterialNotifier", "LogOnlyNotificationService"]
