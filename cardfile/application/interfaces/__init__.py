"""Application ports: repository and service protocols."""

from cardfile.application.interfaces.repositories import (
    ICategoryRepository,
    ITextMaterialRepository,
    IUnitOfWork,
    IUserDirectory,
)
from cardfile.application.interfaces.services import (
    INotificationService,
    ITextMaterialNotifier,
)

__all__ = [
    "ICategoryRepository",
    "INotificationService",
    "ITextMaterialNotifier",
    "ITextMaterialRepository",
    "IUnitOfWork",
    "IUserDirectory",
]
