"""AppUser ORM model. Read-only here: users are managed by the external auth service."""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from cardfile.infrastructure.persistence.database import Base


class AppUser(Base):
    """Author of text materials. Table: app_user."""

    __tablename__ = "app_user"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    username: Mapped[str] = mapped_column(String(150), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    receive_notifications: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True
    )
