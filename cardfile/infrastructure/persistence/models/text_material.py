"""TextMaterial ORM model with optimistic-lock version column."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, SmallInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from cardfile.domain.enums import ApprovalStatus
from cardfile.infrastructure.persistence.database import Base
from cardfile.infrastructure.persistence.models.text_material_category import (
    TextMaterialCategory,
)
from cardfile.infrastructure.persistence.models.user import AppUser


class TextMaterial(Base):
    """Community-submitted text material. Table: text_material.

    version is SQLAlchemy's version_id_col: every UPDATE is guarded by the
    version read, and a mismatch raises StaleDataError.
    """

    __tablename__ = "text_material"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    author_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    category_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("text_material_category.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    approval_status: Mapped[int] = mapped_column(
        SmallInteger, nullable=False, default=ApprovalStatus.PENDING.value, index=True
    )
    date_published: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )
    reject_message: Mapped[str | None] = mapped_column(String(500), nullable=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    author: Mapped[AppUser | None] = relationship(lazy="raise")
    category: Mapped[TextMaterialCategory | None] = relationship(lazy="raise")

    __mapper_args__ = {"version_id_col": version}
