"""TextMaterialCategory ORM model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from cardfile.infrastructure.persistence.database import Base


class TextMaterialCategory(Base):
    """Category a text material is filed under. Table: text_material_category. Unique title."""

    __tablename__ = "text_material_category"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
