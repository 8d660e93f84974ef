"""Domain entities and aggregates.

Pure domain models; no ORM or persistence concerns.
"""

from cardfile.domain.entities.text_material import TextMaterialEntity

__all__ = ["TextMaterialEntity"]
