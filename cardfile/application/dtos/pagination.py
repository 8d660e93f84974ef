"""Paged result with page metadata."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """One page of items plus the metadata every paged response carries.

    total_count is computed over the filtered set, before paging.
    """

    items: tuple[T, ...]
    total_count: int
    page_size: int
    current_page: int
    total_pages: int

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    def metadata(self) -> dict[str, int | bool]:
        """Page metadata keyed as the web client expects (X-Pagination header)."""
        return {
            "TotalCount": self.total_count,
            "PageSize": self.page_size,
            "CurrentPage": self.current_page,
            "TotalPages": self.total_pages,
            "HasNext": self.has_next,
            "HasPrevious": self.has_previous,
        }
