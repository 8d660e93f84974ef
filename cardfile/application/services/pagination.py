"""Page slicing and page metadata."""

import math
from collections.abc import Sequence
from typing import TypeVar

from cardfile.application.dtos.pagination import PagedResult
from cardfile.domain.exceptions import InvalidPaginationException

T = TypeVar("T")


def validate_page(page_number: int, page_size: int) -> None:
    """Raise InvalidPaginationException unless both values are positive."""
    if page_number <= 0 or page_size <= 0:
        raise InvalidPaginationException(page_number, page_size)


def paginate(items: Sequence[T], page_number: int, page_size: int) -> PagedResult[T]:
    """Slice one page out of an already filtered and sorted sequence.

    A page past the end returns no items; totals still describe the full
    filtered set.

    Args:
        items: Filtered, sorted sequence.
        page_number: 1-based page index.
        page_size: Maximum items per page.

    Returns:
        PagedResult with items at offset (page_number - 1) * page_size.

    Raises:
        InvalidPaginationException: If page_number or page_size is not positive.
    """
    validate_page(page_number, page_size)
    total_count = len(items)
    offset = (page_number - 1) * page_size
    return PagedResult(
        items=tuple(items[offset : offset + page_size]),
        total_count=total_count,
        page_size=page_size,
        current_page=page_number,
        total_pages=math.ceil(total_count / page_size),
    )
