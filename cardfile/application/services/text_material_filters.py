"""Composable predicates over a text material snapshot.

Each predicate is independent and they commute; apply_filters keeps the
input order and never mutates items.
"""

from collections.abc import Callable, Iterable, Sequence
from datetime import datetime

from cardfile.application.dtos.text_material import TextMaterialQuery, TextMaterialResult
from cardfile.domain.enums import ApprovalStatus
from cardfile.shared.utils.datetime import ensure_utc

Predicate = Callable[[TextMaterialResult], bool]


def date_range_predicate(
    from_date: datetime | None, to_date: datetime | None
) -> Predicate | None:
    """Inclusive bounds on date_published; None when both bounds are absent.

    from_date > to_date is accepted and matches nothing.
    """
    if from_date is None and to_date is None:
        return None
    lower = ensure_utc(from_date)
    upper = ensure_utc(to_date)

    def _in_range(material: TextMaterialResult) -> bool:
        published = ensure_utc(material.date_published)
        if lower is not None and published < lower:
            return False
        if upper is not None and published > upper:
            return False
        return True

    return _in_range


def _contains_predicate(
    pattern: str | None, value_of: Callable[[TextMaterialResult], str | None]
) -> Predicate | None:
    """Case-insensitive contains. Items whose value is missing are excluded."""
    if not pattern:
        return None
    needle = pattern.casefold()

    def _matches(material: TextMaterialResult) -> bool:
        value = value_of(material)
        return value is not None and needle in value.casefold()

    return _matches


def title_predicate(pattern: str | None) -> Predicate | None:
    return _contains_predicate(pattern, lambda m: m.title)


def category_predicate(pattern: str | None) -> Predicate | None:
    return _contains_predicate(pattern, lambda m: m.category_title)


def author_predicate(pattern: str | None) -> Predicate | None:
    return _contains_predicate(pattern, lambda m: m.author_name)


def status_predicate(statuses: Iterable[ApprovalStatus]) -> Predicate:
    allowed = frozenset(statuses)
    return lambda material: material.approval_status in allowed


def owner_predicate(author_id: str | None) -> Predicate | None:
    if author_id is None:
        return None
    return lambda material: material.author_id == author_id


def build_predicates(
    params: TextMaterialQuery,
    effective_statuses: Iterable[ApprovalStatus],
    author_id: str | None = None,
) -> list[Predicate]:
    """Collect the active predicates for these parameters (absent ones are skipped)."""
    candidates = [
        date_range_predicate(params.filter_from_date, params.filter_to_date),
        title_predicate(params.search_title),
        category_predicate(params.search_category),
        author_predicate(params.search_author),
        owner_predicate(author_id),
        status_predicate(effective_statuses),
    ]
    return [p for p in candidates if p is not None]


def apply_filters(
    materials: Sequence[TextMaterialResult],
    params: TextMaterialQuery,
    effective_statuses: Iterable[ApprovalStatus],
    author_id: str | None = None,
) -> list[TextMaterialResult]:
    """Return the materials matching every predicate, in input order.

    Args:
        materials: Candidate snapshot from the store.
        params: Caller parameters (date range and search patterns are read here).
        effective_statuses: Role-clamped status set from the visibility policy;
            params.approval_status is ignored in favour of this.
        author_id: Restrict to one author's materials (own-materials listing).
    """
    predicates = build_predicates(params, effective_statuses, author_id)
    return [m for m in materials if all(p(m) for p in predicates)]
