"""Tests for text material filter predicates."""

from datetime import UTC, datetime

from cardfile.application.dtos.text_material import TextMaterialQuery, TextMaterialResult
from cardfile.application.services.text_material_filters import (
    apply_filters,
    author_predicate,
    date_range_predicate,
    title_predicate,
)
from cardfile.domain.enums import ApprovalStatus

ALL = frozenset(ApprovalStatus)


def _material(
    material_id: int,
    title: str = "Title",
    *,
    author_id: str = "u1",
    author_name: str | None = "alice",
    category_title: str | None = "Poetry",
    status: ApprovalStatus = ApprovalStatus.APPROVED,
    published: datetime | None = None,
) -> TextMaterialResult:
    return TextMaterialResult(
        id=material_id,
        title=title,
        content="",
        author_id=author_id,
        author_name=author_name,
        category_id=1 if category_title else None,
        category_title=category_title,
        approval_status=status,
        date_published=published or datetime(2024, 1, material_id, tzinfo=UTC),
    )


class TestDateRange:
    def test_absent_bounds_yield_no_predicate(self) -> None:
        assert date_range_predicate(None, None) is None

    def test_bounds_are_inclusive(self) -> None:
        pred = date_range_predicate(
            datetime(2024, 1, 2, tzinfo=UTC), datetime(2024, 1, 3, tzinfo=UTC)
        )
        assert [pred(_material(d)) for d in (1, 2, 3, 4)] == [False, True, True, False]

    def test_naive_bound_treated_as_utc(self) -> None:
        pred = date_range_predicate(datetime(2024, 1, 2), None)
        assert pred(_material(2))
        assert not pred(_material(1))

    def test_inverted_range_matches_nothing(self) -> None:
        params = TextMaterialQuery(
            filter_from_date=datetime(2024, 1, 5, tzinfo=UTC),
            filter_to_date=datetime(2024, 1, 1, tzinfo=UTC),
        )
        assert apply_filters([_material(i) for i in range(1, 8)], params, ALL) == []


class TestSubstringSearch:
    def test_title_is_case_insensitive(self) -> None:
        pred = title_predicate("LEAV")
        assert pred(_material(1, "Autumn leaves"))
        assert not pred(_material(2, "Bridges"))

    def test_empty_pattern_is_no_filter(self) -> None:
        assert title_predicate("") is None
        assert title_predicate(None) is None

    def test_missing_author_is_excluded(self) -> None:
        pred = author_predicate("ali")
        assert pred(_material(1))
        assert not pred(_material(2, author_name=None))

    def test_missing_category_excluded_by_category_search(self) -> None:
        items = [_material(1), _material(2, category_title=None)]
        params = TextMaterialQuery(search_category="poe")
        assert [m.id for m in apply_filters(items, params, ALL)] == [1]


class TestApplyFilters:
    def test_status_set_applied(self) -> None:
        items = [
            _material(1, status=ApprovalStatus.APPROVED),
            _material(2, status=ApprovalStatus.PENDING),
            _material(3, status=ApprovalStatus.REJECTED),
        ]
        result = apply_filters(items, TextMaterialQuery(), {ApprovalStatus.PENDING})
        assert [m.id for m in result] == [2]

    def test_requested_status_on_params_is_ignored(self) -> None:
        """Only the effective (role-clamped) set counts."""
        items = [_material(1), _material(2, status=ApprovalStatus.REJECTED)]
        params = TextMaterialQuery(approval_status=frozenset({ApprovalStatus.REJECTED}))
        assert [m.id for m in apply_filters(items, params, {ApprovalStatus.APPROVED})] == [1]

    def test_owner_restriction(self) -> None:
        items = [_material(1, author_id="u1"), _material(2, author_id="u2")]
        result = apply_filters(items, TextMaterialQuery(), ALL, author_id="u2")
        assert [m.id for m in result] == [2]

    def test_predicates_combine_and_keep_order(self) -> None:
        items = [
            _material(5, "Night poem"),
            _material(1, "Day poem"),
            _material(3, "Night prose", category_title="Prose"),
            _material(2, "night poem two"),
        ]
        params = TextMaterialQuery(search_title="night", search_category="poe")
        assert [m.id for m in apply_filters(items, params, ALL)] == [5, 2]

    def test_input_not_mutated(self) -> None:
        items = [_material(1), _material(2, status=ApprovalStatus.PENDING)]
        snapshot = list(items)
        apply_filters(items, TextMaterialQuery(), {ApprovalStatus.APPROVED})
        assert items == snapshot
