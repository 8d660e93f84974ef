"""Tests for order-by parsing and stable multi-key sorting."""

from datetime import UTC, datetime

import pytest

from cardfile.application.dtos.text_material import SortKey, TextMaterialResult
from cardfile.application.services.text_material_sorting import (
    parse_order_by,
    parse_sort_key,
    sort_materials,
)
from cardfile.domain.enums import ApprovalStatus, SortDirection, SortField
from cardfile.domain.exceptions import InvalidSortFieldException


def _material(
    material_id: int,
    title: str,
    category_title: str | None = None,
    day: int = 1,
) -> TextMaterialResult:
    return TextMaterialResult(
        id=material_id,
        title=title,
        content="",
        author_id="u1",
        author_name="alice",
        category_id=None,
        category_title=category_title,
        approval_status=ApprovalStatus.APPROVED,
        date_published=datetime(2024, 1, day, tzinfo=UTC),
    )


class TestParseOrderBy:
    def test_none_and_empty_yield_no_keys(self) -> None:
        assert parse_order_by(None) == ()
        assert parse_order_by("") == ()

    def test_web_client_format(self) -> None:
        assert parse_order_by("title asc,category desc") == (
            SortKey(SortField.TITLE, SortDirection.ASC),
            SortKey(SortField.CATEGORY, SortDirection.DESC),
        )

    def test_direction_defaults_to_asc(self) -> None:
        assert parse_sort_key("datePublished") == SortKey(SortField.DATE_PUBLISHED)

    def test_field_and_direction_case_insensitive(self) -> None:
        assert parse_sort_key("DatePublished DESC") == SortKey(
            SortField.DATE_PUBLISHED, SortDirection.DESC
        )

    def test_trailing_comma_skipped(self) -> None:
        assert parse_order_by("title,") == (SortKey(SortField.TITLE),)

    @pytest.mark.parametrize("raw", ["author", "title sideways", "title asc extra", "id desc"])
    def test_invalid_clause_raises(self, raw: str) -> None:
        with pytest.raises(InvalidSortFieldException) as exc_info:
            parse_order_by(raw)
        assert exc_info.value.error_code == "INVALID_SORT_FIELD"
        assert "title" in exc_info.value.details["allowed"]


class TestSortMaterials:
    def test_no_keys_keeps_input_order(self) -> None:
        items = [_material(3, "c"), _material(1, "a"), _material(2, "b")]
        assert sort_materials(items, ()) == items

    def test_title_descending(self) -> None:
        items = [_material(1, "b"), _material(2, "C"), _material(3, "a")]
        result = sort_materials(items, [SortKey(SortField.TITLE, SortDirection.DESC)])
        assert [m.id for m in result] == [2, 1, 3]

    def test_secondary_key_breaks_ties(self) -> None:
        items = [
            _material(1, "Same", "Zeta"),
            _material(2, "Other", "Alpha"),
            _material(3, "Same", "Alpha"),
        ]
        keys = [
            SortKey(SortField.TITLE, SortDirection.ASC),
            SortKey(SortField.CATEGORY, SortDirection.DESC),
        ]
        assert [m.id for m in sort_materials(items, keys)] == [2, 1, 3]

    def test_stable_for_equal_keys(self) -> None:
        items = [_material(i, "Same", day=1) for i in (4, 2, 9, 1)]
        result = sort_materials(items, [SortKey(SortField.DATE_PUBLISHED)])
        assert [m.id for m in result] == [4, 2, 9, 1]

    def test_missing_category_sorts_first(self) -> None:
        items = [_material(1, "x", "Poetry"), _material(2, "y", None)]
        result = sort_materials(items, [SortKey(SortField.CATEGORY)])
        assert [m.id for m in result] == [2, 1]

    def test_date_published_ascending(self) -> None:
        items = [_material(1, "x", day=3), _material(2, "y", day=1), _material(3, "z", day=2)]
        result = sort_materials(items, [SortKey(SortField.DATE_PUBLISHED)])
        assert [m.id for m in result] == [2, 3, 1]

    def test_does_not_mutate_input(self) -> None:
        items = [_material(2, "b"), _material(1, "a")]
        sort_materials(items, [SortKey(SortField.TITLE)])
        assert [m.id for m in items] == [2, 1]

    def test_key_outside_closed_set_rejected(self) -> None:
        with pytest.raises(InvalidSortFieldException):
            sort_materials([_material(1, "a")], [SortKey("author")])  # type: ignore[arg-type]
