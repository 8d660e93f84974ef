"""Stable multi-key ordering of text materials.

Sort keys are a closed set (SortField x SortDirection). The comma-separated
wire format sent by the web client ("title asc,category desc") is parsed once
at the boundary by parse_order_by; the sort itself never sees raw strings.
"""

from collections.abc import Callable, Sequence
from typing import Any

from cardfile.application.dtos.text_material import SortKey, TextMaterialResult
from cardfile.domain.enums import SortDirection, SortField
from cardfile.domain.exceptions import InvalidSortFieldException
from cardfile.shared.utils.datetime import ensure_utc

_FIELD_ALIASES: dict[str, SortField] = {
    "title": SortField.TITLE,
    "category": SortField.CATEGORY,
    "datepublished": SortField.DATE_PUBLISHED,
    "date_published": SortField.DATE_PUBLISHED,
}


def _category_key(material: TextMaterialResult) -> tuple[int, str]:
    # Materials without a category sort before any category (ascending).
    if material.category_title is None:
        return (0, "")
    return (1, material.category_title.casefold())


_KEY_FUNCS: dict[SortField, Callable[[TextMaterialResult], Any]] = {
    SortField.TITLE: lambda m: m.title.casefold(),
    SortField.CATEGORY: _category_key,
    SortField.DATE_PUBLISHED: lambda m: ensure_utc(m.date_published),
}


def allowed_sort_fields() -> list[str]:
    return [f.value for f in SortField]


def parse_sort_key(clause: str) -> SortKey:
    """Parse one "field [asc|desc]" clause. Raises InvalidSortFieldException."""
    parts = clause.split()
    if not parts or len(parts) > 2:
        raise InvalidSortFieldException(clause, allowed_sort_fields())
    sort_field = _FIELD_ALIASES.get(parts[0].lower())
    if sort_field is None:
        raise InvalidSortFieldException(parts[0], allowed_sort_fields())
    direction = SortDirection.ASC
    if len(parts) == 2:
        try:
            direction = SortDirection(parts[1].lower())
        except ValueError as e:
            raise InvalidSortFieldException(clause, allowed_sort_fields()) from e
    return SortKey(field=sort_field, direction=direction)


def parse_order_by(order_by: str | None) -> tuple[SortKey, ...]:
    """Parse "title asc,category desc" into sort keys, primary key first.

    Empty clauses (e.g. a trailing comma) are skipped; None or "" yields ().
    """
    if not order_by:
        return ()
    return tuple(
        parse_sort_key(clause)
        for clause in (c.strip() for c in order_by.split(","))
        if clause
    )


def validate_sort_keys(keys: Sequence[SortKey]) -> None:
    """Raise InvalidSortFieldException if any key is outside the closed field set."""
    for key in keys:
        if not isinstance(key.field, SortField) or key.field not in _KEY_FUNCS:
            raise InvalidSortFieldException(str(key.field), allowed_sort_fields())
        if not isinstance(key.direction, SortDirection):
            raise InvalidSortFieldException(str(key.direction), allowed_sort_fields())


def sort_materials(
    materials: Sequence[TextMaterialResult],
    keys: Sequence[SortKey],
) -> list[TextMaterialResult]:
    """Return a new list ordered by keys (primary first), each with its own direction.

    Python's sort is stable, so sorting by the least significant key first
    and the primary key last yields a correct multi-key order; ties on all
    keys keep input order. With no keys the input order is returned.

    Raises:
        InvalidSortFieldException: If a key's field is outside the closed set.
    """
    validate_sort_keys(keys)
    ordered = list(materials)
    for key in reversed(keys):
        ordered.sort(
            key=_KEY_FUNCS[key.field],
            reverse=key.direction == SortDirection.DESC,
        )
    return ordered
