"""Translate `?search=` and allow-listed filters into SQLAlchemy where-clauses.

The result is the opaque `where` value list endpoints hand to `paginate`.
Filters that are not declared in the `SearchConfig` are dropped.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

from sqlalchemy import and_, or_
from sqlalchemy.sql.elements import ColumnElement


class FilterOperator(str, enum.Enum):
    EQUALS = "equals"
    CONTAINS = "contains"
    IN = "in"
    GT = "gt"
    LT = "lt"
    GTE = "gte"
    LTE = "lte"
    RANGE = "range"


@dataclass(frozen=True)
class FilterField:
    """How a single request filter maps onto a model column."""

    column: Optional[str] = None  # defaults to the filter key
    operator: FilterOperator = FilterOperator.EQUALS
    case_insensitive: bool = False
    transform: Optional[Callable[[Any], Any]] = None


@dataclass(frozen=True)
class SearchConfig:
    searchable_fields: Sequence[str] = ()
    filters: Mapping[str, FilterField] = field(default_factory=dict)


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return [value]


def _filter_clause(column: Any, conf: FilterField, value: Any) -> Optional[ColumnElement[bool]]:
    op = conf.operator
    if op is FilterOperator.CONTAINS:
        return column.icontains(value) if conf.case_insensitive else column.contains(value)
    if op is FilterOperator.IN:
        return column.in_(_as_list(value))
    if op is FilterOperator.GT:
        return column > value
    if op is FilterOperator.LT:
        return column < value
    if op is FilterOperator.GTE:
        return column >= value
    if op is FilterOperator.LTE:
        return column <= value
    if op is FilterOperator.RANGE:
        # [low, high]; any other shape is ignored
        if isinstance(value, (list, tuple)) and len(value) == 2:
            low, high = value
            return and_(column >= low, column <= high)
        return None
    return column == value


def build_where(
    model: type,
    config: SearchConfig,
    *,
    search: Optional[str] = None,
    filters: Optional[Mapping[str, Any]] = None,
) -> list[ColumnElement[bool]]:
    """Return AND-ed conditions for `model` (an empty list means no filtering)."""
    conditions: list[ColumnElement[bool]] = []

    if search and config.searchable_fields:
        conditions.append(
            or_(*(getattr(model, name).icontains(search) for name in config.searchable_fields))
        )

    for key, value in (filters or {}).items():
        if value is None or value == "":
            continue
        conf = config.filters.get(key)
        if conf is None:
            continue
        if conf.transform is not None:
            value = conf.transform(value)
        clause = _filter_clause(getattr(model, conf.column or key), conf, value)
        if clause is not None:
            conditions.append(clause)

    return conditions
