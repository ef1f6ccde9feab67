"""Unit tests for the search/filter to where-clause translation."""

import pytest
from sqlalchemy.dialects import sqlite

from storefront.core.query_builder import FilterField, FilterOperator, SearchConfig, build_where
from storefront.domain import Order, Product


def _sql(clause) -> str:
    return str(clause.compile(dialect=sqlite.dialect(), compile_kwargs={"literal_binds": True}))


ORDER_CONFIG = SearchConfig(
    searchable_fields=("order_number", "customer_email"),
    filters={
        "status": FilterField(operator=FilterOperator.IN),
        "userId": FilterField(column="user_id"),
        "minTotal": FilterField(column="total_amount", operator=FilterOperator.GT, transform=int),
        "totalRange": FilterField(column="total_amount", operator=FilterOperator.RANGE),
    },
)


@pytest.mark.unit
class TestBuildWhere:
    def test_nothing_to_apply_returns_empty_list(self):
        assert build_where(Order, ORDER_CONFIG) == []
        assert build_where(Order, ORDER_CONFIG, search="", filters={"status": None, "userId": ""}) == []

    def test_unknown_filters_are_dropped(self):
        assert build_where(Order, ORDER_CONFIG, filters={"password": "x", "deleted_at": "y"}) == []

    def test_search_is_one_or_clause_over_searchable_fields(self):
        (clause,) = build_where(Order, ORDER_CONFIG, search="SO-10")
        sql = _sql(clause)
        assert "orders.order_number" in sql
        assert "orders.customer_email" in sql
        assert " OR " in sql
        assert "lower(" in sql

    def test_search_without_searchable_fields_is_ignored(self):
        assert build_where(Order, SearchConfig(), search="anything") == []

    def test_in_operator_splits_comma_separated_values(self):
        (clause,) = build_where(Order, ORDER_CONFIG, filters={"status": "pending_payment, confirmed"})
        sql = _sql(clause)
        assert "orders.status IN ('pending_payment', 'confirmed')" in sql

    def test_equals_uses_configured_column(self):
        (clause,) = build_where(Order, ORDER_CONFIG, filters={"userId": "user-01"})
        assert _sql(clause) == "orders.user_id = 'user-01'"

    def test_transform_runs_before_comparison(self):
        (clause,) = build_where(Order, ORDER_CONFIG, filters={"minTotal": "50"})
        assert _sql(clause) == "orders.total_amount > 50"

    def test_range_needs_two_values(self):
        (clause,) = build_where(Order, ORDER_CONFIG, filters={"totalRange": [10, 20]})
        assert _sql(clause) == "orders.total_amount >= 10 AND orders.total_amount <= 20"
        assert build_where(Order, ORDER_CONFIG, filters={"totalRange": [10]}) == []
        assert build_where(Order, ORDER_CONFIG, filters={"totalRange": "10-20"}) == []

    def test_contains_respects_case_sensitivity(self):
        config = SearchConfig(
            filters={
                "name": FilterField(operator=FilterOperator.CONTAINS),
                "slug": FilterField(operator=FilterOperator.CONTAINS, case_insensitive=True),
            }
        )
        name_clause, slug_clause = build_where(Product, config, filters={"name": "Shirt", "slug": "SHIRT"})
        assert "lower(" not in _sql(name_clause)
        assert "lower(" in _sql(slug_clause)

    def test_search_and_filters_combine(self):
        clauses = build_where(Order, ORDER_CONFIG, search="x", filters={"userId": "u", "status": "confirmed"})
        assert len(clauses) == 3
