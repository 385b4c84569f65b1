"""
Roster API: List Query Parsing Tests
======================================

What:  ListQuery.from_params and its helpers.
Why:   The list endpoint never rejects bad page/limit/sortBy/order values;
       each falls back to its default, and only whitelisted columns reach
       ORDER BY.
"""

import pytest

from roster.schemas.common import (
    ListMeta,
    ListQuery,
    SortField,
    SortOrder,
    parse_populate,
    parse_positive_int,
)


class TestParsePositiveInt:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("3", 3),
            (" 7", 7),
            ("12abc", 12),
            ("2.9", 2),
            ("abc", 10),
            ("", 10),
            (None, 10),
            ("0", 10),
            ("-4", 10),
            ("0003", 3),
            ("2147483647", 2147483647),
            ("2147483648", 10),
            ("99999999999999999999", 10),
            pytest.param("9" * 5000, 10, id="thousands-of-digits"),
        ],
    )
    def test_parse(self, raw, expected):
        assert parse_positive_int(raw, 10) == expected


class TestParsePopulate:

    def test_missing_populate_is_empty(self):
        assert parse_populate(None) == frozenset()

    def test_comma_separated_names(self):
        assert parse_populate("Course, Extra,,") == frozenset({"Course", "Extra"})


class TestListQuery:

    def test_defaults(self):
        """No parameters → page 1, limit 10, sortBy id, ASC, no joins."""
        query = ListQuery.from_params()
        assert query.page == 1
        assert query.limit == 10
        assert query.sort_by is SortField.ID
        assert query.order is SortOrder.ASC
        assert query.populate_courses is False
        assert query.offset == 0

    def test_default_limit_comes_from_caller(self):
        assert ListQuery.from_params(limit="junk", default_limit=25).limit == 25

    def test_offset_skips_previous_pages(self):
        query = ListQuery.from_params(page="3", limit="4")
        assert query.offset == 8

    def test_sort_by_maps_to_model_attribute(self):
        query = ListQuery.from_params(sort_by="createdAt")
        assert query.sort_by is SortField.CREATED_AT
        assert query.sort_by.attribute == "created_at"

    def test_unknown_sort_column_falls_back_to_id(self):
        """A column name outside the whitelist is never passed through."""
        query = ListQuery.from_params(sort_by="name; DROP TABLE students")
        assert query.sort_by is SortField.ID

    def test_order_is_case_insensitive(self):
        assert ListQuery.from_params(order="desc").order is SortOrder.DESC

    def test_unknown_order_falls_back_to_asc(self):
        assert ListQuery.from_params(order="sideways").order is SortOrder.ASC

    def test_populate_course(self):
        assert ListQuery.from_params(populate="Course").populate_courses is True

    def test_populate_is_case_sensitive(self):
        assert ListQuery.from_params(populate="course").populate_courses is False


class TestListMeta:

    def test_total_pages_rounds_up(self):
        meta = ListMeta.build(5, ListQuery(page=1, limit=2))
        assert meta.total_pages == 3

    def test_empty_table_has_zero_pages(self):
        meta = ListMeta.build(0, ListQuery())
        assert meta.total_pages == 0

    def test_serialized_with_camel_case_keys(self):
        meta = ListMeta.build(4, ListQuery(page=2, limit=2))
        assert meta.model_dump(by_alias=True) == {
            "totalItems": 4,
            "page": 2,
            "totalPages": 2,
        }
