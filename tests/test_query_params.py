from __future__ import annotations

import pytest

from src.app_catalog.domain.errors import InvalidParameterError
from src.app_catalog.services.query_params import (
    normalize_limit,
    normalize_list_params,
    normalize_order,
    normalize_skip,
    normalize_sort,
    parse_int,
)


class TestParseInt:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("10", 10), (" 7 ", 7), ("-3", -3), ("+4", 4), ("0", 0)],
    )
    def test_parses_integer_literals(self, raw, expected):
        assert parse_int(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "abc", "1.5", "10abc", "  "])
    def test_returns_none_for_non_integers(self, raw):
        assert parse_int(raw) is None


class TestLimit:
    def test_absent_limit_is_unbounded(self):
        assert normalize_limit(None) is None

    def test_non_numeric_limit_is_unbounded(self):
        assert normalize_limit("ten") is None

    def test_zero_and_negative_limit_are_unbounded(self):
        assert normalize_limit("0") is None
        assert normalize_limit("-5") is None

    def test_max_limit_clamps_large_and_absent_limits(self):
        assert normalize_limit("500", max_limit=100) == 100
        assert normalize_limit(None, max_limit=100) == 100
        assert normalize_limit("20", max_limit=100) == 20


class TestSkip:
    def test_defaults_to_zero(self):
        assert normalize_skip(None) == 0
        assert normalize_skip("junk") == 0

    def test_negative_is_clamped(self):
        assert normalize_skip("-10") == 0

    def test_positive_is_kept(self):
        assert normalize_skip("20") == 20


class TestSortAndOrder:
    def test_sort_defaults_to_size(self):
        assert normalize_sort(None) == "size"
        assert normalize_sort("") == "size"

    @pytest.mark.parametrize("field", ["rating", "size", "downloads"])
    def test_allow_listed_fields_are_accepted(self, field):
        assert normalize_sort(field) == field

    def test_unknown_sort_field_is_rejected_every_time(self):
        for _ in range(3):
            with pytest.raises(InvalidParameterError) as exc_info:
                normalize_sort("unknownfield")
            assert exc_info.value.parameter == "sort"
            assert exc_info.value.value == "unknownfield"

    def test_sort_is_case_sensitive(self):
        with pytest.raises(InvalidParameterError):
            normalize_sort("Size")

    @pytest.mark.parametrize(("raw", "expected"), [("asc", "asc"), ("desc", "desc"), (None, "desc"), ("ASC", "desc"), ("up", "desc")])
    def test_order_is_a_two_way_choice(self, raw, expected):
        assert normalize_order(raw) == expected


def test_normalize_list_params_applies_all_defaults():
    query = normalize_list_params({})

    assert query.limit is None
    assert query.skip == 0
    assert query.sort == "size"
    assert query.order == "desc"
    assert query.search == ""


def test_normalize_list_params_reads_every_field():
    query = normalize_list_params(
        {"limit": "10", "skip": "20", "sort": "rating", "order": "asc", "search": "Calc"}
    )

    assert query.limit == 10
    assert query.skip == 20
    assert query.sort == "rating"
    assert query.direction == 1
    assert query.search == "Calc"


def test_normalize_list_params_uses_configured_default_sort():
    query = normalize_list_params({"sort": None}, default_sort="downloads")
    assert query.sort == "downloads"


def test_normalize_list_params_rejects_unknown_sort_with_empty_search():
    with pytest.raises(InvalidParameterError):
        normalize_list_params({"search": "", "sort": "unknownfield"})


class TestOutOfRangeIntegers:
    def test_parse_int_clamps_to_int64(self):
        assert parse_int("100000000000000000000") == 2**63 - 1
        assert parse_int("-100000000000000000000") == -(2**63)

    def test_huge_skip_and_limit_stay_encodable(self):
        query = normalize_list_params({"skip": "100000000000000000000", "limit": "100000000000000000000"})

        assert query.skip == 2**63 - 1
        assert query.limit == 2**63 - 1

    def test_huge_negative_values_fall_back_to_defaults(self):
        query = normalize_list_params({"skip": "-100000000000000000000", "limit": "-100000000000000000000"})

        assert query.skip == 0
        assert query.limit is None
