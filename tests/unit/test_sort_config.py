"""
Unit tests for query parameter parsing into SortRequest.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

import pytest

from src.qdb.base import SortRequest
from src.quoteboard.pagination import (
    current_page_for,
    parse_int32,
    parse_sort_config,
)


def test_defaults_when_no_params() -> None:
    request = parse_sort_config({})

    assert request == SortRequest(
        by_rating=False, by_date=True, descending=True, page_size=10, offset=0
    )


@pytest.mark.parametrize(("page", "page_size"), [(1, 10), (2, 10), (7, 3), (100, 25)])
def test_page_maps_to_offset_and_back(page: int, page_size: int) -> None:
    request = parse_sort_config({"page": [str(page)], "count": [str(page_size)]})

    assert request.offset == (page - 1) * page_size
    assert current_page_for(request) == page


@pytest.mark.parametrize("page", ["0", "-1", "-250"])
def test_zero_or_negative_page_clamps_to_first_page(page: str) -> None:
    request = parse_sort_config({"page": [page], "count": ["5"]})

    assert request.offset == 0


@pytest.mark.parametrize("count", ["abc", "", "1.5", "99999999999", " 5"])
def test_unparsable_count_uses_default(count: str) -> None:
    assert parse_sort_config({"count": [count]}).page_size == 10


@pytest.mark.parametrize("page", ["abc", "", "2.0", "two"])
def test_unparsable_page_uses_first_offset(page: str) -> None:
    assert parse_sort_config({"page": [page], "count": ["4"]}).offset == 0


def test_parsed_count_is_not_clamped() -> None:
    assert parse_sort_config({"count": ["0"]}).page_size == 0
    assert parse_sort_config({"count": ["-3"]}).page_size == -3
    assert parse_sort_config({"count": ["5000"]}).page_size == 5000


def test_fields_fall_back_independently() -> None:
    request = parse_sort_config(
        {"count": ["bogus"], "page": ["3"], "sort_by": ["rating"], "sort_order": ["up"]}
    )

    assert request.page_size == 10
    assert request.offset == 20
    assert request.by_rating is True
    assert request.descending is False


def test_sort_by_rating() -> None:
    request = parse_sort_config({"sort_by": ["rating"]})

    assert request.by_rating is True
    assert request.by_date is False


@pytest.mark.parametrize("value", ["date", "RATING", "", "votes"])
def test_other_sort_by_keeps_date_default(value: str) -> None:
    request = parse_sort_config({"sort_by": [value]})

    assert request.by_rating is False
    assert request.by_date is True


def test_sort_order_mapping() -> None:
    assert parse_sort_config({"sort_order": ["down"]}).descending is True
    assert parse_sort_config({"sort_order": ["up"]}).descending is False
    assert parse_sort_config({"sort_order": ["sideways"]}).descending is False
    assert parse_sort_config({"sort_order": [""]}).descending is False
    assert parse_sort_config({}).descending is True


def test_only_first_value_is_used() -> None:
    request = parse_sort_config({"sort_by": ["date", "rating"], "count": ["3", "50"]})

    assert request.by_date is True
    assert request.page_size == 3


def test_parse_int32_bounds() -> None:
    assert parse_int32("2147483647") == 2147483647
    assert parse_int32("-2147483648") == -2147483648
    assert parse_int32("+12") == 12
    assert parse_int32("2147483648") is None
    assert parse_int32(None) is None


def test_current_page_with_non_positive_page_size() -> None:
    assert current_page_for(SortRequest(page_size=0, offset=0)) == 1
    assert current_page_for(SortRequest(page_size=-5, offset=10)) == 1
