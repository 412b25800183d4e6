"""Tests for column classification."""

from decimal import Decimal

import pytest

from textchart.core.classify import (
    find_first_non_numeric_column, find_first_numeric_column, is_number,
    numeric_series, to_number,
)
from textchart.core.models import Table


@pytest.mark.parametrize("value", [0, 1, -2.5, Decimal("1.25"), "42", " 3.5 ", "1e3", "-7"])
def test_is_number_true(value):
    assert is_number(value)


@pytest.mark.parametrize("value", [None, True, False, "", "abc", "12abc", [1], {"a": 1}])
def test_is_number_false(value):
    assert not is_number(value)


def test_to_number_parses_strings():
    assert to_number(" 12 ") == 12.0
    assert to_number("x") is None


def test_name_value_autoselect():
    table = Table({"name": ("a", "b", "c"), "value": (1, 2, 3)})
    assert find_first_numeric_column(table) == "value"
    assert find_first_non_numeric_column(table) == "name"


def test_column_order_decides():
    table = Table({"b": (1, 2), "a": (3, 4), "label": ("x", "y")})
    assert find_first_numeric_column(table) == "b"


def test_no_numeric_column():
    table = Table({"name": ("a", "b"), "mixed": ("c", 1)})
    assert find_first_numeric_column(table) is None


def test_no_non_numeric_column():
    table = Table({"x": (1, 2), "mixed": ("c", 1)})
    assert find_first_non_numeric_column(table) is None


def test_sampling_stops_after_ten_rows():
    values = tuple(range(10)) + ("oops",)
    table = Table({"n": values})
    assert find_first_numeric_column(table) == "n"


def test_non_numeric_within_first_ten_rows_disqualifies():
    values = tuple(range(9)) + ("oops", 10)
    table = Table({"n": values, "m": tuple(range(11))})
    assert find_first_numeric_column(table) == "m"


def test_short_table_is_sampled_fully():
    table = Table({"n": (1, 2, 3)})
    assert find_first_numeric_column(table) == "n"


def test_all_missing_column_is_non_numeric_only():
    table = Table({"empty": (None, None), "n": (1, 2)})
    assert find_first_numeric_column(table) == "n"
    assert find_first_non_numeric_column(table) == "empty"


def test_missing_values_allowed_in_label_column():
    table = Table({"n": (1, 2, 3), "label": ("a", None, "c")})
    assert find_first_non_numeric_column(table) == "label"


def test_missing_values_skipped_in_numeric_column():
    table = Table({"gappy": (1, None, 3), "full": (1, 2, 3)})
    assert find_first_numeric_column(table) == "gappy"


def test_zero_row_column_is_numeric():
    assert find_first_numeric_column(Table({"data": ()})) == "data"


def test_classification_is_deterministic():
    table = Table({"name": ("a", "b"), "value": (1, 2)})
    assert [find_first_numeric_column(table) for _ in range(3)] == ["value"] * 3


def test_numeric_series_coerces_missing_to_zero():
    assert numeric_series([1, None, "2.5", "n/a", float("nan"), Decimal("4")]) == [
        1.0, 0.0, 2.5, 0.0, 0.0, 4.0,
    ]


def test_int_beyond_float_range_is_a_number():
    assert is_number(10**400)
    assert to_number(-(10**400)) == float("-inf")


def test_numeric_series_zeroes_huge_ints():
    assert numeric_series([1, 10**400]) == [1.0, 0.0]


def test_huge_int_column_classified_numeric():
    table = Table({"n": (1, 10**400, 3)})
    assert find_first_numeric_column(table) == "n"
