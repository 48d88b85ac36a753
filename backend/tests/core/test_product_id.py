"""Tests for parse_product_id — pure parsing of the raw {id} path segment."""

import pytest

from product_api.core.domain_types import MAX_PRODUCT_ID
from product_api.core.errors import InvalidParameterError
from product_api.core.product_id import parse_product_id


def test_parses_decimal_digits():
    assert parse_product_id("1") == 1
    assert parse_product_id("0") == 0
    assert parse_product_id("007") == 7


def test_accepts_largest_storable_id():
    assert parse_product_id(str(MAX_PRODUCT_ID)) == MAX_PRODUCT_ID


@pytest.mark.parametrize("raw", [
    "", "abc", "testabc", "-1", "+1", " 1", "1 ", "1.0", "1e3", "0x10", "١٢",
])
def test_rejects_non_digit_segments(raw):
    with pytest.raises(InvalidParameterError) as exc_info:
        parse_product_id(raw)
    assert exc_info.value.value == raw
    assert exc_info.value.http_status == 400


def test_rejects_id_beyond_column_range():
    with pytest.raises(InvalidParameterError):
        parse_product_id(str(MAX_PRODUCT_ID + 1))


def test_error_names_the_parameter():
    with pytest.raises(InvalidParameterError) as exc_info:
        parse_product_id("abc", parameter="product_id")
    assert exc_info.value.parameter == "product_id"
    assert "product_id" in exc_info.value.message
