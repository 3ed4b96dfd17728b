"""Product Pricing — tests for selling price checks and discount amount."""

import pytest

from marketplace_admin.core.errors import RecordValidationError
from marketplace_admin.core.pricing import discounted_amount, resolve_selling_price


def test_missing_selling_price_means_original():
    assert resolve_selling_price(200, None) == 200.0


def test_selling_price_below_original_is_kept():
    assert resolve_selling_price(200, 150) == 150.0


def test_selling_price_equal_to_original_is_allowed():
    assert resolve_selling_price(99.5, 99.5) == 99.5


def test_selling_price_above_original_is_rejected():
    with pytest.raises(RecordValidationError) as exc:
        resolve_selling_price(100, 120)
    assert exc.value.field == "selling_price"


def test_negative_prices_are_rejected():
    with pytest.raises(RecordValidationError):
        resolve_selling_price(-1, None)
    with pytest.raises(RecordValidationError):
        resolve_selling_price(10, -1)


def test_discounted_amount_never_negative():
    assert discounted_amount(200, 150) == 50.0
    assert discounted_amount(100, 100) == 0.0
    assert discounted_amount(100, 120) == 0.0
