"""Product Offers — tests for offer text and offer-field requirements."""

import pytest

from marketplace_admin.core.errors import RecordValidationError
from marketplace_admin.core.offers import (
    NO_OFFER_TEXT, resolve_offer_text, validate_offer_fields,
)


@pytest.mark.parametrize("offer_type,buy_x,get_y,expected", [
    ("bogo", None, None, "Buy 1 Get 1 Free!"),
    ("bxgy", 3, 1, "Buy 3 Get 1 Free!"),
    ("bxgy", None, "", "Buy X Get Y Free!"),
    ("bogof", None, None, "Buy 1 Get 1 Free (Different Product)!"),
    ("bxgyf", 2, 2, "Buy 2 Get 2 Free (Different Product)!"),
    ("bxgyf", "", 4, "Buy X Get 4 Free (Different Product)!"),
    ("none", 3, 1, NO_OFFER_TEXT),
    (None, None, None, NO_OFFER_TEXT),
    ("mystery", 1, 1, NO_OFFER_TEXT),
])
def test_resolve_offer_text(offer_type, buy_x, get_y, expected):
    assert resolve_offer_text(offer_type, buy_x, get_y) == expected


def test_no_offer_needs_nothing():
    validate_offer_fields("none")
    validate_offer_fields(None)


def test_bogo_needs_nothing_extra():
    validate_offer_fields("bogo")


def test_bxgy_requires_quantities():
    with pytest.raises(RecordValidationError) as exc:
        validate_offer_fields("bxgy", buy_x=2)
    assert exc.value.field == "buy_x"


def test_bogof_requires_free_product():
    with pytest.raises(RecordValidationError) as exc:
        validate_offer_fields("bogof")
    assert exc.value.field == "free_product_id"


def test_bxgyf_requires_quantities_and_free_product():
    with pytest.raises(RecordValidationError):
        validate_offer_fields("bxgyf", free_product_id="p1")
    with pytest.raises(RecordValidationError):
        validate_offer_fields("bxgyf", buy_x=2, get_y=1)
    validate_offer_fields("bxgyf", buy_x=2, get_y=1, free_product_id="p1")


def test_unknown_offer_type_is_rejected():
    with pytest.raises(RecordValidationError) as exc:
        validate_offer_fields("mystery")
    assert exc.value.field == "offer_type"
