"""Product Offers — descriptive offer text and offer-field requirements.

Invariants:
    - Offers are descriptive only: nothing here changes a price
    - bxgy and bxgyf require buy_x and get_y; bogof and bxgyf require free_product_id
    - resolve_offer_text never raises; unknown offer types read as "no offer"
"""

from marketplace_admin.core.domain_types import (
    CROSS_PRODUCT_OFFERS, OfferType, QUANTITY_OFFERS,
)
from marketplace_admin.core.errors import RecordValidationError

NO_OFFER_TEXT = "No active offer"


def _or_placeholder(value, placeholder: str) -> str:
    if value is None or str(value).strip() == "":
        return placeholder
    return str(value)


def resolve_offer_text(offer_type: str | None, buy_x=None, get_y=None) -> str:
    """Human-readable offer description."""
    x = _or_placeholder(buy_x, "X")
    y = _or_placeholder(get_y, "Y")
    if offer_type == OfferType.BOGO:
        return "Buy 1 Get 1 Free!"
    if offer_type == OfferType.BXGY:
        return f"Buy {x} Get {y} Free!"
    if offer_type == OfferType.BOGOF:
        return "Buy 1 Get 1 Free (Different Product)!"
    if offer_type == OfferType.BXGYF:
        return f"Buy {x} Get {y} Free (Different Product)!"
    return NO_OFFER_TEXT


def validate_offer_fields(
    offer_type: str | None, buy_x=None, get_y=None, free_product_id=None,
) -> None:
    """Raise RecordValidationError when offer-dependent fields are missing."""
    try:
        kind = OfferType(offer_type or OfferType.NONE)
    except ValueError:
        raise RecordValidationError(
            f"Unknown offer type '{offer_type}'", "offer_type",
        )
    if kind in QUANTITY_OFFERS and (not buy_x or not get_y):
        raise RecordValidationError(
            "Buy X and Get Y quantities are required for this offer", "buy_x",
        )
    if kind in CROSS_PRODUCT_OFFERS and not free_product_id:
        raise RecordValidationError(
            "A free product is required for this offer", "free_product_id",
        )
