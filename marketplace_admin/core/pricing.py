"""Product Pricing — write-time price checks.

Invariants:
    - selling_price <= original_price, both non-negative
    - A missing selling price means "sell at original price"
    - discounted_amount is never negative
"""

from marketplace_admin.core.errors import RecordValidationError


def resolve_selling_price(original_price: float, selling_price: float | None) -> float:
    """Validate prices and return the effective selling price."""
    if original_price is None or original_price < 0:
        raise RecordValidationError(
            "Original price must be zero or more", "original_price",
        )
    if selling_price is None:
        return float(original_price)
    if selling_price < 0:
        raise RecordValidationError(
            "Selling price must be zero or more", "selling_price",
        )
    if selling_price > original_price:
        raise RecordValidationError(
            "Selling price cannot be greater than original price", "selling_price",
        )
    return float(selling_price)


def discounted_amount(original_price: float, selling_price: float) -> float:
    return max(0.0, float(original_price) - float(selling_price))
