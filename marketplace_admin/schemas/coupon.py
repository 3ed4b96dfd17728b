"""Coupon Schemas — coupon create/update payloads.

Invariants:
    - discount > 0; min_order >= 0 (defaults to 0); max_discount and usage_limit positive when set
    - Window order (active_date <= expiry_date) is NOT enforced here: inverted
      windows are stored as given and simply never read as active
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

DiscountTypeLiteral = Literal["Percentage", "Fixed"]
CouponScopeLiteral = Literal["all", "veg", "nonveg"]


class CouponCreate(BaseModel):
    code: str = Field(min_length=1, max_length=40)
    discount_type: DiscountTypeLiteral
    discount: float = Field(gt=0)
    min_order: float = Field(0, ge=0)
    max_discount: float | None = Field(None, gt=0)
    active_date: datetime
    expiry_date: datetime
    usage_limit: int | None = Field(None, ge=1)
    main_category: CouponScopeLiteral = "all"
    sub_categories: list[str] = Field(default_factory=list)


class CouponUpdate(BaseModel):
    code: str | None = Field(None, min_length=1, max_length=40)
    discount_type: DiscountTypeLiteral | None = None
    discount: float | None = Field(None, gt=0)
    min_order: float | None = Field(None, ge=0)
    max_discount: float | None = Field(None, gt=0)
    active_date: datetime | None = None
    expiry_date: datetime | None = None
    usage_limit: int | None = Field(None, ge=1)
    is_active: bool | None = None
    main_category: CouponScopeLiteral | None = None
    sub_categories: list[str] | None = None
