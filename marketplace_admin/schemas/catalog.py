"""Catalog Schemas — categories, category sliders, and products.

Invariants:
    - Names and titles are stripped and non-empty
    - Update schemas carry only the fields the caller sent (model_dump(exclude_unset=True))
    - Product unit "any" requires custom_unit
    - Prices are non-negative; selling <= original is checked in core/pricing.py
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Literal

from marketplace_admin.core.domain_types import DEFAULT_PRIORITY
from marketplace_admin.schemas.common import ImageUpload

FoodTypeLiteral = Literal["veg", "non-veg"]
CategoryStatusLiteral = Literal["active", "inactive", "pending", "approved"]
SliderStatusLiteral = Literal["active", "inactive"]
ProductStatusLiteral = Literal["available", "unavailable"]
OfferTypeLiteral = Literal["none", "bogo", "bxgy", "bogof", "bxgyf"]


def _strip_required(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("cannot be empty or whitespace")
    return v


# --- Categories ----------------------------------------------------------------

class CategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=120)
    parent_id: str | None = None
    food_type: FoodTypeLiteral | None = None
    is_last: bool = False
    image: ImageUpload | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return _strip_required(v)


class CategoryUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=120)
    food_type: FoodTypeLiteral | None = None
    status: CategoryStatusLiteral | None = None
    is_active: bool | None = None
    image: ImageUpload | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        return _strip_required(v) if v is not None else v


# --- Category sliders ----------------------------------------------------------

class SliderCreate(BaseModel):
    name: str = Field(min_length=1, max_length=120)
    category_id: str = Field(min_length=1)
    priority: int = Field(DEFAULT_PRIORITY, ge=0, le=10)
    status: SliderStatusLiteral = "active"
    image: ImageUpload

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return _strip_required(v)


class SliderUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=120)
    category_id: str | None = None
    priority: int | None = Field(None, ge=0, le=10)
    status: SliderStatusLiteral | None = None
    image: ImageUpload | None = None


# --- Products ------------------------------------------------------------------

class ProductCreate(BaseModel):
    """Product creation — offer and pricing rules are enforced by the service."""
    title: str = Field(min_length=1, max_length=200)
    description: str = Field("", max_length=5000)
    category_id: str = Field(min_length=1)
    sub_category_id: str | None = None
    nested_sub_category_id: str | None = None
    original_price: float = Field(ge=0)
    selling_price: float | None = Field(None, ge=0)
    food_type: FoodTypeLiteral = "veg"
    size: str = ""
    unit: str = ""
    custom_unit: str | None = None
    quantity: float | None = Field(None, ge=0)
    priority: int = Field(DEFAULT_PRIORITY, ge=0)
    status: ProductStatusLiteral = "available"
    offer_type: OfferTypeLiteral = "none"
    buy_x: int | None = Field(None, ge=1)
    get_y: int | None = Field(None, ge=1)
    free_product_id: str | None = None
    max_quantity: int = Field(0, ge=0)
    offer_description: str | None = None
    owner_id: str | None = None
    image: ImageUpload

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_required(v)

    @model_validator(mode="after")
    def validate_custom_unit(self):
        if self.unit == "any" and not (self.custom_unit or "").strip():
            raise ValueError('custom_unit is required when unit is "any"')
        return self


class ProductUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=5000)
    original_price: float | None = Field(None, ge=0)
    selling_price: float | None = Field(None, ge=0)
    size: str | None = None
    unit: str | None = None
    quantity: float | None = Field(None, ge=0)
    priority: int | None = Field(None, ge=0)
    status: ProductStatusLiteral | None = None
    offer_type: OfferTypeLiteral | None = None
    buy_x: int | None = Field(None, ge=1)
    get_y: int | None = Field(None, ge=1)
    free_product_id: str | None = None
    max_quantity: int | None = Field(None, ge=0)
    offer_description: str | None = None
    image: ImageUpload | None = None
