"""Vendor Schemas — moderation actions and the vendor's own account profile."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

VendorAction = Literal["approve", "activate", "suspend", "reject", "delete"]


class VendorStatusUpdate(BaseModel):
    action: VendorAction


class VendorLocation(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    full_address: str | None = Field(None, max_length=500)


class VendorAccountUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=120)
    restaurant_name: str | None = Field(None, min_length=1, max_length=120)
    email: str | None = Field(None, min_length=3, max_length=254)
    phone: str | None = Field(None, max_length=30)
    address: str | None = Field(None, max_length=500)
    location: VendorLocation | None = None

    @field_validator("name", "restaurant_name", "email")
    @classmethod
    def not_blank(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v

    @field_validator("email")
    @classmethod
    def looks_like_email(cls, v: str | None) -> str | None:
        if v is not None and "@" not in v:
            raise ValueError("must be an email address")
        return v

    @field_validator("phone", "address")
    @classmethod
    def strip_optional(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else v
