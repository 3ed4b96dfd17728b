"""Notification Schemas — broadcast payloads."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from marketplace_admin.schemas.common import ImageUpload


class NotificationCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    message: str = Field(min_length=1, max_length=2000)
    type: str = Field("general", max_length=50)
    priority: Literal["low", "medium", "high", "urgent"] = "medium"
    target_audience: Literal["all", "customers_only", "vendors_only"] = "all"
    expiry_date: datetime | None = None
    is_active: bool = True
    image: ImageUpload | None = None

    @field_validator("title", "message")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v
