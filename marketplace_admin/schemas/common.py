"""Shared Schemas — image payloads and status patches used by several screens."""

from pydantic import Base64Bytes, BaseModel, Field, field_validator


class ImageUpload(BaseModel):
    """Image sent inline with a create/update request."""
    filename: str = Field(min_length=1, max_length=200)
    content: Base64Bytes

    @field_validator("filename")
    @classmethod
    def strip_directories(cls, v: str) -> str:
        name = v.replace("\\", "/").rsplit("/", 1)[-1].strip()
        if not name or name in (".", ".."):
            raise ValueError("filename must name a file")
        return name


class StatusUpdate(BaseModel):
    status: str = Field(min_length=1, max_length=30)
