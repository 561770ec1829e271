"""Client roster schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class ClientCreate(BaseModel):
    """Schema for creating a client."""

    name: str = Field(..., max_length=200)
    phone: str = Field(default="", max_length=30)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Require a non-blank name."""
        v = v.strip()
        if not v:
            raise ValueError("Client name is required")
        return v

    @field_validator("phone")
    @classmethod
    def strip_phone(cls, v: str) -> str:
        return v.strip()


class ClientUpdate(BaseModel):
    """Schema for updating a client."""

    name: str | None = Field(None, max_length=200)
    phone: str | None = Field(None, max_length=30)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        """Reject blank names when provided."""
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Client name cannot be blank")
        return v

    @field_validator("phone")
    @classmethod
    def strip_phone(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else v


class ClientResponse(BaseModel):
    """Client response schema."""

    id: UUID
    name: str
    phone: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
