"""Service catalog schemas for request/response validation."""

from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

# Label fields tried, in order, when reading a service record
SERVICE_NAME_FIELDS = ("name", "title")


def resolve_service_name(record: Mapping[str, Any]) -> str:
    """
    Resolve the display name of a service record.

    Falls back through SERVICE_NAME_FIELDS and finally to the record id.
    """
    for field in SERVICE_NAME_FIELDS:
        value = record.get(field)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return str(record.get("id") or "").strip()


class ServiceBase(BaseModel):
    """Base schema for a catalog service."""

    name: str = Field(..., max_length=200)
    duration_minutes: int = Field(default=30, gt=0, le=480)
    price: Decimal = Field(default=Decimal("0"), ge=0, decimal_places=2)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Require a non-blank name."""
        v = v.strip()
        if not v:
            raise ValueError("Service name is required")
        return v


class ServiceCreate(ServiceBase):
    """Schema for creating a catalog service."""


class ServiceUpdate(BaseModel):
    """Schema for updating a catalog service."""

    name: str | None = Field(None, max_length=200)
    duration_minutes: int | None = Field(None, gt=0, le=480)
    price: Decimal | None = Field(None, ge=0, decimal_places=2)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        """Reject blank names when provided."""
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Service name cannot be blank")
        return v


class ServiceImportItem(BaseModel):
    """Loosely shaped service document from a previous data store."""

    id: str | None = Field(None, max_length=200)
    name: str | None = Field(None, max_length=200)
    title: str | None = Field(None, max_length=200)
    duration_minutes: int = Field(default=30, gt=0, le=480)
    price: Decimal = Field(default=Decimal("0"), ge=0)

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="after")
    def require_label(self) -> "ServiceImportItem":
        """At least one of name, title or id must be non-blank."""
        if not resolve_service_name(self.model_dump()):
            raise ValueError("Service needs a name, a title or an id")
        return self

    def to_create(self) -> ServiceCreate:
        """Build a canonical create payload using the name fallback chain."""
        return ServiceCreate(
            name=resolve_service_name(self.model_dump()),
            duration_minutes=self.duration_minutes,
            price=round(self.price, 2),
        )


class ServiceResponse(BaseModel):
    """Catalog service response schema."""

    id: UUID
    name: str
    duration_minutes: int
    price: Decimal
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

    @model_validator(mode="before")
    @classmethod
    def canonical_name(cls, data: Any) -> Any:
        """Collapse alternate label fields into ``name``."""
        if isinstance(data, Mapping):
            data = dict(data)
            data["name"] = resolve_service_name(data)
        return data

    @field_serializer("price", when_used="json")
    def serialize_decimal(self, value: Decimal) -> float:
        """Serialize Decimal to float for JSON."""
        return float(value)
