"""Account schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class AccountCreate(BaseModel):
    """Schema for creating an account from a verified Firebase identity."""

    firebase_uid: str
    email: str | None = None
    display_name: str | None = None
    photo_url: str | None = None


class AccountResponse(BaseModel):
    """Account response schema."""

    id: UUID
    email: str | None = None
    display_name: str | None = None
    photo_url: str | None = None
    is_active: bool = True
    created_at: datetime
    last_login_at: datetime | None = None

    model_config = {"from_attributes": True}
