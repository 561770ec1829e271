"""Authentication schemas."""

from pydantic import BaseModel, Field

from app.schemas.accounts import AccountResponse


class Token(BaseModel):
    """JWT token response schema."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class TokenRefresh(BaseModel):
    """Token refresh request schema."""

    refresh_token: str


class FirebaseAuthRequest(BaseModel):
    """Firebase ID token authentication request."""

    id_token: str = Field(..., description="Firebase ID token obtained by the web client")


class LoginResponse(BaseModel):
    """Login response with tokens and account info."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    account: AccountResponse
