"""JWT helpers for API access and refresh tokens."""

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt

from app.config import settings

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


def _encode_token(data: dict[str, Any], token_type: str, expires_delta: timedelta) -> str:
    issued_at = datetime.now(UTC)
    to_encode = data.copy()
    to_encode.update(
        {
            "exp": issued_at + expires_delta,
            "iat": issued_at,
            "type": token_type,
        }
    )
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def _decode_token(token: str, token_type: str) -> dict[str, Any] | None:
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        return None

    if payload.get("type") != token_type:
        return None

    return payload


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a JWT access token.

    Args:
        data: Payload data to encode (``sub`` carries the account id)
        expires_delta: Optional expiration time delta

    Returns:
        Encoded JWT token
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    return _encode_token(data, ACCESS_TOKEN_TYPE, expires_delta)


def create_refresh_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a JWT refresh token.

    Args:
        data: Payload data to encode
        expires_delta: Optional expiration time delta

    Returns:
        Encoded JWT refresh token
    """
    if expires_delta is None:
        expires_delta = timedelta(days=settings.refresh_token_expire_days)
    return _encode_token(data, REFRESH_TOKEN_TYPE, expires_delta)


def decode_access_token(token: str) -> dict[str, Any] | None:
    """Decode an access token. Returns None if invalid, expired or of another type."""
    return _decode_token(token, ACCESS_TOKEN_TYPE)


def decode_refresh_token(token: str) -> dict[str, Any] | None:
    """Decode a refresh token. Returns None if invalid, expired or of another type."""
    return _decode_token(token, REFRESH_TOKEN_TYPE)
