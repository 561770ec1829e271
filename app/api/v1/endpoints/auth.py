"""Authentication endpoints."""

from fastapi import APIRouter, status

from app.dependencies import AuthServiceDep
from app.schemas.accounts import AccountResponse
from app.schemas.auth import FirebaseAuthRequest, LoginResponse, Token, TokenRefresh

router = APIRouter()


@router.post(
    "/firebase/verify",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
    tags=["Authentication"],
    summary="Firebase ID token verification",
)
async def firebase_verify(
    request: FirebaseAuthRequest,
    auth_service: AuthServiceDep,
) -> LoginResponse:
    """
    Exchange a Firebase ID token for API tokens.

    The web client signs in with Firebase and sends the resulting ID token.
    The account is created on first login.

    Returns:
        Access token, refresh token and account profile
    """
    firebase_token_data = await auth_service.verify_firebase_id_token(request.id_token)
    account, tokens = await auth_service.handle_firebase_login(firebase_token_data)

    return LoginResponse(
        access_token=tokens.access_token,
        refresh_token=tokens.refresh_token,
        token_type=tokens.token_type,
        account=AccountResponse.model_validate(account),
    )


@router.post(
    "/refresh",
    response_model=Token,
    status_code=status.HTTP_200_OK,
    tags=["Authentication"],
    summary="Refresh access token",
)
async def refresh_token(request: TokenRefresh, auth_service: AuthServiceDep) -> Token:
    """Exchange a refresh token for a new token pair."""
    return await auth_service.refresh_access_token(request.refresh_token)


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["Authentication"],
    summary="Logout and revoke tokens",
)
async def logout(request: TokenRefresh, auth_service: AuthServiceDep) -> None:
    """Revoke a refresh token."""
    auth_service.revoke_token(request.refresh_token)
