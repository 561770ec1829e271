"""Account endpoints."""

from fastapi import APIRouter, status

from app.dependencies import CurrentAccount
from app.schemas.accounts import AccountResponse

router = APIRouter()


@router.get(
    "/me",
    response_model=AccountResponse,
    status_code=status.HTTP_200_OK,
    tags=["Accounts"],
    summary="Get current account",
)
async def get_current_account_profile(current_account: CurrentAccount) -> AccountResponse:
    """Get the profile of the authenticated account."""
    return AccountResponse.model_validate(current_account)
