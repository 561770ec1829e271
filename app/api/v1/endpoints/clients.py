"""Client endpoints."""

from uuid import UUID

from fastapi import APIRouter, Query, status

from app.dependencies import ClientServiceDep, CurrentAccountId
from app.schemas.clients import ClientCreate, ClientResponse, ClientUpdate

router = APIRouter()


@router.get(
    "/",
    response_model=list[ClientResponse],
    status_code=status.HTTP_200_OK,
    tags=["Clients"],
    summary="List clients",
)
async def list_clients(
    account_id: CurrentAccountId,
    clients: ClientServiceDep,
    search: str | None = Query(None, max_length=200, description="Name fragment"),
) -> list[ClientResponse]:
    """List clients ordered by name, optionally filtered by name."""
    return await clients.list_clients(account_id, search)


@router.post(
    "/",
    response_model=ClientResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Clients"],
    summary="Create client",
)
async def create_client(
    data: ClientCreate,
    account_id: CurrentAccountId,
    clients: ClientServiceDep,
) -> ClientResponse:
    return await clients.create_client(account_id, data)


@router.get(
    "/{client_id}",
    response_model=ClientResponse,
    status_code=status.HTTP_200_OK,
    tags=["Clients"],
    summary="Get client by ID",
)
async def get_client(
    client_id: UUID,
    account_id: CurrentAccountId,
    clients: ClientServiceDep,
) -> ClientResponse:
    return await clients.get_client(account_id, client_id)


@router.put(
    "/{client_id}",
    response_model=ClientResponse,
    status_code=status.HTTP_200_OK,
    tags=["Clients"],
    summary="Update client",
)
async def update_client(
    client_id: UUID,
    data: ClientUpdate,
    account_id: CurrentAccountId,
    clients: ClientServiceDep,
) -> ClientResponse:
    return await clients.update_client(account_id, client_id, data)


@router.delete(
    "/{client_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["Clients"],
    summary="Delete client",
)
async def delete_client(
    client_id: UUID,
    account_id: CurrentAccountId,
    clients: ClientServiceDep,
) -> None:
    await clients.delete_client(account_id, client_id)
