"""Client roster business logic."""

from uuid import UUID

import structlog

from app.core.exceptions import NotFoundException
from app.repositories.clients import ClientRepository
from app.schemas.clients import ClientCreate, ClientResponse, ClientUpdate

logger = structlog.get_logger(__name__)


class ClientService:
    """Service for managing clients."""

    def __init__(self, repository: ClientRepository):
        """Initialize service with repository."""
        self.repository = repository

    async def list_clients(self, owner_id: UUID, search: str | None = None) -> list[ClientResponse]:
        """List clients by name, optionally filtered by a name fragment."""
        term = (search or "").strip()
        if term:
            rows = await self.repository.search(owner_id, term)
        else:
            rows = await self.repository.list_all(owner_id)
        return [ClientResponse.model_validate(row) for row in rows]

    async def list_recent(self, owner_id: UUID, limit: int = 5) -> list[ClientResponse]:
        rows = await self.repository.list_recent(owner_id, limit)
        return [ClientResponse.model_validate(row) for row in rows]

    async def get_client(self, owner_id: UUID, client_id: UUID) -> ClientResponse:
        """
        Get client by ID.

        Raises:
            NotFoundException: If client not found
        """
        row = await self.repository.get(owner_id, client_id)
        if row is None:
            raise NotFoundException("Client not found")
        return ClientResponse.model_validate(row)

    async def create_client(self, owner_id: UUID, data: ClientCreate) -> ClientResponse:
        row = await self.repository.create(owner_id, data.model_dump())
        logger.info("client_created", owner_id=str(owner_id), client_id=str(row["id"]))
        return ClientResponse.model_validate(row)

    async def update_client(
        self, owner_id: UUID, client_id: UUID, data: ClientUpdate
    ) -> ClientResponse:
        """
        Update a client.

        Raises:
            NotFoundException: If client not found
        """
        values = data.model_dump(exclude_unset=True, exclude_none=True)
        if not values:
            return await self.get_client(owner_id, client_id)

        row = await self.repository.update(owner_id, client_id, values)
        if row is None:
            raise NotFoundException("Client not found")
        return ClientResponse.model_validate(row)

    async def delete_client(self, owner_id: UUID, client_id: UUID) -> None:
        """
        Delete a client.

        Raises:
            NotFoundException: If client not found
        """
        if not await self.repository.delete(owner_id, client_id):
            raise NotFoundException("Client not found")
        logger.info("client_deleted", owner_id=str(owner_id), client_id=str(client_id))
