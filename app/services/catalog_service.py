"""Service catalog business logic."""

from uuid import UUID

import structlog

from app.config import settings
from app.core.exceptions import ServiceNotFoundException
from app.core.redis_client import CacheManager
from app.repositories.services import ServiceRepository
from app.schemas.services import ServiceCreate, ServiceImportItem, ServiceResponse, ServiceUpdate

logger = structlog.get_logger(__name__)


class CatalogService:
    """Service for managing the owner's service catalog."""

    def __init__(self, repository: ServiceRepository, cache: CacheManager | None = None):
        """Initialize service with repository and optional cache manager."""
        self.repository = repository
        self.cache = cache

    @staticmethod
    def _list_cache_key(owner_id: UUID) -> str:
        return f"catalog:{owner_id}"

    def _invalidate(self, owner_id: UUID) -> None:
        if self.cache:
            self.cache.delete(self._list_cache_key(owner_id))

    async def list_services(self, owner_id: UUID) -> list[ServiceResponse]:
        """List the catalog ordered by name (cached)."""
        if self.cache:
            cached = self.cache.get_json(self._list_cache_key(owner_id))
            if cached is not None:
                return [ServiceResponse.model_validate(item) for item in cached]

        rows = await self.repository.list_all(owner_id)
        result = [ServiceResponse.model_validate(row) for row in rows]

        if self.cache:
            self.cache.set_json(
                self._list_cache_key(owner_id),
                [item.model_dump(mode="json") for item in result],
                ttl=settings.catalog_cache_ttl,
            )

        return result

    async def find_service(self, owner_id: UUID, service_id: UUID) -> ServiceResponse | None:
        """Point lookup that returns None when the service does not exist."""
        row = await self.repository.get(owner_id, service_id)
        return ServiceResponse.model_validate(row) if row else None

    async def get_service(self, owner_id: UUID, service_id: UUID) -> ServiceResponse:
        """
        Get a service by id.

        Raises:
            ServiceNotFoundException: If the service does not exist
        """
        service = await self.find_service(owner_id, service_id)
        if service is None:
            raise ServiceNotFoundException()
        return service

    async def create_service(self, owner_id: UUID, data: ServiceCreate) -> ServiceResponse:
        """Add a service to the catalog."""
        row = await self.repository.create(owner_id, data.model_dump())
        self._invalidate(owner_id)

        logger.info("service_created", owner_id=str(owner_id), service_id=str(row["id"]))
        return ServiceResponse.model_validate(row)

    async def update_service(
        self, owner_id: UUID, service_id: UUID, data: ServiceUpdate
    ) -> ServiceResponse:
        """
        Update a service.

        Past appointments keep the name they were booked with.

        Raises:
            ServiceNotFoundException: If the service does not exist
        """
        values = data.model_dump(exclude_unset=True, exclude_none=True)
        if not values:
            return await self.get_service(owner_id, service_id)

        row = await self.repository.update(owner_id, service_id, values)
        if row is None:
            raise ServiceNotFoundException()
        self._invalidate(owner_id)

        return ServiceResponse.model_validate(row)

    async def delete_service(self, owner_id: UUID, service_id: UUID) -> None:
        """
        Delete a service.

        Raises:
            ServiceNotFoundException: If the service does not exist
        """
        if not await self.repository.delete(owner_id, service_id):
            raise ServiceNotFoundException()
        self._invalidate(owner_id)

        logger.info("service_deleted", owner_id=str(owner_id), service_id=str(service_id))

    async def import_services(
        self, owner_id: UUID, items: list[ServiceImportItem]
    ) -> list[ServiceResponse]:
        """
        Store loosely shaped service documents under a canonical name.

        The name is taken from ``name``, then ``title``, then the legacy id.
        """
        created = []
        for item in items:
            row = await self.repository.create(owner_id, item.to_create().model_dump())
            created.append(ServiceResponse.model_validate(row))
        self._invalidate(owner_id)

        logger.info("services_imported", owner_id=str(owner_id), count=len(created))
        return created
