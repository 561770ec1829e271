"""Service catalog endpoints."""

from uuid import UUID

from fastapi import APIRouter, status

from app.dependencies import CatalogServiceDep, CurrentAccountId
from app.schemas.services import ServiceCreate, ServiceImportItem, ServiceResponse, ServiceUpdate

router = APIRouter()


@router.get(
    "/",
    response_model=list[ServiceResponse],
    status_code=status.HTTP_200_OK,
    tags=["Services"],
    summary="List services",
)
async def list_services(
    account_id: CurrentAccountId,
    catalog: CatalogServiceDep,
) -> list[ServiceResponse]:
    """List the service catalog ordered by name."""
    return await catalog.list_services(account_id)


@router.post(
    "/",
    response_model=ServiceResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Services"],
    summary="Create service",
)
async def create_service(
    data: ServiceCreate,
    account_id: CurrentAccountId,
    catalog: CatalogServiceDep,
) -> ServiceResponse:
    return await catalog.create_service(account_id, data)


@router.post(
    "/import",
    response_model=list[ServiceResponse],
    status_code=status.HTTP_201_CREATED,
    tags=["Services"],
    summary="Import legacy services",
)
async def import_services(
    items: list[ServiceImportItem],
    account_id: CurrentAccountId,
    catalog: CatalogServiceDep,
) -> list[ServiceResponse]:
    """
    Import service documents from a previous data store.

    The label may be stored under ``name`` or ``title``; documents without
    either are named after their legacy ``id``.
    """
    return await catalog.import_services(account_id, items)


@router.get(
    "/{service_id}",
    response_model=ServiceResponse,
    status_code=status.HTTP_200_OK,
    tags=["Services"],
    summary="Get service by ID",
)
async def get_service(
    service_id: UUID,
    account_id: CurrentAccountId,
    catalog: CatalogServiceDep,
) -> ServiceResponse:
    return await catalog.get_service(account_id, service_id)


@router.put(
    "/{service_id}",
    response_model=ServiceResponse,
    status_code=status.HTTP_200_OK,
    tags=["Services"],
    summary="Update service",
)
async def update_service(
    service_id: UUID,
    data: ServiceUpdate,
    account_id: CurrentAccountId,
    catalog: CatalogServiceDep,
) -> ServiceResponse:
    """Update a service. Existing appointments keep their booked service name."""
    return await catalog.update_service(account_id, service_id, data)


@router.delete(
    "/{service_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["Services"],
    summary="Delete service",
)
async def delete_service(
    service_id: UUID,
    account_id: CurrentAccountId,
    catalog: CatalogServiceDep,
) -> None:
    await catalog.delete_service(account_id, service_id)
