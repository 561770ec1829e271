"""Tests for the client roster."""

from uuid import UUID, uuid4

import pytest
from httpx import AsyncClient

from app.core.exceptions import NotFoundException
from app.schemas.clients import ClientCreate, ClientUpdate
from app.services.client_service import ClientService


@pytest.mark.asyncio
async def test_search_matches_name_fragment(client_service: ClientService, owner_id: UUID):
    await client_service.create_client(owner_id, ClientCreate(name="Ana Souza", phone="1"))
    await client_service.create_client(owner_id, ClientCreate(name="Bia Lima", phone="2"))
    await client_service.create_client(owner_id, ClientCreate(name="Mariana", phone="3"))

    found = await client_service.list_clients(owner_id, search="ANA")
    everyone = await client_service.list_clients(owner_id, search="  ")

    assert [c.name for c in found] == ["Ana Souza", "Mariana"]
    assert [c.name for c in everyone] == ["Ana Souza", "Bia Lima", "Mariana"]


@pytest.mark.asyncio
async def test_update_client(client_service: ClientService, owner_id: UUID):
    created = await client_service.create_client(owner_id, ClientCreate(name="Ana", phone="1"))

    updated = await client_service.update_client(owner_id, created.id, ClientUpdate(phone=" 99 "))

    assert updated.name == "Ana"
    assert updated.phone == "99"


@pytest.mark.asyncio
async def test_recent_clients_are_newest_first(client_service: ClientService, owner_id: UUID):
    first = await client_service.create_client(owner_id, ClientCreate(name="Ana"))
    await client_service.create_client(owner_id, ClientCreate(name="Bia"))
    await client_service.update_client(owner_id, first.id, ClientUpdate(phone="5"))

    recent = await client_service.list_recent(owner_id, limit=1)

    assert [c.name for c in recent] == ["Ana"]


@pytest.mark.asyncio
async def test_missing_client(client_service: ClientService, owner_id: UUID):
    with pytest.raises(NotFoundException):
        await client_service.get_client(owner_id, uuid4())
    with pytest.raises(NotFoundException):
        await client_service.update_client(owner_id, uuid4(), ClientUpdate(name="X"))
    with pytest.raises(NotFoundException):
        await client_service.delete_client(owner_id, uuid4())


@pytest.mark.asyncio
async def test_client_endpoints(client: AsyncClient, auth_headers: dict) -> None:
    created = await client.post(
        "/api/v1/clients/", json={"name": "Ana", "phone": "1234"}, headers=auth_headers
    )
    assert created.status_code == 201
    client_id = created.json()["id"]

    searched = await client.get(
        "/api/v1/clients/", params={"search": "an"}, headers=auth_headers
    )
    assert [c["id"] for c in searched.json()] == [client_id]

    renamed = await client.put(
        f"/api/v1/clients/{client_id}", json={"name": "Ana Paula"}, headers=auth_headers
    )
    assert renamed.json()["name"] == "Ana Paula"

    deleted = await client.delete(f"/api/v1/clients/{client_id}", headers=auth_headers)
    assert deleted.status_code == 204

    missing = await client.get(f"/api/v1/clients/{client_id}", headers=auth_headers)
    assert missing.status_code == 404
