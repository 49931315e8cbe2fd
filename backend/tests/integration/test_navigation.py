"""Tests for the index and journal page routes."""

import pytest
from httpx import ASGITransport, AsyncClient


def _client(api) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=api), base_url="http://test")


async def _login(client: AsyncClient) -> None:
    await client.post("/api/v1/auth/login", json={"email": "jane@corp.de", "password": "p"})


@pytest.mark.asyncio
async def test_index_without_token_goes_to_login(api):
    async with _client(api) as client:
        response = await client.get("/")

    assert response.status_code == 307
    assert response.headers["location"] == "/auth/login"


@pytest.mark.asyncio
async def test_index_with_token_goes_to_default_journal(api):
    async with _client(api) as client:
        await _login(client)
        response = await client.get("/")

    assert response.status_code == 307
    assert response.headers["location"] == "/journal/Default"


@pytest.mark.asyncio
async def test_journal_requires_login(api):
    async with _client(api) as client:
        response = await client.get("/journal/customer/DefaultCustomer")

    assert response.status_code == 307
    assert response.headers["location"] == "/auth/login"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path,target",
    [
        ("/journal/Ghost", "/journal/Default"),
        ("/journal/customer/Ghost", "/journal/customer/DefaultCustomer"),
    ],
)
async def test_unknown_entity_redirects_to_default(api, path, target):
    async with _client(api) as client:
        await _login(client)
        response = await client.get(path)

    assert response.status_code == 307
    assert response.headers["location"] == target


@pytest.mark.asyncio
async def test_client_journal_page(api):
    async with _client(api) as client:
        await _login(client)
        await client.post("/api/v1/entities/client", json={"name": "Acme GmbH"})
        await client.post("/api/v1/entries/client/Acme GmbH", json={"content": "Angebot geschickt"})

        response = await client.get("/journal/Acme%20GmbH")

    assert response.status_code == 200
    page = response.json()
    assert page["category"] == "client"
    assert page["state"] == "ready"
    assert page["entity"] == "Acme GmbH"
    assert page["user"]["name"] == "jane"
    assert [e["content"] for e in page["entries"]] == ["Angebot geschickt"]
    assert page["clients"][1] == {
        "name": "Acme GmbH",
        "href": "/journal/Acme%20GmbH",
        "active": True,
        "deletable": True,
    }
    assert page["customers"] == [
        {
            "name": "DefaultCustomer",
            "href": "/journal/customer/DefaultCustomer",
            "active": False,
            "deletable": False,
        }
    ]


@pytest.mark.asyncio
async def test_customer_journal_page(api):
    async with _client(api) as client:
        await _login(client)
        response = await client.get("/journal/customer/DefaultCustomer")

    page = response.json()
    assert page["category"] == "customer"
    assert page["customers"][0]["active"] is True
    assert page["clients"][0]["active"] is False


@pytest.mark.asyncio
async def test_entity_name_with_slash(api):
    async with _client(api) as client:
        await _login(client)
        await client.post("/api/v1/entities/client", json={"name": "A/B"})
        sidebar = (await client.get("/journal/Default")).json()["clients"]
        assert sidebar[1]["href"] == "/journal/A%2FB"

        response = await client.get(sidebar[1]["href"])
        assert response.status_code == 200
        assert response.json()["entity"] == "A/B"

        response = await client.post("/api/v1/entries/client/A%2FB", json={"content": "notiert"})
        assert response.status_code == 201
        entries = (await client.get("/api/v1/entries/client/A%2FB")).json()
        assert [e["content"] for e in entries] == ["notiert"]

        response = await client.delete(
            "/api/v1/entities/client/A%2FB", params={"confirmed": True}
        )

    assert response.json()["outcome"] == "removed"
    assert response.json()["names"] == ["Default"]


@pytest.mark.asyncio
async def test_customer_name_with_slash(api):
    async with _client(api) as client:
        await _login(client)
        await client.post("/api/v1/entities/customer", json={"name": "Nord/Süd"})
        response = await client.get("/journal/customer/Nord%2FS%C3%BCd")

    assert response.status_code == 200
    assert response.json()["entity"] == "Nord/Süd"
    assert response.json()["category"] == "customer"
