"""
HTTP-level tests for the FastAPI application
"""

import pytest
from httpx import ASGITransport, AsyncClient

from jydb.api.app import create_app
from tests.documents import ADD_GROUP, FIND_GROUP


@pytest.fixture
def app(database):
    return create_app()


@pytest.mark.integration
@pytest.mark.asyncio
async def test_health(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_graphql_round_trip(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        created = await client.post(
            "/graphql",
            json={
                "query": ADD_GROUP,
                "variables": {
                    "name": "G1",
                    "participants": [{"name": "Ann", "age": 30}],
                    "animators": [{"name": "Bo", "conversations": ["hi"]}],
                },
            },
        )
        assert created.status_code == 200
        group_id = created.json()["data"]["addGroup"]["id"]

        found = await client.post(
            "/graphql", json={"query": FIND_GROUP, "variables": {"id": group_id}}
        )

    group = found.json()["data"]["findGroup"]
    assert group["participants"][0] == {
        "id": group["participants"][0]["id"],
        "name": "Ann",
        "age": 30,
    }
    assert group["animators"][0]["conversations"] == ["hi"]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_validation_error_payload(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post(
            "/graphql",
            json={
                "query": ADD_GROUP,
                "variables": {"name": "G", "participants": [], "animators": []},
            },
        )

    body = response.json()
    assert body["data"]["addGroup"] is None
    assert body["errors"][0]["extensions"]["code"] == "BAD_USER_INPUT"
    assert body["errors"][0]["extensions"]["invalidArgs"]["name"] == "G"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_request_id_header(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        generated = await client.get("/health")
        echoed = await client.get("/health", headers={"X-Request-ID": "req-123"})

    assert generated.headers["X-Request-ID"]
    assert echoed.headers["X-Request-ID"] == "req-123"
