import httpx
import pytest
from fastapi import FastAPI

from travelapp.errors import NotFoundError, register_error_handlers


@pytest.mark.parametrize("method,path,body", [
    ("POST", "/signin", {"account_email": "a@example.com", "account_password": "x"}),
    ("GET", "/profile/1", None),
    ("PUT", "/profile/1", {"account_name": "x"}),
    ("GET", "/qa_activity", None),
    ("GET", "/qa_results", None),
])
async def test_database_failure_returns_error_envelope(broken_db_client, method, path, body):
    resp = await broken_db_client.request(method, path, json=body)

    assert resp.status_code == 500
    assert resp.json()["success"] is False
    assert resp.json()["message"] == "Database error"
    assert "connection refused" in resp.json()["error"]


@pytest.fixture
async def crashing_client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("unexpected state")

    @app.get("/missing")
    async def missing():
        raise NotFoundError("Nothing here")

    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def test_unexpected_exception_still_renders_json(crashing_client):
    resp = await crashing_client.get("/boom")

    assert resp.status_code == 500
    assert resp.json() == {"success": False, "message": "Internal server error", "error": "unexpected state"}


async def test_app_error_keeps_its_status(crashing_client):
    resp = await crashing_client.get("/missing")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "Nothing here", "error": None}
