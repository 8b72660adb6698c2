import httpx
import pytest

from moverhub.config import Settings
from moverhub.entrypoints.fastapi_app import create_app
from moverhub.service_layer.unit_of_work import InMemoryUnitOfWork


@pytest.mark.asyncio
async def test_health(client):
    r = await client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_debug_config_reflects_app_settings(client):
    r = await client.get("/debug/config")
    cfg = r.json()
    assert cfg["SEED_DEMO"] is False
    assert cfg["EMPTY_LIST_IS_ERROR"] is True
    assert cfg["API_KEY_SET"] is False


@pytest.mark.asyncio
async def test_debug_config_requires_key_when_configured():
    app = create_app(InMemoryUnitOfWork(), app_settings=Settings(API_KEY="s3cret-key"), seed=False)

    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as c:
        r = await c.get("/debug/config")
        assert r.status_code == 401

        r = await c.get("/debug/config", headers={"X-API-Key": "wrong"})
        assert r.status_code == 401

        r = await c.get("/debug/config", headers={"X-API-Key": "s3cret-key"})
        assert r.status_code == 200
        assert r.json()["API_KEY_SET"] is True

        # mover routes stay open
        r = await c.get("/health")
        assert r.status_code == 200
