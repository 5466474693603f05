"""Tests for the seed HTTP API."""

import pytest
from httpx import ASGITransport, AsyncClient

from mas_seed.main import app
from mas_seed.pipelines.seed_pipeline import SeedPipeline


@pytest.fixture
def install_pipeline(store):
    def _install(settings) -> SeedPipeline:
        pipeline = SeedPipeline(store, settings)
        app.state.seed_pipeline = pipeline
        return pipeline

    yield _install
    if hasattr(app.state, "seed_pipeline"):
        del app.state.seed_pipeline


@pytest.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


class TestSeedApi:

    @pytest.mark.asyncio
    async def test_health(self, client) -> None:
        resp = await client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_modules(self, client, install_pipeline, settings) -> None:
        install_pipeline(settings)
        resp = await client.get("/api/seed/modules")
        assert resp.status_code == 200
        body = resp.json()
        assert len(body) == 10
        assert body[0] == {
            "name": "core",
            "description": "Core system data (organizations, departments, roles)",
            "collections": ["organizations", "settings", "departments", "roles"],
            "total_records": 18,
        }

    @pytest.mark.asyncio
    async def test_run_core(self, client, install_pipeline, settings, store) -> None:
        install_pipeline(settings)
        resp = await client.post("/api/seed/run", json={"modules": ["core"]})
        assert resp.status_code == 200
        report = resp.json()
        assert report["total_records"] == 18
        assert report["total_written"] == 18
        assert report["project_id"] == "mas-test"
        assert len(store.docs("roles")) == 10

    @pytest.mark.asyncio
    async def test_dry_run(self, client, install_pipeline, settings, store) -> None:
        install_pipeline(settings)
        resp = await client.post("/api/seed/run", json={"modules": ["hr"], "dry_run": True})
        assert resp.status_code == 200
        assert resp.json()["total_records"] == 29
        assert store.calls == []

    @pytest.mark.asyncio
    async def test_invalid_module_is_400(self, client, install_pipeline, settings, store) -> None:
        install_pipeline(settings)
        resp = await client.post("/api/seed/run", json={"modules": ["doesnotexist"]})
        assert resp.status_code == 400
        assert "No valid modules" in resp.json()["detail"]
        assert store.calls == []

    @pytest.mark.asyncio
    async def test_production_requires_force(self, client, install_pipeline, make_settings, store) -> None:
        install_pipeline(make_settings(ENVIRONMENT="production"))
        resp = await client.post("/api/seed/run", json={"modules": ["core"]})
        assert resp.status_code == 409
        assert store.calls == []

        resp = await client.post("/api/seed/run", json={"modules": ["core"], "force": True})
        assert resp.status_code == 200

    @pytest.mark.asyncio
    async def test_store_failure_is_500(self, client, install_pipeline, settings, store) -> None:
        install_pipeline(settings)
        store.fail_on.add("settings")
        resp = await client.post("/api/seed/run", json={"modules": ["core"]})
        assert resp.status_code == 500

    @pytest.mark.asyncio
    async def test_status(self, client, install_pipeline, settings, store) -> None:
        install_pipeline(settings)
        store.preload("users", 3)
        resp = await client.get("/api/seed/status")
        assert resp.status_code == 200
        users = next(s for s in resp.json() if s["collection"] == "users")
        assert users["has_data"] is True
        assert users["count"] == 3

    @pytest.mark.asyncio
    async def test_status_without_project_is_400(self, client, install_pipeline, make_settings) -> None:
        install_pipeline(make_settings(PROJECT_ID=None))
        resp = await client.get("/api/seed/status")
        assert resp.status_code == 400

    @pytest.mark.asyncio
    async def test_uninitialised_pipeline_is_503(self, client) -> None:
        resp = await client.get("/api/seed/modules")
        assert resp.status_code == 503
