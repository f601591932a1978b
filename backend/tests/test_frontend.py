"""Tests for the static frontend mount."""

import pytest
from httpx import ASGITransport, AsyncClient

from filegate.config import Settings
from filegate.main import create_app


@pytest.mark.asyncio
async def test_frontend_served_at_root(root_dir, tmp_path):
    frontend = tmp_path / "frontend"
    frontend.mkdir()
    (frontend / "index.html").write_text("<h1>files</h1>")
    (frontend / "script.js").write_text("console.log(1);")

    app = create_app(Settings(root_dir=str(root_dir), frontend_dir=str(frontend)))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        index = await c.get("/")
        script = await c.get("/script.js")
        api = await c.get("/api/files")

    assert index.status_code == 200
    assert "<h1>files</h1>" in index.text
    assert script.status_code == 200
    # API routes are registered before the catch-all mount
    assert api.status_code == 200
    assert len(api.json()) == 3


@pytest.mark.asyncio
async def test_api_only_without_frontend(client: AsyncClient):
    resp = await client.get("/")
    assert resp.status_code == 404
