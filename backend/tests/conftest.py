"""Test fixtures: temp root directory and FastAPI test client."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from filegate.config import Settings
from filegate.main import create_app


@pytest.fixture
def root_dir(tmp_path):
    """A small tree to serve: two files, a subdirectory with one file."""
    root = tmp_path / "share"
    root.mkdir()
    (root / "notes.txt").write_text("hello")
    (root / "report.PDF").write_bytes(b"%PDF-1.4")
    docs = root / "docs"
    docs.mkdir()
    (docs / "readme").write_text("nested")
    return root


@pytest.fixture
def settings(root_dir, tmp_path):
    return Settings(root_dir=str(root_dir), frontend_dir=str(tmp_path / "no-frontend"))


@pytest_asyncio.fixture
async def client(settings):
    """Async test client around an app bound to ``root_dir``."""
    app = create_app(settings)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
