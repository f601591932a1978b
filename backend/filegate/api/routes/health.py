"""Health check."""

from fastapi import APIRouter, Depends

from filegate import __version__
from filegate.api.deps import get_lister
from filegate.schemas.system import HealthResponse
from filegate.services.directory_lister import DirectoryLister

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(lister: DirectoryLister = Depends(get_lister)):
    """Lightweight connectivity check; also reports whether the root is still there."""
    return HealthResponse(version=__version__, root_exists=lister.root.is_dir())


@router.get("/ping")
async def ping():
    """Ultra-lightweight ping."""
    return {"status": "ok"}
