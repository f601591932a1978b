"""Raw file download at /files/<name>."""

from __future__ import annotations

import logging
import os

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from filegate.api.deps import get_lister
from filegate.exceptions import DirectoryNotFoundError
from filegate.services.directory_lister import DirectoryLister

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/files/{name:path}")
def download_file(name: str, lister: DirectoryLister = Depends(get_lister)):
    """Serve a file below the root; ranges and validators come from FileResponse."""
    if not name:
        raise HTTPException(400, "Filename required")

    try:
        path = lister.resolve(name)
    except DirectoryNotFoundError as e:
        logger.warning("Rejected download %r: %s", name, e)
        raise HTTPException(404, "File not found")

    if not os.path.isfile(path):
        raise HTTPException(404, "File not found")
    return FileResponse(path)
