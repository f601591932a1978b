"""Directory listing routes: /api/files and /api/currentPath."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from filegate.api.deps import get_app_settings, get_lister
from filegate.config import Settings
from filegate.exceptions import DirectoryNotFoundError, DirectoryReadError, EncodeError
from filegate.schemas.files import CurrentPath, ErrorBody, FileRecord
from filegate.services.directory_lister import DirectoryLister

logger = logging.getLogger(__name__)
router = APIRouter()

_CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorBody(error=message).model_dump(),
        headers=_CORS_HEADERS,
    )


def _encode(records: list[FileRecord]) -> JSONResponse:
    try:
        return JSONResponse(content=jsonable_encoder(records), headers=_CORS_HEADERS)
    except (TypeError, ValueError) as e:
        raise EncodeError(str(e)) from e


@router.get(
    "/files",
    response_model=list[FileRecord],
    responses={404: {"model": ErrorBody}, 500: {"model": ErrorBody}},
)
def list_files(
    dir_: str | None = Query(None, alias="dir", description="Directory relative to the root"),
    lister: DirectoryLister = Depends(get_lister),
):
    """List the immediate children of a directory below the root."""
    try:
        records = lister.list(dir_)
    except DirectoryNotFoundError as e:
        logger.info("%s", e)
        return _error(404, "Directory not found")
    except DirectoryReadError:
        return _error(500, "Error reading directory")

    try:
        return _encode(records)
    except EncodeError as e:
        logger.error("Error encoding JSON: %s", e)
        return _error(500, "Error generating JSON response")


@router.get("/currentPath", response_model=CurrentPath)
async def current_path(settings: Settings = Depends(get_app_settings)):
    """Root directory as configured at startup."""
    body = CurrentPath(dirPath=settings.root_dir or "")
    return JSONResponse(content=body.model_dump(), headers=_CORS_HEADERS)
