"""API route registration."""

from fastapi import APIRouter

from filegate.api.routes import downloads, files, health

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(files.router, tags=["files"])

download_router = APIRouter()

download_router.include_router(downloads.router, tags=["files"])
