"""FastAPI dependencies handing out the app-owned settings and lister."""

from __future__ import annotations

from fastapi import Request

from filegate.config import Settings
from filegate.services.directory_lister import DirectoryLister


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings


def get_lister(request: Request) -> DirectoryLister:
    """Directory lister bound to the configured root."""
    return request.app.state.lister
