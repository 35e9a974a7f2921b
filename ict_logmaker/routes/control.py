"""Control endpoints: enable toggle, panel count, interval and yield."""
from __future__ import annotations

from fastapi import APIRouter, Request

from ict_logmaker.config.settings import SettingsUpdate
from ict_logmaker.controller import LogMakerController

router = APIRouter(prefix="/api", tags=["control"])


def _controller(request: Request) -> LogMakerController:
    return request.app.state.controller


@router.get("/status")
async def get_status(request: Request) -> dict:
    return _controller(request).status()


@router.get("/settings")
async def get_settings(request: Request) -> dict:
    return _controller(request).settings.model_dump(mode="json")


@router.post("/settings")
async def update_settings(update: SettingsUpdate, request: Request) -> dict:
    settings = _controller(request).update_settings(update)
    return settings.model_dump(mode="json")
