"""Router registration helpers."""
from __future__ import annotations

from fastapi import APIRouter

from .control import router as control_router


def get_routers() -> list[APIRouter]:
    return [control_router]
