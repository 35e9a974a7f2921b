from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ict_logmaker.controller import LogMakerController
from ict_logmaker.routes import get_routers


def create_app(controller: LogMakerController) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        controller.start()
        yield
        controller.stop()

    app = FastAPI(title="ICT Logfile Maker", lifespan=lifespan)
    app.state.controller = controller
    for router in get_routers():
        app.include_router(router)
    return app
