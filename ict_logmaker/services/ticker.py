"""Asyncio host loop that drives the export scheduler."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional

from .export_scheduler import ExportScheduler

TICK_SECONDS = 1.0

logger = logging.getLogger(__name__)


@dataclass
class Ticker:
    scheduler: ExportScheduler
    period: float = TICK_SECONDS
    _task: Optional[asyncio.Task] = field(default=None, init=False, repr=False)

    def tick(self) -> None:
        try:
            self.scheduler.tick()
        except OSError as exc:
            logger.critical("Saving results failed, stopping: %s", exc, exc_info=True)
            raise SystemExit(1) from exc
        except Exception as exc:
            logger.critical("Export cycle failed, stopping: %s", exc, exc_info=True)
            raise SystemExit(1) from exc

    async def run(self) -> None:
        while True:
            self.tick()
            await asyncio.sleep(self.period)

    def start(self) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self.run())

    def cancel(self) -> None:
        if self._task and not self._task.done():
            self._task.cancel()
        self._task = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()
