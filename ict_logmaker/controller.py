"""Controller wiring catalog, simulator, scheduler and host loop together."""
from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import Any, Dict, Optional

from .catalog import build_catalog
from .config.settings import SettingsUpdate, SimulatorSettings
from .config.settings_manager import SettingsManager
from .models import RunState, format_timestamp
from .panel import PanelAssembler
from .services.export_scheduler import Clock, ExportScheduler
from .services.ticker import Ticker
from .simulator import MeasurementSimulator

logger = logging.getLogger(__name__)


class LogMakerController:
    """Owns the run state of one simulator process.

    The catalog is drawn once at construction and reused for every export.
    """

    def __init__(
        self,
        settings: SimulatorSettings,
        settings_manager: Optional[SettingsManager] = None,
        rng: Optional[random.Random] = None,
        clock: Clock = datetime.now,
    ) -> None:
        self.settings = settings
        self.settings_manager = settings_manager
        rng = rng or random.Random()
        self.catalog = build_catalog(rng, settings.capacitor_count, settings.resistor_count)
        self.run_state = RunState.start(settings.starting_sequence, clock())
        assembler = PanelAssembler(self.catalog, MeasurementSimulator(rng), settings, self.run_state)
        self.scheduler = ExportScheduler(assembler, clock=clock)
        self.ticker = Ticker(self.scheduler)
        logger.info(
            "Log maker ready: %d tests, output %s, batch start %s",
            len(self.catalog),
            settings.output_directory,
            self.run_state.batch_start_time,
        )

    def start(self) -> None:
        self.ticker.start()

    def stop(self) -> None:
        self.ticker.cancel()

    def update_settings(self, update: SettingsUpdate) -> SimulatorSettings:
        update.apply(self.settings)
        changes = update.model_dump(exclude_none=True)
        if self.settings_manager is not None:
            self.settings_manager.update(changes)
        logger.info("Settings updated: %s", changes)
        return self.settings

    def status(self) -> Dict[str, Any]:
        panel = self.scheduler.panel
        return {
            "enabled": self.settings.enabled,
            "next_sequence": self.run_state.next_sequence,
            "last_export": format_timestamp(self.run_state.last_export_time),
            "batch_start_time": self.run_state.batch_start_time,
            "scheduler_state": self.scheduler.state.name.lower(),
            "ticker_running": self.ticker.running,
            "panel": None
            if panel is None
            else {
                "identifier": panel.identifier,
                "boards": [
                    {
                        "position": board.position,
                        "identifier": board.identifier,
                        "status": board.status_long,
                    }
                    for board in panel.boards
                ],
            },
        }
