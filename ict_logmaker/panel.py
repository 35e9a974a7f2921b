"""Builds the multi-board panel for one export cycle."""
from __future__ import annotations

from datetime import date
from typing import List, Sequence

from .catalog import TestDefinition
from .config.settings import SimulatorSettings
from .identifiers import generate_dmc
from .models import Board, Panel, RunState
from .simulator import MeasurementSimulator, TestResult


class PanelAssembler:
    def __init__(
        self,
        catalog: Sequence[TestDefinition],
        simulator: MeasurementSimulator,
        settings: SimulatorSettings,
        state: RunState,
    ) -> None:
        self.catalog = catalog
        self.simulator = simulator
        self.settings = settings
        self.state = state

    def generate_results(self) -> List[TestResult]:
        # Analog tests run even if the pin test failed
        return [
            self.simulator.measure(test, self.settings.test_yield_percent)
            for test in self.catalog
        ]

    def generate_dmc(self, today: date, offset: int) -> str:
        return generate_dmc(today, self.state.next_sequence + offset)

    def assemble(self, today: date) -> Panel:
        """Return a fresh panel; position ``n`` gets sequence offset ``n``."""
        panel = Panel(identifier=self.generate_dmc(today, 0))
        for position in range(1, self.settings.panel_count + 1):
            panel.boards.append(
                Board(
                    identifier=self.generate_dmc(today, position),
                    position=position,
                    results=self.generate_results(),
                )
            )
        return panel
