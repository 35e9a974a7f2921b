"""Periodic export of simulated panel logs.

The scheduler is evaluated on every tick of the host loop. It fires when
exporting is enabled and the configured interval has elapsed since the last
export; a fired cycle assembles a new panel and writes one log file per
board before the counters advance.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta
from enum import Enum, auto
from pathlib import Path
from typing import Callable, List, Optional

from ict_logmaker.identifiers import fits_sequence_width
from ict_logmaker.logging.log_formatter import format_board_log, format_filename
from ict_logmaker.models import Panel, RunState
from ict_logmaker.panel import PanelAssembler

Clock = Callable[[], datetime]

logger = logging.getLogger(__name__)


class SchedulerState(Enum):
    IDLE = auto()
    ARMED = auto()


class ExportScheduler:
    def __init__(self, assembler: PanelAssembler, clock: Clock = datetime.now) -> None:
        self.assembler = assembler
        self.clock = clock
        self.state = SchedulerState.IDLE
        self.panel: Optional[Panel] = None

    @property
    def settings(self):
        return self.assembler.settings

    @property
    def run_state(self) -> RunState:
        return self.assembler.state

    def evaluate(self, now: datetime) -> SchedulerState:
        interval = timedelta(seconds=self.settings.test_interval_seconds)
        if self.settings.enabled and now - self.run_state.last_export_time > interval:
            self.state = SchedulerState.ARMED
        else:
            self.state = SchedulerState.IDLE
        return self.state

    def tick(self) -> List[Path]:
        """Run one evaluation; returns the files written, empty when idle.

        Write errors are not caught here: a failed cycle must stop the run.
        """
        now = self.clock()
        if self.evaluate(now) is SchedulerState.IDLE:
            return []
        try:
            return self.export(now)
        finally:
            self.state = SchedulerState.IDLE

    def export(self, now: datetime) -> List[Path]:
        run_state = self.run_state
        self.panel = self.assembler.assemble(now.date())
        last_sequence = run_state.next_sequence + self.settings.panel_count
        if not fits_sequence_width(last_sequence):
            logger.warning("Sequence %d no longer fits the 5 digit DMC field", last_sequence)

        output_dir = Path(self.settings.output_directory)
        output_dir.mkdir(parents=True, exist_ok=True)
        written: List[Path] = []
        for board in self.panel.boards:
            path = output_dir / format_filename(board.position, now)
            content = format_board_log(
                self.assembler.catalog, board, self.panel, run_state.batch_start_time, now
            )
            with path.open("w", encoding="utf-8", newline="") as file:
                file.write(content)
            logger.info("New log file: %s", path)
            written.append(path)

        run_state.last_export_time = now
        run_state.next_sequence += len(self.panel.boards)
        logger.info(
            "Exported panel %s with %d boards, next sequence %d",
            self.panel.identifier,
            len(self.panel.boards),
            run_state.next_sequence,
        )
        return written
