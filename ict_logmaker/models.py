"""Data models shared by the assembler, the log encoder and the scheduler."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from .simulator import TestResult

TIMESTAMP_FORMAT = "%y%m%d%H%M%S"


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


@dataclass
class Board:
    identifier: str
    position: int
    results: List[TestResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(result.passed for result in self.results)

    @property
    def status_long(self) -> str:
        return "00" if self.passed else "01"


@dataclass
class Panel:
    identifier: str
    boards: List[Board] = field(default_factory=list)


@dataclass
class RunState:
    """Counters and timestamps of the running simulator.

    ``batch_start_time`` is fixed when the process starts and written into
    every log; ``next_sequence`` is never persisted.
    """

    next_sequence: int
    last_export_time: datetime
    batch_start_time: str

    @classmethod
    def start(cls, starting_sequence: int, now: datetime) -> "RunState":
        return cls(
            next_sequence=starting_sequence,
            last_export_time=now,
            batch_start_time=format_timestamp(now),
        )
