"""Renders board results in the line tester log format.

Every board log consists of a ``@BATCH`` record, a ``@BTEST`` record, one
block per catalog test and the closing ``}}``. Downstream parsers depend on
the exact tokens, field order and brace nesting.
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Sequence

from ict_logmaker.catalog import Capacitor, Pin, Resistor, TestDefinition
from ict_logmaker.models import Board, Panel, format_timestamp
from ict_logmaker.simulator import TestResult

BATCH_TEMPLATE = "{{@BATCH|DUMMY||0101|1||btest|{start}||i30704CE0101BZ01|DUMMY|RevA|DUMMY||D"
BTEST_TEMPLATE = "{{@BTEST|{dmc}|{status}|{start}|000000|0|all||n|n|{now}||{position:02d}|{panel}"
FILENAME_TEMPLATE = "{position}-{timestamp}I3070CE0101BZ01"


def format_number(value: float) -> str:
    """Signed scientific notation with an unpadded exponent, e.g. ``+1.234560E-9``."""
    mantissa, exponent = f"{value:+.6E}".split("E")
    return f"{mantissa}E{int(exponent)}"


def _analog_lines(
    tag: str, test: TestDefinition, result: TestResult, position: int, limits: Capacitor | Resistor
) -> List[str]:
    return [
        f"{{@BLOCK|{position}%{test.name}|{result.status_long}",
        f"{{@{tag}|{result.status_short}|{format_number(result.measured)}"
        f"{{@LIM3|{format_number(limits.nominal)}|{format_number(limits.max)}|{format_number(limits.min)}}}}}",
        "}",
    ]


def format_test_block(test: TestDefinition, result: TestResult, position: int) -> List[str]:
    match test.kind:
        case Pin():
            return [f"{{@PF|{position}%{test.name}|{result.status_short}|0", "}"]
        case Capacitor() as limits:
            return _analog_lines("A-CAP", test, result, position, limits)
        case Resistor() as limits:
            return _analog_lines("A-RES", test, result, position, limits)
        case _:
            raise TypeError(f"Unknown test kind: {test.kind!r}")


def format_board_log(
    catalog: Sequence[TestDefinition],
    board: Board,
    panel: Panel,
    batch_start_time: str,
    now: datetime,
) -> str:
    if len(board.results) != len(catalog):
        raise ValueError(
            f"Board {board.position} has {len(board.results)} results for {len(catalog)} tests"
        )
    lines: List[str] = [
        BATCH_TEMPLATE.format(start=batch_start_time),
        BTEST_TEMPLATE.format(
            dmc=board.identifier,
            status=board.status_long,
            start=batch_start_time,
            now=format_timestamp(now),
            position=board.position,
            panel=panel.identifier,
        ),
    ]
    for test, result in zip(catalog, board.results):
        lines.extend(format_test_block(test, result, board.position))
    lines.append("}}")
    return "\n".join(lines)


def format_filename(position: int, moment: datetime) -> str:
    return FILENAME_TEMPLATE.format(position=position, timestamp=format_timestamp(moment))
