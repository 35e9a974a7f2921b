"""Data matrix code (DMC) helpers for boards and panels.

A DMC looks like ``L202412300042TB0001010111``: the letter ``L``, the four
digit year, the day of the year, a five digit sequence number and a static
suffix.
"""
from __future__ import annotations

import re
from datetime import date
from typing import NamedTuple

DMC_PREFIX = "L"
DMC_SUFFIX = "TB0001010111"
SEQUENCE_DIGITS = 5

_DMC_PATTERN = re.compile(
    rf"^{DMC_PREFIX}(?P<year>\d{{4}})(?P<day>\d{{3}})(?P<sequence>\d{{{SEQUENCE_DIGITS},}}){DMC_SUFFIX}$"
)


class DecodedDMC(NamedTuple):
    year: int
    day_of_year: int
    sequence: int


def generate_dmc(day: date, sequence: int) -> str:
    day_of_year = day.timetuple().tm_yday
    return f"{DMC_PREFIX}{day.year:04d}{day_of_year:03d}{sequence:0{SEQUENCE_DIGITS}d}{DMC_SUFFIX}"


def decode_dmc(identifier: str) -> DecodedDMC:
    match = _DMC_PATTERN.match(identifier)
    if not match:
        raise ValueError(f"Not a valid DMC: {identifier!r}")
    return DecodedDMC(
        year=int(match.group("year")),
        day_of_year=int(match.group("day")),
        sequence=int(match.group("sequence")),
    )


def fits_sequence_width(sequence: int) -> bool:
    return 0 <= sequence < 10**SEQUENCE_DIGITS
