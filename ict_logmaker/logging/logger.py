"""Logging helpers for the ICT log maker."""
from __future__ import annotations

import logging
from pathlib import Path

LOG_FILE = Path("data/logs/ict_logmaker.log")


def configure_logging(level: int | str = logging.INFO, log_file: Path = LOG_FILE) -> None:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.FileHandler(log_file), logging.StreamHandler()],
    )
