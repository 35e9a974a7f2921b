"""Load and save the simulator settings file."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from .settings import SimulatorSettings

SETTINGS_FILE = Path("data/settings/simulator.json")

logger = logging.getLogger(__name__)


class SettingsManager:
    """Persists settings as JSON; values missing from the file keep their defaults."""

    def __init__(self, path: Path = SETTINGS_FILE) -> None:
        self.path = Path(path)

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as file:
            return json.load(file)

    def _write(self, payload: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as file:
            json.dump(payload, file, indent=2, ensure_ascii=False)

    def load(self, **overrides: Any) -> SimulatorSettings:
        payload = self._read()
        payload.update({key: value for key, value in overrides.items() if value is not None})
        settings = SimulatorSettings.model_validate(payload)
        logger.info("Settings loaded from %s", self.path)
        return settings

    def save(self, settings: SimulatorSettings) -> SimulatorSettings:
        self._write(settings.model_dump(mode="json"))
        logger.info("Settings saved to %s", self.path)
        return settings

    def update(self, changes: Dict[str, Any]) -> Dict[str, Any]:
        """Merge ``changes`` into the stored file, leaving other keys as they are."""
        payload = self._read()
        payload.update(changes)
        self._write(payload)
        logger.info("Settings file %s updated: %s", self.path, sorted(changes))
        return payload
