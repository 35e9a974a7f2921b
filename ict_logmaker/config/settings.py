"""Validated simulator settings."""
from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_OUTPUT_DIR = Path("data/output")


class SimulatorSettings(BaseModel):
    """Runtime configuration of the log maker.

    Assignments are validated too, so values changed through the control
    surface can never leave the allowed ranges.
    """

    enabled: bool = False
    panel_count: int = Field(20, ge=1, le=20)
    test_interval_seconds: int = Field(30, ge=5, le=60)
    output_directory: Path = DEFAULT_OUTPUT_DIR
    starting_sequence: int = Field(1, ge=0)
    test_yield_percent: int = Field(99, ge=0, le=100)
    capacitor_count: int = Field(10, ge=0)
    resistor_count: int = Field(10, ge=0)

    model_config = {"validate_assignment": True}


class SettingsUpdate(BaseModel):
    """Fields that may be changed while the simulator is running."""

    enabled: bool | None = None
    panel_count: int | None = Field(None, ge=1, le=20)
    test_interval_seconds: int | None = Field(None, ge=5, le=60)
    test_yield_percent: int | None = Field(None, ge=0, le=100)

    def apply(self, settings: SimulatorSettings) -> SimulatorSettings:
        for key, value in self.model_dump(exclude_none=True).items():
            setattr(settings, key, value)
        return settings
