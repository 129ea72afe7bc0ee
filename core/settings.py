# core/settings.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from core.units import LENGTH

LOG_LEVEL_ENV = "UNIT_CONVERTER_LOG_LEVEL"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Startup defaults for the converter window."""
    input_unit: str = "M"
    output_unit: str = "M"
    places: int = 2
    window_width: int = 420
    window_height: int = 360
    log_level: str = "WARNING"

    def __post_init__(self):
        # raises ValueError for unknown symbols
        self.input_unit = LENGTH.normalize(self.input_unit).symbol
        self.output_unit = LENGTH.normalize(self.output_unit).symbol
        if self.places < 0:
            raise ValueError(f"places must be >= 0, got {self.places}")
        level = (self.log_level or "").strip().upper()
        self.log_level = level if level in _LEVELS else "WARNING"

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    @staticmethod
    def from_env(environ=None) -> "Settings":
        env = os.environ if environ is None else environ
        return Settings(log_level=env.get(LOG_LEVEL_ENV, "WARNING"))
