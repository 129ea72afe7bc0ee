# core/conversion.py
from __future__ import annotations

import math
import re
from typing import List

import pandas as pd

from core.units import LENGTH, UnitLike, UnitRegistry

# Beyond this magnitude a float has no fractional digits left to round.
_EXACT_INT_LIMIT = 2.0 ** 52

# Plain ASCII decimals only: no digit-group underscores, no non-ASCII digits, no nan/inf.
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def round_half_up(value: float, places: int = 2) -> float:
    """
    Round to ``places`` decimals; ties go toward +infinity (0.005 -> 0.01, -0.005 -> 0.0).
    """
    scale = 10 ** places
    scaled = value * scale
    if not math.isfinite(scaled) or abs(scaled) >= _EXACT_INT_LIMIT:
        return value
    return math.floor(scaled + 0.5) / scale


class ConversionEngine:
    """
    Holds the unit table and turns (input text, input factor, output factor)
    into the display string shown as the result.
    """

    def __init__(self, registry: UnitRegistry = LENGTH, places: int = 2):
        if places < 0:
            raise ValueError(f"places must be >= 0, got {places}")
        self.registry = registry
        self.places = places

    # ---- parsing ----
    @staticmethod
    def parse_value(text: str) -> float:
        s = "" if text is None else str(text).strip()
        if not _NUMBER_RE.fullmatch(s):
            return 0.0
        value = float(s)
        return value if math.isfinite(value) else 0.0

    # ---- conversions ----
    def convert_value(self, input_text: str, input_factor: float, output_factor: float) -> float:
        if not input_factor > 0 or not output_factor > 0:
            raise ValueError(
                f"Conversion factors must be positive (got {input_factor!r}, {output_factor!r})."
            )
        value = self.parse_value(input_text)
        return round_half_up(value * input_factor / output_factor, self.places)

    def convert(self, input_text: str, input_factor: float, output_factor: float) -> str:
        return str(self.convert_value(input_text, input_factor, output_factor))

    def convert_units(self, input_text: str, from_unit: UnitLike, to_unit: UnitLike) -> str:
        u_from = self.registry.normalize(from_unit)
        u_to = self.registry.normalize(to_unit)
        return self.convert(input_text, u_from.factor, u_to.factor)

    def equivalents(self, input_text: str, from_unit: UnitLike) -> pd.DataFrame:
        """The input value expressed in every registered unit, in registry order."""
        u_from = self.registry.normalize(from_unit)
        rows: List[dict] = []
        for u in self.registry.units():
            value = self.convert_value(input_text, u_from.factor, u.factor)
            rows.append({"Unit": u.name, "Symbol": u.symbol, "Value": value, "Text": str(value)})
        return pd.DataFrame(rows, columns=["Unit", "Symbol", "Value", "Text"])
