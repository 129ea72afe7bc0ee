# core/units.py
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple, Union

@dataclass(frozen=True)
class Unit:
    symbol: str
    name: str
    factor: float  # one of this unit, expressed in the base unit
    aliases: Tuple[str, ...] = ()

    def __post_init__(self):
        if not math.isfinite(self.factor) or self.factor <= 0:
            raise ValueError(f"Unit '{self.symbol}' needs a positive factor, got {self.factor!r}.")


UnitLike = Union[Unit, str]


class UnitRegistry:
    def __init__(self, units: Iterable[Unit], *, base_symbol: str):
        self._units: Dict[str, Unit] = {}
        self._ordered: Tuple[Unit, ...] = tuple(units)
        for u in self._ordered:
            for key in (u.symbol, *u.aliases):
                k = key.upper()
                if k in self._units:
                    raise ValueError(f"Duplicate unit key: {key}")
                self._units[k] = u
        try:
            self._base: Unit = self._units[base_symbol.upper()]
        except KeyError:
            raise ValueError(f"Base unit '{base_symbol}' not present.") from None

    @property
    def base(self) -> Unit:
        return self._base

    def units(self) -> Tuple[Unit, ...]:
        """Registered units in declaration order."""
        return self._ordered

    def symbols(self) -> Tuple[str, ...]:
        return tuple(u.symbol for u in self._ordered)

    def normalize(self, u: UnitLike) -> Unit:
        if isinstance(u, Unit):
            return u
        try:
            return self._units[u.strip().upper()]
        except KeyError as e:
            raise ValueError(
                f"Unknown unit '{u}'. Options: {list(self.symbols())}"
            ) from e

    def __contains__(self, u: object) -> bool:
        if isinstance(u, Unit):
            return u in self._ordered
        return isinstance(u, str) and u.strip().upper() in self._units

    def __iter__(self):
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def convert(self, value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
        u_from = self.normalize(from_unit)
        u_to   = self.normalize(to_unit)
        return value * u_from.factor / u_to.factor


# Length (base: M)
METERS      = Unit("M",  "Meters",      1.0,    aliases=("METER", "METERS"))
CENTIMETERS = Unit("CM", "Centimeters", 0.01,   aliases=("CENTIMETER", "CENTIMETERS"))
MILLIMETERS = Unit("MM", "Millimeters", 0.001,  aliases=("MILLIMETER", "MILLIMETERS"))
FEET        = Unit("FT", "Feet",        0.3048, aliases=("FOOT", "FEET"))

LENGTH = UnitRegistry(
    units=(METERS, CENTIMETERS, MILLIMETERS, FEET),
    base_symbol="M",
)
