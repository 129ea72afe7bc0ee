# core/view_model.py
from __future__ import annotations

import logging
from typing import Optional

import pandas as pd
from PySide6.QtCore import QObject, Signal

from core.conversion import ConversionEngine
from core.settings import Settings
from core.units import Unit, UnitLike

logger = logging.getLogger(__name__)


class ConverterViewModel(QObject):
    """
    UI-local converter state owned by whoever creates it.
    Every mutation goes through recompute(); widgets only listen.
    """
    resultChanged = Signal(str)
    unitsChanged = Signal(str, str)  # (input symbol, output symbol)
    stateChanged = Signal()  # after every recompute, even when the result text is unchanged

    def __init__(
        self,
        engine: Optional[ConversionEngine] = None,
        settings: Optional[Settings] = None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        settings = settings or Settings()
        self.engine = engine or ConversionEngine(places=settings.places)
        registry = self.engine.registry
        self._input_text: str = ""
        self._input_unit: Unit = registry.normalize(settings.input_unit)
        self._output_unit: Unit = registry.normalize(settings.output_unit)
        self._output_text: str = self._derive()

    # ---- properties ----
    @property
    def input_text(self) -> str:
        return self._input_text

    @property
    def input_unit(self) -> Unit:
        return self._input_unit

    @property
    def output_unit(self) -> Unit:
        return self._output_unit

    @property
    def output_text(self) -> str:
        return self._output_text

    # ---- setters recompute ----
    def set_input_text(self, text: str) -> None:
        text = text or ""
        if text == self._input_text:
            return
        self._input_text = text
        self.recompute()

    def set_input_unit(self, unit: UnitLike) -> None:
        u = self.engine.registry.normalize(unit)
        if u == self._input_unit:
            return
        logger.debug("input unit -> %s", u.symbol)
        self._input_unit = u
        self.unitsChanged.emit(self._input_unit.symbol, self._output_unit.symbol)
        self.recompute()

    def set_output_unit(self, unit: UnitLike) -> None:
        u = self.engine.registry.normalize(unit)
        if u == self._output_unit:
            return
        logger.debug("output unit -> %s", u.symbol)
        self._output_unit = u
        self.unitsChanged.emit(self._input_unit.symbol, self._output_unit.symbol)
        self.recompute()

    def swap_units(self) -> None:
        if self._input_unit == self._output_unit:
            return
        self._input_unit, self._output_unit = self._output_unit, self._input_unit
        logger.debug("swapped units -> %s / %s", self._input_unit.symbol, self._output_unit.symbol)
        self.unitsChanged.emit(self._input_unit.symbol, self._output_unit.symbol)
        self.recompute()

    # ---- derived state ----
    def recompute(self) -> str:
        text = self._derive()
        if text != self._output_text:
            self._output_text = text
            self.resultChanged.emit(text)
        self.stateChanged.emit()
        return self._output_text

    def equivalents(self) -> pd.DataFrame:
        return self.engine.equivalents(self._input_text, self._input_unit)

    def _derive(self) -> str:
        return self.engine.convert(
            self._input_text, self._input_unit.factor, self._output_unit.factor
        )
