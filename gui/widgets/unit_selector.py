# gui/widgets/unit_selector.py
from PySide6.QtCore import Signal
from PySide6.QtWidgets import QComboBox

from core.units import LENGTH, Unit, UnitRegistry

class UnitSelector(QComboBox):
    """Combo box offering every unit of a registry; item data is the unit symbol."""
    unitSelected = Signal(str)

    def __init__(self, registry: UnitRegistry = LENGTH, current: str = "M", parent=None):
        super().__init__(parent)
        self.registry = registry
        for u in registry.units():
            self.addItem(u.name, u.symbol)
        self.set_unit(current)
        self.currentIndexChanged.connect(self._on_index_changed)

    # ---- public API ----
    def unit(self) -> Unit:
        return self.registry.normalize(self.currentData())

    def set_unit(self, unit) -> None:
        sym = self.registry.normalize(unit).symbol
        idx = self.findData(sym)
        if idx != self.currentIndex():
            self.setCurrentIndex(idx)

    # ---- helpers ----
    def _on_index_changed(self, idx: int) -> None:
        if idx >= 0:
            self.unitSelected.emit(self.itemData(idx))
