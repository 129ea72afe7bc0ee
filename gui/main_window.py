# gui/main_window.py

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from core.settings import Settings
from core.view_model import ConverterViewModel

from gui.widgets.equivalents_table import EquivalentsTable
from gui.widgets.unit_selector import UnitSelector


class MainWindow(QMainWindow):

    def __init__(self, settings: Optional[Settings] = None) -> None:

        super().__init__()

        self.setWindowTitle("Unit Converter")
        self.settings = settings or Settings()

        # ---- State ----
        self.vm = ConverterViewModel(settings=self.settings, parent=self)
        registry = self.vm.engine.registry

        # ---- Central UI ----
        central_widget = QWidget()
        main_layout = QVBoxLayout(central_widget)
        main_layout.setAlignment(Qt.AlignTop)
        self.setCentralWidget(central_widget)

        title = QLabel("Unit Converter")
        font = QFont(title.font())
        font.setPointSize(font.pointSize() + 8)
        font.setBold(True)
        title.setFont(font)
        title.setAlignment(Qt.AlignCenter)
        main_layout.addWidget(title)

        # Input value
        self.input_edit = QLineEdit()
        self.input_edit.setPlaceholderText("Enter Value")
        main_layout.addWidget(self.input_edit)

        # Unit selectors
        units_group = QGroupBox("Units")
        units_row = QHBoxLayout(units_group)

        self.input_selector = UnitSelector(registry, self.vm.input_unit.symbol)
        self.output_selector = UnitSelector(registry, self.vm.output_unit.symbol)
        self.btn_swap = QPushButton("Swap")

        units_row.addWidget(QLabel("From:"))
        units_row.addWidget(self.input_selector)
        units_row.addWidget(self.btn_swap)
        units_row.addWidget(QLabel("To:"))
        units_row.addWidget(self.output_selector)
        main_layout.addWidget(units_group)

        # Result
        self.result_label = QLabel()
        font = QFont(self.result_label.font())
        font.setPointSize(font.pointSize() + 4)
        self.result_label.setFont(font)
        self.result_label.setAlignment(Qt.AlignCenter)
        self.result_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        main_layout.addWidget(self.result_label)

        # All-units table
        self.equivalents = EquivalentsTable(self.vm, self)
        main_layout.addWidget(self.equivalents)

        # ---- Connections ----
        self.input_edit.textChanged.connect(self.vm.set_input_text)
        self.input_selector.unitSelected.connect(self.vm.set_input_unit)
        self.output_selector.unitSelected.connect(self.vm.set_output_unit)
        self.btn_swap.clicked.connect(self.vm.swap_units)

        self.vm.resultChanged.connect(self._on_result_changed)
        self.vm.unitsChanged.connect(self._on_units_changed)

        self._on_result_changed(self.vm.output_text)


    # ---------------- Event handlers ----------------

    def _on_result_changed(self, text: str) -> None:
        self.result_label.setText(f"Result: {text}")

    def _on_units_changed(self, input_symbol: str, output_symbol: str) -> None:
        # keep combos in sync when the model changes units on its own (swap)
        self.input_selector.set_unit(input_symbol)
        self.output_selector.set_unit(output_symbol)
