# gui/widgets/equivalents_table.py
from PySide6.QtWidgets import QWidget, QGroupBox, QVBoxLayout, QTableWidget, \
    QTableWidgetItem, QSizePolicy, QHeaderView, QAbstractItemView
from PySide6.QtCore import Qt

from core.view_model import ConverterViewModel

class EquivalentsTable(QWidget):
    """Read-only table with the current input expressed in every unit."""
    def __init__(self, view_model: ConverterViewModel, parent=None):
        super().__init__(parent)
        self.vm = view_model

        self.group = QGroupBox("All Units")
        vbox = QVBoxLayout(self.group)

        self.table = QTableWidget(0, 2)
        self.table.setHorizontalHeaderLabels(["Unit", "Value"])
        self.table.verticalHeader().setVisible(False)
        self.table.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.table.verticalHeader().setSectionResizeMode(QHeaderView.Fixed)
        self.table.verticalHeader().setDefaultSectionSize(28)
        self.table.setAlternatingRowColors(True)
        self.table.setWordWrap(False)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        vbox.addWidget(self.table)

        lay = QVBoxLayout(self)
        lay.addWidget(self.group)

        self.vm.stateChanged.connect(self.refresh)
        self.refresh()

    # ---- public API ----
    def refresh(self):
        df = self.vm.equivalents()
        self.table.setRowCount(len(df))
        for r, row in enumerate(df.itertuples(index=False)):
            self.table.setItem(r, 0, QTableWidgetItem(row.Unit))
            self.table.setItem(r, 1, self._num(row.Text))

    # ---- helpers ----
    @staticmethod
    def _num(txt: str) -> QTableWidgetItem:
        it = QTableWidgetItem(txt)
        it.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
        return it
