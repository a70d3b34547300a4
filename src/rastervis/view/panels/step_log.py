from __future__ import annotations

from html import escape

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QAbstractItemView, QFormLayout, QGroupBox, QHeaderView, QLabel, QTableWidget,
    QTableWidgetItem, QVBoxLayout, QWidget,
)

from rastervis.model.geometry import GridPoint
from rastervis.model.inputs import SLOPE_NONE

DEFAULT_HEADERS = ("Step Data",)


class StepLogPanel(QWidget):
    """Right-side panel: status/info box, slope and cursor readouts, step table."""
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)

        grp_info = QGroupBox(self.tr("Info"), self)
        form = QFormLayout(grp_info)
        self.lbl_status = QLabel(grp_info)
        self.lbl_info = QLabel(grp_info)
        self.lbl_info.setTextFormat(Qt.TextFormat.RichText)
        self.lbl_info.setWordWrap(True)
        self.lbl_slope = QLabel(SLOPE_NONE, grp_info)
        self.lbl_coords = QLabel("(0.00, 0.00)", grp_info)
        form.addRow(self.tr("Status:"), self.lbl_status)
        form.addRow(self.lbl_info)
        form.addRow(self.tr("Slope:"), self.lbl_slope)
        form.addRow(self.tr("Cursor:"), self.lbl_coords)
        layout.addWidget(grp_info)

        self.table = QTableWidget(0, 0, self)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        layout.addWidget(self.table, 1)

        self._headers: tuple[str, ...] = ()
        self.reset_table()

    # ---- step table ----

    def reset_table(self) -> None:
        self._set_headers(DEFAULT_HEADERS)

    def _set_headers(self, headers: tuple[str, ...]) -> None:
        self._headers = tuple(headers)
        self.table.setRowCount(0)
        self.table.setColumnCount(len(self._headers))
        self.table.setHorizontalHeaderLabels(list(self._headers))

    def add_row(self, headers: tuple[str, ...], values: tuple[str, ...]) -> None:
        """Append a row; a new header set starts a fresh table."""
        if tuple(headers) != self._headers:
            self._set_headers(tuple(headers))
        row = self.table.rowCount()
        self.table.insertRow(row)
        for col, value in enumerate(values[: len(self._headers)]):
            self.table.setItem(row, col, QTableWidgetItem(str(value)))
        self.table.scrollToBottom()

    # ---- readouts ----

    def set_status(self, text: str) -> None:
        self.lbl_status.setText(text)

    def set_info(self, info: dict[str, str]) -> None:
        self.lbl_info.setText("<br>".join(f"<b>{escape(k)}:</b> {escape(v)}" for k, v in info.items()))

    def set_slope(self, text: str) -> None:
        self.lbl_slope.setText(text)

    def set_coords(self, point: GridPoint) -> None:
        self.lbl_coords.setText(f"({point.x:.2f}, {point.y:.2f})")
