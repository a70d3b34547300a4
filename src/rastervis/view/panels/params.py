from __future__ import annotations

from PySide6.QtCore import Signal, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QLabel, QGridLayout,
    QSizePolicy, QDoubleSpinBox
)

from rastervis.model.inputs import AlgorithmParams, CircleParams, InputKind, LineParams
from rastervis.view.panels.registry import register_editor


class ParamEditorBase(QWidget):
    """Base class for the input editors of one algorithm family."""
    KEY: str = "base"  # Override in subclass
    TITLE: str = "Parameters"

    params_changed = Signal(object)

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        box = QGroupBox(self.tr(self.TITLE), self)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(box)
        self.grid = QGridLayout(box)
        self.grid.setVerticalSpacing(8)
        self._spins: dict[str, QDoubleSpinBox] = {}
        self._row = 0
        self._build_ui()  # subclass defines inputs
        for w in self._spins.values():
            w.valueChanged.connect(self._relay_changed)

    # ---- utilities ----

    def _next_row(self) -> int:
        r = self._row
        self._row += 1
        return r

    def _add_spin(
        self,
        key: str,
        label: str,
        *,
        min_value: float = -1e9,
        max_value: float = 1e9,
        step: float = 1.0,
        default: float = 0.0,
        decimals: int = 3
    ) -> QDoubleSpinBox:
        row = self._next_row()
        lab = QLabel(self.tr(label), self)
        self.grid.addWidget(lab, row, 0)
        w = QDoubleSpinBox(self)
        w.setRange(min_value, max_value)
        w.setSingleStep(step)
        w.setDecimals(decimals)
        w.setValue(default)
        w.setKeyboardTracking(False)
        w.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.grid.addWidget(w, row, 1)
        self._spins[key] = w
        return w

    def values(self) -> dict[str, float]:
        return {k: w.value() for k, w in self._spins.items()}

    def _set_values(self, values: dict[str, float]) -> None:
        """Update all spins at once, emitting a single `params_changed`."""
        for key, value in values.items():
            spin = self._spins[key]
            spin.blockSignals(True)
            spin.setValue(value)
            spin.blockSignals(False)
        self.params_changed.emit(self.params())

    @Slot()
    def _relay_changed(self) -> None:
        self.params_changed.emit(self.params())

    # ---- abstract API for subclasses ----

    def _build_ui(self) -> None:
        """Create form widgets (use `_add_spin` helper)."""
        raise NotImplementedError("`_build_ui` must be implemented in subclass.")

    def params(self) -> AlgorithmParams:
        raise NotImplementedError("`params` must be implemented in subclass.")

    def set_params(self, params: AlgorithmParams) -> None:
        raise NotImplementedError("`set_params` must be implemented in subclass.")


@register_editor
class LineParamsEditor(ParamEditorBase):
    KEY = InputKind.LINE.value
    TITLE = "Line endpoints"

    def _build_ui(self) -> None:
        defaults = LineParams()
        self._add_spin("x1", "x1:", default=defaults.x1)
        self._add_spin("y1", "y1:", default=defaults.y1)
        self._add_spin("x2", "x2:", default=defaults.x2)
        self._add_spin("y2", "y2:", default=defaults.y2)

    def params(self) -> LineParams:
        return LineParams(**self.values())

    def set_params(self, params: LineParams) -> None:
        self._set_values({"x1": params.x1, "y1": params.y1, "x2": params.x2, "y2": params.y2})


@register_editor
class CircleParamsEditor(ParamEditorBase):
    KEY = InputKind.CIRCLE.value
    TITLE = "Circle"

    def _build_ui(self) -> None:
        defaults = CircleParams()
        self._add_spin("xc", "xc:", default=defaults.xc)
        self._add_spin("yc", "yc:", default=defaults.yc)
        self._add_spin("r", "r:", min_value=0.0, default=defaults.r)

    def params(self) -> CircleParams:
        return CircleParams(**self.values())

    def set_params(self, params: CircleParams) -> None:
        self._set_values({"xc": params.xc, "yc": params.yc, "r": params.r})
