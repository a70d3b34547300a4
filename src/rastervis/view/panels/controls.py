from __future__ import annotations

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtWidgets import (
    QCheckBox, QComboBox, QFormLayout, QGridLayout, QGroupBox, QHBoxLayout, QLabel,
    QPushButton, QSlider, QSpinBox, QStackedWidget, QStyle, QVBoxLayout, QWidget,
)

from rastervis import config
from rastervis.model import algorithms  # noqa: F401  (registers the built-in sources)
from rastervis.model.inputs import CircleParams, InputKind, LineParams
from rastervis.model.sources import algorithm_info, list_keys
from rastervis.view.panels.params import ParamEditorBase
from rastervis.view.panels.registry import create_editor


class ControlPanel(QWidget):
    """
    Left-side panel: algorithm selection, inputs, playback and view options.

    Top: algorithm selector. Below: the parameter editor for the selected
    algorithm's input kind. Emits signals only; the main window wires them.
    """
    algorithm_changed = Signal(str)
    line_params_changed = Signal(object)
    circle_params_changed = Signal(object)

    play_clicked = Signal()
    pause_clicked = Signal()
    next_clicked = Signal()
    reset_clicked = Signal()
    export_clicked = Signal()

    step_delay_changed = Signal(int)
    zoom_changed = Signal(int)
    snap_toggled = Signal(bool)
    arrows_toggled = Signal(bool)
    top_left_origin_toggled = Signal(bool)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        root = QVBoxLayout(self)

        # --- Algorithm ---
        grp_algo = QGroupBox(self.tr("Algorithm"), self)
        sel = QGridLayout(grp_algo)
        sel.addWidget(QLabel(self.tr("Algorithm:"), grp_algo), 0, 0)
        self.combo_algo = QComboBox(grp_algo)
        for key in list_keys():
            self.combo_algo.addItem(algorithm_info(key).label, userData=key)
        default_index = self.combo_algo.findData(config.DEFAULT_ALGORITHM)
        if default_index >= 0:
            self.combo_algo.setCurrentIndex(default_index)
        sel.addWidget(self.combo_algo, 0, 1)
        root.addWidget(grp_algo)

        # --- Inputs (one editor per input kind) ---
        self.stack = QStackedWidget(self)
        self._editors: dict[InputKind, ParamEditorBase] = {}
        for kind in InputKind:
            editor = create_editor(kind.value, parent=self.stack)
            self._editors[kind] = editor
            self.stack.addWidget(editor)
        self._editors[InputKind.LINE].params_changed.connect(self.line_params_changed)
        self._editors[InputKind.CIRCLE].params_changed.connect(self.circle_params_changed)
        root.addWidget(self.stack)

        # --- Playback ---
        grp_play = QGroupBox(self.tr("Playback"), self)
        l_play = QVBoxLayout(grp_play)

        hbox_buttons = QHBoxLayout()
        self.btn_play = QPushButton(self.tr("Play"))
        self.btn_play.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_MediaPlay))
        self.btn_pause = QPushButton(self.tr("Pause"))
        self.btn_pause.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_MediaPause))
        self.btn_next = QPushButton(self.tr("Next"))
        self.btn_next.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_MediaSkipForward))
        self.btn_reset = QPushButton(self.tr("Reset"))
        for btn in (self.btn_play, self.btn_pause, self.btn_next, self.btn_reset):
            hbox_buttons.addWidget(btn)
        l_play.addLayout(hbox_buttons)

        form_play = QFormLayout()
        self.spin_delay = QSpinBox()
        self.spin_delay.setRange(config.STEP_DELAY_MIN_MS, config.STEP_DELAY_MAX_MS)
        self.spin_delay.setValue(config.DEFAULT_STEP_DELAY_MS)
        self.spin_delay.setSuffix(" ms")
        form_play.addRow(self.tr("Step delay:"), self.spin_delay)
        l_play.addLayout(form_play)
        root.addWidget(grp_play)

        # --- View ---
        grp_view = QGroupBox(self.tr("View"), self)
        form_view = QFormLayout(grp_view)

        self.slider_zoom = QSlider(Qt.Orientation.Horizontal)
        self.slider_zoom.setRange(int(config.SCALE_MIN), int(config.SCALE_MAX))
        self.slider_zoom.setValue(int(config.DEFAULT_SCALE))
        form_view.addRow(self.tr("Zoom:"), self.slider_zoom)

        self.chk_snap = QCheckBox(self.tr("Snap to grid"))
        self.chk_snap.setChecked(True)
        self.chk_arrows = QCheckBox(self.tr("Show arrows"))
        self.chk_arrows.setChecked(True)
        self.chk_top_left = QCheckBox(self.tr("Origin at top-left"))
        form_view.addRow(self.chk_snap)
        form_view.addRow(self.chk_arrows)
        form_view.addRow(self.chk_top_left)

        self.btn_export = QPushButton(self.tr("Download PNG..."))
        form_view.addRow(self.btn_export)
        root.addWidget(grp_view)

        root.addStretch()

        # wiring
        self.combo_algo.currentIndexChanged.connect(self._on_algorithm_changed)
        self.btn_play.clicked.connect(self.play_clicked)
        self.btn_pause.clicked.connect(self.pause_clicked)
        self.btn_next.clicked.connect(self.next_clicked)
        self.btn_reset.clicked.connect(self.reset_clicked)
        self.btn_export.clicked.connect(self.export_clicked)
        self.spin_delay.valueChanged.connect(self.step_delay_changed)
        self.slider_zoom.valueChanged.connect(self.zoom_changed)
        self.chk_snap.toggled.connect(self.snap_toggled)
        self.chk_arrows.toggled.connect(self.arrows_toggled)
        self.chk_top_left.toggled.connect(self.top_left_origin_toggled)

        self._show_editor(self.current_kind())

    # ---- queries ----

    def current_algorithm(self) -> str:
        return self.combo_algo.currentData()

    def current_kind(self) -> InputKind:
        key = self.current_algorithm()
        return algorithm_info(key).kind if key else InputKind.LINE

    def line_params(self) -> LineParams:
        return self._editors[InputKind.LINE].params()

    def circle_params(self) -> CircleParams:
        return self._editors[InputKind.CIRCLE].params()

    # ---- updates from the canvas ----

    def set_line_params(self, params: LineParams) -> None:
        self._editors[InputKind.LINE].set_params(params)

    def set_circle_params(self, params: CircleParams) -> None:
        self._editors[InputKind.CIRCLE].set_params(params)

    def set_zoom(self, scale: float) -> None:
        """Mirror a wheel zoom into the slider without re-emitting `zoom_changed`."""
        self.slider_zoom.blockSignals(True)
        self.slider_zoom.setValue(int(round(scale)))
        self.slider_zoom.blockSignals(False)

    # ---- internals ----

    def _show_editor(self, kind: InputKind) -> None:
        self.stack.setCurrentWidget(self._editors[kind])

    @Slot()
    def _on_algorithm_changed(self) -> None:
        self._show_editor(self.current_kind())
        self.algorithm_changed.emit(self.current_algorithm())
