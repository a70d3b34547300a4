"""
Playback Controller
===================
Step-driven playback of a rasterization source.

Why is this file needed?
------------------------
1. Cadence: The algorithm only decides pixels; this controller decides when
   the next one is shown (single step, or a timed loop on the Qt event loop).
2. Ownership: Exactly one source is active at a time. It is created lazily on
   the first step/play and discarded on finish, reset, or any input change.
3. Signals: Table rows, info fields, slope readout and status messages are
   emitted as Qt signals, so the widgets never reach into the controller.

Classes:
    PlaybackState: Idle / Stepping / Playing / Finished.
    PlaybackController: The state machine.
"""
from __future__ import annotations

from enum import StrEnum
import logging

from PySide6.QtCore import QObject, QTimer, Signal

from rastervis import config
from rastervis.model import algorithms  # noqa: F401  (registers the built-in sources)
from rastervis.model.events import PlotEvent
from rastervis.model.geometry import GridPoint
from rastervis.model.inputs import (
    SLOPE_NONE, AlgorithmParams, CircleParams, InputKind, LineParams, slope_readout,
)
from rastervis.model.scene import PlotSink
from rastervis.model.sources import RasterSource, algorithm_info, create_source

logger = logging.getLogger(__name__)

STATUS_IDLE = "No algorithm running"
STATUS_FINISHED = "Finished"
STATUS_PAUSED = "Paused"


class PlaybackState(StrEnum):
    IDLE = "idle"
    STEPPING = "stepping"
    PLAYING = "playing"
    FINISHED = "finished"


class PlaybackController(QObject):
    """
    Pulls PlotEvents from the active source and turns them into drawing and
    logging side effects.

    Pixels go to the `sink` in the order the algorithm emitted them. With arrows
    enabled, each non-empty event gets an arrow from the previous anchor to its
    last pixel.
    """
    state_changed = Signal(object)        # PlaybackState
    status_changed = Signal(str)
    scene_changed = Signal()
    table_reset = Signal()
    table_row_added = Signal(object, object)  # (headers, values)
    info_changed = Signal(object)         # dict[str, str]
    slope_changed = Signal(str)
    finished = Signal()

    def __init__(self, sink: PlotSink, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._sink = sink

        self._algorithm: str = config.DEFAULT_ALGORITHM
        self._line = LineParams()
        self._circle = CircleParams()

        self._state = PlaybackState.IDLE
        self._source: RasterSource | None = None
        self._last_plotted: GridPoint | None = None
        self._diagnostic: str | None = None
        self._running = False
        self._show_arrows = True
        self._step_delay_ms = config.DEFAULT_STEP_DELAY_MS

        # one deferred tick at a time; re-armed after every step while running
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_tick)

    # ------------------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------------------

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def has_source(self) -> bool:
        return self._source is not None

    @property
    def last_plotted(self) -> GridPoint | None:
        return self._last_plotted

    @property
    def diagnostic(self) -> str | None:
        """Why the current/last source could not be built, if it could not."""
        return self._diagnostic

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def line_params(self) -> LineParams:
        return self._line

    @property
    def circle_params(self) -> CircleParams:
        return self._circle

    @property
    def input_kind(self) -> InputKind:
        try:
            return algorithm_info(self._algorithm).kind
        except KeyError:
            return InputKind.LINE

    @property
    def current_params(self) -> AlgorithmParams:
        return self._circle if self.input_kind == InputKind.CIRCLE else self._line

    @property
    def show_arrows(self) -> bool:
        return self._show_arrows

    @show_arrows.setter
    def show_arrows(self, enabled: bool) -> None:
        self._show_arrows = bool(enabled)

    @property
    def step_delay_ms(self) -> int:
        return self._step_delay_ms

    @step_delay_ms.setter
    def step_delay_ms(self, value: int) -> None:
        self._step_delay_ms = max(config.STEP_DELAY_MIN_MS, min(config.STEP_DELAY_MAX_MS, int(value)))

    def static_slope(self) -> str:
        """Slope readout derived from the inputs alone."""
        if self.input_kind == InputKind.LINE:
            return slope_readout(self._line)
        return SLOPE_NONE

    def _set_state(self, state: PlaybackState) -> None:
        if state != self._state:
            logger.debug(f"Playback state {self._state} -> {state}")
            self._state = state
            self.state_changed.emit(state)

    # ------------------------------------------------------------------------------
    # Selection & inputs (any change discards the active source)
    # ------------------------------------------------------------------------------

    def set_algorithm(self, key: str) -> None:
        self._algorithm = key
        self.reset()

    def set_line_params(self, params: LineParams) -> None:
        self._line = params
        self.reset()

    def set_circle_params(self, params: CircleParams) -> None:
        self._circle = params
        self.reset()

    # ------------------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------------------

    def reset(self) -> None:
        """Back to IDLE from any state: source, anchor, scene and logs are cleared."""
        self._timer.stop()
        self._running = False
        self._source = None
        self._last_plotted = None
        self._diagnostic = None
        self._sink.clear()
        self._set_state(PlaybackState.IDLE)

        self.table_reset.emit()
        self.info_changed.emit({})
        self.status_changed.emit(STATUS_IDLE)
        self.slope_changed.emit(self.static_slope())
        self.scene_changed.emit()

    def ensure_source(self) -> None:
        """Create the source from the current selection and inputs if none is active."""
        if self._source is not None:
            return

        self._source, self._diagnostic = create_source(self._algorithm, self.current_params)
        self._last_plotted = None
        self._sink.clear()
        self.table_reset.emit()

        if self._diagnostic:
            self.status_changed.emit(self._diagnostic)
        else:
            logger.info(f"Started {self._label()} with {self.current_params}")
            self.status_changed.emit(self._running_status())
        self.slope_changed.emit(self.static_slope())
        # inputs are redrawn before any pixel is known
        self.scene_changed.emit()

    def step(self) -> bool:
        """
        Pull exactly one event.

        Returns:
            True if an event was applied, False if the run is (or just became) finished.
        """
        if self._state == PlaybackState.FINISHED:
            return False

        self.ensure_source()
        if self._state == PlaybackState.IDLE:
            self._set_state(PlaybackState.STEPPING)

        try:
            event = self._source.advance()
        except Exception as e:
            logger.exception(f"Source '{self._algorithm}' failed while advancing")
            self._diagnostic = f"Algorithm error: {e}"
            event = None

        if event is None:
            self._finish()
            return False

        self._apply(event)
        return True

    def play(self) -> None:
        """Step repeatedly every `step_delay_ms` until paused or finished."""
        if self._running or self._state == PlaybackState.FINISHED:
            return
        resuming = self._source is not None
        self.ensure_source()
        if resuming and not self._diagnostic:
            self.status_changed.emit(self._running_status())
        self._running = True
        self._set_state(PlaybackState.PLAYING)
        self._on_tick()

    def pause(self) -> None:
        """Stop the loop; the source and the arrow anchor are kept."""
        if not self._running:
            return
        self._running = False
        self._timer.stop()
        self._set_state(PlaybackState.STEPPING)
        self.status_changed.emit(STATUS_PAUSED)

    # ------------------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------------------

    def _label(self) -> str:
        return algorithm_info(self._algorithm).label

    def _running_status(self) -> str:
        return f"Running {self._label()}"

    def _on_tick(self) -> None:
        if not self._running:
            return
        self.step()
        if self._running:
            self._timer.start(self._step_delay_ms)

    def _apply(self, event: PlotEvent) -> None:
        for pixel in event.plotted:
            self._sink.plot_pixel(pixel)

        anchor = event.last_pixel
        if anchor is not None:
            if self._show_arrows and self._last_plotted is not None:
                self._sink.plot_arrow(self._last_plotted, anchor)
            self._last_plotted = anchor

        if event.table is not None:
            self.table_row_added.emit(tuple(event.table.headers), tuple(event.table.values))

        if event.info is not None:
            info = {str(k): str(v) for k, v in event.info.items()}
            self.info_changed.emit(info)
            if "slope" in info:
                self.slope_changed.emit(info["slope"])

        self.scene_changed.emit()

    def _finish(self) -> None:
        self._running = False
        self._timer.stop()
        self._source = None
        self._set_state(PlaybackState.FINISHED)

        message = self._diagnostic or STATUS_FINISHED
        logger.info(f"Playback of '{self._algorithm}' finished: {message}")
        self.status_changed.emit(message)
        self.finished.emit()
