"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (zoom limits, timer delays, default
   inputs) scattered throughout the code.
2. Consistency: The viewport, the controller and the widgets all read the same
   limits, so a zoom slider can never disagree with the wheel zoom.

Exports:
    SCALE_MIN, SCALE_MAX (float): Allowed pixels per grid unit.
    ZOOM_STEP (float): Scale change per wheel notch.
    DEFAULT_STEP_DELAY_MS (int): Delay between animated steps.
"""
import logging

# Viewport
SCALE_MIN: float = 6.0
SCALE_MAX: float = 120.0
ZOOM_STEP: float = 2.0
DEFAULT_SCALE: float = 20.0

# Drawing surface
CANVAS_MIN_WIDTH: int = 600
CANVAS_MAX_WIDTH: int = 1200
CANVAS_HEIGHT: int = 560
DRAG_CLICK_TOLERANCE_PX: int = 3

# Playback
DEFAULT_STEP_DELAY_MS: int = 120
STEP_DELAY_MIN_MS: int = 1
STEP_DELAY_MAX_MS: int = 2000

# Default inputs
DEFAULT_ALGORITHM: str = "dda"
DEFAULT_LINE: tuple[float, float, float, float] = (0.0, 0.0, 10.0, 6.0)
DEFAULT_CIRCLE: tuple[float, float, float] = (0.0, 0.0, 8.0)

# Export
EXPORT_FILENAME: str = "cg_visualizer.png"

# Logging
LOG_LEVEL: int = logging.INFO
LOG_FILE: str | None = None
