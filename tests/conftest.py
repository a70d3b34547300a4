from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from rastervis.model.scene import Scene


@pytest.fixture(scope="session", autouse=True)
def qapp() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


class RecordingSink(Scene):
    """Scene that also counts clears."""
    def __init__(self) -> None:
        super().__init__()
        self.clears = 0

    def clear(self) -> None:
        super().clear()
        self.clears += 1


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
