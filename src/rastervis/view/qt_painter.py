"""
QPainter implementation of the renderer's `Painter` protocol.
Maps semantic draw roles to pens, brushes and marker shapes.
"""
from __future__ import annotations

import math

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QPainter, QPainterPath, QPen

from rastervis.model.geometry import PixelPoint
from rastervis.view.renderer import DrawRole

ARROW_HEAD = 8.0

# role -> (color, line width, dashed)
_STROKES: dict[DrawRole, tuple[QColor, float, bool]] = {
    DrawRole.GRID_LINE: (QColor("#eef3ff"), 1.0, False),
    DrawRole.AXIS: (QColor("#111111"), 2.0, False),
    DrawRole.TICK: (QColor("#111111"), 1.0, False),
    DrawRole.INPUT_OUTLINE: (QColor(10, 120, 10, 178), 1.5, False),
    DrawRole.RADIUS_GUIDE: (QColor("#0b66ff"), 1.0, True),
    DrawRole.ARROW: (QColor(200, 20, 20, 230), 2.0, False),
}

_FILLS: dict[DrawRole, QColor] = {
    DrawRole.ENDPOINT: QColor("#0b66ff"),
    DrawRole.PLOTTED_PIXEL: QColor("black"),
    DrawRole.GHOST: QColor(0, 0, 0, 51),
    DrawRole.LABEL: QColor("#111111"),
    DrawRole.ARROW: QColor(200, 20, 20, 230),
}


def _qp(p: PixelPoint) -> QPointF:
    return QPointF(p.x, p.y)


class QtPainter:
    """Adapter around an active QPainter (created in a widget's paintEvent)."""
    def __init__(self, painter: QPainter) -> None:
        self._p = painter

    def _stroke(self, role: DrawRole) -> None:
        color, width, dashed = _STROKES.get(role, (QColor("black"), 1.0, False))
        pen = QPen(color, width)
        if dashed:
            pen.setDashPattern([6.0, 4.0])
        self._p.setPen(pen)
        self._p.setBrush(Qt.BrushStyle.NoBrush)

    def clear(self, width: int, height: int) -> None:
        self._p.fillRect(QRectF(0, 0, width, height), QColor("white"))

    def line(self, start: PixelPoint, end: PixelPoint, role: DrawRole) -> None:
        self._stroke(role)
        self._p.drawLine(_qp(start), _qp(end))

    def marker(self, center: PixelPoint, size: float, role: DrawRole, color: str | None = None) -> None:
        fill = QColor(color) if color else _FILLS.get(role, QColor("black"))
        self._p.setPen(Qt.PenStyle.NoPen)
        self._p.setBrush(QBrush(fill))
        if role == DrawRole.ENDPOINT:
            self._p.drawEllipse(_qp(center), size, size)
            return
        # square pixel snapped to whole device pixels
        w = int(size)
        self._p.fillRect(QRectF(round(center.x) - w // 2, round(center.y) - w // 2, w, w), fill)

    def circle(self, center: PixelPoint, radius: float, role: DrawRole) -> None:
        self._stroke(role)
        self._p.drawEllipse(_qp(center), radius, radius)

    def arrow(self, start: PixelPoint, end: PixelPoint, role: DrawRole) -> None:
        self._stroke(role)
        self._p.drawLine(_qp(start), _qp(end))

        angle = math.atan2(end.y - start.y, end.x - start.x)
        head = QPainterPath(_qp(end))
        for sign in (-1, 1):
            a = angle + sign * math.pi / 6
            head.lineTo(end.x - ARROW_HEAD * math.cos(a), end.y - ARROW_HEAD * math.sin(a))
        head.closeSubpath()
        self._p.fillPath(head, QBrush(_FILLS[DrawRole.ARROW]))

    def text(self, anchor: PixelPoint, text: str, role: DrawRole, size: float) -> None:
        font = QFont("Arial")
        font.setPixelSize(int(size))
        self._p.setFont(font)
        self._p.setPen(QPen(_FILLS.get(role, QColor("black"))))
        self._p.drawText(_qp(anchor), text)
