"""
Recursive Tree Canvas
=====================
The QWidget that the trees are painted on.

Why is this file needed?
------------------------
1. Painting: It adapts QPainter to the renderer's CanvasSurface and runs one
   render cycle per paintEvent.
2. Animation: It starts the AnimationWorker on the first paint and turns the
   worker's redraw requests into `update()` calls on the GUI thread.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QSize, Slot
from PySide6.QtGui import QColor, QPainter, QPaintEvent, QPen
from PySide6.QtWidgets import QWidget

from recursivetree import config
from recursivetree.controller.workers import AnimationWorker
from recursivetree.model.geometry_primitives import Segment
from recursivetree.model.state import AnimationState
from recursivetree.view.renderer import TreeRenderer

logger = logging.getLogger(__name__)


def hue_to_color(hue: int) -> QColor:
    """HSB color for a position on the hue wheel."""
    return QColor.fromHsvF(hue / config.HUE_STEPS, config.COLOR_SATURATION, config.COLOR_BRIGHTNESS)


class QPainterSurface:
    """Draws segments with an active QPainter."""

    def __init__(self, painter: QPainter) -> None:
        self.painter = painter

    def draw_segment(self, segment: Segment) -> None:
        if segment.hue is not None:
            self.painter.setPen(QPen(hue_to_color(segment.hue)))
        self.painter.drawLine(segment.start.x, segment.start.y, segment.end.x, segment.end.y)


class TreeCanvas(QWidget):
    """Draws recursive trees; the centre tree grows while the app runs."""

    def __init__(self, parent: QWidget | None = None, state: AnimationState | None = None,
                 renderer: TreeRenderer | None = None) -> None:
        super().__init__(parent)
        self.setAutoFillBackground(True)

        self.state = state if state is not None else AnimationState()
        self.renderer = renderer if renderer is not None else TreeRenderer(self.state)

        self.worker = AnimationWorker(self.state)
        self.worker.redraw_requested.connect(self.on_redraw_requested)
        self.worker.error_occurred.connect(self.on_worker_error)

    def sizeHint(self) -> QSize:
        return QSize(config.FRAME_WIDTH, config.FRAME_HEIGHT)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            self.renderer.paint(QPainterSurface(painter))
        finally:
            painter.end()

        if self.state.mark_started():
            self.worker.start()

    @Slot(int)
    def on_redraw_requested(self, depth: int) -> None:
        self.update()

    @Slot(str)
    def on_worker_error(self, message: str) -> None:
        logger.error(f"Animation stopped: {message}")

    def shutdown(self) -> None:
        """Stops the animation loop, if it was started."""
        if self.worker.isRunning():
            self.worker.stop()
            logger.info("Animation worker stopped.")
