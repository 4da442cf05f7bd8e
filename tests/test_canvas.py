"""Widget tests, run on the offscreen Qt platform."""
import pytest
from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QImage, QPainter

from recursivetree import config
from recursivetree.model.geometry_primitives import Point, Segment
from recursivetree.model.state import AnimationState
from recursivetree.view.canvas import QPainterSurface, TreeCanvas, hue_to_color
from recursivetree.view.main_window import MainWindow


def blank_image(width: int, height: int) -> QImage:
    image = QImage(width, height, QImage.Format.Format_ARGB32)
    image.fill(QColor(Qt.GlobalColor.white))
    return image


class TestHueToColor:
    def test_hsb_components(self) -> None:
        color = hue_to_color(120)
        assert color.hsvHueF() == pytest.approx(120 / 360, abs=1e-3)
        assert color.hsvSaturationF() == pytest.approx(1.0, abs=1e-3)
        assert color.valueF() == pytest.approx(0.75, abs=1e-2)


class TestQPainterSurface:
    def test_draws_colored_line(self, qapp) -> None:
        image = blank_image(10, 10)
        painter = QPainter(image)
        QPainterSurface(painter).draw_segment(Segment(Point(0, 5), Point(9, 5), hue=120))
        painter.end()

        pixel = image.pixelColor(5, 5)
        assert pixel.green() > pixel.red()
        assert pixel.green() > pixel.blue()
        assert image.pixelColor(5, 1) == QColor(Qt.GlobalColor.white)

    def test_monochrome_uses_current_pen(self, qapp) -> None:
        image = blank_image(10, 10)
        painter = QPainter(image)
        painter.setPen(QColor(Qt.GlobalColor.black))
        QPainterSurface(painter).draw_segment(Segment(Point(2, 0), Point(2, 9)))
        painter.end()

        assert image.pixelColor(2, 4) == QColor(Qt.GlobalColor.black)


class TestTreeCanvas:
    def test_paints_pending_depth(self, qapp) -> None:
        state = AnimationState()
        state.started = True  # keep the worker idle
        state.advance_if_due(state.program_start_ms)

        canvas = TreeCanvas(state=state)
        canvas.resize(config.FRAME_WIDTH, config.FRAME_HEIGHT)
        image = blank_image(config.FRAME_WIDTH, config.FRAME_HEIGHT)
        canvas.render(image)

        assert state.pending_depth is None
        background = image.pixelColor(10, 10)
        assert image.pixelColor(450, 400) != background
        assert image.pixelColor(450, 500) == background

    def test_first_paint_starts_animation(self, qapp) -> None:
        canvas = TreeCanvas()
        canvas.resize(200, 200)
        try:
            canvas.render(blank_image(200, 200))
            assert canvas.state.started
            assert canvas.worker.isRunning()
        finally:
            canvas.shutdown()
        assert not canvas.worker.isRunning()

    def test_size_hint(self, qapp) -> None:
        assert TreeCanvas().sizeHint().width() == config.FRAME_WIDTH


class TestMainWindow:
    def test_window_setup(self, qapp) -> None:
        window = MainWindow()
        assert window.windowTitle() == "Recursive Tree"
        assert isinstance(window.centralWidget(), TreeCanvas)
        assert not window.canvas.state.started
        window.close()
