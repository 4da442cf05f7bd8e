"""Shared fixtures: a headless QApplication for the widget tests."""
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from recursivetree.model.geometry_primitives import Segment


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


class RecordingSurface:
    """CanvasSurface that remembers every segment it was asked to draw."""

    def __init__(self) -> None:
        self.segments: list[Segment] = []

    def draw_segment(self, segment: Segment) -> None:
        self.segments.append(segment)


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


def expected_count(length: float, min_length: float = 5.0) -> int:
    """Segment count of the default tree, straight from its recurrence."""
    if length < min_length:
        return 0
    return 1 + expected_count(length * 0.75, min_length) + expected_count(length * 0.66, min_length)
