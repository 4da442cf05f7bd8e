"""
Geometric Primitives for the tree renderer.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Point:
    """A point in screen space (x right, y down), in whole pixels."""
    x: int
    y: int

    def to_array(self) -> npt.NDArray[np.int64]:
        return np.array([self.x, self.y], dtype=np.int64)


@dataclass(frozen=True)
class Segment:
    """
    A single branch of the tree.

    `hue` is None for monochrome branches, which are drawn with the
    canvas's current pen color.
    """
    start: Point
    end: Point
    hue: Optional[int] = None

    @property
    def length(self) -> float:
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)


def calculate_end_point(start: Point, angle: float, length: float) -> Point:
    """
    Calculates the end point given a starting point, angle, and length.

    Coordinates are truncated toward zero, so every child branch starts from
    a whole-pixel point.

    Args:
        start: The starting point.
        angle: Direction in degrees; 0 points along +X, 90 points down.
        length: Length of the branch.
    """
    rad = math.radians(angle)
    end_x = int(math.cos(rad) * length + start.x)
    end_y = int(math.sin(rad) * length + start.y)
    return Point(end_x, end_y)


def segments_to_array(segments: Iterable[Segment]) -> npt.NDArray[np.int64]:
    """Packs segments into an (N, 4) array of [x1, y1, x2, y2] rows."""
    rows = [(s.start.x, s.start.y, s.end.x, s.end.y) for s in segments]
    if not rows:
        return np.empty((0, 4), dtype=np.int64)
    return np.array(rows, dtype=np.int64)
