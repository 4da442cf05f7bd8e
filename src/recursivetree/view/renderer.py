"""
Paint orchestration for the recursive tree canvas.

Kept free of Qt so the drawing order can be checked against any surface that
accepts line segments.
"""
from __future__ import annotations

import logging
from typing import Iterable, Protocol

from recursivetree import config
from recursivetree.model.geometry_primitives import Point, Segment
from recursivetree.model.state import AnimationState
from recursivetree.model.tree import (
    DEFAULT_PARAMETERS,
    TreeParameters,
    generate_tree,
    generate_tree_to_depth_with_colors,
    generate_tree_with_colors,
)

logger = logging.getLogger(__name__)


class CanvasSurface(Protocol):
    def draw_segment(self, segment: Segment) -> None: ...


class TreeRenderer:
    """Draws the trees for one paint cycle onto a CanvasSurface."""

    def __init__(
        self,
        state: AnimationState,
        params: TreeParameters = DEFAULT_PARAMETERS,
        only_draw_slow_tree: bool = config.ONLY_DRAW_SLOW_TREE,
        trunk_length: float = config.TRUNK_LENGTH,
    ) -> None:
        self.state = state
        self.params = params
        self.only_draw_slow_tree = only_draw_slow_tree
        self.trunk_length = trunk_length

    def paint(self, surface: CanvasSurface) -> int:
        """
        Runs one paint cycle.

        Returns:
            The number of segments drawn.
        """
        hue = self.state.hue
        hue.reset()
        drawn = 0

        if not self.only_draw_slow_tree:
            plain = Point(*config.PLAIN_TREE_ORIGIN)
            colored = Point(*config.COLOR_TREE_ORIGIN)
            for angle in config.TRUNK_ANGLES:
                drawn += self._draw(surface, generate_tree(plain, angle, self.trunk_length, self.params))
            for angle in config.TRUNK_ANGLES:
                drawn += self._draw(
                    surface,
                    generate_tree_with_colors(colored, angle, self.trunk_length, hue, self.params),
                )

        depth = self.state.take_pending_depth()
        if depth is not None:
            drawn += self.paint_to_depth(surface, depth)

        logger.debug(f"Painted {drawn} segments.")
        return drawn

    def paint_to_depth(self, surface: CanvasSurface, depth: int) -> int:
        """Draws the depth-limited colorful pair at the canvas center."""
        self.state.descent.reset()
        self.state.hue.reset()

        origin = Point(*config.SLOW_TREE_ORIGIN)
        drawn = 0
        # Counter and hue carry over from the upward half into the downward one
        for angle in config.TRUNK_ANGLES:
            drawn += self._draw(
                surface,
                generate_tree_to_depth_with_colors(
                    origin, angle, self.trunk_length, depth,
                    self.state.hue, self.state.descent, self.params,
                ),
            )
        return drawn

    @staticmethod
    def _draw(surface: CanvasSurface, segments: Iterable[Segment]) -> int:
        count = 0
        for segment in segments:
            surface.draw_segment(segment)
            count += 1
        return count
