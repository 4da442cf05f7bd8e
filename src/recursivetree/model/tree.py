"""
Recursive Tree Generation
=========================
Generates the branches of a binary fractal tree as a stream of segments.

Each branch spawns two children from its end point: one turned by the left
rule and one by the right rule, each shorter by its decay factor. Recursion
stops once a branch would be shorter than the minimum length.

Three variants are provided:
    generate_tree: monochrome branches.
    generate_tree_with_colors: each branch takes the next hue from a HueCursor.
    generate_tree_to_depth_with_colors: as above, but only the first
        `depth + 1` branches counted by a shared DescentCounter are produced.

The generators are lazy; the hue cursor and descent counter advance as the
segments are consumed, in depth-first pre-order.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from recursivetree import config
from recursivetree.model.geometry_primitives import Point, Segment, calculate_end_point


@dataclass(frozen=True)
class BranchRule:
    """How a child branch is derived from its parent."""
    angle_offset: float
    decay: float


@dataclass(frozen=True)
class TreeParameters:
    """
    Shape of the tree. The defaults reproduce the classic asymmetric tree.

    Raises:
        ValueError: if the parameters would not terminate the recursion.
    """
    min_length: float = config.MIN_LENGTH
    left: BranchRule = field(default_factory=lambda: BranchRule(*config.LEFT_BRANCH))
    right: BranchRule = field(default_factory=lambda: BranchRule(*config.RIGHT_BRANCH))

    def __post_init__(self) -> None:
        if self.min_length <= 0:
            raise ValueError(f"Minimum branch length must be positive, got {self.min_length}.")
        for name, rule in (("left", self.left), ("right", self.right)):
            if not 0.0 < rule.decay < 1.0:
                raise ValueError(f"The {name} decay factor must be in (0, 1), got {rule.decay}.")

    def children(self, angle: float, length: float) -> tuple[tuple[float, float], tuple[float, float]]:
        """(angle, length) of the left and right child branches."""
        return (
            (angle + self.left.angle_offset, length * self.left.decay),
            (angle + self.right.angle_offset, length * self.right.decay),
        )


DEFAULT_PARAMETERS = TreeParameters()


class HueCursor:
    """Rotating hue counter in [0, 359], advanced once per colored branch."""

    def __init__(self, steps: int = config.HUE_STEPS) -> None:
        self._steps = steps
        self._hue = 0

    @property
    def hue(self) -> int:
        return self._hue

    def reset(self) -> None:
        self._hue = 0

    def next_hue(self) -> int:
        self._hue += 1
        if self._hue > self._steps - 1:
            self._hue = 0
        return self._hue


class DescentCounter:
    """Counts the recursive calls admitted during one depth-limited draw."""

    def __init__(self) -> None:
        self._value = 0

    @property
    def value(self) -> int:
        return self._value

    def reset(self) -> None:
        self._value = 0

    def enter(self) -> int:
        """Returns the count before this call, then increments it."""
        value = self._value
        self._value += 1
        return value


def generate_tree(
    start: Point,
    angle: float,
    length: float,
    params: TreeParameters = DEFAULT_PARAMETERS,
) -> Iterator[Segment]:
    """
    Recursively generates a monochrome tree.

    Args:
        start: The starting point.
        angle: Direction of the trunk in degrees.
        length: Length of the trunk.
        params: Branching rules and minimum length.
    """
    if length < params.min_length:
        return

    end = calculate_end_point(start, angle, length)
    yield Segment(start, end)

    for child_angle, child_length in params.children(angle, length):
        yield from generate_tree(end, child_angle, child_length, params)


def generate_tree_with_colors(
    start: Point,
    angle: float,
    length: float,
    hue: HueCursor,
    params: TreeParameters = DEFAULT_PARAMETERS,
) -> Iterator[Segment]:
    """
    Recursively generates a tree whose branches cycle through the color wheel.

    See generate_tree; each branch additionally takes `hue.next_hue()`.
    """
    if length < params.min_length:
        return

    end = calculate_end_point(start, angle, length)
    yield Segment(start, end, hue.next_hue())

    for child_angle, child_length in params.children(angle, length):
        yield from generate_tree_with_colors(end, child_angle, child_length, hue, params)


def generate_tree_to_depth_with_colors(
    start: Point,
    angle: float,
    length: float,
    depth: int,
    hue: HueCursor,
    counter: DescentCounter,
    params: TreeParameters = DEFAULT_PARAMETERS,
) -> Iterator[Segment]:
    """
    Recursively generates a colored tree up to a certain depth.

    A call proceeds while its length is long enough AND the shared counter,
    read before incrementing, is <= depth. The counter only advances for calls
    that pass the length check, and it is shared by every call that uses it,
    so at most `depth + 1` branches are produced until it is reset.

    Args:
        start: The starting point.
        angle: Direction of the trunk in degrees.
        length: Length of the trunk.
        depth: The depth to draw until.
        hue: Shared hue cursor.
        counter: Shared descent counter.
        params: Branching rules and minimum length.
    """
    if length < params.min_length or counter.enter() > depth:
        return

    end = calculate_end_point(start, angle, length)
    yield Segment(start, end, hue.next_hue())

    for child_angle, child_length in params.children(angle, length):
        yield from generate_tree_to_depth_with_colors(
            end, child_angle, child_length, depth, hue, counter, params
        )
