"""
Configuration & Constants
=========================
This module serves as the central registry for the fixed constants of the
recursive tree demo.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (lengths, angles, timings) from being
   scattered throughout the geometry, rendering and scheduling code.
2. Tuning: The visual shape of the tree depends on these exact values, so they
   are kept together where they can be reviewed at a glance.

Exports:
    MIN_LENGTH (float): Branches shorter than this are not drawn.
    SLOW_DRAW_SPEED_MS (int): How often, in ms, the animated tree grows by one level.
    ONLY_DRAW_SLOW_TREE (bool): Draw only the animated tree.
"""
from typing import Tuple

# --- Window ---
TITLE: str = "Recursive Tree"
FRAME_WIDTH: int = 900
FRAME_HEIGHT: int = 900

# --- Render mode ---
# Only draw the slowly drawn tree, in order to visualize it better
ONLY_DRAW_SLOW_TREE: bool = True

# --- Tree geometry ---
MIN_LENGTH: float = 5.0
TRUNK_LENGTH: float = 100.0

# (angle offset in degrees, length decay factor) for each child branch
LEFT_BRANCH: Tuple[float, float] = (-30.0, 0.75)
RIGHT_BRANCH: Tuple[float, float] = (50.0, 0.66)

# Trunk directions: up and down from the origin (screen Y grows downward)
TRUNK_ANGLES: Tuple[float, float] = (-90.0, 90.0)

PLAIN_TREE_ORIGIN: Tuple[int, int] = (225, 450)
COLOR_TREE_ORIGIN: Tuple[int, int] = (675, 450)
SLOW_TREE_ORIGIN: Tuple[int, int] = (450, 450)

# --- Colors (HSB) ---
HUE_STEPS: int = 360
COLOR_SATURATION: float = 1.0
COLOR_BRIGHTNESS: float = 0.75

# --- Animation ---
SLOW_DRAW_SPEED_MS: int = 50
POLL_INTERVAL_MS: int = 1
SCHEDULER_CHECKS_PER_TICK: int = 2
