"""
Animation State (Data Model)
============================
This module defines the state shared between the paint path and the
background animation loop.

Why is this file needed?
------------------------
1. State Management: It holds the animation progress (steps completed, the
   depth waiting to be painted) and the per-paint counters in one place.
2. Thread Safety: The animation loop and the GUI thread only touch the shared
   fields through the accessors below, which hold a lock.

Classes:
    AnimationState: The container owned by the canvas.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import threading
import time
from typing import Optional

from recursivetree import config
from recursivetree.model.tree import DescentCounter, HueCursor

logger = logging.getLogger(__name__)


def now_ms() -> float:
    """Monotonic wall-clock time in milliseconds."""
    return time.monotonic() * 1000.0


@dataclass
class AnimationState:
    """
    Progress of the slowly drawn tree.

    The animation loop calls `advance_if_due`; the paint path calls
    `take_pending_depth`. `hue` and `descent` are only used while painting.
    """
    program_start_ms: float = field(default_factory=now_ms)
    slow_draw_speed_ms: int = config.SLOW_DRAW_SPEED_MS

    steps_completed: int = 0
    pending_depth: Optional[int] = None
    started: bool = False

    hue: HueCursor = field(default_factory=HueCursor)
    descent: DescentCounter = field(default_factory=DescentCounter)

    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def elapsed_ms(self, current_ms: float) -> float:
        return current_ms - self.program_start_ms

    def advance_if_due(self, current_ms: float) -> Optional[int]:
        """
        Queues the next depth level if enough time has passed.

        Returns:
            The newly pending depth, or None if the next level is not due yet.
        """
        with self._lock:
            if self.elapsed_ms(current_ms) < self.steps_completed * self.slow_draw_speed_ms:
                return None

            self.pending_depth = self.steps_completed
            self.steps_completed += 1
            return self.pending_depth

    def take_pending_depth(self) -> Optional[int]:
        """Returns the pending depth and clears it."""
        with self._lock:
            depth = self.pending_depth
            self.pending_depth = None
            return depth

    def mark_started(self) -> bool:
        """Returns True only the first time it is called."""
        with self._lock:
            if self.started:
                return False
            self.started = True
        logger.info("Slow tree animation started.")
        return True
