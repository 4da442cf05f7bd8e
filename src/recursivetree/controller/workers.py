"""
Background Workers (Threading)
==============================
This module contains the QThread that drives the slowly drawn tree.

Why is this file needed?
------------------------
1. Timing: The animation advances on wall-clock time, independent of when
   the GUI decides to paint.
2. Signals: Drawing is only allowed on the GUI thread. The worker never
   paints; it updates the AnimationState and asks for a repaint via a Qt
   Signal, which Qt delivers to the canvas through its event queue.

Classes:
    AnimationWorker: Polls the clock and queues one depth level per interval.
"""
import logging
from typing import Callable, Optional

from PySide6.QtCore import QThread, Signal

from recursivetree import config
from recursivetree.model.state import AnimationState, now_ms

logger = logging.getLogger(__name__)


class AnimationWorker(QThread):
    # Signals to update the UI from the background
    redraw_requested = Signal(int)  # the depth that became pending
    error_occurred = Signal(str)

    def __init__(
        self,
        state: AnimationState,
        clock: Callable[[], float] = now_ms,
        poll_interval_ms: int = config.POLL_INTERVAL_MS,
        checks_per_tick: int = config.SCHEDULER_CHECKS_PER_TICK,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self.state = state
        self.clock = clock
        self.poll_interval_ms = poll_interval_ms
        self.checks_per_tick = checks_per_tick
        self.is_running = True

    def tick(self, current_ms: float) -> Optional[int]:
        """
        One scheduler step: queue the next depth level if it is due.

        Returns:
            The depth that was queued, if any.
        """
        depth = self.state.advance_if_due(current_ms)
        if depth is not None:
            logger.debug(f"Depth {depth} due at {self.state.elapsed_ms(current_ms):.0f} ms.")
            self.redraw_requested.emit(depth)
        return depth

    def poll(self) -> list[int]:
        """Reads the clock once and runs the scheduler step `checks_per_tick` times."""
        current = self.clock()
        queued = []
        for _ in range(self.checks_per_tick):
            depth = self.tick(current)
            if depth is not None:
                queued.append(depth)
        return queued

    def run(self) -> None:
        try:
            logger.info("Starting animation loop in background thread...")
            while self.is_running:
                self.poll()
                self.msleep(self.poll_interval_ms)
            logger.info("Animation loop stopped.")
        except Exception as e:
            logger.error(f"Error in AnimationWorker: {e}")
            self.error_occurred.emit(str(e))

    def stop(self) -> None:
        self.is_running = False
        self.wait()
