"""Tests for the background animation loop."""
import time

from recursivetree.controller.workers import AnimationWorker
from recursivetree.model.state import AnimationState


class FakeClock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def make_worker(clock: FakeClock, checks_per_tick: int = 2) -> AnimationWorker:
    state = AnimationState(program_start_ms=0.0, slow_draw_speed_ms=50)
    return AnimationWorker(state, clock=clock, checks_per_tick=checks_per_tick)


class TestTick:
    def test_emits_redraw_request(self, qapp) -> None:
        worker = make_worker(FakeClock())
        requested = []
        worker.redraw_requested.connect(requested.append)

        assert worker.tick(0.0) == 0
        assert worker.tick(10.0) is None
        assert worker.tick(50.0) == 1
        assert requested == [0, 1]

    def test_state_written_before_signal(self, qapp) -> None:
        worker = make_worker(FakeClock())
        seen = []
        worker.redraw_requested.connect(lambda depth: seen.append(worker.state.pending_depth))
        worker.tick(0.0)
        assert seen == [0]


class TestPoll:
    def test_one_level_per_interval(self, qapp) -> None:
        clock = FakeClock()
        worker = make_worker(clock)
        assert worker.poll() == [0]
        clock.now = 30.0
        assert worker.poll() == []
        clock.now = 50.0
        assert worker.poll() == [1]

    def test_double_check_catches_up(self, qapp) -> None:
        """Two scheduler steps per poll queue two levels when the loop is behind."""
        clock = FakeClock()
        worker = make_worker(clock)
        worker.poll()
        clock.now = 120.0
        assert worker.poll() == [1, 2]
        assert worker.state.pending_depth == 2

    def test_single_check_per_tick(self, qapp) -> None:
        clock = FakeClock()
        worker = make_worker(clock, checks_per_tick=1)
        worker.poll()
        clock.now = 120.0
        assert worker.poll() == [1]


class TestRun:
    def test_thread_advances_and_stops(self, qapp) -> None:
        state = AnimationState(slow_draw_speed_ms=50)
        worker = AnimationWorker(state)
        worker.start()
        deadline = time.monotonic() + 2.0
        while state.steps_completed == 0 and time.monotonic() < deadline:
            time.sleep(0.01)
        worker.stop()

        assert state.steps_completed >= 1
        assert not worker.isRunning()

    def test_error_is_reported(self, qapp) -> None:
        def broken_clock() -> float:
            raise RuntimeError("clock failed")

        worker = AnimationWorker(AnimationState(), clock=broken_clock)
        errors = []
        worker.error_occurred.connect(errors.append)

        worker.run()

        assert errors == ["clock failed"]
