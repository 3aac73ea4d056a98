import pytest

from osched.clock import Clock, SimulatedProcess


def test_clock_starts_at_zero_and_ticks():
    clock = Clock()
    assert clock.now == 0
    assert clock.tick() == 1
    assert clock.tick() == 2
    assert clock.now == 2


def test_clock_custom_start():
    clock = Clock(start=7)
    assert clock.tick() == 8


def test_process_runs_partially():
    proc = SimulatedProcess(5)
    assert proc.run(3) == 3
    assert proc.remaining_time == 2
    assert not proc.finished


def test_process_stops_at_zero():
    proc = SimulatedProcess(2)
    assert proc.run(10) == 2
    assert proc.remaining_time == 0
    assert proc.finished


def test_process_advances_attached_clock():
    clock = Clock()
    proc = SimulatedProcess(4, clock)
    consumed = proc.run(3)
    assert clock.now == consumed
    proc.run(5)
    assert clock.now == 4
    assert proc.finished


def test_zero_runtime_process_is_finished():
    proc = SimulatedProcess(0)
    assert proc.finished
    assert proc.run(1) == 0


def test_negative_ticks_rejected():
    with pytest.raises(ValueError):
        SimulatedProcess(3).run(-1)


def test_negative_remaining_rejected():
    with pytest.raises(ValueError):
        SimulatedProcess(-2)