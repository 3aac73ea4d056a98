"""Emulated system clock and the busy work of a simulated process."""

from __future__ import annotations


class Clock:
    """A discrete clock that advances one unit per tick."""

    def __init__(self, start: int = 0) -> None:
        self.now = start

    def tick(self) -> int:
        """Advance the clock by one unit and return the new time."""
        self.now += 1
        return self.now

    def __repr__(self) -> str:
        return f"Clock(now={self.now})"


class SimulatedProcess:
    """A process that burns one unit of remaining time per clock tick."""

    def __init__(self, remaining_time: int, clock: Clock | None = None) -> None:
        if remaining_time < 0:
            raise ValueError(f"remaining time cannot be negative, got {remaining_time}")
        self.remaining_time = remaining_time
        self.clock = clock

    @property
    def finished(self) -> bool:
        """True once no time remains."""
        return self.remaining_time <= 0

    def run(self, ticks: int) -> int:
        """Run for up to ticks units; return how many units were consumed."""
        if ticks < 0:
            raise ValueError(f"ticks cannot be negative, got {ticks}")
        consumed = min(ticks, self.remaining_time)
        for _ in range(consumed):
            if self.clock is not None:
                self.clock.tick()
            self.remaining_time -= 1
        return consumed