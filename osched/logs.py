"""Scheduler, performance and memory log writers."""

from __future__ import annotations

import math
from enum import Enum
from typing import Protocol, TextIO

from .pcb import PCB

SCHEDULER_HEADER = "#At time x process y state arr w total z remain y wait k"
MEMORY_HEADER = "#At time x allocated y bytes for process z from i to j"


class _HasTime(Protocol):
    now: int


class LogEvent(Enum):
    """Kinds of process events written to the scheduler log."""

    STARTED = 0
    FINISHED = 1
    STOPPED = 2
    RESUMED = 3
    CONTINUED = 4


def _ratio(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator > 0:
        return math.inf
    if numerator < 0:
        return -math.inf
    return math.nan


class SimulationLog:
    """Writes event lines and accumulates the statistics for the performance file."""

    def __init__(
        self,
        clock: _HasTime,
        log_stream: TextIO,
        perf_stream: TextIO,
        memory_stream: TextIO,
    ) -> None:
        self.clock = clock
        self.log_stream = log_stream
        self.perf_stream = perf_stream
        self.memory_stream = memory_stream
        self.total_run = 0.0
        self.total_wait = 0.0
        self.total_wta = 0.0
        self.last_finish = 0.0
        print(SCHEDULER_HEADER, file=self.log_stream)
        print(MEMORY_HEADER, file=self.memory_stream)

    def process_event(self, pcb: PCB, event: LogEvent) -> None:
        """Write one scheduler log line for the event."""
        now = self.clock.now
        common = (
            f"arr {pcb.arrival_time} total {pcb.running_time} "
            f"remain {pcb.remaining_time} wait {pcb.wait_time}"
        )
        if event is LogEvent.STARTED:
            line = f"At time {now} process {pcb.id} started {common}"
        elif event is LogEvent.FINISHED:
            turnaround = now - pcb.arrival_time
            weighted = _ratio(turnaround, pcb.running_time)
            self.last_finish = float(now)
            self.total_run += pcb.running_time
            self.total_wait += pcb.wait_time
            self.total_wta += weighted
            line = (
                f"At time {now} process {pcb.id} finished {common} "
                f"TA {turnaround} WTA {weighted:.2f}"
            )
        elif event is LogEvent.STOPPED:
            line = f"At time {now} process {pcb.id} stopped {common}"
        elif event is LogEvent.RESUMED:
            line = f"At time {now} process {pcb.id} resumed {common}"
        else:
            line = (
                f"At time {now} process {pcb.id} still having the cpu  "
                f"remain {pcb.remaining_time} wait {pcb.wait_time}"
            )
        print(line, file=self.log_stream)

    def memory_event(self, allocated: bool, pcb: PCB, start: int, end: int) -> None:
        """Write one memory log line for an allocation or a release."""
        verb = "allocated" if allocated else "freed"
        print(
            f"At time {self.clock.now} {verb} {pcb.memory_size} bytes "
            f"for process {pcb.id} from {start} to {end}",
            file=self.memory_stream,
        )

    def write_performance(self, count: int) -> None:
        """Write CPU utilisation and the averages over count processes."""
        utilization = _ratio(self.total_run, self.last_finish) * 100
        print(f"CPU utilization = {utilization:.2f}%", file=self.perf_stream)
        print(f"Avg WTA = {_ratio(self.total_wta, count):.2f}", file=self.perf_stream)
        print(f"Avg Waiting = {_ratio(self.total_wait, count):.2f}", file=self.perf_stream)