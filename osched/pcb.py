"""Process control block and the enumerations shared by the scheduler."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class ProcessState(Enum):
    """Lifecycle state of a simulated process."""

    WAITING = 0
    RUNNING = 1
    READY = 2


class Algorithm(IntEnum):
    """Scheduling algorithms, numbered as on the command line."""

    SJF = 1
    HPF = 2
    RR = 3
    MLFL = 4


@dataclass
class PCB:
    """Bookkeeping for one simulated process."""

    id: int
    arrival_time: int
    running_time: int
    priority: int
    memory_size: int
    remaining_time: int | None = None
    start_time: int = -1
    stop_time: int = -1
    wait_time: int = 0
    pid: int = 0
    state: ProcessState = ProcessState.READY

    def __post_init__(self) -> None:
        if self.remaining_time is None:
            self.remaining_time = self.running_time


def fits_half(process_size: int, block_size: int) -> bool:
    """Return True when the process still fits in half of the block."""
    return block_size // 2 >= process_size