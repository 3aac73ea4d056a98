"""Discrete-time CPU scheduler with buddy-system memory admission."""

from __future__ import annotations

from collections import deque
from dataclasses import replace
from pathlib import Path
from typing import Iterable

from .admission import MemoryAdmission
from .buddy import BuddyAllocator
from .clock import Clock
from .logs import LogEvent, SimulationLog
from .pcb import PCB, Algorithm, ProcessState
from .queues import FifoQueue, PriorityQueue

SCHEDULER_LOG = "scheduler.log"
PERFORMANCE_FILE = "scheduler.perf"
MEMORY_LOG = "memory.log"


class Scheduler:
    """Runs admitted processes on one simulated CPU under a chosen algorithm.

    Shortest-job-first is non-preemptive and ordered by running time,
    highest-priority-first preempts on a smaller priority value, and
    round robin rotates the ready queue every quantum.
    """

    def __init__(
        self,
        algorithm: Algorithm | int,
        quantum: int = -1,
        clock: Clock | None = None,
        log: SimulationLog | None = None,
        allocator: BuddyAllocator | None = None,
    ) -> None:
        self.algorithm = Algorithm(algorithm)
        if self.algorithm is Algorithm.MLFL:
            raise ValueError("multi-level feedback scheduling is not supported")
        if self.algorithm is Algorithm.RR and quantum < 1:
            raise ValueError("Missing quantum.")
        self.quantum = quantum
        self.clock = clock if clock is not None else Clock()
        self.log = log
        self.admission = MemoryAdmission(allocator, log)
        self.ready: FifoQueue | PriorityQueue = (
            FifoQueue() if self.algorithm is Algorithm.RR else PriorityQueue()
        )
        self.current: PCB | None = None
        self.finished: list[PCB] = []
        self._last_time = -1

    def _event(self, pcb: PCB, event: LogEvent) -> None:
        if self.log is not None:
            self.log.process_event(pcb, event)

    def _key(self, pcb: PCB) -> int:
        if self.algorithm is Algorithm.SJF:
            return pcb.running_time
        return pcb.priority

    def _enqueue(self, pcb: PCB) -> None:
        if isinstance(self.ready, FifoQueue):
            self.ready.push(pcb)
        else:
            self.ready.push(pcb, self._key(pcb))

    def receive(self, pcb: PCB) -> bool:
        """Accept an arriving process; return True if it got memory at once."""
        total = self.admission.allocator.root.size
        if not 0 < pcb.memory_size <= total:
            raise ValueError(
                f"process {pcb.id} needs {pcb.memory_size} bytes; memory holds {total}"
            )
        if pcb.running_time < 0:
            raise ValueError(f"process {pcb.id} has a negative running time")
        pcb.state = ProcessState.READY
        if self.admission.admit(pcb) is None:
            return False
        if isinstance(self.ready, FifoQueue):
            self._receive_round_robin(pcb)
        else:
            self.ready.push(pcb, self._key(pcb))
        return True

    def _receive_round_robin(self, pcb: PCB) -> None:
        queue = self.ready
        if not queue:
            queue.push(pcb)
            return
        last = queue.pop_back()
        if last.stop_time == self.clock.now:
            # A process preempted at this very instant goes behind the newcomer.
            queue.push(pcb)
            queue.push(last)
            self._event(last, LogEvent.STOPPED)
        else:
            queue.push(last)
            queue.push(pcb)

    def step(self) -> bool:
        """Handle the current instant until nothing more changes.

        Each round admits at most one waiting process and then runs the
        algorithm once. Returns True if anything happened.
        """
        changed = False
        while True:
            admitted = self._admit_waiting()
            dispatched = self._dispatch()
            if not (admitted or dispatched):
                return changed
            changed = True

    def _admit_waiting(self) -> bool:
        pcb = self.admission.admit_waiting()
        if pcb is None:
            return False
        if self.algorithm is not Algorithm.RR:
            pcb.state = ProcessState.READY
        self._enqueue(pcb)
        return True

    def _dispatch(self) -> bool:
        if self.algorithm is Algorithm.SJF:
            return self._shortest_job_first()
        if self.algorithm is Algorithm.HPF:
            return self._highest_priority_first()
        return self._round_robin()

    def _finish(self, pcb: PCB) -> None:
        self._event(pcb, LogEvent.FINISHED)
        self.admission.release(pcb)
        self.finished.append(pcb)
        self.current = None

    def _shortest_job_first(self) -> bool:
        now = self.clock.now
        if self.current is None:
            if not self.ready:
                return False
            pcb = self.ready.pop()
            pcb.wait_time = now - pcb.arrival_time
            pcb.start_time = now
            pcb.state = ProcessState.RUNNING
            self.current = pcb
            self._event(pcb, LogEvent.STARTED)
            return True
        pcb = self.current
        elapsed = now - pcb.start_time
        if pcb.running_time != elapsed:
            return False
        pcb.remaining_time = pcb.running_time - elapsed
        self._finish(pcb)
        return True

    def _round_robin(self) -> bool:
        now = self.clock.now
        acted = False
        if self.current is None and self.ready:
            pcb = self.ready.pop()
            self._last_time = now
            if pcb.start_time == -1:
                pcb.start_time = now
            if pcb.state is ProcessState.WAITING:
                pcb.state = ProcessState.RUNNING
                event = LogEvent.CONTINUED if pcb.stop_time == now else LogEvent.RESUMED
                self._event(pcb, event)
                pcb.wait_time += now - pcb.stop_time
            else:
                pcb.wait_time = now - pcb.arrival_time
                self._event(pcb, LogEvent.STARTED)
                pcb.state = ProcessState.RUNNING
            self.current = pcb
            acted = True

        pcb = self.current
        if pcb is None:
            return acted
        elapsed = now - self._last_time
        if elapsed >= self.quantum or elapsed >= pcb.remaining_time or pcb.remaining_time <= 0:
            pcb.remaining_time -= elapsed
            if pcb.remaining_time <= 0:
                self._finish(pcb)
            else:
                pcb.stop_time = now
                if self.ready:
                    self._event(pcb, LogEvent.STOPPED)
                pcb.state = ProcessState.WAITING
                self.ready.push(pcb)
                self.current = None
            self._last_time = now
            acted = True
        return acted

    def _highest_priority_first(self) -> bool:
        now = self.clock.now
        acted = False
        if self.current is None and self.ready:
            pcb = self.ready.pop()
            if pcb.state is ProcessState.WAITING:
                pcb.state = ProcessState.RUNNING
                pcb.wait_time += now - pcb.stop_time
                self._event(pcb, LogEvent.RESUMED)
            else:
                pcb.wait_time = now - pcb.arrival_time
                self._event(pcb, LogEvent.STARTED)
                pcb.state = ProcessState.RUNNING
            self.current = pcb
            acted = True
        elif self.current is not None:
            pcb = self.current
            pcb.remaining_time -= now - self._last_time
            if pcb.remaining_time <= 0:
                self._finish(pcb)
                acted = True
            elif self.ready and pcb.priority > self.ready.peek().priority:
                pcb.stop_time = now
                self._event(pcb, LogEvent.STOPPED)
                pcb.state = ProcessState.WAITING
                self.ready.push(pcb, pcb.priority)
                self.current = None
                acted = True
        self._last_time = now
        return acted


def run_simulation(
    processes: Iterable[PCB],
    algorithm: Algorithm | int,
    quantum: int,
    out_dir: str | Path,
) -> list[PCB]:
    """Simulate the processes and write the log, performance and memory files.

    The given process records are copied, not changed. Returns the copies
    in the order in which they finished.
    """
    pending = deque(replace(process) for process in processes)
    total = len(pending)
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    clock = Clock()
    with open(out / SCHEDULER_LOG, "w") as log_file, open(
        out / PERFORMANCE_FILE, "w"
    ) as perf_file, open(out / MEMORY_LOG, "w") as memory_file:
        log = SimulationLog(clock, log_file, perf_file, memory_file)
        scheduler = Scheduler(algorithm, quantum, clock=clock, log=log)
        while len(scheduler.finished) < total:
            while pending and pending[0].arrival_time <= clock.now:
                scheduler.receive(pending.popleft())
            scheduler.step()
            if len(scheduler.finished) < total:
                clock.tick()
        log.write_performance(total)
    return scheduler.finished