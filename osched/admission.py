"""Admission of arriving processes into buddy-allocated memory."""

from __future__ import annotations

from .buddy import Block, BuddyAllocator
from .logs import SimulationLog
from .pcb import PCB
from .queues import PriorityQueue


class MemoryAdmission:
    """Allocates memory for arriving processes and parks those that do not fit."""

    def __init__(
        self,
        allocator: BuddyAllocator | None = None,
        log: SimulationLog | None = None,
    ) -> None:
        self.allocator = allocator if allocator is not None else BuddyAllocator()
        self.log = log
        self.waiting = PriorityQueue()

    def admit(self, pcb: PCB) -> Block | None:
        """Allocate memory for an arriving process, or queue it to wait."""
        if self.allocator.find_free(pcb.memory_size) is None:
            self.waiting.push_by_memory(pcb)
            return None
        block = self.allocator.allocate(pcb.id, pcb.memory_size)
        if self.log is not None:
            self.log.memory_event(True, pcb, block.start, block.end)
        return block

    def admit_waiting(self) -> PCB | None:
        """Admit the smallest waiting process if a free block can hold it."""
        if not self.waiting:
            return None
        head = self.waiting.peek()
        if self.allocator.find_free(head.memory_size) is None:
            return None
        pcb = self.waiting.pop()
        self.allocator.allocate(pcb.id, pcb.memory_size)
        return pcb

    def release(self, pcb: PCB) -> Block:
        """Free the memory of a finished process and return its block."""
        block = self.allocator.release(pcb.id)
        if self.log is not None:
            self.log.memory_event(False, pcb, block.start, block.end)
        return block