"""Ready and waiting queues used by the scheduler."""

from __future__ import annotations

from bisect import bisect_right
from collections import deque
from dataclasses import dataclass
from typing import Iterator

from .pcb import PCB


class FifoQueue:
    """First-in first-out queue of process control blocks."""

    def __init__(self) -> None:
        self._items: deque[PCB] = deque()

    def push(self, process: PCB) -> None:
        """Append a process at the back."""
        self._items.append(process)

    def pop(self) -> PCB:
        """Remove and return the front process; IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def pop_back(self) -> PCB:
        """Remove and return the back process; IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.pop()

    def peek(self) -> PCB:
        """Return the front process without removing it."""
        if not self._items:
            raise IndexError("peek at an empty queue")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[PCB]:
        return iter(self._items)


@dataclass
class _Entry:
    priority: int
    process: PCB


class PriorityQueue:
    """Queue ordered by ascending key; equal keys keep arrival order."""

    def __init__(self) -> None:
        self._entries: list[_Entry] = []

    def push(self, process: PCB, priority: int) -> None:
        """Insert a process after every entry whose priority is not greater."""
        index = bisect_right(self._entries, priority, key=lambda e: e.priority)
        self._entries.insert(index, _Entry(priority, process))

    def push_by_memory(self, process: PCB) -> None:
        """Insert a process ordered by its memory size."""
        index = bisect_right(
            self._entries, process.memory_size, key=lambda e: e.process.memory_size
        )
        self._entries.insert(index, _Entry(process.memory_size, process))

    def pop(self) -> PCB:
        """Remove and return the process with the smallest key."""
        if not self._entries:
            raise IndexError("pop from an empty queue")
        return self._entries.pop(0).process

    def peek(self) -> PCB:
        """Return the process with the smallest key without removing it."""
        if not self._entries:
            raise IndexError("peek at an empty queue")
        return self._entries[0].process

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PCB]:
        return (entry.process for entry in self._entries)