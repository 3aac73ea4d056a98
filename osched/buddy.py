"""Buddy-system memory allocator with free and allocated block tables."""

from __future__ import annotations

from bisect import insort
from dataclasses import dataclass, field
from enum import Enum

from .pcb import fits_half

DEFAULT_MEMORY_SIZE = 1024


class AllocationError(Exception):
    """Raised when no free block can hold the requested size."""


class BlockStatus(Enum):
    FREE = 0
    ALLOCATED = 1
    SPLIT = 2


@dataclass(eq=False)
class Block:
    """A node of the buddy tree covering addresses start..end inclusive."""

    size: int
    start: int
    end: int
    status: BlockStatus = BlockStatus.FREE
    parent: Block | None = field(default=None, repr=False)
    left: Block | None = field(default=None, repr=False)
    right: Block | None = field(default=None, repr=False)

    @property
    def buddy(self) -> Block | None:
        """The sibling block, or None for the root."""
        if self.parent is None:
            return None
        return self.parent.right if self.parent.left is self else self.parent.left

    def split(self) -> tuple[Block, Block]:
        """Split into two free halves and return them (left, right)."""
        mid = self.start + (self.end - self.start) // 2
        half = self.size // 2
        self.left = Block(half, self.start, mid, parent=self)
        self.right = Block(half, mid + 1, self.end, parent=self)
        self.status = BlockStatus.SPLIT
        return self.left, self.right


class BuddyAllocator:
    """Allocates blocks to processes and merges buddies on release."""

    def __init__(self, total_size: int = DEFAULT_MEMORY_SIZE) -> None:
        self.root = Block(total_size, 0, total_size - 1)
        self._free: list[Block] = [self.root]
        self._table: list[tuple[int, Block]] = []

    def _add_free(self, block: Block) -> None:
        insort(self._free, block, key=lambda b: b.start)

    def find_free(self, size: int) -> Block | None:
        """First free block, in address order, that can hold size."""
        return next((block for block in self._free if size <= block.size), None)

    def allocate(self, pid: int, size: int) -> Block:
        """Allocate the smallest buddy block for size inside the first fit."""
        if size <= 0:
            raise ValueError(f"allocation size must be positive, got {size}")
        block = self.find_free(size)
        if block is None:
            raise AllocationError(f"no free block can hold {size} bytes")
        self._free.remove(block)
        while fits_half(size, block.size):
            left, right = block.split()
            self._add_free(right)
            block = left
        block.status = BlockStatus.ALLOCATED
        self._table.insert(0, (pid, block))
        return block

    def release(self, pid: int) -> Block:
        """Free the block held by pid, merge buddies, and return the freed block."""
        found = next(
            ((index, block) for index, (owner, block) in enumerate(self._table) if owner == pid),
            None,
        )
        if found is None:
            raise KeyError(pid)
        index, block = found
        del self._table[index]
        block.status = BlockStatus.FREE

        node = block
        if self._free:
            while (
                node.parent is not None
                and node.status is BlockStatus.FREE
                and node.buddy.status is BlockStatus.FREE
            ):
                self._free.remove(node.buddy)
                node = node.parent
                node.left = None
                node.right = None
                node.status = BlockStatus.FREE
        self._add_free(node)
        return block

    def free_blocks(self) -> list[Block]:
        """Free blocks in address order."""
        return list(self._free)

    def allocated_blocks(self) -> list[tuple[int, Block]]:
        """(pid, block) pairs, most recent allocation first."""
        return list(self._table)

    def describe(self) -> str:
        """Human-readable listing of the free and allocated tables."""
        if self._free:
            lines = [f"Free: From: {b.start}, To: {b.end}" for b in self._free]
        else:
            lines = ["Free Memory Table is empty"]
        if self._table:
            lines += [f"Memory: From: {b.start}, To: {b.end} " for _, b in self._table]
        else:
            lines.append("Memory Table is empty")
        return "\n".join(lines)