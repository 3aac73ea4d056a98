import io

import pytest

from osched.admission import MemoryAdmission
from osched.buddy import BuddyAllocator
from osched.clock import Clock
from osched.logs import SimulationLog
from osched.pcb import PCB


def proc(pid, size):
    return PCB(pid, 0, 5, 1, size)


def test_admit_allocates_tight_block():
    admission = MemoryAdmission()
    block = admission.admit(proc(1, 100))
    assert block.size >= 100
    assert block.size // 2 < 100
    assert len(admission.waiting) == 0
    assert admission.allocator.allocated_blocks()[0][0] == 1


def test_admit_queues_when_full():
    admission = MemoryAdmission()
    assert admission.admit(proc(1, 1024)) is not None
    assert admission.admit(proc(2, 10)) is None
    assert [p.id for p in admission.waiting] == [2]


def test_waiting_ordered_by_memory():
    admission = MemoryAdmission()
    admission.admit(proc(1, 1024))
    admission.admit(proc(2, 600))
    admission.admit(proc(3, 300))
    admission.admit(proc(4, 300))
    assert [p.id for p in admission.waiting] == [3, 4, 2]


def test_admit_waiting_after_release():
    admission = MemoryAdmission()
    first = proc(1, 1024)
    admission.admit(first)
    admission.admit(proc(2, 200))
    assert admission.admit_waiting() is None
    admission.release(first)
    admitted = admission.admit_waiting()
    assert admitted.id == 2
    assert len(admission.waiting) == 0
    assert [pid for pid, _ in admission.allocator.allocated_blocks()] == [2]


def test_admit_waiting_empty():
    assert MemoryAdmission().admit_waiting() is None


def test_release_restores_whole_memory():
    allocator = BuddyAllocator()
    admission = MemoryAdmission(allocator)
    a, b = proc(1, 100), proc(2, 300)
    admission.admit(a)
    admission.admit(b)
    admission.release(a)
    admission.release(b)
    free = allocator.free_blocks()
    assert len(free) == 1
    assert free[0] is allocator.root


def test_release_unknown_process():
    with pytest.raises(KeyError):
        MemoryAdmission().release(proc(5, 10))


def test_memory_log_written():
    log = SimulationLog(Clock(), io.StringIO(), io.StringIO(), io.StringIO())
    admission = MemoryAdmission(log=log)
    pcb = proc(7, 100)
    block = admission.admit(pcb)
    admission.release(pcb)
    out = log.memory_stream.getvalue().splitlines()[1:]
    assert len(out) == 2
    assert " allocated 100 bytes for process 7 " in out[0]
    assert " freed 100 bytes for process 7 " in out[1]
    assert all(line.endswith(f"from {block.start} to {block.end}") for line in out)


def test_waiting_admission_not_logged():
    log = SimulationLog(Clock(), io.StringIO(), io.StringIO(), io.StringIO())
    admission = MemoryAdmission(log=log)
    big = proc(1, 1024)
    admission.admit(big)
    admission.admit(proc(2, 50))
    admission.release(big)
    admission.admit_waiting()
    out = log.memory_stream.getvalue().splitlines()[1:]
    assert [line.split()[3] for line in out] == ["allocated", "freed"]