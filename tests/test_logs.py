import io

from osched.clock import Clock
from osched.logs import LogEvent, SimulationLog
from osched.pcb import PCB


def make_log(now=0):
    clock = Clock(start=now)
    log = SimulationLog(clock, io.StringIO(), io.StringIO(), io.StringIO())
    return clock, log


def lines(stream):
    return stream.getvalue().splitlines()


def test_headers_written():
    _, log = make_log()
    assert lines(log.log_stream)[0].startswith("#At time x process y state")
    assert lines(log.memory_stream)[0].startswith("#At time x allocated y bytes")
    assert log.perf_stream.getvalue() == ""


def test_started_line():
    _, log = make_log(5)
    pcb = PCB(1, 2, 3, 4, 10, wait_time=3)
    log.process_event(pcb, LogEvent.STARTED)
    assert lines(log.log_stream)[1] == "At time 5 process 1 started arr 2 total 3 remain 3 wait 3"


def test_finished_line_and_totals():
    _, log = make_log(10)
    pcb = PCB(1, 2, 4, 1, 10, remaining_time=0, wait_time=4)
    log.process_event(pcb, LogEvent.FINISHED)
    assert (
        lines(log.log_stream)[1]
        == "At time 10 process 1 finished arr 2 total 4 remain 0 wait 4 TA 8 WTA 2.00"
    )
    assert log.total_run == 4
    assert log.total_wait == 4
    assert log.last_finish == 10


def test_other_events_use_their_words():
    _, log = make_log(3)
    pcb = PCB(9, 0, 5, 1, 10)
    log.process_event(pcb, LogEvent.STOPPED)
    log.process_event(pcb, LogEvent.RESUMED)
    log.process_event(pcb, LogEvent.CONTINUED)
    out = lines(log.log_stream)[1:]
    assert " stopped " in out[0]
    assert " resumed " in out[1]
    assert "still having the cpu  remain 5" in out[2]
    assert all(line.startswith("At time 3 process 9 ") for line in out)


def test_non_finish_events_leave_totals():
    _, log = make_log(3)
    log.process_event(PCB(1, 0, 5, 1, 10), LogEvent.STARTED)
    assert log.total_run == 0
    assert log.last_finish == 0


def test_zero_runtime_gives_infinite_wta():
    _, log = make_log(4)
    log.process_event(PCB(2, 1, 0, 1, 10), LogEvent.FINISHED)
    assert lines(log.log_stream)[1].endswith("WTA inf")


def test_performance_file():
    _, log = make_log(10)
    log.process_event(PCB(1, 0, 10, 1, 10, remaining_time=0), LogEvent.FINISHED)
    log.write_performance(1)
    assert lines(log.perf_stream) == [
        "CPU utilization = 100.00%",
        "Avg WTA = 1.00",
        "Avg Waiting = 0.00",
    ]


def test_memory_lines():
    clock, log = make_log(3)
    pcb = PCB(7, 0, 5, 1, 100)
    log.memory_event(True, pcb, 0, 127)
    clock.tick()
    log.memory_event(False, pcb, 0, 127)
    out = lines(log.memory_stream)[1:]
    assert out[0].startswith("At time 3 allocated 100 bytes for process 7")
    assert out[1].startswith("At time 4 freed 100 bytes for process 7")
    assert all(line.endswith("from 0 to 127") for line in out)