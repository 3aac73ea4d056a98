# osched

A small operating-system scheduling simulator. Processes read from a file
arrive at given clock ticks, get memory from a 1024-byte buddy allocator,
and run on one simulated CPU under one of three algorithms:

1. Shortest Job First (SJF): non-preemptive, ordered by running time
2. Highest Priority First (HPF): preemptive, a smaller priority value wins
3. Round Robin (RR): rotates the ready queue every quantum

Algorithm number 4 (multi-level feedback) is accepted on the command line
but is not supported: the simulation stops with an error message.

The simulation writes three files to the output directory:

- `scheduler.log`: when each process started, stopped, resumed and finished
- `scheduler.perf`: CPU utilization, average weighted turnaround and average waiting time
- `memory.log`: allocations made when a process arrives, and every release,
  with the address range

## Input format

The first line is a header and is skipped. Each non-blank line after it
holds five whitespace-separated integers: id, arrival time, running time,
priority and memory size.

```
#id arrival runtime priority memsize
1	1	6	5	200
2	3	4	2	100
```

A line with a different number of fields, or a field that is not an
integer, is reported as an error. A process whose memory size is not between
1 and 1024, or whose running time is negative, stops the simulation with an
error.

A process that does not fit into any free block waits until memory is
released. Waiting processes are admitted in order of memory size, smallest
first.

## Command line

```
osched processes.txt -sch 1
osched processes.txt -sch 2
osched processes.txt -sch 3 -q 2
```

For Round Robin, `-q` must follow the algorithm number and the quantum must
be at least 1. Extra arguments after SJF or HPF are ignored with a notice.
The output files are written to the current directory, and the command
prints how many processes were simulated. The exit status is 0 on success,
1 for a bad command line or an unsupported simulation, and 2 when the input
file cannot be read or parsed.

## Library use

```python
from osched.generator import read_processes
from osched.pcb import Algorithm
from osched.scheduler import run_simulation

processes = read_processes("processes.txt")
finished = run_simulation(processes, Algorithm.RR, 2, "out")
```

`run_simulation` copies the process records, writes the three files into
the given directory (creating it if needed) and returns the copies in the
order in which they finished.

The building blocks can also be used on their own:

- `osched.pcb.PCB`: the process record; `Algorithm` and `ProcessState` enumerations
- `osched.buddy.BuddyAllocator`: `allocate(pid, size)` returns a `Block`
  (or raises `AllocationError`), `release(pid)` frees it and merges buddies,
  `free_blocks()`, `allocated_blocks()` and `describe()` show the tables
- `osched.queues.FifoQueue` and `osched.queues.PriorityQueue`: the ready and waiting queues
- `osched.clock.Clock`: the discrete clock, advanced with `tick()`
- `osched.logs.SimulationLog`: writes the log lines and the performance figures to any text streams
- `osched.admission.MemoryAdmission`: allocates memory for arrivals and parks those that do not fit
- `osched.scheduler.Scheduler`: feed it processes with `receive`, handle the
  current instant with `step`, and advance its `clock` with `tick()`

```python
from osched.pcb import PCB, Algorithm
from osched.scheduler import Scheduler

scheduler = Scheduler(Algorithm.SJF)
scheduler.receive(PCB(id=1, arrival_time=0, running_time=2, priority=1, memory_size=100))
while not scheduler.finished:
    scheduler.step()
    scheduler.clock.tick()
```

## What it does not do

Everything happens on a simulated clock inside one Python process. No real
child processes are started, stopped or signalled, and no wall-clock time
passes between ticks. Multi-level feedback scheduling is not implemented.

## Tests

```
pip install -e .[test]
pytest
```