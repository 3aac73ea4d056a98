"""Command-line entry point: read a process list and run the simulation."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .pcb import PCB, Algorithm
from .scheduler import run_simulation

USAGE_EXAMPLE = (
    "Please enter information in this scheme for example "
    "process_generator testcase.txt -sch 3 -q 2"
)
_VALID_ALGORITHMS = {"1", "2", "3", "4"}
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class UsageError(ValueError):
    """Raised when the command line does not describe a valid simulation."""


@dataclass(frozen=True)
class Options:
    """Parsed command-line options."""

    path: Path
    algorithm: Algorithm
    quantum: int = -1
    ignored: tuple[str, ...] = ()


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_args(argv: Sequence[str]) -> Options:
    """Parse ``<file> -sch <1-4> [-q <quantum>]`` into options."""
    args = list(argv)
    if len(args) < 3:
        raise UsageError("Not enough information provided, cannot simulate.")
    if args[1] != "-sch":
        raise UsageError(USAGE_EXAMPLE)
    if args[2] not in _VALID_ALGORITHMS:
        raise UsageError("Invalid Scheduling algorithm")
    algorithm = Algorithm(int(args[2]))
    path = Path(args[0])

    if algorithm in (Algorithm.SJF, Algorithm.HPF):
        return Options(path, algorithm, -1, tuple(args[3:]))

    if len(args) < 5:
        raise UsageError("Needed parameters aren't provided, cannot simulate.")
    if args[3] != "-q":
        raise UsageError(USAGE_EXAMPLE)
    quantum = _leading_int(args[4])
    if quantum < 1:
        raise UsageError("Quantum cannot be less than 1, try again")
    return Options(path, algorithm, quantum, tuple(args[5:]))


def read_processes(path: str | Path) -> list[PCB]:
    """Read processes from a file whose first line is a header.

    Every following non-blank line holds five integers:
    id, arrival time, running time, priority and memory size.
    """
    processes: list[PCB] = []
    with open(path) as handle:
        handle.readline()
        for line_number, line in enumerate(handle, start=2):
            fields = line.split()
            if not fields:
                continue
            if len(fields) != 5:
                raise ValueError(
                    f"{path}:{line_number}: expected 5 fields, got {len(fields)}"
                )
            try:
                pid, arrival, running, priority, memory = map(int, fields)
            except ValueError as exc:
                raise ValueError(f"{path}:{line_number}: {exc}") from None
            processes.append(PCB(pid, arrival, running, priority, memory))
    return processes


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation described by the command line; return an exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_args(args)
    except UsageError as exc:
        print(exc)
        return 1
    if options.ignored:
        print("Additional parameters are ignored")

    try:
        processes = read_processes(options.path)
    except OSError:
        print("Could not open file for reading")
        return 2
    except ValueError as exc:
        print(exc)
        return 2

    try:
        finished = run_simulation(
            processes, options.algorithm, options.quantum, Path.cwd()
        )
    except ValueError as exc:
        print(exc)
        return 1
    print(f"Simulated {len(finished)} processes")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())