"""Discrete-time CPU scheduling simulator with buddy-system memory allocation."""

__version__ = "0.1.0"
__all__ = ["pcb", "queues", "buddy", "clock", "logs", "admission", "scheduler", "generator"]