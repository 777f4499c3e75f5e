"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("waiting", not "TaskStatus.WAITING")
- They work as FastAPI query parameters and request fields
- Typos become immediate errors instead of silent bugs
"""

import enum


class TaskStatus(str, enum.Enum):
    WAITING = "waiting"        # submitted, sitting in the ready set
    RUNNING = "running"        # currently holding the CPU
    COMPLETED = "completed"    # remaining_time reached 0 (terminal)


class SchedulingPolicy(str, enum.Enum):
    SJF = "sjf"                # Shortest Job First: min-heap by execution_time
    PRIORITY = "priority"      # Priority: max-heap by priority (higher = more urgent)
    FCFS = "fcfs"              # First Come First Served: FIFO queue


class TieBreak(str, enum.Enum):
    HEAP = "heap"              # primary key only, order of equal keys follows heap swaps
    ARRIVAL = "arrival"        # equal keys fall back to task id (creation order)
