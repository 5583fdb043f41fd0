"""Round-robin CPU scheduling with turnaround and waiting times."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessResult:
    """Timing of one finished process; ``process`` is its 1-based number."""

    process: int
    burst: int
    turnaround: int
    waiting: int


@dataclass(frozen=True)
class Schedule:
    """Finished processes in completion order, with their averages."""

    results: tuple[ProcessResult, ...]

    @property
    def average_waiting(self) -> float:
        return sum(r.waiting for r in self.results) / len(self.results)

    @property
    def average_turnaround(self) -> float:
        return sum(r.turnaround for r in self.results) / len(self.results)


def round_robin(arrivals: Sequence[int], bursts: Sequence[int], quantum: int) -> Schedule:
    """Run processes round-robin with the given time slice.

    The scheduler moves to the next process only when it has arrived by the
    current time and otherwise starts again from the first one. When that
    leaves it with no runnable work, ValueError is raised.
    """
    count = len(bursts)
    if len(arrivals) != count:
        raise ValueError("arrivals and bursts must have the same length")
    if count == 0:
        raise ValueError("at least one process is needed")
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    if any(burst <= 0 for burst in bursts):
        raise ValueError("burst times must be positive")

    remaining = list(bursts)
    pending = count
    total = 0
    index = 0
    idle_steps = 0
    results: list[ProcessResult] = []

    while pending:
        left = remaining[index]
        if left > 0:
            idle_steps = 0
            if left <= quantum:
                total += left
                remaining[index] = 0
                pending -= 1
                turnaround = total - arrivals[index]
                results.append(
                    ProcessResult(
                        index + 1, bursts[index], turnaround, turnaround - bursts[index]
                    )
                )
            else:
                remaining[index] -= quantum
                total += quantum
        else:
            idle_steps += 1
            if idle_steps > count:
                raise ValueError(f"scheduler stalls at time {total}: no runnable process")

        if index == count - 1:
            index = 0
        elif arrivals[index + 1] <= total:
            index += 1
        else:
            index = 0

    return Schedule(tuple(results))