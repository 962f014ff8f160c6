from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

import numpy as np
from ortools.sat.python import cp_model

from nurses.build import NDS
from nurses.extract import roster_table


@dataclass(frozen=True)
class SolutionEvent:
    """
    Snapshot of one solution, copied out of the solver inside the callback.

    assignment[n, d, s] is True iff nurse n works shift s on day d.
    """

    index: int  # 0-based, in discovery order
    wall_time: float  # seconds since the search started
    assignment: np.ndarray


class SolutionObserver(Protocol):
    def on_solution(self, event: SolutionEvent) -> None: ...


class SolutionCounter(cp_model.CpSolverSolutionCallback):
    """
    Solution callback owned by the enumeration driver.

    Counts solutions, records (wall_time, count) history and forwards a
    SolutionEvent to each observer. The body runs under a lock, so the
    count and the observers never see interleaved callbacks.
    """

    def __init__(
        self,
        shift: dict[NDS, cp_model.IntVar],
        dims: tuple[int, int, int],
        observers: Sequence[SolutionObserver] = (),
        log_every_solution: bool = True,
    ):
        super().__init__()
        self._shift = shift
        self._dims = dims
        self._observers = list(observers)
        self.log_every_solution = log_every_solution
        self._lock = threading.Lock()
        self._count = 0
        self.history: list[tuple[float, int]] = []

    def OnSolutionCallback(self):
        with self._lock:
            index = self._count
            self._count += 1
            now = self.WallTime()
            self.history.append((now, self._count))
            if self.log_every_solution:
                print(f"Solution #{index}: time = {now:.3f} s", flush=True)
            if not self._observers:
                return
            event = SolutionEvent(
                index=index, wall_time=now, assignment=self._snapshot()
            )
            for obs in self._observers:
                obs.on_solution(event)

    def _snapshot(self) -> np.ndarray:
        arr = np.zeros(self._dims, dtype=bool)
        for key, var in self._shift.items():
            arr[key] = self.BooleanValue(var)
        return arr

    def solution_count(self) -> int:
        with self._lock:
            return self._count

    def solution_history(self) -> list[tuple[float, int]]:
        """Return collected (wall_time, solutions_so_far) tuples."""
        with self._lock:
            return list(self.history)


class SolutionCollector:
    """
    Observer that keeps solution snapshots: all of them, only the given
    `indices`, and/or at most `limit` of them.
    """

    def __init__(
        self, limit: Optional[int] = None, indices: Optional[Sequence[int]] = None
    ) -> None:
        self.limit = limit
        self.indices = set(indices) if indices is not None else None
        self.events: list[SolutionEvent] = []

    def on_solution(self, event: SolutionEvent) -> None:
        if self.indices is not None and event.index not in self.indices:
            return
        if self.limit is None or len(self.events) < self.limit:
            self.events.append(event)

    @property
    def assignments(self) -> list[np.ndarray]:
        return [e.assignment for e in self.events]


class SamplePrinter:
    """Observer that prints the roster of a few chosen solution indices."""

    def __init__(self, indices: Sequence[int]) -> None:
        self.indices = set(int(i) for i in indices)
        self.printed: list[int] = []

    def on_solution(self, event: SolutionEvent) -> None:
        if event.index not in self.indices:
            return
        print(f"\nSolution {event.index} (found at {event.wall_time:.3f} s):")
        print(roster_table(event.assignment).to_string(), flush=True)
        self.printed.append(event.index)
