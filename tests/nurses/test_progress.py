from __future__ import annotations

import re
import threading
from unittest.mock import patch

import numpy as np
import pytest
from ortools.sat.python import cp_model

from nurses.progress import (
    SamplePrinter,
    SolutionCollector,
    SolutionCounter,
    SolutionEvent,
)


@pytest.fixture
def mock_print():
    """Patch print in the progress module to capture output."""
    with patch("nurses.progress.print") as m:
        yield m


def build_tiny_model():
    """One nurse, one day, two shifts: exactly two solutions."""
    m = cp_model.CpModel()
    shift = {(0, 0, s): m.NewBoolVar(f"shift_n0d0s{s}") for s in range(2)}
    m.AddExactlyOne(list(shift.values()))
    return m, shift


def _solve_all(model, counter):
    solver = cp_model.CpSolver()
    solver.parameters.enumerate_all_solutions = True
    solver.parameters.num_search_workers = 1
    return solver.Solve(model, counter)


def test_counter_logs_each_solution(mock_print):
    model, shift = build_tiny_model()
    counter = SolutionCounter(shift, (1, 1, 2))

    status = _solve_all(model, counter)

    assert status == cp_model.OPTIMAL
    assert counter.solution_count() == 2
    assert mock_print.call_count == 2
    first = mock_print.call_args_list[0].args[0]
    assert re.match(r"^Solution #0: time = \d+\.\d{3} s$", first)


def test_counter_is_quiet_when_logging_disabled(mock_print):
    model, shift = build_tiny_model()
    counter = SolutionCounter(shift, (1, 1, 2), log_every_solution=False)
    _solve_all(model, counter)
    assert counter.solution_count() == 2
    mock_print.assert_not_called()


def test_observers_receive_snapshots():
    model, shift = build_tiny_model()
    collector = SolutionCollector()
    counter = SolutionCounter(
        shift, (1, 1, 2), observers=[collector], log_every_solution=False
    )
    _solve_all(model, counter)

    assert [e.index for e in collector.events] == [0, 1]
    seen = sorted(tuple(e.assignment[0, 0]) for e in collector.events)
    assert seen == [(False, True), (True, False)]
    history = counter.solution_history()
    assert [count for _, count in history] == [1, 2]
    assert all(t >= 0.0 for t, _ in history)


def test_counter_increments_are_serialised():
    counter = SolutionCounter({}, (0, 0, 0), log_every_solution=False)
    counter.WallTime = lambda: 0.0

    def hammer():
        for _ in range(200):
            counter.OnSolutionCallback()

    threads = [threading.Thread(target=hammer) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert counter.solution_count() == 1600
    assert sorted(c for _, c in counter.solution_history()) == list(range(1, 1601))


def _event(index: int) -> SolutionEvent:
    a = np.zeros((1, 2, 2), dtype=bool)
    a[0, 0, 1] = a[0, 1, 0] = True
    return SolutionEvent(index=index, wall_time=0.5, assignment=a)


def test_collector_limit_and_indices():
    limited = SolutionCollector(limit=2)
    chosen = SolutionCollector(indices=[1, 3])
    for i in range(5):
        limited.on_solution(_event(i))
        chosen.on_solution(_event(i))
    assert [e.index for e in limited.events] == [0, 1]
    assert [e.index for e in chosen.events] == [1, 3]
    assert len(chosen.assignments) == 2


def test_sample_printer_prints_only_chosen(mock_print):
    printer = SamplePrinter([2])
    for i in range(4):
        printer.on_solution(_event(i))
    assert printer.printed == [2]
    text = "\n".join(str(c.args[0]) for c in mock_print.call_args_list)
    assert "Solution 2" in text
    assert "Nurse 0" in text
