from __future__ import annotations

from nurses.build import build_model
from nurses.config import Config
from nurses.progress import SolutionCounter
from nurses.result_types import classify_status
from nurses.solver import enumerate_solutions, setup_solver

KNOWN_GROUPS = {"COVER", "ONE-SHIFT", "OFF-DAYS", "SHIFT-BALANCE", "CONTIGUOUS"}


def _counter(ctx) -> SolutionCounter:
    c = ctx.cfg
    return SolutionCounter(
        ctx.shift, (c.N_NURSES, c.DAYS, c.N_SHIFTS), log_every_solution=False
    )


def test_setup_solver_enables_enumeration():
    solver = setup_solver(Config(NUM_SEARCH_WORKERS=1, TIME_LIMIT_SEC=5.0))
    assert solver.parameters.enumerate_all_solutions
    assert solver.parameters.num_search_workers == 1
    assert solver.parameters.max_time_in_seconds == 5.0


def test_setup_solver_enumerates_on_one_worker():
    cfg = Config(NUM_SEARCH_WORKERS=4)
    assert setup_solver(cfg).parameters.num_search_workers == 1
    plain = setup_solver(cfg, enumerate_all=False)
    assert not plain.parameters.enumerate_all_solutions
    assert plain.parameters.num_search_workers == 4


def test_setup_solver_without_time_limit_keeps_default():
    default_limit = setup_solver(Config()).parameters.max_time_in_seconds
    assert default_limit > 1e6


def test_infeasible_run_reports_unsat_core_groups():
    cfg = Config(N_NURSES=3, ENABLE_UNSAT_CORE=True, LOG_EVERY_SOLUTION=False)
    ctx = build_model(cfg)
    counter = _counter(ctx)
    _, status_name, groups = enumerate_solutions(ctx, counter)
    assert status_name == "INFEASIBLE"
    assert counter.solution_count() == 0
    assert groups
    assert "COVER" in groups
    assert set(groups) <= KNOWN_GROUPS


def test_classify_status():
    assert classify_status("OPTIMAL") == "all_solutions"
    assert classify_status("INFEASIBLE") == "infeasible"
    assert classify_status("MODEL_INVALID") == "invalid"
    assert classify_status("FEASIBLE") == "aborted"
    assert classify_status("UNKNOWN") == "aborted"
