# nurses/solver.py
from __future__ import annotations

from collections import defaultdict
from typing import Tuple

from ortools.sat.python import cp_model

from nurses.build import BuildContext
from nurses.config import Config
from nurses.progress import SolutionCounter


def setup_solver(cfg: Config, enumerate_all: bool = True) -> cp_model.CpSolver:
    """
    Create a CpSolver for the run.

    Enumeration always runs on one worker: with several workers CP-SAT
    reports the same solution from more than one of them and never proves
    the search exhausted. NUM_SEARCH_WORKERS only applies to plain solves.
    """
    solver = cp_model.CpSolver()
    solver.parameters.enumerate_all_solutions = enumerate_all
    if cfg.TIME_LIMIT_SEC is not None:
        solver.parameters.max_time_in_seconds = cfg.TIME_LIMIT_SEC
    solver.parameters.num_search_workers = (
        1 if enumerate_all else cfg.NUM_SEARCH_WORKERS
    )
    solver.parameters.log_search_progress = False
    return solver


def _extract_unsat_groups(
    solver: cp_model.CpSolver, ctx: BuildContext
) -> dict[str, list[str]]:
    core = solver.SufficientAssumptionsForInfeasibility()
    if not core:
        return {}

    labels = ctx.core_labels(core)
    grouped = defaultdict(list)
    for lab in labels:
        key = lab.split("[", 1)[0]
        grouped[key].append(lab)
    return dict(grouped)


def enumerate_solutions(
    ctx: BuildContext, counter: SolutionCounter
) -> Tuple[cp_model.CpSolver, str, dict[str, list[str]]]:
    """
    Enumerate every solution of the model, reporting each one to `counter`.
    Blocks until the search is exhausted (or the time limit hits).
    If infeasible and UNSAT core is enabled, also return the grouped core.
    Returns: (solver, status_name, unsat_core_groups)
    """
    solver = setup_solver(ctx.cfg)
    status = solver.Solve(ctx.m, counter)
    status_name = solver.StatusName(status)

    groups: dict[str, list[str]] = {}
    if status == cp_model.INFEASIBLE and ctx.cfg.ENABLE_UNSAT_CORE:
        # CP-SAT only produces cores for a plain solve (no callback, no enumeration).
        core_solver = setup_solver(ctx.cfg, enumerate_all=False)
        if core_solver.Solve(ctx.m) == cp_model.INFEASIBLE:
            groups = _extract_unsat_groups(core_solver, ctx)

    return solver, status_name, groups
