# nurses/model.py
from __future__ import annotations

from enum import Enum
from typing import Sequence, Type

from nurses.build import BuildContext, build_model
from nurses.config import Config
from nurses.progress import SolutionCounter, SolutionObserver
from nurses.reporting.model_stats import format_model_stats
from nurses.result_types import EnumerationResult
from nurses.rules.base import Rule, RuleSpec
from nurses.solver import enumerate_solutions


class SearchState(Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    COMPLETED = "completed"


class NurseModel:
    """
    Thin orchestrator around:
      - build_model()          -> returns BuildContext with model + variables
      - enumerate_solutions()  -> runs CP-SAT in enumerate-all mode
    """

    def __init__(
        self,
        cfg: Config,
        rules: Sequence[RuleSpec | Type[Rule]] | None = None,
    ):
        self.cfg = cfg
        self._ctx: BuildContext | None = None  # populated by build()
        self._rule_specs = rules
        self.state = SearchState.IDLE
        self.counter: SolutionCounter | None = None

    # ---------- Build ----------
    def build(self) -> BuildContext:
        """Build the CP-SAT model (variables first, then hard constraints)."""
        self._ctx = build_model(self.cfg, rules=self._rule_specs)
        return self._ctx

    @property
    def context(self) -> BuildContext:
        if self._ctx is None:
            raise RuntimeError("Call build() before accessing the model.")
        return self._ctx

    # ---------- Enumerate ----------
    def enumerate(
        self, observers: Sequence[SolutionObserver] = ()
    ) -> EnumerationResult:
        """
        Enumerate every solution of the built model.

        A fresh SolutionCounter is created for each run and handed to CP-SAT.
        Each observer's on_solution() is called once per solution, from the
        solver's thread, while the search is running. The call blocks until
        the search finishes; the returned count is read after that.

        Parameters:
        observers (Sequence[SolutionObserver]): objects notified per solution

        Returns:
        EnumerationResult: final status, solution count and solver statistics.
        Non-success statuses (INFEASIBLE, MODEL_INVALID, UNKNOWN, ...) are
        returned as-is, never retried.
        """
        ctx = self.context
        if self.state is SearchState.SEARCHING:
            raise RuntimeError("enumerate() is already running on this model.")

        cfg = self.cfg
        self.counter = SolutionCounter(
            ctx.shift,
            (cfg.N_NURSES, cfg.DAYS, cfg.N_SHIFTS),
            observers=observers,
            log_every_solution=cfg.LOG_EVERY_SOLUTION,
        )
        self.state = SearchState.SEARCHING
        try:
            solver, status_name, unsat_groups = enumerate_solutions(
                ctx, self.counter
            )
        finally:
            self.state = SearchState.COMPLETED

        return EnumerationResult(
            status_name=status_name,
            solution_count=self.counter.solution_count(),
            num_conflicts=int(solver.NumConflicts()),
            num_branches=int(solver.NumBranches()),
            wall_time=float(solver.WallTime()),
            unsat_core_groups=unsat_groups,
            progress_history=self.counter.solution_history(),
            solver_stats=solver.ResponseStats(),
        )

    def model_stats(self) -> str | None:
        return format_model_stats(self._ctx)
