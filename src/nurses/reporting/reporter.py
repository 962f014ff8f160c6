from __future__ import annotations

from typing import Any, Sequence

from nurses.progress import SolutionEvent
from nurses.reporting.model_stats import format_statistics
from nurses.reporting.plots import show_roster, show_solution_progress
from nurses.result_types import EnumerationResult


class Reporter:
    """Prints the model summary before enumeration and the statistics after."""

    def __init__(self, cfg: Any, enable_plots: bool = False) -> None:
        self.cfg = cfg
        self.enable_plots = enable_plots

    def pre_solve(self, model: object) -> None:
        """Print a model complexity summary, if the model has been built."""
        model_stats = getattr(model, "model_stats", None)
        summary = model_stats() if callable(model_stats) else None
        if summary:
            print("\nModel stats summary:\n" + summary)
        else:
            print("Model stats: (model not built; skipping)")

    def post_solve(
        self, res: EnumerationResult, samples: Sequence[SolutionEvent] = ()
    ) -> None:
        """Print the statistics block (and optional plots) after enumeration."""
        print("\n" + format_statistics(res), flush=True)

        if res.outcome == "infeasible":
            self._print_unsat_core(res)
            return
        if res.outcome == "aborted":
            print("Search stopped before the solution space was exhausted.")
        elif res.outcome == "invalid":
            print("The solver rejected the model as invalid.")
            return

        if not self.enable_plots:
            return
        show_solution_progress(res.progress_history or [])
        for ev in samples:
            show_roster(ev.assignment, index=ev.index)

    # ---------- helpers ----------

    def _print_unsat_core(self, res: EnumerationResult) -> None:
        groups = res.unsat_core_groups
        if not groups:
            if getattr(self.cfg, "ENABLE_UNSAT_CORE", False):
                print("No UNSAT core available.")
            return
        print("\nUNSAT core (rules involved):")
        for key, labels in sorted(groups.items()):
            shown = ", ".join(labels[:5])
            more = f" (+{len(labels) - 5} more)" if len(labels) > 5 else ""
            print(f"  {key}: {shown}{more}")
