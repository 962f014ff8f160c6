# nurses/result_types.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

Outcome = Literal["all_solutions", "infeasible", "invalid", "aborted"]

_OUTCOME_BY_STATUS: dict[str, Outcome] = {
    "OPTIMAL": "all_solutions",
    "INFEASIBLE": "infeasible",
    "MODEL_INVALID": "invalid",
}


def classify_status(status_name: str) -> Outcome:
    """
    Map a CP-SAT status name onto the enumeration outcome.

    With enumerate_all_solutions and no objective, OPTIMAL means the search
    space was exhausted. FEASIBLE and UNKNOWN both mean the search stopped
    early (e.g. time limit), whether or not solutions were found.
    """
    return _OUTCOME_BY_STATUS.get(status_name, "aborted")


@dataclass
class EnumerationResult:
    """Structured output of one enumeration run."""

    status_name: str
    solution_count: int
    num_conflicts: int
    num_branches: int
    wall_time: float
    unsat_core_groups: dict[str, list[str]] = field(default_factory=dict)
    progress_history: list[tuple[float, int]] | None = None
    solver_stats: Optional[str] = None

    @property
    def outcome(self) -> Outcome:
        return classify_status(self.status_name)
