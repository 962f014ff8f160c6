# src/nurses/build.py
from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Sequence, Tuple, Type, cast

from ortools.sat.python import cp_model

from nurses.config import Config
from nurses.rules.base import BuildCtxProto, RuleSpec
from nurses.rules.registry import RULE_REGISTRY

if TYPE_CHECKING:
    # Only imported for typing to avoid runtime cycles
    from nurses.rules.base import Rule

# Type aliases for readability
NDS = Tuple[int, int, int]  # (nurse, day, shift)
NS = Tuple[int, int]  # (nurse, shift)


class BuildContext:
    """Holds shared state while building the model (used by rules and solver)."""

    def __init__(self, cfg: Config) -> None:
        self.cfg: Config = cfg
        self.m: cp_model.CpModel = cp_model.CpModel()

        # UNSAT-core label map: literal index -> human-friendly label
        self.ASSUMP_LABEL: dict[int, str] = {}

        # Decision/derived variables the rules will populate
        self.shift: dict[NDS, cp_model.IntVar] = {}
        self.works_shift: dict[NS, cp_model.IntVar] = {}

        # Constraints added so far, by kind (linear / max_equality / bool_or)
        self.constraint_counts: Counter[str] = Counter()

        # Concrete rule instances (filled during build)
        self._rules: list["Rule"] = []

    # ----- helpers exposed to rules -----
    def add_assumption(self, label: str) -> cp_model.IntVar:
        """Create an assumption literal with a readable label for UNSAT cores."""
        a = self.m.NewBoolVar(f"a_{len(self.ASSUMP_LABEL)//2}")
        self.ASSUMP_LABEL[a.Index()] = label
        self.ASSUMP_LABEL[a.Not().Index()] = label + " (neg)"
        self.m.AddAssumption(a)
        return a

    def count_constraint(self, kind: str, n: int = 1) -> None:
        self.constraint_counts[kind] += n

    def core_labels(self, core: Sequence[int]) -> list[str]:
        """Translate literal indices from the solver into readable labels."""
        return [self.ASSUMP_LABEL.get(k, f"lit#{k}") for k in core]

    @property
    def rule_names(self) -> list[str]:
        return [r.name for r in self._rules]

    def num_variables(self) -> int:
        return len(self.shift) + len(self.works_shift) + len(self.ASSUMP_LABEL) // 2

    def num_constraints(self) -> int:
        return sum(self.constraint_counts.values())


def build_model(
    cfg: Config, rules: Sequence[RuleSpec | Type["Rule"]] | None = None
) -> BuildContext:
    """
    Build the CP-SAT model by running each registered Rule through 2 phases:
      1) declare_vars  2) add_hard
    No feasibility checks are made; an unsatisfiable parameter set still
    produces a valid model and the solver reports INFEASIBLE.
    """
    ctx = BuildContext(cfg)

    ctx._rules = RULE_REGISTRY.build_sequence(cast(BuildCtxProto, ctx), rules)

    # Phase 1: variables
    for r in ctx._rules:
        r.declare_vars()

    # Phase 2: hard constraints
    for r in ctx._rules:
        r.add_hard()

    # ---- sanity checks (fail fast with clear messages) ----
    expected = cfg.N_NURSES * cfg.DAYS * cfg.N_SHIFTS
    if len(ctx.shift) != expected:
        raise RuntimeError(
            f"[build sanity] shift has {len(ctx.shift)} keys; expected {expected} "
            "(N_NURSES*DAYS*N_SHIFTS). Ensure VariablesRule is registered/enabled."
        )
    last = (cfg.N_NURSES - 1, cfg.DAYS - 1, cfg.N_SHIFTS - 1)
    for sent in [(0, 0, 0), last]:
        if sent not in ctx.shift:
            raise RuntimeError(
                f"[build sanity] Missing shift{sent}; a rule may have overwritten "
                "or under-filled shift."
            )

    return ctx
