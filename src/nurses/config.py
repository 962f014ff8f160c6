from dataclasses import dataclass, field
from typing import Literal, Optional, TypeAlias

CoverageMode: TypeAlias = Literal["exact", "at_most"]

# Shift index reserved for "not working that day".
OFF_SHIFT = 0


@dataclass
class Config:

    # Problem size
    N_NURSES: int = 4
    N_SHIFTS: int = 4  # includes the off shift (index 0)
    DAYS: int = 7

    ### HARD CONSTRAINTS ###

    # "exact": every (day, shift) slot gets exactly one nurse. Only feasible
    # when N_NURSES == N_SHIFTS. "at_most": every slot gets at most one nurse.
    COVERAGE_MODE: CoverageMode = "exact"

    # Off days per nurse over the cycle (closed range)
    MIN_OFF_DAYS: int = 1
    MAX_OFF_DAYS: int = 2

    # Distinct nurses allowed to ever work a given working shift
    MAX_NURSES_PER_SHIFT: int = 2

    # Shifts that may not be worked on an isolated day (cyclic week)
    CONTIGUOUS_SHIFTS: tuple[int, ...] = (2, 3)

    ### SOLVER SETUP ###

    TIME_LIMIT_SEC: Optional[float] = None  # None = run until exhausted
    NUM_SEARCH_WORKERS: int = 1  # plain solves only; enumeration uses one worker

    # Output
    LOG_EVERY_SOLUTION: bool = True
    SAMPLE_SOLUTIONS: list[int] = field(default_factory=list)

    # Diagnostics
    ENABLE_UNSAT_CORE: bool = False

    @property
    def all_nurses(self) -> range:
        return range(self.N_NURSES)

    @property
    def all_days(self) -> range:
        return range(self.DAYS)

    @property
    def all_shifts(self) -> range:
        return range(self.N_SHIFTS)

    @property
    def working_shifts(self) -> range:
        return range(OFF_SHIFT + 1, self.N_SHIFTS)

    def validate(self):
        """
        Validate the Config object has sensible values before building.

        Feasibility is not checked here (e.g. N_NURSES != N_SHIFTS with
        COVERAGE_MODE="exact" is accepted); the solver reports it.
        """
        for attr in ("N_NURSES", "N_SHIFTS", "DAYS"):
            if getattr(self, attr) <= 0:
                raise ValueError(f"{attr} must be > 0.")
        if self.COVERAGE_MODE not in ("exact", "at_most"):
            raise ValueError("COVERAGE_MODE must be 'exact' or 'at_most'.")
        if not (0 <= self.MIN_OFF_DAYS <= self.MAX_OFF_DAYS <= self.DAYS):
            raise ValueError("Require 0 <= MIN_OFF_DAYS <= MAX_OFF_DAYS <= DAYS.")
        if self.MAX_NURSES_PER_SHIFT < 0:
            raise ValueError("MAX_NURSES_PER_SHIFT must be non-negative.")
        for s in self.CONTIGUOUS_SHIFTS:
            if s not in self.working_shifts:
                raise ValueError(
                    f"CONTIGUOUS_SHIFTS entry {s} is not a working shift "
                    f"in [1, {self.N_SHIFTS})."
                )
        if self.TIME_LIMIT_SEC is not None and self.TIME_LIMIT_SEC <= 0.0:
            raise ValueError("TIME_LIMIT_SEC must be > 0 (or None).")
        if self.NUM_SEARCH_WORKERS <= 0:
            raise ValueError("NUM_SEARCH_WORKERS must be > 0.")
        if any(i < 0 for i in self.SAMPLE_SOLUTIONS):
            raise ValueError("SAMPLE_SOLUTIONS indices must be non-negative.")


cfg = Config(
    N_NURSES=4,
    N_SHIFTS=4,
    DAYS=7,
    SAMPLE_SOLUTIONS=[859, 2034, 5091, 7003],
)
