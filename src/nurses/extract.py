# nurses/extract.py
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

import numpy as np
import pandas as pd

from nurses.config import OFF_SHIFT, Config

if TYPE_CHECKING:
    from nurses.progress import SolutionEvent


def assignment_to_frame(assignment: np.ndarray) -> pd.DataFrame:
    """Return one row per (nurse, day) with the shift that nurse works."""
    nurses, days, shifts = np.nonzero(assignment)
    df = pd.DataFrame({"nurse": nurses, "day": days, "shift": shifts})
    return df.sort_values(["nurse", "day"], kind="stable").reset_index(drop=True)


def roster_table(assignment: np.ndarray) -> pd.DataFrame:
    """
    Nurse x day pivot of shift indices (0 = off).

    Cells with no assigned shift hold -1; cells with several hold the lowest.
    """
    n_nurses, n_days, _ = assignment.shape
    worked = assignment.any(axis=2)
    table = np.where(worked, assignment.argmax(axis=2), -1)
    return pd.DataFrame(
        table,
        index=pd.Index([f"Nurse {n}" for n in range(n_nurses)], name="nurse"),
        columns=[f"Day {d}" for d in range(n_days)],
    )


def works_shift_matrix(assignment: np.ndarray) -> np.ndarray:
    """works[n, s] is True iff nurse n works shift s on at least one day."""
    return assignment.any(axis=1)


def solutions_frame(events: Iterable["SolutionEvent"]) -> pd.DataFrame:
    """Stack collected solutions into one long (solution, nurse, day, shift) frame."""
    frames = []
    for ev in events:
        df = assignment_to_frame(ev.assignment)
        df.insert(0, "solution", ev.index)
        frames.append(df)
    if not frames:
        return pd.DataFrame(columns=["solution", "nurse", "day", "shift"])
    return pd.concat(frames, ignore_index=True)


def check_assignment(assignment: np.ndarray, cfg: Config) -> list[str]:
    """
    Check a full assignment against the scheduling rules in `cfg`.
    Returns a list of readable violations; empty means the roster is valid.
    """
    expected = (cfg.N_NURSES, cfg.DAYS, cfg.N_SHIFTS)
    if assignment.shape != expected:
        return [f"shape {assignment.shape} != {expected}"]

    x = assignment.astype(int)
    problems: list[str] = []

    per_slot = x.sum(axis=0)  # (day, shift)
    for d, s in zip(*np.nonzero(per_slot > 1)):
        problems.append(f"COVER[d={d},s={s}]: {per_slot[d, s]} nurses")
    if cfg.COVERAGE_MODE == "exact":
        for d, s in zip(*np.nonzero(per_slot == 0)):
            problems.append(f"COVER[d={d},s={s}]: uncovered")

    per_day = x.sum(axis=2)  # (nurse, day)
    for n, d in zip(*np.nonzero(per_day != 1)):
        problems.append(f"ONE-SHIFT[n={n},d={d}]: {per_day[n, d]} shifts")

    off = x[:, :, OFF_SHIFT].sum(axis=1)
    for n in np.nonzero((off < cfg.MIN_OFF_DAYS) | (off > cfg.MAX_OFF_DAYS))[0]:
        problems.append(f"OFF-DAYS[n={n}]: {off[n]} off days")

    works = works_shift_matrix(assignment).astype(int)
    for s in cfg.working_shifts:
        distinct = int(works[:, s].sum())
        if distinct > cfg.MAX_NURSES_PER_SHIFT:
            problems.append(f"SHIFT-BALANCE[s={s}]: {distinct} nurses")

    for s in cfg.CONTIGUOUS_SHIFTS:
        on = assignment[:, :, s]
        neighbour = np.roll(on, 1, axis=1) | np.roll(on, -1, axis=1)
        for n, d in zip(*np.nonzero(on & ~neighbour)):
            problems.append(f"CONTIGUOUS[n={n},s={s},d={d}]: isolated day")

    return problems
