from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap

from nurses.extract import roster_table


def _save_and_show(fig: plt.Figure, filename: str) -> None:
    """Persist the plot under outputs/ and show it."""
    out_dir = Path("outputs")
    out_dir.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_dir / filename, dpi=fig.dpi, bbox_inches="tight")
    plt.show()


def show_solution_progress(history: Sequence[tuple[float, int]]) -> None:
    """
    Plot cumulative solutions found versus elapsed wall time.

    history entries are (wall_time_sec, solutions_so_far).
    """
    if not history:
        return
    times = [pt[0] for pt in history]
    counts = [pt[1] for pt in history]

    fig, ax = plt.subplots(figsize=(7.5, 4), dpi=150)
    ax.set_title("Solutions found over time")
    ax.step(times, counts, where="post", color="tab:blue", linewidth=1.5)
    ax.set_xlabel(f"Elapsed time (seconds). Max={max(times):.2f}s")
    ax.set_ylabel(f"Solutions found. Total={counts[-1]:,}")
    ax.set_xlim(*_expand_limits(times))
    ax.set_ylim(0, counts[-1] * 1.05 + 1)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.yaxis.set_major_locator(plt.MaxNLocator(integer=True))
    ax.grid(alpha=0.3)
    fig.tight_layout()
    _save_and_show(fig, "solution_progress.png")


def show_roster(assignment: np.ndarray, index: int | None = None) -> None:
    """Render one solution as a nurse x day grid coloured by shift."""
    table = roster_table(assignment)
    n_shifts = assignment.shape[2]

    base = plt.get_cmap("Pastel1")
    colors = ["#e5e7eb"] + [base(i % base.N) for i in range(1, n_shifts)]
    cmap = ListedColormap(colors)

    fig_height = 1.5 + 0.4 * table.shape[0]
    fig, ax = plt.subplots(figsize=(1.5 + 0.7 * table.shape[1], fig_height), dpi=150)
    ax.imshow(table.to_numpy(), cmap=cmap, vmin=-0.5, vmax=n_shifts - 0.5)
    for (r, c), val in np.ndenumerate(table.to_numpy()):
        ax.text(c, r, "off" if val == 0 else str(val), ha="center", va="center")
    ax.set_xticks(range(table.shape[1]), table.columns)
    ax.set_yticks(range(table.shape[0]), table.index)
    title = "Roster" if index is None else f"Roster (solution #{index})"
    ax.set_title(title, fontsize=11)
    for spine in ax.spines.values():
        spine.set_visible(False)
    fig.tight_layout()
    name = "roster.png" if index is None else f"roster_{index}.png"
    _save_and_show(fig, name)


def _expand_limits(
    values: Sequence[float], axis_padding: float = 0.05
) -> tuple[float, float]:
    lo = min(values)
    hi = max(values)
    if lo == hi:
        delta = max(abs(lo), 1.0) * max(axis_padding, 0.05)
        return lo - delta, hi + delta
    span = hi - lo
    pad = span * axis_padding
    return lo - pad, hi + pad
