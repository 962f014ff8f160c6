from __future__ import annotations

from typing import Any


def _format_numeric(value: Any) -> str:
    """Format ints with thousands separators; leave anything else as str()."""
    if isinstance(value, bool) or value is None:
        return str(value)
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        return f"{value:,.3f}".rstrip("0").rstrip(".")
    return str(value)


def format_model_stats(ctx: Any) -> str | None:
    """Summarise variables and constraints of a BuildContext."""
    shift = getattr(ctx, "shift", None)
    if not shift:
        return None
    works = ctx.works_shift
    assumptions = len(ctx.ASSUMP_LABEL) // 2

    var_line = (
        f"  Variables: total={ctx.num_variables():,} "
        f"(shift={len(shift):,}, works_shift={len(works):,}"
        + (f", assumptions={assumptions:,}" if assumptions else "")
        + ")"
    )
    parts = [var_line]
    counts = ctx.constraint_counts
    if counts:
        details = ", ".join(f"{k}={v:,}" for k, v in sorted(counts.items()))
        parts.append(f"  Constraints: total={ctx.num_constraints():,} ({details})")
    if ctx.rule_names:
        parts.append("  Rules: " + " -> ".join(ctx.rule_names))
    return "\n".join(parts)


def format_statistics(res: Any) -> str:
    """Final enumeration report: status, conflicts, branches, wall time, #solutions."""
    lines = [
        "Statistics",
        f"  - solve status    : {res.status_name}",
        f"  - conflicts       : {_format_numeric(res.num_conflicts)}",
        f"  - branches        : {_format_numeric(res.num_branches)}",
        f"  - wall time       : {res.wall_time:.3f} s",
        f"  - #solutions      : {_format_numeric(res.solution_count)}",
    ]
    return "\n".join(lines)
