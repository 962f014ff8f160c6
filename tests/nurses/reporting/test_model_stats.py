from __future__ import annotations

from nurses.build import build_model
from nurses.config import Config
from nurses.reporting.model_stats import format_model_stats, format_statistics
from nurses.result_types import EnumerationResult


def test_format_model_stats_counts_variables_and_constraints():
    text = format_model_stats(build_model(Config()))
    assert "Variables: total=128 (shift=112, works_shift=16)" in text
    assert "Constraints: total=" in text
    assert "bool_or=56" in text
    assert "Rules: Variables -> Coverage" in text


def test_format_model_stats_mentions_assumptions():
    text = format_model_stats(build_model(Config(ENABLE_UNSAT_CORE=True)))
    assert "assumptions=" in text


def test_format_model_stats_none_without_context():
    assert format_model_stats(None) is None


def test_format_statistics_block():
    res = EnumerationResult(
        status_name="OPTIMAL",
        solution_count=12345,
        num_conflicts=10,
        num_branches=2500,
        wall_time=1.25,
    )
    lines = format_statistics(res).splitlines()
    assert lines == [
        "Statistics",
        "  - solve status    : OPTIMAL",
        "  - conflicts       : 10",
        "  - branches        : 2,500",
        "  - wall time       : 1.250 s",
        "  - #solutions      : 12,345",
    ]


def test_format_model_stats_totals_match_context():
    ctx = build_model(Config(ENABLE_UNSAT_CORE=True))
    text = format_model_stats(ctx)
    assert f"Variables: total={ctx.num_variables():,} " in text
    assert f"Constraints: total={ctx.num_constraints():,} " in text
