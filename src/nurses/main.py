from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence, Type

from nurses.config import Config, cfg
from nurses.extract import solutions_frame
from nurses.model import NurseModel
from nurses.progress import SamplePrinter, SolutionCollector, SolutionObserver
from nurses.reporting import Reporter
from nurses.result_types import EnumerationResult
from nurses.rules.base import Rule, RuleSpec


def run_enumeration(
    config: Config | None = None,
    reporter: Reporter | None = None,
    observers: Sequence[SolutionObserver] = (),
    validate_config: bool = True,
    enable_reporting: bool = True,
    rules: Sequence[RuleSpec | Type[Rule]] | None = None,
    export_path: Path | None = None,
) -> EnumerationResult:
    """
    Build the nurse model, enumerate all of its solutions and report.

    Parameters
    ----------
    config:
        The configuration for the run. Defaults to `nurses.config.cfg` when omitted.
    reporter:
        Custom reporter instance. When `enable_reporting` is True and no reporter is
        provided, the default `Reporter` is used.
    observers:
        Extra `SolutionObserver`s notified once per solution. A `SamplePrinter`
        is added automatically when `config.SAMPLE_SOLUTIONS` is non-empty.
    validate_config:
        Toggle to run `Config.validate()` before building.
    enable_reporting:
        When False, skips reporter pre/post hooks even if a reporter is provided.
    rules:
        Optional iterable describing which rule classes to use. `None` falls back
        to the library defaults.
    export_path:
        When given, every solution is collected and written there as CSV
        (columns: solution, nurse, day, shift).

    Returns
    -------
    EnumerationResult
        Status, solution count and solver statistics.
    """
    cfg_obj = config or cfg
    if validate_config:
        cfg_obj.validate()

    model = NurseModel(cfg_obj, rules=rules)

    active_reporter = reporter if enable_reporting else None
    if active_reporter is None and enable_reporting:
        active_reporter = Reporter(cfg_obj)

    model.build()
    if active_reporter is not None:
        active_reporter.pre_solve(model)

    all_observers: list[SolutionObserver] = list(observers)
    samples = SolutionCollector(indices=cfg_obj.SAMPLE_SOLUTIONS)
    if cfg_obj.SAMPLE_SOLUTIONS:
        all_observers += [SamplePrinter(cfg_obj.SAMPLE_SOLUTIONS), samples]
    collector = None
    if export_path is not None:
        collector = SolutionCollector()
        all_observers.append(collector)

    print("\nEnumerating...")
    result = model.enumerate(observers=all_observers)

    if active_reporter is not None:
        active_reporter.post_solve(result, samples.events)

    if collector is not None:
        export_path.parent.mkdir(parents=True, exist_ok=True)
        solutions_frame(collector.events).to_csv(export_path, index=False)
        print(f"Wrote {len(collector.events):,} solutions to {export_path}")

    return result


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Enumerate every valid nurse-shift schedule with CP-SAT."
    )
    parser.add_argument("--nurses", type=int, default=cfg.N_NURSES)
    parser.add_argument(
        "--shifts",
        type=int,
        default=cfg.N_SHIFTS,
        help="number of shifts, including the off shift 0",
    )
    parser.add_argument("--days", type=int, default=cfg.DAYS)
    parser.add_argument(
        "--coverage", choices=["exact", "at_most"], default=cfg.COVERAGE_MODE
    )
    parser.add_argument(
        "--contiguous",
        type=int,
        nargs="*",
        default=None,
        help=(
            "shifts never worked on an isolated day; defaults to "
            f"{list(cfg.CONTIGUOUS_SHIFTS)}, limited to the working shifts"
        ),
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=cfg.NUM_SEARCH_WORKERS,
        help="workers for the UNSAT-core solve; enumeration always uses one",
    )
    parser.add_argument(
        "--time-limit", type=float, default=None, help="seconds; default unbounded"
    )
    parser.add_argument(
        "--sample",
        type=int,
        nargs="*",
        default=None,
        help="solution indices to print in full",
    )
    parser.add_argument(
        "--quiet", action="store_true", help="do not print a line per solution"
    )
    parser.add_argument("--plot", action="store_true", help="save/show plots")
    parser.add_argument(
        "--unsat-core",
        action="store_true",
        help="explain infeasibility with an UNSAT core",
    )
    parser.add_argument(
        "--export", type=Path, default=None, help="write all solutions to this CSV"
    )
    return parser


def _contiguous_shifts(args: argparse.Namespace) -> tuple[int, ...]:
    if args.contiguous is not None:
        return tuple(args.contiguous)
    return tuple(s for s in cfg.CONTIGUOUS_SHIFTS if 0 < s < args.shifts)


def main(argv: Sequence[str] | None = None) -> EnumerationResult:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    config = Config(
        N_NURSES=args.nurses,
        N_SHIFTS=args.shifts,
        DAYS=args.days,
        COVERAGE_MODE=args.coverage,
        CONTIGUOUS_SHIFTS=_contiguous_shifts(args),
        NUM_SEARCH_WORKERS=args.workers,
        TIME_LIMIT_SEC=args.time_limit,
        LOG_EVERY_SOLUTION=not args.quiet,
        SAMPLE_SOLUTIONS=(
            list(args.sample)
            if args.sample is not None
            else list(cfg.SAMPLE_SOLUTIONS)
        ),
        ENABLE_UNSAT_CORE=args.unsat_core,
    )
    try:
        config.validate()
    except ValueError as e:
        parser.error(str(e))
    return run_enumeration(
        config=config,
        reporter=Reporter(config, enable_plots=args.plot),
        validate_config=False,
        export_path=args.export,
    )


if __name__ == "__main__":
    main()
