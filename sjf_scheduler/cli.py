from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path
from typing import List

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .errors import InvalidInputError
from .models import ScheduleResult
from .report import print_report
from .scheduler import run_batch
from .workload_io import load_workload

logger = logging.getLogger(__name__)

EXAMPLES_DIR = Path(__file__).resolve().parent / "examples"
WORKLOAD_SUFFIXES = (".json", ".csv")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sjf-scheduler",
        description="Non-preemptive Shortest-Job-First CPU scheduling simulator.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Schedule one or more workload files.")
    run_parser.add_argument(
        "--workload",
        "-w",
        required=True,
        nargs="+",
        help="Path(s) to JSON or CSV workload files; each file is one batch.",
    )
    _add_schedule_options(run_parser)

    demo_parser = subparsers.add_parser("demo", help="Schedule the bundled example batches.")
    demo_parser.add_argument(
        "--examples-dir",
        default=str(EXAMPLES_DIR),
        help=f"Directory holding example workloads (default: {EXAMPLES_DIR}).",
    )
    _add_schedule_options(demo_parser)

    return parser


def _add_schedule_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--tick-idle",
        action="store_true",
        help="Advance the clock one unit at a time while the CPU is idle.",
    )
    parser.add_argument(
        "--step",
        action="store_true",
        help="Show a simple time-stepped simulation in the terminal.",
    )
    parser.add_argument(
        "--step-delay",
        type=float,
        default=0.3,
        help="Seconds to wait between steps when --step is used (default: 0.3).",
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _animate_result(result: ScheduleResult, delay: float, console: Console) -> None:
    """
    Simple time-stepped textual simulation using the computed schedule.
    """
    timeline = sorted(result.timeline, key=lambda s: s.start_time)
    if not timeline:
        console.print("[red]No execution to animate.[/red]")
        return

    makespan = max(s.end_time for s in timeline)
    console.print(f"[bold]Simulating {result.algorithm}[/bold] (duration {makespan} time units)")
    console.print("[dim]Press Ctrl+C to skip animation.[/dim]")

    for t in range(makespan):
        running = None
        for sl in timeline:
            if sl.start_time <= t < sl.end_time:
                running = sl
                break

        if running is None:
            console.print(f"t={t:2d}: [dim]idle[/dim]")
        else:
            bar = "#" * (t - running.start_time + 1)
            console.print(f"t={t:2d}: {running.label} [green]{bar}[/green]")
        time.sleep(delay)


def _run_batches(paths: List[Path], args: argparse.Namespace, console: Console) -> int:
    for path in paths:
        processes = load_workload(path)
        result = run_batch(processes, jump_idle=not args.tick_idle)

        if args.step:
            try:
                _animate_result(result, delay=args.step_delay, console=console)
            except KeyboardInterrupt:
                console.print("[yellow]Animation skipped.[/yellow]")

        print_report(result, processes, console=console, title=path.name)

    return 0


def _example_workloads(examples_dir: Path) -> List[Path]:
    if not examples_dir.is_dir():
        raise FileNotFoundError(f"Examples directory not found: {examples_dir}")
    return sorted(p for p in examples_dir.iterdir() if p.suffix.lower() in WORKLOAD_SUFFIXES)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    console = Console()

    try:
        if args.command == "run":
            return _run_batches([Path(p) for p in args.workload], args, console)

        if args.command == "demo":
            paths = _example_workloads(Path(args.examples_dir))
            logger.info("Running %d example batch(es) from %s", len(paths), args.examples_dir)
            return _run_batches(paths, args, console)
    except (InvalidInputError, OSError) as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        return 2

    parser.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
