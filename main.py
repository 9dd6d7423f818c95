#!/usr/bin/env python3
"""
microbench - CLI Entry Point

Usage:
    python main.py run mypackage.module:func --rounds 100
    python main.py run mypackage.module:func --units ms --list-timings
    python main.py run mypackage.module:Parser.parse_sample --pretty
    python main.py list-units
"""

import sys
import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.progress import Progress, TextColumn

from microbench import __version__
from microbench.api import bench
from microbench.config import Config
from microbench.exceptions import ConfigurationError
from microbench.benchmark.formatting import FIXED_UNITS, UNIT_ALIASES
from microbench.benchmark.reporter import Reporter
from microbench.benchmark.runner import BenchmarkConfig
from microbench.benchmark.workload import load_workload

logger = logging.getLogger(__name__)

console = Console()


def setup_logging(debug: bool = False):
    """Configure logging level."""
    level = logging.DEBUG if debug else getattr(logging, Config.LOG_LEVEL, logging.WARNING)

    # Configure root logger
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Also set level for our modules
    logging.getLogger('microbench').setLevel(level)


@click.group()
@click.version_option(version=__version__)
@click.option('--debug', is_flag=True, help='Enable debug output (DEBUG level, logs every round)')
@click.pass_context
def cli(ctx, debug):
    """
    microbench

    Call a Python function repeatedly and report how long it takes:
    mean, min, max and standard deviation over all rounds.
    """
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug
    setup_logging(debug)


@cli.command()
@click.argument('code')
@click.option('--rounds', '-n', default=None, type=int, help='Number of rounds to run [default: 50, or MICROBENCH_ROUNDS]')
@click.option('--verbose', '-v', is_flag=True, help='Show progress after every round')
@click.option('--pretty', is_flag=True, help='Print "<mean> +/- <std>" only')
@click.option('--units', default=None, help='Fixed unit for all durations: min, sec, ms, µs/us, ns [default: MICROBENCH_UNITS]')
@click.option('--list-timings', is_flag=True, help='Include every round\'s timing (ignored with --pretty)')
@click.option('--sign-digits', default=None, type=int,
              help='Significant digits kept for the statistics, 0 disables rounding [default: 4, or MICROBENCH_SIGN_DIGITS]')
@click.option('--format', '-f', type=click.Choice(['table', 'json']), default='table', help='Output format')
def run(code, rounds, verbose, pretty, units, list_timings, sign_digits, format):
    """
    Benchmark CODE.

    CODE names a zero-argument callable as "package.module:function".

    Example:
        python main.py run mypackage.workloads:build_index -n 200 --pretty
    """
    try:
        defaults = Config.get_benchmark_defaults()
        config = BenchmarkConfig(
            rounds=defaults["rounds"] if rounds is None else rounds,
            units=defaults["units"] if units is None else units,
            sign_digits=defaults["sign_digits"] if sign_digits is None else sign_digits,
            pretty=pretty,
            list_timings=list_timings,
            verbose=verbose,
        ).validate()
        workload = load_workload(code)
    except ConfigurationError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    options = dict(
        rounds=config.rounds,
        pretty=config.pretty,
        units=config.units,
        list_timings=config.list_timings,
        sign_digits=config.sign_digits,
    )

    if config.verbose:
        with Progress(
            TextColumn("{task.completed} / {task.total}"),
            console=console,
        ) as progress:
            task = progress.add_task("Running benchmark...", total=config.rounds)

            result = bench(
                workload,
                verbose=True,
                on_progress=lambda completed, total: progress.update(task, completed=completed),
                **options,
            )
    else:
        result = bench(workload, **options)

    Reporter(console).print_report(result, format=format)


@cli.command('list-units')
def list_units_cmd():
    """List units accepted by --units."""
    console.print("\n[bold]Available Units:[/bold]\n")

    table = Table()
    table.add_column("Unit", style="cyan")
    table.add_column("Aliases")
    table.add_column("Nanoseconds", justify="right")

    for unit, size in FIXED_UNITS.items():
        aliases = [alias for alias, target in UNIT_ALIASES.items() if target == unit]
        table.add_row(unit, ", ".join(aliases), f"{size:,}")

    console.print(table)


if __name__ == "__main__":
    cli()
