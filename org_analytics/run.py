"""Command line runner — validates the employee source or runs every report."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from org_analytics import analytics
from org_analytics.config import (
    AnalyticsConfig,
    apply_overrides,
    get_env_config,
    load_analytics_config,
    load_config_file,
)
from org_analytics.errors import AnalyticsError
from org_analytics.hr.org_structure import hierarchy_stats
from org_analytics.utils.types import RunStatus

console = Console()

DEFAULT_CONFIG_FILE = Path("org_analytics.yaml")


def load_config(args: argparse.Namespace) -> AnalyticsConfig:
    config = apply_overrides(load_analytics_config(args.env), get_env_config())

    config_path = Path(args.config) if args.config else DEFAULT_CONFIG_FILE
    if config_path.exists():
        config = apply_overrides(config, load_config_file(config_path))

    # Command line flags win over any file
    cli: dict[str, dict] = {"source": {}, "salary_policy": {}, "reporting_lines": {}}
    if args.file:
        cli["source"]["path"] = args.file
    if args.no_header:
        cli["source"]["has_header"] = False
    if args.min_percent is not None:
        cli["salary_policy"]["min_percent"] = args.min_percent
    if args.max_percent is not None:
        cli["salary_policy"]["max_percent"] = args.max_percent
    if args.threshold is not None:
        cli["reporting_lines"]["threshold"] = args.threshold
    return apply_overrides(config, cli)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Analyze an employee hierarchy")
    parser.add_argument("--file", type=str, help="Employee CSV file")
    parser.add_argument("--no-header", action="store_true", help="The CSV has no header line")
    parser.add_argument("--env", type=str, default="production", help="Configuration preset")
    parser.add_argument("--config", type=str, help="YAML file with configuration overrides")
    parser.add_argument("--min-percent", type=int, help="Minimum percentage above subordinates' average")
    parser.add_argument("--max-percent", type=int, help="Maximum percentage above subordinates' average")
    parser.add_argument("--threshold", type=int, help="Maximum allowed reporting line depth")
    parser.add_argument("--validate", action="store_true", help="Only validate the source, don't run")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level",
    )
    return parser


def _print_validation(outcome: dict, source: Path) -> None:
    table = Table(title="Validation Results")
    table.add_column("Source")
    table.add_column("Valid")
    table.add_column("Details")

    match outcome:
        case {"status": RunStatus.OK, "rows_available": rows}:
            table.add_row(source.name, "[green]✓[/green]", f"{rows} employee(s)")
        case {"status": RunStatus.ERROR, "message": msg}:
            table.add_row(source.name, "[red]✗[/red]", msg)
    console.print(table)


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    try:
        config = load_config(args)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        sys.exit(1)

    if args.validate:
        outcome = analytics.validate(config)
        _print_validation(outcome, config.source.path)
        if outcome["status"] != RunStatus.OK:
            sys.exit(1)
        return

    console.print("[bold]=========== INITIALIZING ANALYTICS REPORTS ===========[/bold]")
    try:
        result = analytics.run_analytics(config)
    except AnalyticsError as exc:
        console.print(f"[red]ERROR: {exc}[/red]")
        sys.exit(1)

    stats = hierarchy_stats(result.root)
    console.print(
        f"Hierarchy: {stats['headcount']} employee(s), max depth {stats['max_depth']}, "
        f"mean span of control {stats['mean_span_of_control']}"
    )
    console.print("[bold]=========== FINISHING ANALYTICS REPORTS ===========[/bold]")


if __name__ == "__main__":
    main()
