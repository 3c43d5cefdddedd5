#!/usr/bin/env python3
"""
Training load CLI.

Scores an exported activity history (JSON) and shows load metrics.

Usage:
    training-load thresholds activities.json
    training-load loads activities.json --days 30
    training-load status activities.json --json
    training-load trends activities.json --days 28
    training-load quality activities.json
"""

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich import box

from .calculator import TrainingLoadCalculator
from .config import configure_logging, get_settings
from .exceptions import ErrorCode, TrainingLoadError, InputFileError
from .metrics.aggregation import filter_recent_activities
from .metrics.quality import assess_data_quality
from .metrics.thresholds import estimate_athlete_thresholds
from .models import Activity, AthleteThresholds, TrainingStatus

logger = logging.getLogger(__name__)

console = Console()


def get_status_color(status: TrainingStatus) -> str:
    """Get color for training status."""
    colors = {
        TrainingStatus.PEAK: "red",
        TrainingStatus.BUILD: "yellow",
        TrainingStatus.MAINTAIN: "green",
        TrainingStatus.RECOVER: "blue",
    }
    return colors.get(status, "white")


def format_duration(seconds: int) -> str:
    """Format seconds as h:mm."""
    hours, remainder = divmod(int(seconds), 3600)
    return f"{hours}:{remainder // 60:02d}"


def load_activity_file(path: str) -> List[Activity]:
    """
    Read activities from a JSON export.

    Accepts either a list of activity objects or an object with an
    "activities" list.

    Raises:
        InputFileError: If the file is missing or not valid JSON
        ActivityParseError: If a row fails validation
    """
    file_path = Path(path)
    if not file_path.exists():
        raise InputFileError(f"Activity file not found: {path}", path=path, missing=True)

    try:
        payload = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InputFileError(f"Could not read activity file {path}: {e}", path=path) from e

    if isinstance(payload, dict):
        payload = payload.get("activities")
    if not isinstance(payload, list):
        raise InputFileError(
            f"Activity file {path} must contain a list of activities",
            path=path,
        )

    return Activity.from_dicts(payload)


def build_thresholds(args, activities: List[Activity]) -> AthleteThresholds:
    """
    Estimate thresholds from history, then apply command-line overrides.

    An overridden max HR re-derives the estimated lactate threshold unless
    --threshold-hr is also given.

    Raises:
        TrainingLoadError: If an override is out of range (VALIDATION_ERROR)
    """
    estimated = estimate_athlete_thresholds(activities)
    overrides = {
        "max_heart_rate": args.max_hr,
        "resting_heart_rate": args.rest_hr,
        "functional_threshold_power": args.ftp,
        "lactate_threshold": args.threshold_hr,
        "weight_kg": args.weight_kg,
        "sex": args.sex,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if not overrides:
        return estimated
    if "max_heart_rate" in overrides and "lactate_threshold" not in overrides:
        overrides["lactate_threshold"] = None

    try:
        return AthleteThresholds(**{**estimated.model_dump(), **overrides})
    except ValidationError as e:
        raise TrainingLoadError(
            f"Invalid threshold override: {e.error_count()} validation error(s)",
            code=ErrorCode.VALIDATION_ERROR,
            details={"errors": [err["msg"] for err in e.errors()]},
        ) from e


def _recent(args, activities: List[Activity]) -> List[Activity]:
    return filter_recent_activities(activities, args.days, args.as_of)


def cmd_thresholds(args, activities: List[Activity]) -> None:
    """Show estimated athlete thresholds."""
    thresholds = build_thresholds(args, activities)

    table = Table(title="Athlete Thresholds", box=box.ROUNDED)
    table.add_column("Threshold", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Max HR", f"{thresholds.max_heart_rate:.0f} bpm")
    table.add_row("Resting HR", f"{thresholds.resting_heart_rate:.0f} bpm")
    table.add_row("Threshold HR", f"{thresholds.threshold_heart_rate:.0f} bpm")
    ftp = thresholds.functional_threshold_power
    table.add_row("FTP", f"{ftp:.0f} W" if ftp is not None else "unknown")
    power_to_weight = thresholds.power_to_weight
    if power_to_weight is not None:
        table.add_row("FTP/kg", f"{power_to_weight:.2f} W/kg")

    console.print(table)


def cmd_loads(args, activities: List[Activity]) -> None:
    """Show daily load points."""
    calculator = TrainingLoadCalculator(build_thresholds(args, activities))
    points = calculator.process_activities(_recent(args, activities))

    if not points:
        console.print(f"No qualifying activities in the last {args.days} days.")
        return

    table = Table(title=f"Daily Load (Last {args.days} Days)", box=box.ROUNDED)
    table.add_column("Date", style="cyan")
    table.add_column("Activity")
    table.add_column("Sport")
    table.add_column("Time", justify="right")
    table.add_column("TRIMP", justify="right")
    table.add_column("TSS", justify="right")
    table.add_column("Load", justify="right")

    for point in points:
        table.add_row(
            point.date.isoformat(),
            point.activity.name,
            point.activity.sport_type,
            format_duration(point.activity.duration),
            f"{point.trimp:.1f}",
            f"{point.tss:.1f}",
            f"{point.normalized_load:.1f}",
        )

    console.print(table)


def cmd_status(args, activities: List[Activity]) -> None:
    """Show current training status."""
    calculator = TrainingLoadCalculator(build_thresholds(args, activities))
    points = calculator.process_activities(_recent(args, activities))
    metrics = calculator.calculate_load_metrics(points, as_of=args.as_of)

    if args.json:
        print(json.dumps(metrics.to_dict(), indent=2))
        return

    color = get_status_color(metrics.status)
    status_text = f"""
[cyan]Acute (7d):[/cyan]     {metrics.acute:.1f}
[cyan]Chronic (28d):[/cyan]  {metrics.chronic:.1f}
[cyan]Balance:[/cyan]        {metrics.balance:.2f}
[cyan]Ramp rate:[/cyan]      {metrics.ramp_rate:+.1f}%

[cyan]Status:[/cyan]         [{color}]{metrics.status.value.upper()}[/{color}]
"""
    console.print(Panel(status_text, title="Training Status", box=box.ROUNDED))
    console.print(metrics.recommendation)


def cmd_trends(args, activities: List[Activity]) -> None:
    """Show the acute/chronic trend."""
    settings = get_settings()
    calculator = TrainingLoadCalculator(build_thresholds(args, activities))
    points = calculator.process_activities(_recent(args, activities))
    trends = calculator.calculate_load_trends(points, as_of=args.as_of)

    if not trends:
        console.print("No load history to chart.")
        return

    table = Table(title="Load Trend", box=box.ROUNDED)
    table.add_column("Date", style="cyan")
    table.add_column("Load", justify="right")
    table.add_column("Acute", justify="right")
    table.add_column("Chronic", justify="right")
    table.add_column("Balance", justify="right")

    for row in trends[-settings.trend_days:]:
        balance_color = "red" if row.balance >= 1.3 else "green" if row.balance >= 0.8 else "blue"
        table.add_row(
            row.date.isoformat(),
            f"{row.daily_load:.1f}",
            f"{row.acute:.1f}",
            f"{row.chronic:.1f}",
            Text(f"{row.balance:.2f}", style=balance_color),
        )

    console.print(table)


def cmd_quality(args, activities: List[Activity]) -> None:
    """Show heart rate / power coverage."""
    report = assess_data_quality(_recent(args, activities))

    table = Table(title="Data Quality", box=box.ROUNDED, show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Activities", str(report.total_activities))
    table.add_row("With heart rate", f"{report.activities_with_hr} ({report.hr_percentage:.0f}%)")
    table.add_row("With power", f"{report.activities_with_power} ({report.power_percentage:.0f}%)")
    table.add_row("Quality", report.quality.value.upper())

    console.print(table)


COMMANDS = {
    "thresholds": cmd_thresholds,
    "loads": cmd_loads,
    "status": cmd_status,
    "trends": cmd_trends,
    "quality": cmd_quality,
}


def create_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="training-load",
        description="Training load analytics for an exported activity history",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  training-load thresholds activities.json
  training-load loads activities.json --days 30
  training-load status activities.json --ftp 250 --json
  training-load trends activities.json
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("file", help="JSON export of activities")
    common.add_argument(
        "--days", "-d", type=int, default=settings.history_days,
        help="Days of history to analyze",
    )
    common.add_argument(
        "--as-of", type=date.fromisoformat, default=None,
        help="Day the analysis ends on (YYYY-MM-DD, default: today)",
    )
    common.add_argument("--max-hr", type=float, help="Maximum heart rate")
    common.add_argument("--rest-hr", type=float, help="Resting heart rate")
    common.add_argument("--threshold-hr", type=float, help="Lactate threshold heart rate")
    common.add_argument("--ftp", type=float, help="Functional threshold power (watts)")
    common.add_argument("--weight-kg", type=float, help="Body weight (kg), for FTP in W/kg")
    common.add_argument(
        "--sex", choices=["male", "female"],
        help="Sex (affects TRIMP coefficients)",
    )

    subparsers.add_parser("thresholds", parents=[common], help="Show estimated athlete thresholds")
    subparsers.add_parser("loads", parents=[common], help="Show daily load points")
    status_p = subparsers.add_parser("status", parents=[common], help="Show training status")
    status_p.add_argument("--json", action="store_true", help="Print metrics as JSON")
    subparsers.add_parser("trends", parents=[common], help="Show acute/chronic trend")
    subparsers.add_parser("quality", parents=[common], help="Show data quality")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    configure_logging(get_settings())
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.as_of is None:
        args.as_of = date.today()

    try:
        activities = load_activity_file(args.file)
    except TrainingLoadError as e:
        logger.debug("Failed to load %s: %r", args.file, e)
        console.print(f"[red]Error: {e.message}[/red]")
        return 1

    try:
        COMMANDS[args.command](args, activities)
    except TrainingLoadError as e:
        logger.debug("%s failed: %r", args.command, e)
        console.print(f"[red]Error: {e.message}[/red]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
