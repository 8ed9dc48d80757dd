"""
Command-line interface for the schedule validator.

Usage:
    python -m schedule_validator slots config.json --day 1
    python -m schedule_validator grid config.json --day 5
    python -m schedule_validator check config.json
    python -m schedule_validator validate old.json new.json schedules.json
    python -m schedule_validator suggest old.json new.json schedules.json --action adjust
    python -m schedule_validator convert legacy.json -o config.json
    python -m schedule_validator conflicts schedules.json
    python -m schedule_validator presets standard
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .conflicts import find_time_conflicts
from .data.loader import ConfigLoadError, load_config_file, load_schedules_file
from .data.models import Schedule, ScheduleConfig, day_name, day_short_label
from .data.presets import get_preset, get_preset_data, preset_names
from .generator import build_day_grid, generate_time_slots_per_day, instructional_minutes
from .logging import setup_logging
from .output.report import REASON_LABELS, describe_changes, format_changes, generate_report
from .output.schema import ChangeAction, ScheduleValidationResult, TimeSlot
from .settings import SuggestionScope, get_settings
from .suggestions import plan_remediation
from .validator import group_suggestions_by_reason, validate_schedules_against_config

# Create Typer app
app = typer.Typer(
    name="schedule-validator",
    help="Per-day school schedule configuration: slot generation and validation.",
    add_completion=False,
)

# Rich console for pretty output
console = Console()


class OutputFormat(str, Enum):
    TABLE = "table"
    REPORT = "report"
    JSON = "json"


class RemediationAction(str, Enum):
    ADJUST = "adjust"
    DELETE = "delete"


# =============================================================================
# Helper Functions
# =============================================================================

def _storage_days(ctx: typer.Context) -> bool:
    return bool(ctx.obj and ctx.obj.get("storage_days"))


def load_config(ctx: typer.Context, path: Path) -> ScheduleConfig:
    """Load a configuration file or exit with an error."""
    try:
        return load_config_file(path, storage_days=_storage_days(ctx))
    except ConfigLoadError as e:
        console.print(f"[red]Error loading configuration:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)


def load_schedule_list(ctx: typer.Context, path: Path) -> list[Schedule]:
    """Load a schedules file or exit with an error."""
    try:
        return load_schedules_file(path, storage_days=_storage_days(ctx))
    except ConfigLoadError as e:
        console.print(f"[red]Error loading schedules:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)


def _slot_table(title: str, slots: list[TimeSlot]) -> Table:
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Time")
    table.add_column("Label")
    table.add_column("Kind")

    for slot in slots:
        if slot.is_break:
            kind = "[yellow]break[/yellow]"
        elif slot.is_configured:
            kind = "[magenta]configured class[/magenta]"
        else:
            kind = "[green]class[/green]"
        table.add_row(f"{slot.start}-{slot.end}", slot.label, kind)

    return table


def print_validation_table(result: ScheduleValidationResult) -> None:
    """Print a validation result as Rich tables."""
    status = Text(
        "VALID" if result.is_valid else f"{len(result.affected_schedules)} AFFECTED",
        style="bold green" if result.is_valid else "bold red",
    )
    console.print(Panel(status, title="Validation Status"))

    changes = describe_changes(result.changes_summary)
    if changes:
        console.print("[bold]Changes:[/bold]")
        for line in changes:
            console.print(f"  [cyan]*[/cyan] {line}")
    else:
        console.print("[dim]No configuration changes[/dim]")

    for reason, suggestions in group_suggestions_by_reason(result).items():
        table = Table(title=REASON_LABELS[reason], show_header=True, header_style="bold")
        table.add_column("Schedule")
        table.add_column("Day", style="cyan")
        table.add_column("Time")
        table.add_column("Recommendation")
        for s in suggestions:
            state = s.current_state
            table.add_row(
                str(s.schedule_id),
                day_name(state.day_of_week),
                f"{state.start_time}-{state.end_time}",
                s.recommendation,
            )
        console.print(table)


# =============================================================================
# Callback
# =============================================================================

@app.callback()
def main_callback(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level (default from SCHEDULE_VALIDATOR_LOG_LEVEL)",
    ),
    log_json: Optional[bool] = typer.Option(
        None,
        "--log-json/--no-log-json",
        help="Emit logs as JSON lines",
    ),
    storage_days: Optional[bool] = typer.Option(
        None,
        "--storage-days/--iso-days",
        help="Input day numbers are 0-6 with 0=Sunday",
    ),
) -> None:
    """Configure logging and shared options."""
    settings = get_settings()
    setup_logging(
        json_output=settings.log_json if log_json is None else log_json,
        log_level=log_level or settings.log_level,
    )
    ctx.obj = {
        "storage_days": settings.storage_days if storage_days is None else storage_days,
    }


# =============================================================================
# Commands
# =============================================================================

@app.command()
def slots(
    ctx: typer.Context,
    config_file: Path = typer.Argument(..., help="Path to configuration JSON"),
    day: Optional[int] = typer.Option(
        None,
        "--day", "-d",
        help="Only this day (1=Monday ... 7=Sunday)",
        min=1,
        max=7,
    ),
) -> None:
    """
    List the bookable class periods of each working day.

    Example:
        python -m schedule_validator slots config.json --day 1
    """
    config = load_config(ctx, config_file)

    per_day = generate_time_slots_per_day(config)
    if day is not None:
        if day not in per_day:
            console.print(f"[yellow]{day_name(day)} is not a working day[/yellow]")
            raise typer.Exit(code=1)
        per_day = {day: per_day[day]}

    for d, periods in per_day.items():
        console.print(_slot_table(f"{day_name(d)} ({len(periods)} periods)", periods))


@app.command()
def grid(
    ctx: typer.Context,
    config_file: Path = typer.Argument(..., help="Path to configuration JSON"),
    day: int = typer.Option(
        ...,
        "--day", "-d",
        help="Day to show (1=Monday ... 7=Sunday)",
        min=1,
        max=7,
    ),
) -> None:
    """
    Show a full day grid: class periods and configured breaks.

    Example:
        python -m schedule_validator grid config.json --day 5
    """
    config = load_config(ctx, config_file)
    console.print(_slot_table(day_name(day), build_day_grid(config, day)))
    console.print(f"Instructional minutes: {instructional_minutes(config, day)}")


@app.command()
def check(
    ctx: typer.Context,
    config_file: Path = typer.Argument(..., help="Path to configuration JSON"),
) -> None:
    """
    Validate a configuration file and summarise it.

    Example:
        python -m schedule_validator check config.json
    """
    console.print(f"\n[bold]Checking:[/bold] {config_file}\n")
    config = load_config(ctx, config_file)
    console.print("[green]Configuration is valid[/green]\n")

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Day")
    table.add_column("Configured slots")
    table.add_column("Class periods")
    table.add_column("Instructional min")

    per_day = generate_time_slots_per_day(config)
    for day, periods in per_day.items():
        table.add_row(
            day_name(day),
            str(len(config.slots_for_day(day))),
            str(len(periods)),
            str(instructional_minutes(config, day)),
        )

    console.print(f"Section: {config.section_id}")
    console.print(f"Window: {config.start_time}-{config.end_time}")
    console.print(f"Class duration: {config.class_duration} min")
    console.print(table)

    stray = sorted(d for d in config.break_slots if d not in config.working_days)
    if stray:
        days = ", ".join(day_short_label(d) for d in stray)
        console.print(f"[yellow]Slots configured for non-working days:[/yellow] {days}")


@app.command()
def validate(
    ctx: typer.Context,
    old_config_file: Path = typer.Argument(..., help="Configuration before the edit"),
    new_config_file: Path = typer.Argument(..., help="Configuration after the edit"),
    schedules_file: Path = typer.Argument(..., help="Schedules placed under the old configuration"),
    format: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--format", "-f",
        help="Output format: table, report, or json",
    ),
) -> None:
    """
    Report schedules invalidated by a configuration change.

    Exits with code 1 when any schedule is affected.

    Example:
        python -m schedule_validator validate old.json new.json schedules.json
    """
    old_config = load_config(ctx, old_config_file)
    new_config = load_config(ctx, new_config_file)
    schedules = load_schedule_list(ctx, schedules_file)

    result = validate_schedules_against_config(schedules, old_config, new_config)

    if format == OutputFormat.JSON:
        console.print_json(result.to_json())
    elif format == OutputFormat.REPORT:
        console.print(generate_report(result))
    else:
        print_validation_table(result)

    if not result.is_valid:
        raise typer.Exit(code=1)


@app.command()
def suggest(
    ctx: typer.Context,
    old_config_file: Path = typer.Argument(..., help="Configuration before the edit"),
    new_config_file: Path = typer.Argument(..., help="Configuration after the edit"),
    schedules_file: Path = typer.Argument(..., help="Schedules placed under the old configuration"),
    action: RemediationAction = typer.Option(
        RemediationAction.ADJUST,
        "--action", "-a",
        help="adjust: move affected schedules; delete: drop them",
    ),
    scope: Optional[SuggestionScope] = typer.Option(
        None,
        "--scope", "-s",
        help="Breaks to avoid when moving: all_days or same_day (default from SCHEDULE_VALIDATOR_SUGGESTION_SCOPE)",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the plan as JSON",
    ),
) -> None:
    """
    Propose changes that make affected schedules fit again.

    Example:
        python -m schedule_validator suggest old.json new.json schedules.json --action adjust
    """
    old_config = load_config(ctx, old_config_file)
    new_config = load_config(ctx, new_config_file)
    schedules = load_schedule_list(ctx, schedules_file)

    result = validate_schedules_against_config(schedules, old_config, new_config)
    change_action = ChangeAction.DELETE if action == RemediationAction.DELETE else ChangeAction.UPDATE
    if scope is None:
        scope = get_settings().suggestion_scope
    changes = plan_remediation(result, new_config, change_action, scope=scope)

    if as_json:
        console.print_json(json.dumps([c.to_dict() for c in changes]))
    elif not changes:
        console.print("[green]Nothing to change: all schedules fit.[/green]")
    else:
        console.print(format_changes(changes))


@app.command()
def convert(
    ctx: typer.Context,
    config_file: Path = typer.Argument(..., help="Configuration JSON, legacy or per-day"),
    output: Optional[Path] = typer.Option(
        None,
        "--output", "-o",
        help="Path to write the per-day configuration",
    ),
) -> None:
    """
    Convert a configuration to the per-day break-slot format.

    Example:
        python -m schedule_validator convert legacy.json -o config.json
    """
    config = load_config(ctx, config_file)
    text = config.to_json()

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w") as f:
            f.write(text)
        console.print(f"[green]Per-day configuration saved to:[/green] {output}")
    else:
        console.print_json(text)


@app.command()
def conflicts(
    ctx: typer.Context,
    schedules_file: Path = typer.Argument(..., help="Schedules JSON"),
) -> None:
    """
    Report teacher and classroom double bookings.

    Exits with code 1 when any conflict is found.
    """
    schedules = load_schedule_list(ctx, schedules_file)
    found = find_time_conflicts(schedules)

    if not found:
        console.print("[green]No conflicts found[/green]")
        return

    table = Table(title=f"{len(found)} conflict(s)", show_header=True, header_style="bold red")
    table.add_column("Type")
    table.add_column("Day", style="cyan")
    table.add_column("Time")
    table.add_column("Schedules")
    for conflict in found:
        table.add_row(
            conflict.type.value,
            day_name(conflict.day_of_week),
            f"{conflict.start_time}-{conflict.end_time}",
            ", ".join(str(i) for i in conflict.schedule_ids),
        )
    console.print(table)
    raise typer.Exit(code=1)


@app.command()
def presets(
    name: Optional[str] = typer.Argument(None, help="Preset to print"),
    section_id: Optional[int] = typer.Option(
        None,
        "--section", "-S",
        help="Section ID to put in the printed preset",
    ),
) -> None:
    """
    List bundled example configurations, or print one as JSON.

    Example:
        python -m schedule_validator presets complex --section 7
    """
    if name is None:
        for preset in preset_names():
            console.print(preset)
        return

    if name not in preset_names():
        console.print(f"[red]Error:[/red] Unknown preset '{name}'")
        console.print(f"Available presets: {', '.join(preset_names())}")
        raise typer.Exit(code=1)

    if name == "legacy":
        data = get_preset_data(name)
        if section_id is not None:
            data["sectionId"] = section_id
        console.print_json(json.dumps(data))
    else:
        console.print_json(get_preset(name, section_id=section_id).to_json())


# =============================================================================
# Main Entry Point
# =============================================================================

def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
