"""
Main CLI application using Typer.
"""

import logging
from datetime import time
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..adapters.csv_calendar import SAMPLE_CALENDAR, CsvCalendarSource, InvalidRecordPolicy
from ..config import AppConfig, load_config
from ..domain.exceptions import SlotFinderError
from ..domain.models import Workday
from ..services.slot_finder import SlotFinderService

app = typer.Typer(
    name="slotfinder",
    help="Find common free meeting slots within a workday",
    add_completion=False
)

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _resolve_calendar_path(
    config: AppConfig,
    calendar_file: Optional[Path],
    sample: bool
) -> Path:
    """
    Pick the calendar to load: --sample, then --calendar, then the config file.
    """
    if sample:
        return SAMPLE_CALENDAR
    if calendar_file is not None:
        return calendar_file
    if config.calendar_file is not None:
        return config.calendar_file

    console.print(
        "[bold red]Error:[/bold red] No calendar given. "
        "Use --calendar, --sample or set calendar_file in config.yaml."
    )
    raise typer.Exit(1)


def _load_service(config: AppConfig, calendar_path: Path, strict: bool) -> SlotFinderService:
    """Build the service and load the calendar, reporting skipped records."""
    policy = InvalidRecordPolicy.ABORT if strict else InvalidRecordPolicy(config.on_invalid_record)
    source = CsvCalendarSource(
        calendar_path,
        on_invalid=policy,
        has_header=config.has_header
    )

    service = SlotFinderService(workday=config.workday.to_workday())
    report = service.load(source)

    if report.skipped:
        console.print(
            f"[yellow]⚠ {report.skipped} invalid record(s) skipped in {calendar_path}[/yellow]"
        )

    return service


def _format_slot(workday: Workday, start: time, duration_minutes: int) -> str:
    end = workday.time_at(workday.offset_of(start) + duration_minutes)
    return f"{start.strftime('%H:%M')} – {end.strftime('%H:%M')}"


@app.command()
def find(
    participants: Annotated[List[str], typer.Argument(help="Participant names (case-sensitive)")],
    calendar_file: Annotated[Optional[Path], typer.Option("--calendar", "-f", help="CSV calendar to load")] = None,
    sample: Annotated[bool, typer.Option("--sample", help="Use the bundled sample calendar")] = False,
    duration: Annotated[Optional[int], typer.Option("--duration", "-d", help="Meeting duration in minutes")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")] = None,
    strict: Annotated[bool, typer.Option("--strict", help="Abort on the first invalid calendar record")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
):
    """
    Find meeting slots where all participants are free.

    Examples:

        # Use the bundled sample calendar
        slotfinder find Alice Jack Bob --sample --duration 60

        # Load your own calendar
        slotfinder find Alice Bob --calendar team.csv -d 30
    """
    _configure_logging(verbose)

    try:
        config = load_config(config_file)
        calendar_path = _resolve_calendar_path(config, calendar_file, sample)
        min_duration = duration if duration is not None else config.duration_minutes

        service = _load_service(config, calendar_path, strict)

        unknown = [p for p in participants if p not in service.store]
        if unknown:
            console.print(f"[yellow]⚠ Not in calendar, ignored: {', '.join(unknown)}[/yellow]")

        console.print("[bold cyan]Summary:[/bold cyan]")
        console.print(f"   Participants: {', '.join(participants)}")
        console.print(f"   Duration: {min_duration} min")
        console.print(f"   Workday: {service.workday}")
        console.print()

        slots = service.find_slots(participants, min_duration)

        if not slots:
            console.print("[yellow]⚠ No available slots found.[/yellow]")
        else:
            console.print(f"[bold green]✓ {len(slots)} available slot(s) found:[/bold green]\n")
            for slot in slots:
                console.print(f"  {_format_slot(service.workday, slot, min_duration)}")

        console.print()

    except (FileNotFoundError, ValueError, SlotFinderError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def list_participants(
    calendar_file: Annotated[Optional[Path], typer.Option("--calendar", "-f", help="CSV calendar to load")] = None,
    sample: Annotated[bool, typer.Option("--sample", help="Use the bundled sample calendar")] = False,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
):
    """
    List all participants found in the calendar.
    """
    _configure_logging(False)

    try:
        config = load_config(config_file)
        calendar_path = _resolve_calendar_path(config, calendar_file, sample)
        service = _load_service(config, calendar_path, strict=False)

        names = service.known_participants()
        if not names:
            console.print("[yellow]No participants in the calendar.[/yellow]")
            return

        table = Table(
            title="Participants",
            show_header=True,
            header_style="bold cyan"
        )
        table.add_column("Name", style="bold yellow")
        table.add_column("Busy intervals", justify="right")
        table.add_column("Booked minutes", justify="right")

        for name in names:
            intervals = service.store.intervals_for(name)
            booked = sum(interval.duration_minutes() for interval in intervals)
            table.add_row(name, str(len(intervals)), str(booked))

        console.print()
        console.print(table)
        console.print()

    except (FileNotFoundError, ValueError, SlotFinderError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]slotfinder[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
