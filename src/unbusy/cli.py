"""CLI entry point for the Unbusy domain model."""

from __future__ import annotations

from pathlib import Path

import click
import structlog

from .core.config import load_settings
from .core.enums import Day, Department
from .core.errors import UnbusyError
from .observability.logger import get_logger, setup_logging

logger = get_logger(__name__)


@click.group()
@click.option("--config", default=None, help="TOML settings file path")
@click.pass_context
def main(ctx: click.Context, config: str | None) -> None:
    """Unbusy: RUET routine, notice and holiday toolkit."""
    settings = load_settings(config_path=config)
    setup_logging(
        level=settings.observability.log_level,
        format=settings.observability.log_format,
    )
    structlog.contextvars.bind_contextvars(command=ctx.invoked_subcommand)
    if settings.courses.catalogue_path:
        from .core.file_io import load_catalogue

        try:
            load_catalogue(settings.courses.catalogue_path)
        except (OSError, UnbusyError) as exc:
            logger.warning(
                "catalogue_not_loaded",
                path=settings.courses.catalogue_path,
                error=str(exc),
            )


@main.command()
@click.argument("number")
def roll(number: str) -> None:
    """Show what a roll number says about its owner."""
    from .domain.roll import Roll

    try:
        r = Roll.parse(number)
    except UnbusyError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Roll:            {r}")
    click.echo(f"Series:          {r.series}")
    click.echo(f"Department:      {r.department} ({r.department.tag})")
    click.echo(f"Roll in dept:    {r.roll_in_dept}")
    click.echo(f"Section:         {r.section.value}")
    click.echo(f"Thirty:          {r.thirty.value}")


@main.command()
@click.argument("department")
@click.argument("code")
def course(department: str, code: str) -> None:
    """Look up the official and colloquial name of a course."""
    try:
        official, colloquial = Department.parse(department).get_course_name(code)
    except UnbusyError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"{official} ({colloquial})")


@main.command()
@click.argument("routine_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--roll", "roll_number", required=True, help="Roll number")
@click.option(
    "--day",
    required=True,
    type=click.Choice([d.value for d in Day], case_sensitive=False),
    help="Cycle day (A-E)",
)
@click.option("--cycle", default=1, type=click.IntRange(0, 255), help="Cycle number")
def classes(routine_file: Path, roll_number: str, day: str, cycle: int) -> None:
    """List the classes a roll sits for on a day of a cycle."""
    from .core.file_io import load_routine
    from .domain.roll import Roll

    try:
        r = Roll.parse(roll_number)
        routine = load_routine(routine_file)
    except UnbusyError as exc:
        raise click.ClickException(str(exc)) from exc

    found = routine.classes_for(Day(day.upper()), r, cycle)
    logger.debug("classes_resolved", roll=int(r), day=day, cycle=cycle, count=len(found))
    if not found:
        click.echo("No classes.")
        return
    for c in found:
        line = f"{c.period}  {c.course:<12} {c.teacher:<6} {c.class_room}"
        if c.contact_hours != 1:
            line += f"  ({c.contact_hours}h)"
        if c.comment:
            line += f"  - {c.comment}"
        click.echo(line)


_KINDS = ("routine", "holidays", "notices")


@main.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--kind", required=True, type=click.Choice(_KINDS), help="Document kind")
def check(document: Path, kind: str) -> None:
    """Validate a routine, holiday or notice document."""
    from .core import file_io

    loaders = {
        "routine": file_io.load_routine,
        "holidays": file_io.load_holidays,
        "notices": file_io.load_notices,
    }
    try:
        value = loaders[kind](document)
    except UnbusyError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"OK: {kind} document with {len(value)} item(s)")
