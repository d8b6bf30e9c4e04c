"""
Command-line interface for md-events.

Provides commands to extract calendar events from markdown task lists
and print them as JSON.

Usage:
    md-events parse concerts.md        # Print events of a tagged file
    md-events line "- [ ] (2 Nov) () (Houston) Polyphia"
    md-events check concerts.md        # Is the file tagged as an event list?
    md-events --metrics-file parse.prom parse concerts.md
"""

import json
import sys

import click
import structlog

from src.config.settings import get_settings
from src.event_parsing.builder import EventBuilder
from src.event_parsing.config import EventParsingConfig
from src.event_parsing.errors import EventParseError
from src.event_parsing.scanner import EventScanner
from src.observability.logging import bind_context, clear_context, setup_logging
from src.observability.metrics import get_metrics, write_metrics

logger = structlog.get_logger()


def _dump(data: object, pretty: bool) -> str:
    return json.dumps(data, indent=2 if pretty else None, ensure_ascii=False)


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--metrics-file",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write Prometheus metrics to this file on exit",
)
@click.pass_context
def main(ctx: click.Context, debug: bool, metrics_file: str | None) -> None:
    """md-events - Extract calendar events from markdown task lists."""
    if debug:
        import os
        os.environ["LOG_LEVEL"] = "DEBUG"
        get_settings.cache_clear()

    setup_logging()

    if metrics_file:
        # Runs on normal return and on sys.exit() from a command
        ctx.call_on_close(lambda: write_metrics(metrics_file))


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--year", type=int, default=None, help="Year for dates written without one")
@click.option("--force", is_flag=True, help="Parse even if the file lacks the event tag")
@click.option("--pretty", is_flag=True, help="Indent JSON output")
@click.option("--include-failures", is_flag=True, help="Also report lines that failed to parse")
@click.option("--strict", is_flag=True, help="Exit with status 1 if any line failed")
def parse(
    path: str,
    year: int | None,
    force: bool,
    pretty: bool,
    include_failures: bool,
    strict: bool,
) -> None:
    """Parse the event lines of a markdown file.

    Example:
        md-events parse concerts.md --pretty
        md-events parse notes.md --force --year 2024 --include-failures
    """
    config = EventParsingConfig()
    scanner = EventScanner(
        builder=EventBuilder(config=config, current_year=year),
        config=config,
        metrics=get_metrics(),
    )

    bind_context(path=path)
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()

        if not scanner.is_event_file(text) and not force:
            logger.error("File is not tagged as an event list", tag=config.event_tag)
            sys.exit(1)

        result = scanner.scan_text(text)
        logger.info(
            "Parsed event file",
            events=len(result.events),
            failures=len(result.failures),
        )
    finally:
        clear_context()

    if include_failures:
        output: object = result.to_dict(config.date_format, config.time_format)
    else:
        output = [e.to_dict(config.date_format, config.time_format) for e in result.events]
    click.echo(_dump(output, pretty))

    if strict and result.failures:
        sys.exit(1)


# Event lines start with "- [", which click would otherwise read as an option
@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("text")
@click.option("--year", type=int, default=None, help="Year for dates written without one")
@click.option("--pretty", is_flag=True, help="Indent JSON output")
def line(text: str, year: int | None, pretty: bool) -> None:
    """Parse a single event line.

    Example:
        md-events line "- [ ] (19 Nov) (7-10PM) (Acadia Bar & Grill, Houston) Trapt"
    """
    config = EventParsingConfig()
    builder = EventBuilder(config=config, current_year=year)

    try:
        event = builder.build(text)
    except EventParseError as e:
        get_metrics().record_failure(e.kind)
        click.echo(click.style(f"{e.kind}: {e}", fg="red"), err=True)
        sys.exit(1)

    get_metrics().record_event(success=True)
    click.echo(_dump(event.to_dict(config.date_format, config.time_format), pretty))


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def check(path: str) -> None:
    """Check whether a markdown file is tagged as an event list."""
    scanner = EventScanner(metrics=get_metrics())

    with open(path, encoding="utf-8") as f:
        tagged = scanner.is_event_file(f.read())

    if tagged:
        click.echo(click.style(f"{path}: event list", fg="green"))
        sys.exit(0)
    else:
        click.echo(click.style(f"{path}: not an event list", fg="red"))
        sys.exit(1)


if __name__ == "__main__":
    main()
