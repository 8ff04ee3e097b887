"""CLI for Hobby Tracker.

Prints every analytics result for the demonstration hobby log. The
report is deterministic and takes no arguments.
"""

import typer
from loguru import logger
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from hobby_tracker.analytics import (
    average_time_per_hobby,
    count_mood,
    long_sessions,
    mood_counts,
    session_count,
    sessions_on_day,
    sort_by_day,
    sort_by_minutes_desc,
    total_time,
    total_time_for_hobby,
    unique_hobbies,
)
from hobby_tracker.analytics.enrichment import (
    EnrichedSession,
    with_average_time_per_hobby,
    with_hobby_total,
    with_long_sessions_count,
    with_mood_count,
    with_mood_total,
    with_total_time,
    with_unique_hobbies,
    with_unique_hobbies_count,
)
from hobby_tracker.config.settings import settings
from hobby_tracker.core.logger import setup_logger
from hobby_tracker.sessions import HOBBY_LOG, HobbyLog

# Initialize Rich console for output
console = Console()

# Initialize Typer app
app = typer.Typer(
    name="hobby-tracker",
    help="Hobby Tracker - session analytics over the demonstration hobby log",
    add_completion=False,
)

REPORT_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")


def _setup_logging(debug: bool = False) -> None:
    """Set up logging from settings.

    Args:
        debug: Force DEBUG level regardless of LOG_LEVEL
    """
    log_level = "DEBUG" if debug else settings.log_level
    setup_logger(level=log_level, log_file=settings.log_file or None)


def _sessions_table(title: str, log: HobbyLog) -> Table:
    table = Table(title=title)
    table.add_column("Day")
    table.add_column("Hobby")
    table.add_column("Minutes", justify="right")
    table.add_column("Mood")
    for session in log:
        table.add_row(session.day, session.hobby, str(session.minutes), session.mood)
    return table


def _print_value(label: str, value: object, unit: str = "") -> None:
    suffix = f" {unit}" if unit else ""
    console.print(f"[bold]{label}:[/bold] {value}{suffix}")


def _print_enriched(label: str, rows: list[EnrichedSession]) -> None:
    console.print(f"[bold]{label}:[/bold]")
    console.print(JSON.from_data(rows))


def _print_summary(log: HobbyLog) -> None:
    threshold = settings.long_session_threshold
    mood_labels = list(mood_counts(log))

    _print_value("Total time spent", total_time(log), "minutes")
    _print_value("Unique hobbies", ", ".join(unique_hobbies(log)))
    console.print(_sessions_table(f"Sessions longer than {threshold} min", long_sessions(log, threshold)))
    for mood in mood_labels:
        _print_value(f"Number of {mood} sessions", count_mood(log, mood))
    for hobby in unique_hobbies(log):
        _print_value(f"Total time for {hobby}", total_time_for_hobby(log, hobby), "minutes")
    _print_value("Unique hobbies count", len(unique_hobbies(log)))
    _print_value("Long sessions count", len(long_sessions(log, threshold)))
    _print_value("Mood counts", mood_counts(log))
    _print_value("Average time per hobby", f"{average_time_per_hobby(log):.2f}", "minutes")
    _print_value("Total sessions", session_count(log))

    for day in REPORT_DAYS:
        console.print(_sessions_table(f"Hobby sessions on {day}", sessions_on_day(log, day)))

    console.print(_sessions_table("Hobby log sorted by minutes", sort_by_minutes_desc(log)))
    console.print(_sessions_table("Hobby log sorted by day", sort_by_day(log)))


def _print_enrichments(log: HobbyLog) -> None:
    _print_enriched("Hobby log with mood counts", with_mood_count(log))
    _print_enriched("Hobby log with unique hobbies", with_unique_hobbies(log))
    _print_enriched("Hobby log with unique hobbies count", with_unique_hobbies_count(log))
    _print_enriched(
        f"Hobby log with long sessions count (> {settings.long_session_threshold} min)",
        with_long_sessions_count(log, settings.long_session_threshold),
    )
    _print_enriched(
        f"Hobby log with long sessions count (> {settings.wide_long_session_threshold} min)",
        with_long_sessions_count(log, settings.wide_long_session_threshold),
    )
    _print_enriched("Hobby log with total time per hobby", with_hobby_total(log))
    _print_enriched("Hobby log with total time for all hobbies", with_total_time(log))
    _print_enriched("Hobby log with average time per hobby", with_average_time_per_hobby(log))
    for mood in mood_counts(log):
        _print_enriched(f"Hobby log with total {mood} sessions", with_mood_total(log, mood))


@app.command()
def report(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Print every analytics result for the demonstration hobby log."""
    _setup_logging(debug=debug)
    logger.info(f"Building report for {len(HOBBY_LOG)} sessions")

    console.print(Panel(Text("Hobby Tracker Report", style="bold green"), border_style="green"))
    _print_summary(HOBBY_LOG)
    _print_enrichments(HOBBY_LOG)

    logger.info("Report complete")


if __name__ == "__main__":
    app()
