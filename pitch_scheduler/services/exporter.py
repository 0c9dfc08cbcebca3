"""
Schedule export for the Pitch Scheduler.
Renders match lists as CSV or plain text for printing and spreadsheets.
"""

import csv
import io
from datetime import datetime
from typing import List, Dict

from pitch_scheduler.models import Match, TournamentSettings
from pitch_scheduler.services.helpers import get_pitch_name

# Leading characters a spreadsheet would evaluate as a formula
FORMULA_PREFIXES = ("=", "+", "-", "@")

TIME_FORMAT = "%H:%M"
DATE_TIME_FORMAT = "%Y-%m-%d %H:%M"


def escape_csv_field(value) -> str:
    """Prefix formula-like values with an apostrophe so spreadsheets show them as text."""
    value = str(value)
    if value.startswith(FORMULA_PREFIXES):
        return "'" + value
    return value


def time_format_for(matches: List[Match]) -> str:
    """HH:MM for a single-day schedule, date and time once play spans several days."""
    days = {match.start_time.date() for match in matches}
    days.update(match.end_time.date() for match in matches)
    return DATE_TIME_FORMAT if len(days) > 1 else TIME_FORMAT


def export_to_csv(matches: List[Match], settings: TournamentSettings) -> str:
    """
    Format matches as CSV with a header row.

    Args:
        matches: Matches in display order
        settings: Used for pitch names

    Returns:
        CSV text, one newline-terminated line per row
    """
    time_format = time_format_for(matches)
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")

    writer.writerow(['Time', 'Pitch', 'Home Team', 'Away Team', 'End Time'])
    for match in matches:
        writer.writerow([
            escape_csv_field(cell) for cell in (
                match.start_time.strftime(time_format),
                get_pitch_name(match.pitch, settings),
                match.home_team.name,
                match.away_team.name,
                match.end_time.strftime(time_format)
            )
        ])

    return output.getvalue()


def export_to_text(matches: List[Match], settings: TournamentSettings) -> str:
    """
    Format matches as a printable schedule grouped by kick-off time.

    Args:
        matches: Matches in chronological order
        settings: Used for the title and pitch names

    Returns:
        Plain-text schedule
    """
    time_format = time_format_for(matches)
    title = settings.name.strip().upper() if settings.name and settings.name.strip() else "TOURNAMENT SCHEDULE"
    text = title + "\n"
    text += "=" * 60 + "\n\n"

    matches_by_time: Dict[datetime, List[Match]] = {}
    for match in matches:
        matches_by_time.setdefault(match.start_time, []).append(match)

    for kickoff, matches_at_time in matches_by_time.items():
        text += f"{kickoff.strftime(time_format)}\n"
        for match in matches_at_time:
            text += (
                f"  {get_pitch_name(match.pitch, settings)}: "
                f"{match.home_team.name} vs {match.away_team.name}\n"
            )
        text += "\n"

    return text
