"""
Tests for CSV and text export.
"""

import sys
import os
import csv
import io
from datetime import datetime, timedelta

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pitch_scheduler.models import Team, TournamentSettings, Match
from pitch_scheduler.services.exporter import escape_csv_field, export_to_csv, export_to_text


def make_settings(**overrides):
    values = dict(start_date="2026-01-15", start_time="09:00", num_pitches=2)
    values.update(overrides)
    return TournamentSettings(**values)


def make_match(match_id, home, away, pitch, start):
    return Match(
        id=match_id,
        home_team=Team(id=home, name=home),
        away_team=Team(id=away, name=away),
        pitch=pitch,
        start_time=start,
        end_time=start + timedelta(minutes=30),
    )


def test_escape_formula_prefixes():
    assert escape_csv_field("=SUM(A1)") == "'=SUM(A1)"
    assert escape_csv_field("+1234") == "'+1234"
    assert escape_csv_field("-1234") == "'-1234"
    assert escape_csv_field("@mention") == "'@mention"
    assert escape_csv_field("Plain Team") == "Plain Team"


def test_export_to_csv():
    settings = make_settings(pitch_names=["Center Court"])
    start = datetime(2026, 1, 15, 9, 0)
    matches = [
        make_match("match-0", "Lions", "=DANGEROUS", 1, start),
        make_match("match-1", "Tigers, FC", "Bears", 2, start),
    ]

    lines = export_to_csv(matches, settings).split("\n")

    assert lines[0] == "Time,Pitch,Home Team,Away Team,End Time"
    assert lines[1] == "09:00,Center Court,Lions,'=DANGEROUS,09:30"
    assert lines[2] == '09:00,Pitch 2,"Tigers, FC",Bears,09:30'
    assert lines[3] == ""
    assert len(lines) == 4


def test_export_to_csv_quotes_awkward_names():
    """Commas, quotes and formula prefixes survive a round trip through a CSV reader."""
    start = datetime(2026, 1, 15, 9, 0)
    matches = [
        make_match("match-0", 'FC "Copenhagen"', "=SUM, data", 1, start),
        make_match("match-1", "Line\nbreak", '=SUM"test"', 2, start),
    ]

    content = export_to_csv(matches, make_settings())
    assert '"FC ""Copenhagen"""' in content
    assert "\"'=SUM, data\"" in content

    rows = list(csv.reader(io.StringIO(content)))
    assert rows[1][2:4] == ['FC "Copenhagen"', "'=SUM, data"]
    assert rows[2][2:4] == ["Line\nbreak", "'=SUM\"test\""]


def test_export_to_csv_header_only_for_empty_schedule():
    assert export_to_csv([], make_settings()) == "Time,Pitch,Home Team,Away Team,End Time\n"


def test_export_to_csv_includes_date_across_days():
    day_one = datetime(2026, 1, 15, 9, 0)
    matches = [
        make_match("match-0", "A", "B", 1, day_one),
        make_match("match-1", "A", "C", 1, day_one + timedelta(days=1)),
    ]

    lines = export_to_csv(matches, make_settings()).split("\n")

    assert lines[1] == "2026-01-15 09:00,Pitch 1,A,B,2026-01-15 09:30"
    assert lines[2] == "2026-01-16 09:00,Pitch 1,A,C,2026-01-16 09:30"


def test_export_to_text():
    start = datetime(2026, 1, 15, 9, 0)
    text = export_to_text([make_match("match-0", "A", "B", 1, start)], make_settings(name="Spring Cup"))

    assert text == "SPRING CUP\n" + "=" * 60 + "\n\n09:00\n  Pitch 1: A vs B\n\n"


def test_export_to_text_groups_by_kickoff():
    start = datetime(2026, 1, 15, 9, 0)
    matches = [
        make_match("match-0", "A", "B", 1, start),
        make_match("match-1", "C", "D", 2, start),
        make_match("match-2", "A", "C", 1, start + timedelta(minutes=35)),
    ]

    text = export_to_text(matches, make_settings(pitch_names=["North", "South"]))

    assert text.startswith("TOURNAMENT SCHEDULE\n")
    assert "09:00\n  North: A vs B\n  South: C vs D\n\n" in text
    assert "09:35\n  North: A vs C\n\n" in text


def test_export_to_text_keeps_days_apart():
    """Same clock time on different days is two blocks, each labelled with its date."""
    day_one = datetime(2026, 1, 15, 9, 0)
    matches = [
        make_match("match-0", "A", "B", 1, day_one),
        make_match("match-1", "A", "C", 1, day_one + timedelta(days=1)),
    ]

    text = export_to_text(matches, make_settings())

    assert "2026-01-15 09:00\n  Pitch 1: A vs B\n\n" in text
    assert "2026-01-16 09:00\n  Pitch 1: A vs C\n\n" in text


def test_match_past_midnight_switches_to_dates():
    late = datetime(2026, 1, 15, 23, 45)
    text = export_to_text([make_match("match-0", "A", "B", 1, late)], make_settings())
    assert "2026-01-15 23:45\n" in text
