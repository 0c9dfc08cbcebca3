"""
Tests for domain models, duration rules, pitch naming and schemas.
"""

import sys
import os
import json
from datetime import datetime, date, time, timedelta

import pytest
from pydantic import ValidationError

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pitch_scheduler import get_pitch_name, calculate_match_duration
from pitch_scheduler.models import (
    Team, TournamentSettings, SchedulingConfig, Match, GeneratedSchedule,
    MatchMode, SchedulingMode
)
from pitch_scheduler.models.schemas import (
    TournamentSettingsSchema, MatchSchema, TeamSchema, GeneratedScheduleSchema,
    ScheduleRequest
)
from pitch_scheduler.core.exceptions import ScheduleConfigurationError, SchedulerError


def make_settings(**overrides):
    values = dict(start_date="2026-01-15", start_time="09:00")
    values.update(overrides)
    return TournamentSettings(**values)


def test_full_time_duration():
    assert calculate_match_duration(make_settings(match_duration_minutes=40)) == 40
    assert calculate_match_duration(make_settings()) == 30


def test_two_halves_duration():
    settings = make_settings(
        match_mode=MatchMode.TWO_HALVES,
        half_duration_minutes=20,
        halftime_break_minutes=10,
    )
    assert calculate_match_duration(settings) == 50


def test_two_halves_defaults():
    """Missing halves default to 15 minutes with a 5-minute halftime."""
    settings = make_settings(match_mode="two-halves")
    assert settings.match_mode == MatchMode.TWO_HALVES
    assert settings.match_duration == 35


def test_two_halves_ignores_full_time_length():
    settings = make_settings(
        match_mode=MatchMode.TWO_HALVES,
        match_duration_minutes=90,
        half_duration_minutes=10,
        halftime_break_minutes=0,
    )
    assert settings.match_duration == 20


def test_start_datetime_parsing():
    assert make_settings().start_datetime() == datetime(2026, 1, 15, 9, 0)
    settings = make_settings(start_date=date(2026, 3, 1), start_time=time(14, 30))
    assert settings.start_datetime() == datetime(2026, 3, 1, 14, 30)


def test_start_datetime_rejects_garbage():
    with pytest.raises(ScheduleConfigurationError):
        make_settings(start_date="not-a-date").start_datetime()
    with pytest.raises(SchedulerError):
        make_settings(start_time="noon").start_datetime()
    with pytest.raises(ValueError):
        make_settings(start_date="2026-02-30").start_datetime()


def test_get_pitch_name():
    settings = make_settings(num_pitches=3, pitch_names=["Main Field", "", "North"])

    assert get_pitch_name(1, settings) == "Main Field"
    assert get_pitch_name(2, settings) == "Pitch 2"
    assert get_pitch_name(3, settings) == "North"
    assert get_pitch_name(4, settings) == "Pitch 4"


def test_get_pitch_name_without_names():
    assert get_pitch_name(1, make_settings()) == "Pitch 1"
    assert get_pitch_name(2, make_settings(pitch_names=None)) == "Pitch 2"


def test_team_identity_is_by_id():
    assert Team(id="a", name="Alpha") == Team(id="a", name="Renamed")
    assert Team(id="a", name="Alpha") != Team(id="b", name="Alpha")
    assert len({Team(id="a", name="x"), Team(id="a", name="y")}) == 1
    assert str(Team(id="a", name="Alpha")) == "Alpha"


def test_scheduling_config_constructors():
    assert SchedulingConfig.round_robin().mode == SchedulingMode.ROUND_ROBIN

    config = SchedulingConfig.limited_matches(2, 5)
    assert config.mode == SchedulingMode.LIMITED_MATCHES
    assert config.max_matches_per_team == 2
    assert config.max_total_matches == 5

    assert SchedulingConfig(mode="limited-matches").mode == SchedulingMode.LIMITED_MATCHES


def test_match_helpers():
    a, b, c = Team(id="a", name="A"), Team(id="b", name="B"), Team(id="c", name="C")
    start = datetime(2026, 1, 15, 9, 0)
    match = Match("match-0", a, b, 1, start, start + timedelta(minutes=30))
    later = Match("match-1", a, c, 2, start + timedelta(minutes=30), start + timedelta(minutes=60))

    assert match.duration == timedelta(minutes=30)
    assert match.involves_team(a) and match.involves_team("b")
    assert not match.involves_team(c)
    assert match.get_opponent(a) == b
    assert match.get_opponent(c) is None
    assert match.is_home_game(a) and not match.is_home_game(b)
    assert not match.overlaps_with(later)


def test_generated_schedule_queries():
    a, b, c = Team(id="a", name="A"), Team(id="b", name="B"), Team(id="c", name="C")
    start = datetime(2026, 1, 15, 9, 0)
    schedule = GeneratedSchedule(matches=[
        Match("match-0", b, a, 1, start, start + timedelta(minutes=30)),
        Match("match-1", a, c, 1, start + timedelta(minutes=35), start + timedelta(minutes=65)),
    ])

    assert [t.id for t in schedule.get_teams()] == ["b", "a", "c"]
    assert len(schedule.get_team_matches("a")) == 2
    assert len(schedule.get_matches_by_pitch(2)) == 0
    assert schedule.makespan == timedelta(minutes=65)
    assert GeneratedSchedule().makespan == timedelta(0)


def test_match_schema_uses_iso_timestamps():
    start = datetime(2026, 1, 15, 9, 0)
    match = Match(
        "match-0", Team(id="a", name="A"), Team(id="b", name="B"), 1,
        start, start + timedelta(minutes=30)
    )

    payload = json.loads(MatchSchema.from_domain(match).model_dump_json())
    assert payload["start_time"] == "2026-01-15T09:00:00"
    assert payload["end_time"] == "2026-01-15T09:30:00"

    assert MatchSchema.model_validate(payload).to_domain() == match


def test_generated_schedule_schema_round_trip():
    start = datetime(2026, 1, 15, 9, 0)
    schedule = GeneratedSchedule(
        matches=[Match("match-0", Team(id="a", name="A"), Team(id="b", name="B"), 2,
                       start, start + timedelta(minutes=30))],
        warnings=["Odd number of teams: BYE team added for round-robin pairing"],
    )

    restored = GeneratedScheduleSchema.model_validate_json(
        GeneratedScheduleSchema.from_domain(schedule).model_dump_json()
    ).to_domain()

    assert restored.matches == schedule.matches
    assert restored.warnings == schedule.warnings


def test_settings_schema_validation():
    with pytest.raises(ValidationError):
        TournamentSettingsSchema(start_date="2026-01-15", start_time="09:00", num_pitches=0)
    with pytest.raises(ValidationError):
        TournamentSettingsSchema(start_date="2026-01-15", start_time="09:00", match_duration_minutes=4)
    with pytest.raises(ValidationError):
        TournamentSettingsSchema(start_date="2026-01-15", start_time="09:00", match_mode="three-thirds")
    with pytest.raises(ValidationError):
        TeamSchema(id="", name="Nobody")


def test_schedule_request_defaults_to_round_robin():
    request = ScheduleRequest.model_validate({
        "settings": {"start_date": "2026-01-15", "start_time": "09:00", "match_mode": "two-halves"},
        "teams": [{"id": "a", "name": "A"}, {"id": "b", "name": "B"}],
    })

    settings = request.settings.to_domain()
    assert settings.match_mode == MatchMode.TWO_HALVES
    assert settings.pitch_names == []
    assert request.config.to_domain().mode == SchedulingMode.ROUND_ROBIN


def test_schedule_request_rejects_duplicate_team_ids():
    with pytest.raises(ValidationError, match="Duplicate team ids: a"):
        ScheduleRequest.model_validate({
            "settings": {"start_date": "2026-01-15", "start_time": "09:00"},
            "teams": [{"id": "a", "name": "A"}, {"id": "b", "name": "B"}, {"id": "a", "name": "A2"}],
        })


def test_match_schema_rejects_utc_offsets():
    payload = {
        "id": "m1",
        "home_team": {"id": "a", "name": "A"},
        "away_team": {"id": "b", "name": "B"},
        "pitch": 1,
        "start_time": "2026-01-15T09:00:00+01:00",
        "end_time": "2026-01-15T09:30:00+01:00",
    }
    with pytest.raises(ValidationError):
        MatchSchema.model_validate(payload)

    payload.update(start_time="2026-01-15T09:00:00", end_time="2026-01-15T09:30:00")
    assert MatchSchema.model_validate(payload).start_time == datetime(2026, 1, 15, 9, 0)
