"""
Tests for greedy pitch/time assignment.
"""

import sys
import os
from datetime import datetime, timedelta

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pitch_scheduler.models import Team, TournamentSettings, MatchMode
from pitch_scheduler.services.pair_generator import PairGenerator
from pitch_scheduler.services.slot_assigner import SlotAssigner
from pitch_scheduler.core.exceptions import ScheduleConfigurationError


A, B, C, D = [Team(id=x, name=f"Team {x}") for x in "ABCD"]


def at(hour, minute):
    return datetime(2026, 1, 15, hour, minute)


def make_settings(**overrides):
    values = dict(
        start_date="2026-01-15",
        start_time="09:00",
        num_pitches=2,
        match_mode=MatchMode.FULL_TIME,
        match_duration_minutes=30,
        break_between_matches=5,
    )
    values.update(overrides)
    return TournamentSettings(**values)


def test_four_team_round_robin_on_two_pitches():
    pairs, _ = PairGenerator().generate_round_robin([A, B, C, D])
    matches = SlotAssigner(make_settings()).assign(pairs)

    summary = [(m.id, m.home_team.id, m.away_team.id, m.pitch, m.start_time) for m in matches]
    assert summary == [
        ("match-0", "A", "D", 1, at(9, 0)),
        ("match-1", "B", "C", 2, at(9, 0)),
        ("match-2", "A", "C", 1, at(9, 35)),
        ("match-3", "D", "B", 2, at(9, 35)),
        ("match-4", "A", "B", 1, at(10, 10)),
        ("match-5", "C", "D", 2, at(10, 10)),
    ]
    for match in matches:
        assert match.end_time - match.start_time == timedelta(minutes=30)


def test_single_pitch_respects_break_and_team_availability():
    settings = make_settings(num_pitches=1, break_between_matches=10)
    matches = SlotAssigner(settings).assign([(A, B), (C, D), (A, C)])

    assert [m.start_time for m in matches] == [at(9, 0), at(9, 40), at(10, 20)]
    assert all(m.pitch == 1 for m in matches)


def test_team_waits_for_previous_match_and_lowest_pitch_wins_ties():
    """Both pitches free at the same moment: pitch 1 is chosen."""
    settings = make_settings(break_between_matches=0)
    matches = SlotAssigner(settings).assign([(A, B), (A, C)])

    assert [(m.pitch, m.start_time) for m in matches] == [(1, at(9, 0)), (1, at(9, 30))]


def test_parallel_pitches_fill_before_waiting():
    settings = make_settings(break_between_matches=0, num_pitches=3)
    matches = SlotAssigner(settings).assign([(A, B), (C, D), (A, C)])

    assert [(m.pitch, m.start_time) for m in matches] == [
        (1, at(9, 0)), (2, at(9, 0)), (1, at(9, 30))
    ]


def test_equal_start_times_keep_assignment_order():
    settings = make_settings(num_pitches=4)
    teams = [Team(id=str(i), name=str(i)) for i in range(8)]
    pairs = [(teams[i], teams[i + 1]) for i in range(0, 8, 2)]
    matches = SlotAssigner(settings).assign(pairs)

    assert [m.id for m in matches] == ["match-0", "match-1", "match-2", "match-3"]
    assert {m.start_time for m in matches} == {at(9, 0)}


def test_two_halves_duration():
    settings = make_settings(
        match_mode=MatchMode.TWO_HALVES,
        half_duration_minutes=15,
        halftime_break_minutes=5,
    )
    matches = SlotAssigner(settings).assign([(A, B)])
    assert matches[0].end_time - matches[0].start_time == timedelta(minutes=35)


def test_zero_pitches_fall_back_to_one():
    matches = SlotAssigner(make_settings(num_pitches=0)).assign([(A, B), (C, D)])
    assert [m.pitch for m in matches] == [1, 1]


def test_invalid_start_date_is_fatal():
    with pytest.raises(ScheduleConfigurationError):
        SlotAssigner(make_settings(start_date="not-a-date"))

    with pytest.raises(ScheduleConfigurationError):
        SlotAssigner(make_settings(start_time="25:99"))


def test_no_pairs_no_matches():
    assert SlotAssigner(make_settings()).assign([]) == []
