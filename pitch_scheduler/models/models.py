"""
Data models for the Pitch Scheduler.
Defines all data structures used throughout the application.
"""

from dataclasses import dataclass, field
from datetime import datetime, date, time, timedelta
from typing import List, Optional, Dict, Union
from enum import Enum

from pitch_scheduler.core.config import (
    DEFAULT_MATCH_DURATION_MINUTES, DEFAULT_HALF_DURATION_MINUTES,
    DEFAULT_HALFTIME_BREAK_MINUTES
)
from pitch_scheduler.core.exceptions import ScheduleConfigurationError


class MatchMode(Enum):
    FULL_TIME = "full-time"
    TWO_HALVES = "two-halves"


class SchedulingMode(Enum):
    ROUND_ROBIN = "round-robin"
    LIMITED_MATCHES = "limited-matches"


@dataclass
class Team:
    id: str
    name: str

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if isinstance(other, Team):
            return self.id == other.id
        return False

    def __str__(self):
        return self.name


class ByeSlot:
    """
    Placeholder that pads an odd round-robin field to an even size.
    Pairings against it are rest rounds and never become matches.
    """

    def __repr__(self):
        return "BYE"


BYE = ByeSlot()


@dataclass
class TournamentSettings:
    start_date: Union[str, date]
    start_time: Union[str, time]
    num_pitches: int = 1
    match_mode: MatchMode = MatchMode.FULL_TIME
    match_duration_minutes: Optional[int] = None
    half_duration_minutes: Optional[int] = None
    halftime_break_minutes: Optional[int] = None
    break_between_matches: int = 0
    pitch_names: List[str] = field(default_factory=list)
    name: str = ""

    def __post_init__(self):
        if isinstance(self.match_mode, str):
            self.match_mode = MatchMode(self.match_mode)
        if self.pitch_names is None:
            self.pitch_names = []

    @property
    def match_duration(self) -> int:
        """Effective length of one match in minutes, halftime included."""
        if self.match_mode == MatchMode.FULL_TIME:
            if self.match_duration_minutes is None:
                return DEFAULT_MATCH_DURATION_MINUTES
            return self.match_duration_minutes

        half = self.half_duration_minutes
        if half is None:
            half = DEFAULT_HALF_DURATION_MINUTES
        halftime = self.halftime_break_minutes
        if halftime is None:
            halftime = DEFAULT_HALFTIME_BREAK_MINUTES
        return 2 * half + halftime

    def start_datetime(self) -> datetime:
        """
        Combine start_date and start_time into the tournament's first instant.

        Raises:
            ScheduleConfigurationError: If either part does not parse
        """
        try:
            if isinstance(self.start_date, datetime):
                start_date = self.start_date.date()
            elif isinstance(self.start_date, date):
                start_date = self.start_date
            else:
                start_date = date.fromisoformat(str(self.start_date).strip())

            if isinstance(self.start_time, time):
                start_time = self.start_time
            else:
                start_time = time.fromisoformat(str(self.start_time).strip())
        except (TypeError, ValueError) as e:
            raise ScheduleConfigurationError(
                f"Invalid tournament start date/time "
                f"'{self.start_date} {self.start_time}': {e}"
            ) from e

        return datetime.combine(start_date, start_time)


@dataclass
class SchedulingConfig:
    mode: SchedulingMode = SchedulingMode.ROUND_ROBIN
    max_matches_per_team: Optional[int] = None
    max_total_matches: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.mode, str):
            self.mode = SchedulingMode(self.mode)

    @classmethod
    def round_robin(cls) -> 'SchedulingConfig':
        return cls(mode=SchedulingMode.ROUND_ROBIN)

    @classmethod
    def limited_matches(cls, max_matches_per_team: int,
                        max_total_matches: Optional[int] = None) -> 'SchedulingConfig':
        return cls(
            mode=SchedulingMode.LIMITED_MATCHES,
            max_matches_per_team=max_matches_per_team,
            max_total_matches=max_total_matches
        )


@dataclass(frozen=True)
class Match:
    id: str
    home_team: Team
    away_team: Team
    pitch: int
    start_time: datetime
    end_time: datetime

    def __str__(self):
        return f"{self.home_team.name} vs {self.away_team.name} on pitch {self.pitch} at {self.start_time:%Y-%m-%d %H:%M}"

    @property
    def duration(self) -> timedelta:
        return self.end_time - self.start_time

    def involves_team(self, team: Union[Team, str]) -> bool:
        team_id = team.id if isinstance(team, Team) else team
        return self.home_team.id == team_id or self.away_team.id == team_id

    def get_opponent(self, team: Team) -> Optional[Team]:
        if self.home_team == team:
            return self.away_team
        elif self.away_team == team:
            return self.home_team
        return None

    def is_home_game(self, team: Team) -> bool:
        return self.home_team == team

    def overlaps_with(self, other: 'Match') -> bool:
        return self.start_time < other.end_time and other.start_time < self.end_time


@dataclass
class ScheduleConflict:
    team: Team
    matches: List[Match] = field(default_factory=list)


@dataclass
class GeneratedSchedule:
    matches: List[Match] = field(default_factory=list)
    conflicts: List[ScheduleConflict] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def makespan(self) -> timedelta:
        if not self.matches:
            return timedelta(0)
        first_start = min(match.start_time for match in self.matches)
        last_end = max(match.end_time for match in self.matches)
        return last_end - first_start

    def get_team_matches(self, team: Union[Team, str]) -> List[Match]:
        return [match for match in self.matches if match.involves_team(team)]

    def get_matches_by_pitch(self, pitch: int) -> List[Match]:
        return [match for match in self.matches if match.pitch == pitch]

    def get_teams(self) -> List[Team]:
        """Teams in order of first appearance."""
        seen: Dict[str, Team] = {}
        for match in self.matches:
            for team in (match.home_team, match.away_team):
                seen.setdefault(team.id, team)
        return list(seen.values())


@dataclass
class SchedulingConstraint:
    constraint_type: str
    severity: str
    description: str
    affected_teams: List[Team] = field(default_factory=list)
    affected_matches: List[Match] = field(default_factory=list)


@dataclass
class ScheduleValidationResult:
    is_valid: bool
    hard_constraint_violations: List[SchedulingConstraint] = field(default_factory=list)
    soft_constraint_violations: List[SchedulingConstraint] = field(default_factory=list)

    def add_violation(self, constraint: SchedulingConstraint):
        if constraint.severity == 'hard':
            self.hard_constraint_violations.append(constraint)
            self.is_valid = False
        else:
            self.soft_constraint_violations.append(constraint)

    def get_summary(self) -> str:
        summary = f"Schedule Valid: {self.is_valid}\n"
        summary += f"Hard Violations: {len(self.hard_constraint_violations)}\n"
        summary += f"Soft Violations: {len(self.soft_constraint_violations)}\n"
        return summary


@dataclass
class TeamScheduleStats:
    team: Team
    total_matches: int = 0
    home_matches: int = 0
    away_matches: int = 0
    opponents: List[Team] = field(default_factory=list)

    @property
    def unique_opponents(self) -> int:
        return len(set(self.opponents))
