"""
Pydantic models for API requests/responses and schedule serialization.
Timestamps travel as ISO-8601 strings and are parsed back into datetimes.
"""

from datetime import datetime
from typing import List, Optional, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from pitch_scheduler.models.models import (
    Team, TournamentSettings, SchedulingConfig, Match, ScheduleConflict,
    GeneratedSchedule, MatchMode, SchedulingMode
)
from pitch_scheduler.core.config import (
    MIN_MATCH_DURATION_MINUTES, MIN_HALF_DURATION_MINUTES,
    MAX_TEAMS, MAX_MATCHES_PER_TEAM, MAX_TOTAL_MATCHES
)


class TeamSchema(BaseModel):
    id: str = Field(..., min_length=1, description="Unique team identifier")
    name: str = Field(..., description="Display name")

    @classmethod
    def from_domain(cls, team: Team) -> 'TeamSchema':
        return cls(id=team.id, name=team.name)

    def to_domain(self) -> Team:
        return Team(id=self.id, name=self.name)


class TournamentSettingsSchema(BaseModel):
    name: str = Field("", description="Tournament name, used as the export title")
    start_date: str = Field(..., description="First day of play, YYYY-MM-DD")
    start_time: str = Field(..., description="First kick-off, HH:MM")
    num_pitches: int = Field(1, ge=1, description="Number of pitches used in parallel")
    pitch_names: Optional[List[str]] = Field(None, description="Custom pitch names, pitch 1 first")
    match_mode: Literal["full-time", "two-halves"] = "full-time"
    match_duration_minutes: Optional[int] = Field(None, ge=MIN_MATCH_DURATION_MINUTES)
    half_duration_minutes: Optional[int] = Field(None, ge=MIN_HALF_DURATION_MINUTES)
    halftime_break_minutes: Optional[int] = Field(None, ge=0)
    break_between_matches: int = Field(0, ge=0, description="Minutes a pitch rests between matches")

    @classmethod
    def from_domain(cls, settings: TournamentSettings) -> 'TournamentSettingsSchema':
        return cls(
            name=settings.name,
            start_date=str(settings.start_date),
            start_time=str(settings.start_time),
            num_pitches=settings.num_pitches,
            pitch_names=list(settings.pitch_names) or None,
            match_mode=settings.match_mode.value,
            match_duration_minutes=settings.match_duration_minutes,
            half_duration_minutes=settings.half_duration_minutes,
            halftime_break_minutes=settings.halftime_break_minutes,
            break_between_matches=settings.break_between_matches
        )

    def to_domain(self) -> TournamentSettings:
        return TournamentSettings(
            name=self.name,
            start_date=self.start_date,
            start_time=self.start_time,
            num_pitches=self.num_pitches,
            pitch_names=list(self.pitch_names or []),
            match_mode=MatchMode(self.match_mode),
            match_duration_minutes=self.match_duration_minutes,
            half_duration_minutes=self.half_duration_minutes,
            halftime_break_minutes=self.halftime_break_minutes,
            break_between_matches=self.break_between_matches
        )


class SchedulingConfigSchema(BaseModel):
    mode: Literal["round-robin", "limited-matches"] = "round-robin"
    max_matches_per_team: Optional[int] = Field(None, ge=1, le=MAX_MATCHES_PER_TEAM)
    max_total_matches: Optional[int] = Field(None, ge=1, le=MAX_TOTAL_MATCHES)

    @classmethod
    def from_domain(cls, config: SchedulingConfig) -> 'SchedulingConfigSchema':
        return cls(
            mode=config.mode.value,
            max_matches_per_team=config.max_matches_per_team,
            max_total_matches=config.max_total_matches
        )

    def to_domain(self) -> SchedulingConfig:
        return SchedulingConfig(
            mode=SchedulingMode(self.mode),
            max_matches_per_team=self.max_matches_per_team,
            max_total_matches=self.max_total_matches
        )


class MatchSchema(BaseModel):
    id: str
    home_team: TeamSchema
    away_team: TeamSchema
    pitch: int = Field(..., ge=1)
    start_time: datetime
    end_time: datetime

    @field_validator("start_time", "end_time")
    @classmethod
    def require_local_time(cls, value: datetime) -> datetime:
        """Match times are naive local tournament times."""
        if value.utcoffset() is not None:
            raise ValueError("timestamps must be local times without a UTC offset")
        return value

    @model_validator(mode="after")
    def check_order(self) -> 'MatchSchema':
        if self.end_time < self.start_time:
            raise ValueError(f"match {self.id} ends before it starts")
        return self

    @classmethod
    def from_domain(cls, match: Match) -> 'MatchSchema':
        return cls(
            id=match.id,
            home_team=TeamSchema.from_domain(match.home_team),
            away_team=TeamSchema.from_domain(match.away_team),
            pitch=match.pitch,
            start_time=match.start_time,
            end_time=match.end_time
        )

    def to_domain(self) -> Match:
        return Match(
            id=self.id,
            home_team=self.home_team.to_domain(),
            away_team=self.away_team.to_domain(),
            pitch=self.pitch,
            start_time=self.start_time,
            end_time=self.end_time
        )


class ScheduleConflictSchema(BaseModel):
    team: TeamSchema
    matches: List[MatchSchema]

    @classmethod
    def from_domain(cls, conflict: ScheduleConflict) -> 'ScheduleConflictSchema':
        return cls(
            team=TeamSchema.from_domain(conflict.team),
            matches=[MatchSchema.from_domain(match) for match in conflict.matches]
        )

    def to_domain(self) -> ScheduleConflict:
        return ScheduleConflict(
            team=self.team.to_domain(),
            matches=[match.to_domain() for match in self.matches]
        )


class GeneratedScheduleSchema(BaseModel):
    matches: List[MatchSchema] = Field(default_factory=list)
    conflicts: List[ScheduleConflictSchema] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, schedule: GeneratedSchedule) -> 'GeneratedScheduleSchema':
        return cls(
            matches=[MatchSchema.from_domain(match) for match in schedule.matches],
            conflicts=[ScheduleConflictSchema.from_domain(c) for c in schedule.conflicts],
            warnings=list(schedule.warnings)
        )

    def to_domain(self) -> GeneratedSchedule:
        return GeneratedSchedule(
            matches=[match.to_domain() for match in self.matches],
            conflicts=[conflict.to_domain() for conflict in self.conflicts],
            warnings=list(self.warnings)
        )


class ScheduleRequest(BaseModel):
    """Request model for schedule generation."""
    settings: TournamentSettingsSchema
    teams: List[TeamSchema] = Field(..., max_length=MAX_TEAMS)
    config: SchedulingConfigSchema = Field(default_factory=SchedulingConfigSchema)

    @field_validator("teams")
    @classmethod
    def unique_team_ids(cls, teams: List[TeamSchema]) -> List[TeamSchema]:
        seen = set()
        duplicates = []
        for team in teams:
            if team.id in seen and team.id not in duplicates:
                duplicates.append(team.id)
            seen.add(team.id)
        if duplicates:
            raise ValueError(f"Duplicate team ids: {', '.join(duplicates)}")
        return teams


class ScheduleResponse(BaseModel):
    """Response model for schedule generation."""
    success: bool
    message: str
    total_matches: int
    schedule: GeneratedScheduleSchema
    generation_time: float


class MatchListRequest(BaseModel):
    """A schedule supplied by the caller, e.g. after hand edits."""
    matches: List[MatchSchema] = Field(..., max_length=MAX_TOTAL_MATCHES)


class ExportRequest(BaseModel):
    """Request model for rendering a schedule as CSV or text."""
    settings: TournamentSettingsSchema
    matches: List[MatchSchema] = Field(..., max_length=MAX_TOTAL_MATCHES)
