"""
Data models for the scheduling system.
"""

from .models import (
    MatchMode,
    SchedulingMode,
    Team,
    ByeSlot,
    BYE,
    TournamentSettings,
    SchedulingConfig,
    Match,
    ScheduleConflict,
    GeneratedSchedule,
    SchedulingConstraint,
    ScheduleValidationResult,
    TeamScheduleStats
)

__all__ = [
    "MatchMode",
    "SchedulingMode",
    "Team",
    "ByeSlot",
    "BYE",
    "TournamentSettings",
    "SchedulingConfig",
    "Match",
    "ScheduleConflict",
    "GeneratedSchedule",
    "SchedulingConstraint",
    "ScheduleValidationResult",
    "TeamScheduleStats"
]
