"""
Pitch Scheduler.
Assigns round-robin or limited-match tournaments to time slots across
parallel pitches and reports any double-booked teams.
"""

from .models import (
    Team, TournamentSettings, SchedulingConfig, Match,
    ScheduleConflict, GeneratedSchedule, MatchMode, SchedulingMode
)
from .services import generate_schedule, get_pitch_name, calculate_match_duration
from .core.exceptions import SchedulerError, ScheduleConfigurationError

__all__ = [
    'Team', 'TournamentSettings', 'SchedulingConfig', 'Match',
    'ScheduleConflict', 'GeneratedSchedule', 'MatchMode', 'SchedulingMode',
    'generate_schedule', 'get_pitch_name', 'calculate_match_duration',
    'SchedulerError', 'ScheduleConfigurationError'
]
