"""
Time slot assignment for the Pitch Scheduler.
Places generated pairs onto (pitch, start time) slots.
"""

from datetime import datetime, timedelta
from typing import List, Dict, Tuple

from pitch_scheduler.models import Team, Match, TournamentSettings
from pitch_scheduler.core.logging_config import get_logger

logger = get_logger(__name__)


class SlotAssigner:
    """
    Greedy earliest-available-slot assignment across parallel pitches.

    Pairs are placed in the order given. Each pair goes to the pitch that
    lets it start soonest once both teams are free; ties go to the lowest
    pitch number. The result never double-books a pitch or a team, but the
    total schedule length is not guaranteed to be minimal.
    """

    def __init__(self, settings: TournamentSettings):
        """
        Initialize the assigner from tournament settings.

        Args:
            settings: Tournament settings (start, pitches, durations, breaks)

        Raises:
            ScheduleConfigurationError: If the start date/time does not parse
        """
        self.settings = settings
        self.tournament_start = settings.start_datetime()
        self.match_duration = timedelta(minutes=settings.match_duration)
        self.break_between_matches = timedelta(minutes=settings.break_between_matches)
        self.num_pitches = max(1, settings.num_pitches)

    def assign(self, pairs: List[Tuple[Team, Team]]) -> List[Match]:
        """
        Assign every pair a pitch and start/end time.

        Args:
            pairs: (home_team, away_team) pairs in processing order

        Returns:
            Matches sorted by start time; equal start times keep assignment order
        """
        pitch_available: List[datetime] = [self.tournament_start] * self.num_pitches
        team_last_end: Dict[str, datetime] = {}
        matches = []

        for index, (home_team, away_team) in enumerate(pairs):
            earliest_start = max(
                self.tournament_start,
                team_last_end.get(home_team.id, self.tournament_start),
                team_last_end.get(away_team.id, self.tournament_start)
            )

            best_pitch = 0
            best_start = max(earliest_start, pitch_available[0])
            for pitch in range(1, self.num_pitches):
                candidate_start = max(earliest_start, pitch_available[pitch])
                if candidate_start < best_start:
                    best_pitch = pitch
                    best_start = candidate_start

            end_time = best_start + self.match_duration
            pitch_available[best_pitch] = end_time + self.break_between_matches
            team_last_end[home_team.id] = end_time
            team_last_end[away_team.id] = end_time

            matches.append(Match(
                id=f"match-{index}",
                home_team=home_team,
                away_team=away_team,
                pitch=best_pitch + 1,
                start_time=best_start,
                end_time=end_time
            ))

        logger.debug(f"Assigned {len(matches)} matches across {self.num_pitches} pitches")
        return sorted(matches, key=lambda m: m.start_time)
