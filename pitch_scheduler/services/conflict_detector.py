"""
Double-booking detection for the Pitch Scheduler.
"""

from typing import List, Dict
from datetime import datetime

from pitch_scheduler.models import Match, Team, ScheduleConflict


class ConflictDetector:
    """
    Finds teams scheduled into more than one match with the same start time.

    This is an independent check on a finished match list, so it can also be
    run against hand-edited or imported schedules.
    """

    def detect_conflicts(self, matches: List[Match]) -> List[ScheduleConflict]:
        """
        Group matches by (team, exact start time) and report crowded groups.

        Args:
            matches: Matches to check, in any order

        Returns:
            One conflict per affected team and start time, in order of first
            appearance, each listing every match in that group
        """
        team_matches_by_time: Dict[str, Dict[datetime, List[Match]]] = {}
        teams_by_id: Dict[str, Team] = {}

        for match in matches:
            participants = [match.home_team]
            if match.away_team.id != match.home_team.id:
                participants.append(match.away_team)

            for team in participants:
                teams_by_id.setdefault(team.id, team)
                team_times = team_matches_by_time.setdefault(team.id, {})
                team_times.setdefault(match.start_time, []).append(match)

        conflicts = []
        for team_id, time_map in team_matches_by_time.items():
            for start_time, matches_at_time in time_map.items():
                if len(matches_at_time) > 1:
                    conflicts.append(ScheduleConflict(
                        team=teams_by_id[team_id],
                        matches=list(matches_at_time)
                    ))

        return conflicts
