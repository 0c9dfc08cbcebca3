"""
Schedule validation module for the Pitch Scheduler.
Validates match lists against the no-overlap rules and reports statistics.
"""

from typing import List, Optional
from collections import defaultdict

from pitch_scheduler.models import (
    Match, Team, GeneratedSchedule, TournamentSettings, SchedulingConstraint,
    ScheduleValidationResult, TeamScheduleStats
)
from pitch_scheduler.services.conflict_detector import ConflictDetector
from pitch_scheduler.services.helpers import get_pitch_name
from pitch_scheduler.core.config import DEFAULT_PITCH_LABEL
from pitch_scheduler.core.logging_config import get_logger

logger = get_logger(__name__)


class ScheduleValidator:
    """
    Validates tournament schedules independently of how they were built.
    Hard constraints are physical impossibilities; soft ones are quality issues.
    """

    def __init__(self):
        self.conflict_detector = ConflictDetector()

    def validate_schedule(self, matches: List[Match]) -> ScheduleValidationResult:
        """
        Validate a list of matches against all constraints.

        Args:
            matches: The matches to validate

        Returns:
            ScheduleValidationResult with all violations found
        """
        result = ScheduleValidationResult(is_valid=True)

        self._check_pitch_overlaps(matches, result)
        self._check_team_overlaps(matches, result)
        self._check_team_double_booking(matches, result)
        self._check_duplicate_matchups(matches, result)

        logger.info(
            f"Validated {len(matches)} matches: "
            f"{len(result.hard_constraint_violations)} hard, "
            f"{len(result.soft_constraint_violations)} soft violations"
        )
        return result

    def _check_pitch_overlaps(self, matches: List[Match], result: ScheduleValidationResult):
        """Check for pitches hosting two matches whose intervals overlap."""
        pitch_matches = defaultdict(list)
        for match in matches:
            pitch_matches[match.pitch].append(match)

        for pitch, on_pitch in sorted(pitch_matches.items()):
            on_pitch = sorted(on_pitch, key=lambda m: m.start_time)
            for i, current in enumerate(on_pitch):
                for following in on_pitch[i + 1:]:
                    if following.start_time >= current.end_time:
                        break
                    if not current.overlaps_with(following):
                        continue
                    result.add_violation(SchedulingConstraint(
                        constraint_type="pitch_overlap",
                        severity="hard",
                        description=(
                            f"Pitch {pitch} hosts {current.id} and {following.id} "
                            f"at overlapping times"
                        ),
                        affected_matches=[current, following]
                    ))

    def _check_team_overlaps(self, matches: List[Match], result: ScheduleValidationResult):
        """
        Check for teams playing two matches whose intervals overlap.
        Identical start times are left to the double-booking check.
        """
        team_matches = defaultdict(list)
        teams = {}
        for match in matches:
            for team in (match.home_team, match.away_team):
                team_matches[team.id].append(match)
                teams[team.id] = team

        for team_id, played in team_matches.items():
            played = sorted(played, key=lambda m: m.start_time)
            for i, current in enumerate(played):
                for following in played[i + 1:]:
                    if following.start_time >= current.end_time:
                        break
                    if following.start_time == current.start_time:
                        continue
                    if not current.overlaps_with(following):
                        continue
                    result.add_violation(SchedulingConstraint(
                        constraint_type="team_overlap",
                        severity="hard",
                        description=(
                            f"Team {teams[team_id].name} plays {current.id} and "
                            f"{following.id} at overlapping times"
                        ),
                        affected_teams=[teams[team_id]],
                        affected_matches=[current, following]
                    ))

    def _check_team_double_booking(self, matches: List[Match], result: ScheduleValidationResult):
        """
        Check for teams scheduled into multiple matches at the same start time.
        This is a CRITICAL constraint - teams cannot be in two places at once.
        """
        for conflict in self.conflict_detector.detect_conflicts(matches):
            start_time = conflict.matches[0].start_time
            result.add_violation(SchedulingConstraint(
                constraint_type="team_double_booking",
                severity="hard",
                description=(
                    f"Team {conflict.team.name} is scheduled to play "
                    f"{len(conflict.matches)} matches simultaneously at {start_time:%Y-%m-%d %H:%M}"
                ),
                affected_teams=[conflict.team],
                affected_matches=conflict.matches
            ))

    def _check_duplicate_matchups(self, matches: List[Match], result: ScheduleValidationResult):
        """Check for pairs of teams meeting more than once."""
        matchup_matches = defaultdict(list)
        for match in matches:
            key = tuple(sorted([match.home_team.id, match.away_team.id]))
            matchup_matches[key].append(match)

        for key, repeated in matchup_matches.items():
            if len(repeated) > 1:
                first = repeated[0]
                result.add_violation(SchedulingConstraint(
                    constraint_type="duplicate_matchup",
                    severity="soft",
                    description=(
                        f"{first.home_team.name} and {first.away_team.name} "
                        f"meet {len(repeated)} times"
                    ),
                    affected_teams=[first.home_team, first.away_team],
                    affected_matches=repeated
                ))

    def get_team_stats(self, team: Team, matches: List[Match]) -> TeamScheduleStats:
        """
        Calculate statistics for a team's schedule.

        Args:
            team: The team to analyze
            matches: The complete match list

        Returns:
            TeamScheduleStats with all statistics
        """
        stats = TeamScheduleStats(team=team)

        for match in matches:
            if not match.involves_team(team):
                continue
            stats.total_matches += 1
            if match.is_home_game(team):
                stats.home_matches += 1
            else:
                stats.away_matches += 1

            opponent = match.get_opponent(team)
            if opponent:
                stats.opponents.append(opponent)

        return stats

    def generate_schedule_report(self, schedule: GeneratedSchedule,
                                 settings: Optional[TournamentSettings] = None) -> str:
        """
        Generate a plain-text report of the schedule.

        Args:
            schedule: The schedule to report on
            settings: Used for pitch names when given

        Returns:
            Formatted report string
        """
        report = []
        report.append("=" * 80)
        report.append("SCHEDULE REPORT")
        report.append("=" * 80)
        report.append(f"Total Matches: {len(schedule.matches)}")
        if schedule.matches:
            first_start = schedule.matches[0].start_time
            last_end = max(match.end_time for match in schedule.matches)
            report.append(f"First Kick-off: {first_start:%Y-%m-%d %H:%M}")
            report.append(f"Last Final Whistle: {last_end:%Y-%m-%d %H:%M}")
        total_minutes = int(schedule.makespan.total_seconds() // 60)
        report.append(f"Makespan: {total_minutes // 60}h {total_minutes % 60:02d}m")
        report.append(f"Conflicts: {len(schedule.conflicts)}")
        report.extend(self.validate_schedule(schedule.matches).get_summary().splitlines())
        report.append("")

        report.append("Matches by Pitch:")
        pitches = sorted({match.pitch for match in schedule.matches})
        for pitch in pitches:
            label = get_pitch_name(pitch, settings) if settings else f"{DEFAULT_PITCH_LABEL} {pitch}"
            report.append(f"  {label}: {len(schedule.get_matches_by_pitch(pitch))} matches")
        report.append("")

        report.append("Team Statistics:")
        for team in sorted(schedule.get_teams(), key=lambda t: t.name):
            stats = self.get_team_stats(team, schedule.matches)
            report.append(f"  {team.name}:")
            report.append(f"    Total Matches: {stats.total_matches}")
            report.append(f"    Home: {stats.home_matches}, Away: {stats.away_matches}")
            report.append(f"    Unique Opponents: {stats.unique_opponents}")

        if schedule.warnings:
            report.append("")
            report.append("Warnings:")
            for warning in schedule.warnings:
                report.append(f"  - {warning}")

        report.append("=" * 80)
        return "\n".join(report)
