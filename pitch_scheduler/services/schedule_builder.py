"""
Schedule generation pipeline for the Pitch Scheduler.
Runs pairing, slot assignment and conflict detection in one pass.
"""

from typing import List

from pitch_scheduler.models import Team, TournamentSettings, SchedulingConfig, GeneratedSchedule
from pitch_scheduler.services.pair_generator import PairGenerator
from pitch_scheduler.services.slot_assigner import SlotAssigner
from pitch_scheduler.services.conflict_detector import ConflictDetector
from pitch_scheduler.core.config import LARGE_TOURNAMENT_THRESHOLD
from pitch_scheduler.core.logging_config import get_logger

logger = get_logger(__name__)


class ScheduleBuilder:
    """
    Builds a complete tournament schedule from settings, teams and a config.

    Holds no state between calls: every generate() call works on its own
    local counters, so one builder can be shared freely.
    """

    def __init__(self):
        self.pair_generator = PairGenerator()
        self.conflict_detector = ConflictDetector()

    def generate(self, settings: TournamentSettings, teams: List[Team],
                 config: SchedulingConfig) -> GeneratedSchedule:
        """
        Generate a schedule.

        Args:
            settings: Tournament settings
            teams: Teams taking part
            config: Round-robin or limited-matches configuration

        Returns:
            GeneratedSchedule with chronologically sorted matches, any
            conflicts found, and all warnings collected along the way

        Raises:
            ScheduleConfigurationError: If the start date/time is invalid
        """
        # Fails before any pairing when the start instant is unusable
        slot_assigner = SlotAssigner(settings)

        warnings: List[str] = []
        if settings.num_pitches < 1:
            warnings.append("Number of pitches must be at least 1: scheduling on 1 pitch")

        pairs, pairing_warnings = self.pair_generator.generate_pairs(teams, config)
        warnings.extend(pairing_warnings)

        matches = slot_assigner.assign(pairs)
        conflicts = self.conflict_detector.detect_conflicts(matches)

        if conflicts:
            warnings.insert(
                0,
                f"{len(conflicts)} scheduling conflict(s) detected - "
                f"same team playing multiple matches simultaneously"
            )

        if len(matches) > LARGE_TOURNAMENT_THRESHOLD:
            warnings.append(
                f"Large tournament: {len(matches)} matches scheduled. "
                f"Consider breaking into phases."
            )

        logger.debug(
            f"Generated {len(matches)} matches for {len(teams)} teams "
            f"({config.mode.value}), {len(conflicts)} conflicts, {len(warnings)} warnings"
        )
        return GeneratedSchedule(matches=matches, conflicts=conflicts, warnings=warnings)


def generate_schedule(settings: TournamentSettings, teams: List[Team],
                      config: SchedulingConfig) -> GeneratedSchedule:
    """Generate a schedule; see ScheduleBuilder.generate."""
    return ScheduleBuilder().generate(settings, teams, config)
