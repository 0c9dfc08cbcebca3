"""
Pairing generation for the Pitch Scheduler.
Turns a team list into the ordered list of matches that must be played,
without any time or pitch information.
"""

import math
from collections import defaultdict
from typing import List, Tuple, Union, Set, Dict

from pitch_scheduler.models import Team, ByeSlot, BYE, SchedulingConfig, SchedulingMode
from pitch_scheduler.core.config import ATTEMPT_BUDGET_MULTIPLIER, DEFAULT_MAX_MATCHES_PER_TEAM
from pitch_scheduler.core.logging_config import get_logger

logger = get_logger(__name__)

Pairing = Tuple[Team, Team]
Entrant = Union[Team, ByeSlot]


class PairGenerator:
    """
    Produces (home_team, away_team) pairs for either scheduling mode.

    Output order matters: the slot assigner processes pairs in the order
    they are returned, so round-robin pairs come out round by round and
    limited-matches pairs come out load-balanced.
    """

    def generate_pairs(self, teams: List[Team],
                       config: SchedulingConfig) -> Tuple[List[Pairing], List[str]]:
        """
        Generate the pairs required by the scheduling config.

        Args:
            teams: Teams taking part, in the order supplied by the caller
            config: Round-robin or limited-matches configuration

        Returns:
            Tuple of (pairs, warnings)
        """
        if config.mode == SchedulingMode.ROUND_ROBIN:
            return self.generate_round_robin(teams)
        return self.generate_limited_matches(
            teams,
            config.max_matches_per_team or DEFAULT_MAX_MATCHES_PER_TEAM,
            config.max_total_matches
        )

    def generate_round_robin(self, teams: List[Team]) -> Tuple[List[Pairing], List[str]]:
        """
        Every team plays every other team once, using the circle method.

        Index 0 stays fixed while the remaining entrants rotate one place
        after every round. An odd field is padded with a BYE; pairings
        against it are rest rounds and are dropped.
        """
        warnings = []
        entrants: List[Entrant] = list(teams)

        if len(entrants) % 2 != 0:
            entrants.append(BYE)
            warnings.append("Odd number of teams: BYE team added for round-robin pairing")

        n = len(entrants)
        pairs: List[Pairing] = []
        if n < 2:
            return pairs, warnings

        for round_num in range(n - 1):
            for slot in range(n // 2):
                if slot == 0:
                    home, away = entrants[0], entrants[n - 1]
                else:
                    home, away = entrants[slot], entrants[n - 1 - slot]

                if isinstance(home, ByeSlot) or isinstance(away, ByeSlot):
                    continue
                pairs.append((home, away))

            # Move the tail to position 1; position 0 never moves
            entrants.insert(1, entrants.pop())

        logger.debug(f"Round-robin: {len(teams)} teams, {n - 1} rounds, {len(pairs)} pairs")
        return pairs, warnings

    def generate_limited_matches(self, teams: List[Team], max_matches_per_team: int,
                                 max_total_matches: int = None) -> Tuple[List[Pairing], List[str]]:
        """
        Greedy load-balanced pairing with a per-team match cap.

        Each step takes the teams still under the cap, lowest match count
        first, and pairs the first two that have not met yet. When every
        available pairing has been used, the two lowest-count teams meet again.
        """
        warnings = []
        pairs: List[Pairing] = []

        if len(teams) < 2:
            return pairs, warnings

        max_unique_opponents = len(teams) - 1
        if max_matches_per_team > max_unique_opponents:
            warnings.append(
                f"Max matches per team ({max_matches_per_team}) exceeds unique opponents "
                f"({max_unique_opponents}). Duplicate matchups will occur."
            )

        target = math.floor(len(teams) * max_matches_per_team / 2)
        if max_total_matches is not None:
            target = min(target, max_total_matches)

        match_counts: Dict[str, int] = defaultdict(int)
        used_pairings: Set[Tuple[str, str]] = set()
        max_attempts = target * ATTEMPT_BUDGET_MULTIPLIER
        attempts = 0

        while len(pairs) < target and attempts < max_attempts:
            attempts += 1

            available = [team for team in teams if match_counts[team.id] < max_matches_per_team]
            if len(available) < 2:
                break

            # Stable sort keeps input order among teams with equal counts
            available.sort(key=lambda team: match_counts[team.id])

            pairing = self._first_unused_pairing(available, used_pairings)
            if pairing is None:
                pairing = (available[0], available[1])

            home, away = pairing
            used_pairings.add(self._pairing_key(home, away))
            match_counts[home.id] += 1
            match_counts[away.id] += 1
            pairs.append(pairing)

        if len(pairs) < target:
            if attempts >= max_attempts:
                reason = "attempt budget exhausted"
            else:
                reason = "not enough teams with remaining capacity"
            warnings.append(
                f"Only {len(pairs)} of {target} target matches could be generated ({reason})."
            )

        logger.debug(f"Limited matches: {len(teams)} teams, target {target}, {len(pairs)} pairs")
        return pairs, warnings

    def _first_unused_pairing(self, available: List[Team],
                              used_pairings: Set[Tuple[str, str]]):
        for i, team1 in enumerate(available):
            for team2 in available[i + 1:]:
                if self._pairing_key(team1, team2) not in used_pairings:
                    return team1, team2
        return None

    @staticmethod
    def _pairing_key(team1: Team, team2: Team) -> Tuple[str, str]:
        return tuple(sorted([team1.id, team2.id]))
