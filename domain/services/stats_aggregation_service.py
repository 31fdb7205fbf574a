"""
Stats aggregation domain service.

Turns one player's match history into a recency-weighted PerformanceProfile.
"""

import logging
from collections.abc import Sequence

from config import TITLE_DECAY_FACTOR
from domain.models.match_record import MatchRecord
from domain.models.performance_profile import PerformanceProfile

logger = logging.getLogger("lobby_titles.domain.stats_aggregation")

# (profile field, record field) pairs averaged with decay weights
_WEIGHTED_FIELDS: tuple[tuple[str, str], ...] = (
    ("avg_damage", "damage_dealt"),
    ("avg_healing", "healing"),
    ("avg_damage_taken", "damage_taken"),
    ("avg_self_mitigated", "damage_self_mitigated"),
    ("avg_kills", "kills"),
    ("avg_deaths", "deaths"),
    ("avg_assists", "assists"),
    ("avg_cc_time", "cc_time"),
    ("avg_vision_score", "vision_score"),
    ("avg_wards_placed", "wards_placed"),
    ("avg_cs", "creep_score"),
)


class StatsAggregator:
    """
    Pure domain service for building performance profiles.

    Responsibilities:
    - Count the current win or loss streak
    - Compute decay-weighted averages of every per-game stat
    - Compute the weighted surrender rate

    History is newest-first. The game at original position ``i`` weighs
    ``decay ** i``. Unresolvable games (``None`` entries) add nothing to any
    sum but still occupy their position, so they never shift the weight of
    older games. They are also invisible to the streak scan: a skipped game
    between two wins does not break a win streak.
    """

    def __init__(self, decay: float | None = None):
        """
        Initialize the aggregator.

        Args:
            decay: Per-game-age weight multiplier in (0, 1]; defaults to TITLE_DECAY_FACTOR
        """
        decay = TITLE_DECAY_FACTOR if decay is None else decay
        if not 0.0 < decay <= 1.0:
            raise ValueError(f"decay must be in (0, 1], got {decay}")
        self.decay = decay

    def weight_for(self, position: int) -> float:
        """Weight of the game at original position ``position`` (0 = most recent)."""
        return self.decay**position

    def aggregate(self, history: Sequence[MatchRecord | None]) -> PerformanceProfile | None:
        """
        Build a profile from a newest-first match history.

        Args:
            history: Match records, newest first; None marks an unresolvable game

        Returns:
            PerformanceProfile, or None when no game in the history resolves
        """
        win_streak = 0
        loss_streak = 0
        streak_outcome: bool | None = None
        streak_broken = False

        sums = dict.fromkeys((name for name, _ in _WEIGHTED_FIELDS), 0.0)
        surrender_weight = 0.0
        total_weight = 0.0
        games_counted = 0

        for position, record in enumerate(history):
            if record is None:
                continue

            if not streak_broken:
                if streak_outcome is None:
                    streak_outcome = record.win
                if record.win == streak_outcome:
                    if record.win:
                        win_streak += 1
                    else:
                        loss_streak += 1
                else:
                    streak_broken = True

            weight = self.weight_for(position)
            for profile_field, record_field in _WEIGHTED_FIELDS:
                sums[profile_field] += getattr(record, record_field) * weight
            if record.surrendered:
                surrender_weight += weight
            total_weight += weight
            games_counted += 1

        if games_counted == 0:
            logger.debug(f"No resolvable games in history of length {len(history)}")
            return None

        averages = {name: total / total_weight for name, total in sums.items()}
        return PerformanceProfile(
            win_streak=win_streak,
            loss_streak=loss_streak,
            surrender_rate=surrender_weight / total_weight,
            games_counted=games_counted,
            **averages,
        )
