"""
Performance profile domain model.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PerformanceProfile:
    """
    Recency-weighted summary of a player's recent games.

    Streaks are plain counts from the most recent game. Every ``avg_*`` field
    is a decay-weighted mean, and ``surrender_rate`` is the weighted fraction
    of games that ended in a surrender (0.0 - 1.0).

    All fields default to zero so callers (and tests) only set what matters.
    """

    win_streak: int = 0
    loss_streak: int = 0
    avg_damage: float = 0.0
    avg_healing: float = 0.0
    avg_damage_taken: float = 0.0
    avg_self_mitigated: float = 0.0
    avg_kills: float = 0.0
    avg_deaths: float = 0.0
    avg_assists: float = 0.0
    avg_cc_time: float = 0.0
    avg_vision_score: float = 0.0
    avg_wards_placed: float = 0.0
    avg_cs: float = 0.0
    surrender_rate: float = 0.0
    games_counted: int = 0

    @property
    def kill_participation(self) -> float:
        """Average kills plus assists per game."""
        return self.avg_kills + self.avg_assists

    def __str__(self) -> str:
        streak = (
            f"W{self.win_streak}" if self.win_streak else f"L{self.loss_streak}"
        )
        return (
            f"Profile({streak}, {self.avg_kills:.1f}/{self.avg_deaths:.1f}/"
            f"{self.avg_assists:.1f}, games={self.games_counted})"
        )
