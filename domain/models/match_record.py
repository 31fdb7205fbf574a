"""
Match record domain model.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchRecord:
    """
    One historical game from a single player's point of view.

    Records are supplied newest-first by the match history source. A game the
    player could not be matched against is represented by ``None`` in the
    history rather than by a record.
    """

    win: bool
    surrendered: bool = False
    damage_dealt: float = 0.0
    healing: float = 0.0
    damage_taken: float = 0.0
    damage_self_mitigated: float = 0.0
    kills: float = 0.0
    deaths: float = 0.0
    assists: float = 0.0
    cc_time: float = 0.0  # seconds of crowd control applied to enemies
    vision_score: float = 0.0
    wards_placed: float = 0.0
    creep_score: float = 0.0
    game_id: int | None = None
