"""
Service for turning raw match-history payloads into MatchRecords.

The payload follows the game client's match-history JSON:

    {"games": {"games": [
        {"gameId": 1,
         "participantIdentities": [{"participantId": 3, "player": {"puuid": "..."}}],
         "participants": [{"participantId": 3, "stats": {...}}]},
        ...
    ]}}

Only the requesting player's participant is read from each game.
Entries that do not have the expected shape make that one game unresolvable.
"""

import logging
import math
import numbers
from collections.abc import Mapping
from typing import Any

from domain.models.match_record import MatchRecord

logger = logging.getLogger("lobby_titles.services.match_history")

# MatchRecord field -> stats key in the payload
_STAT_KEYS: dict[str, str] = {
    "damage_dealt": "totalDamageDealtToChampions",
    "healing": "totalHeal",
    "damage_taken": "totalDamageTaken",
    "damage_self_mitigated": "damageSelfMitigated",
    "kills": "kills",
    "deaths": "deaths",
    "assists": "assists",
    "cc_time": "timeCCingOthers",
    "vision_score": "visionScore",
    "wards_placed": "wardsPlaced",
    "creep_score": "totalMinionsKilled",
}


class MalformedStatError(ValueError):
    """A stats value was present but not of the expected type."""


def _numeric(stats: Mapping[str, Any], key: str) -> float:
    value = stats.get(key)
    if value is None:
        return 0.0
    # bool is an int subclass; a flag where a counter belongs is malformed
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise MalformedStatError(f"{key}={value!r}")
    try:
        number = float(value)
    except OverflowError:
        raise MalformedStatError(f"{key} out of range") from None
    if not math.isfinite(number):
        raise MalformedStatError(f"{key}={value!r}")
    return number


def _flag(stats: Mapping[str, Any], key: str) -> bool:
    value = stats.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise MalformedStatError(f"{key}={value!r}")
    return value


def _mappings(game: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    """Mapping entries of a list field; anything else counts as absent."""
    items = game.get(key)
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, Mapping)]


def _find_participant_id(game: Mapping[str, Any], player_id: str) -> int | None:
    for identity in _mappings(game, "participantIdentities"):
        player = identity.get("player")
        if isinstance(player, Mapping) and player.get("puuid") == player_id:
            return identity.get("participantId")
    return None


def match_record_from_payload(game: Mapping[str, Any], player_id: str) -> MatchRecord | None:
    """
    Extract one player's record from a single game payload.

    Args:
        game: One entry of the match-history "games" list
        player_id: The player's puuid

    Returns:
        MatchRecord, or None when the player cannot be resolved in this game
        or their stats are malformed
    """
    game_id = game.get("gameId")

    participant_id = _find_participant_id(game, player_id)
    if participant_id is None:
        logger.debug(f"Could not find participant for {player_id} in game {game_id}")
        return None

    participant = next(
        (
            p
            for p in _mappings(game, "participants")
            if p.get("participantId") == participant_id
        ),
        None,
    )
    stats = participant.get("stats") if participant else None
    if not isinstance(stats, Mapping):
        logger.debug(f"No stats for participant {participant_id} in game {game_id}")
        return None

    try:
        counters = {field: _numeric(stats, key) for field, key in _STAT_KEYS.items()}
        win = _flag(stats, "win")
        surrendered = _flag(stats, "gameEndedInSurrender")
        early_surrender = _flag(stats, "gameEndedInEarlySurrender")
    except MalformedStatError as e:
        logger.debug(f"Skipping game {game_id} for {player_id}: malformed stat {e}")
        return None

    return MatchRecord(
        win=win,
        surrendered=surrendered or early_surrender,
        game_id=game_id if isinstance(game_id, int) and not isinstance(game_id, bool) else None,
        **counters,
    )


def match_history_from_payload(
    payload: Mapping[str, Any] | None, player_id: str
) -> list[MatchRecord | None]:
    """
    Extract a player's newest-first history from a match-history payload.

    Unresolvable games stay in the list as None so their position (and thus
    the decay weight of every older game) is preserved.
    """
    if not isinstance(payload, Mapping):
        return []
    container = payload.get("games")
    games = container.get("games") if isinstance(container, Mapping) else None
    if not isinstance(games, list):
        return []
    return [
        match_record_from_payload(game, player_id) if isinstance(game, Mapping) else None
        for game in games
    ]
