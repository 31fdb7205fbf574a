"""
Profile cache service.

Holds one aggregated PerformanceProfile (or a known "no profile" outcome) per
player, and refreshes missing players by fetching their match history
concurrently.

Thread Safety:
    Every read and write of the cache goes through _lock. Fetches run outside
    the lock; only the final store is serialized.
"""

import asyncio
import logging
import threading
from collections.abc import Iterable, Mapping
from typing import Any

from config import MATCH_HISTORY_GAMES
from domain.models.performance_profile import PerformanceProfile
from domain.services.stats_aggregation_service import StatsAggregator
from services.error_codes import FETCH_FAILED, NO_RESOLVABLE_MATCHES, VALIDATION_ERROR
from services.interfaces import HistoryFetcher, IProfileCacheService
from services.match_history_service import match_history_from_payload
from services.result import Result

logger = logging.getLogger("lobby_titles.services.profile_cache")


class ProfileCacheService(IProfileCacheService):
    """
    Shared player-id -> profile cache.

    A player maps to a PerformanceProfile, or to None once their history has
    been fetched and found unusable. Failed fetches are not cached, so the
    next refresh retries them.
    """

    def __init__(
        self,
        aggregator: StatsAggregator | None = None,
        max_games: int | None = None,
    ):
        """
        Initialize the cache.

        Args:
            aggregator: Builds profiles from histories (default decay from config)
            max_games: Only the newest this-many games are aggregated (default MATCH_HISTORY_GAMES)
        """
        self.aggregator = aggregator or StatsAggregator()
        self.max_games = max_games if max_games is not None else MATCH_HISTORY_GAMES
        self._profiles: dict[str, PerformanceProfile | None] = {}
        self._lock = threading.RLock()

    def get(self, player_id: str) -> PerformanceProfile | None:
        with self._lock:
            return self._profiles.get(player_id)

    def has(self, player_id: str) -> bool:
        with self._lock:
            return player_id in self._profiles

    def put(self, player_id: str, profile: PerformanceProfile | None) -> None:
        with self._lock:
            self._profiles[player_id] = profile

    def invalidate(self, player_id: str | None = None) -> None:
        """Forget one player's outcome, or everything when player_id is None."""
        with self._lock:
            if player_id is None:
                self._profiles.clear()
            else:
                self._profiles.pop(player_id, None)

    def resolved_ids(self) -> frozenset[str]:
        with self._lock:
            return frozenset(
                player_id
                for player_id, profile in self._profiles.items()
                if profile is not None
            )

    def build_profile(
        self, player_id: str, payload: Mapping[str, Any] | None
    ) -> Result[PerformanceProfile]:
        """
        Aggregate a raw match-history payload into a profile.

        Returns:
            Result with the profile, or a NO_RESOLVABLE_MATCHES failure when no
            game in the window could be matched to the player
        """
        history = match_history_from_payload(payload, player_id)[: self.max_games]
        profile = self.aggregator.aggregate(history)
        if profile is None:
            return Result.fail(
                f"No resolvable matches for {player_id} in {len(history)} game(s)",
                code=NO_RESOLVABLE_MATCHES,
            )
        return Result.ok(profile)

    async def refresh(
        self,
        player_ids: Iterable[str],
        fetch_history: HistoryFetcher,
        *,
        force: bool = False,
    ) -> Result[dict[str, PerformanceProfile | None]]:
        """
        Make sure every listed player has a cached outcome.

        Each uncached player (every player when force=True) is fetched and
        aggregated independently and concurrently. One player's fetch failure
        never fails the refresh; that player simply maps to None this time.

        Args:
            player_ids: Lobby members to refresh
            fetch_history: async callable returning a player's raw match-history payload
            force: Re-fetch players that already have a cached outcome

        Returns:
            Result mapping each requested id to its profile (None when unavailable)
        """
        ids = list(dict.fromkeys(player_ids))
        invalid = [pid for pid in ids if not isinstance(pid, str) or not pid]
        if invalid:
            return Result.fail(f"Invalid player ids: {invalid!r}", code=VALIDATION_ERROR)

        pending = [pid for pid in ids if force or not self.has(pid)]
        if pending:
            outcomes = await asyncio.gather(
                *(self._load(pid, fetch_history) for pid in pending)
            )
            for player_id, outcome in zip(pending, outcomes):
                if outcome.success:
                    self.put(player_id, outcome.value)
                elif outcome.error_code == NO_RESOLVABLE_MATCHES:
                    self.put(player_id, None)
            logger.info(
                f"Refreshed {len(pending)} profile(s); {len(self.resolved_ids())} resolved in cache"
            )

        return Result.ok({pid: self.get(pid) for pid in ids})

    async def _load(
        self, player_id: str, fetch_history: HistoryFetcher
    ) -> Result[PerformanceProfile]:
        try:
            payload = await fetch_history(player_id)
        except Exception as e:
            logger.warning(f"Match history fetch failed for {player_id}: {e}")
            return Result.fail(str(e), code=FETCH_FAILED)

        result = self.build_profile(player_id, payload)
        if not result:
            logger.debug(result.error)
        return result
