"""
Lobby title service.

Keeps a lobby's titles stable across repeated polls. Evaluation re-runs only
when the set of lobby members with a resolved profile changes, so the sampled
pool is not re-rolled on every render tick.
"""

import logging
import random
from collections.abc import Callable, Iterable

from config import TITLES_ENABLED
from domain.models.title import PlayerEntry, TitleResult
from domain.services.pool_sampling_service import RandomSource
from services.interfaces import ILobbyTitleService, IProfileCacheService, ITitleEvaluationService
from services.title_evaluation_service import TitleEvaluationService

logger = logging.getLogger("lobby_titles.services.lobby_titles")


class LobbyTitleService(ILobbyTitleService):
    """
    Debounced title lookups for one lobby.

    Members without a resolved profile joining or leaving do not trigger a
    re-evaluation; they simply map to None.
    """

    def __init__(
        self,
        profile_cache: IProfileCacheService,
        evaluator: ITitleEvaluationService | None = None,
        rng_factory: Callable[[], RandomSource] = random.Random,
        enabled: bool | None = None,
    ):
        """
        Initialize the service.

        Args:
            profile_cache: Source of each member's profile
            evaluator: Runs the actual evaluation (default TitleEvaluationService())
            rng_factory: Builds a fresh random source per evaluation
            enabled: Overrides TITLES_ENABLED
        """
        self.profile_cache = profile_cache
        self.evaluator = evaluator or TitleEvaluationService()
        self.rng_factory = rng_factory
        self.enabled = TITLES_ENABLED if enabled is None else enabled
        self._last_resolved: frozenset[str] | None = None
        self._last_result: dict[str, TitleResult | None] = {}

    def titles_for(self, player_ids: Iterable[str]) -> dict[str, TitleResult | None]:
        """
        Titles for the current lobby members.

        Args:
            player_ids: Current lobby members, in display order

        Returns:
            Dict covering every member; None where no title applies
        """
        ids = list(dict.fromkeys(player_ids))
        if not self.enabled:
            return dict.fromkeys(ids)

        resolved = frozenset(pid for pid in ids if self.profile_cache.get(pid) is not None)
        if resolved != self._last_resolved:
            entries = [PlayerEntry(pid, self.profile_cache.get(pid)) for pid in ids]
            self._last_result = self.evaluator.evaluate(entries, self.rng_factory())
            self._last_resolved = resolved
            logger.debug(f"Re-evaluated titles for {len(resolved)} resolved member(s)")

        return {pid: self._last_result.get(pid) for pid in ids}

    def reset(self) -> None:
        """Forget the last evaluation so the next lookup re-rolls."""
        self._last_resolved = None
        self._last_result = {}
