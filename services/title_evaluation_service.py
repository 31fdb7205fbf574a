"""
Title evaluation service.

Maps a lobby of players and their profiles to at most one title each.

Each call to evaluate() samples a fresh candidate pool from the catalogue
according to rarity, then runs one ranked-bidding pass over it.

Rarity inclusion chances (sampled once per evaluation):
    COMMON   - always included
    UNCOMMON - 60% chance
    RARE     - 25% chance

Guarantees:
    - At most one title per player.
    - A title goes to a player only when they are strictly the best (no ties).
    - Players without a profile always receive None.
    - The same seeded random source gives the same output.
"""

import logging
from collections.abc import Iterable

from domain.models.performance_profile import PerformanceProfile
from domain.models.title import PlayerEntry, TitleResult
from domain.models.title_catalogue import DEFAULT_CATALOGUE, TitleCatalogue
from domain.services.bidding_assignment_service import BiddingAssigner
from domain.services.pool_sampling_service import PoolSampler, RandomSource
from services.interfaces import ITitleEvaluationService

logger = logging.getLogger("lobby_titles.services.title_evaluation")

EntryLike = PlayerEntry | tuple[str, PerformanceProfile | None]


class TitleEvaluationService(ITitleEvaluationService):
    """
    Orchestrates pool sampling and bidding for one lobby evaluation.

    Stateless between calls: the only randomness comes from the source passed
    to evaluate(), so concurrent calls are safe as long as each brings its own.
    """

    def __init__(
        self,
        catalogue: TitleCatalogue = DEFAULT_CATALOGUE,
        sampler: PoolSampler | None = None,
        assigner: BiddingAssigner | None = None,
    ):
        self.catalogue = catalogue
        self.sampler = sampler or PoolSampler()
        self.assigner = assigner or BiddingAssigner()

    def evaluate(
        self, entries: Iterable[EntryLike], rng: RandomSource
    ) -> dict[str, TitleResult | None]:
        """
        Evaluate titles for every player in the lobby.

        Args:
            entries: PlayerEntry objects or (player_id, profile) pairs
            rng: Random source for pool sampling; pass a seeded random.Random
                for reproducible results

        Returns:
            Dict keyed by player id with a TitleResult, or None when no title
            was awarded
        """
        profiles = self._collect_profiles(entries)

        if not any(profile is not None for profile in profiles.values()):
            return dict.fromkeys(profiles)

        pool = self.sampler.sample(self.catalogue, rng)
        logger.debug(f"Sampled {len(pool)}/{len(self.catalogue)} titles into the pool")

        result = self.assigner.assign(pool, profiles)

        awarded = sum(1 for r in result.values() if r is not None)
        logger.info(f"Awarded {awarded} title(s) across {len(result)} player(s)")
        return result

    def _collect_profiles(
        self, entries: Iterable[EntryLike]
    ) -> dict[str, PerformanceProfile | None]:
        profiles: dict[str, PerformanceProfile | None] = {}
        for entry in entries:
            if isinstance(entry, PlayerEntry):
                player_id, profile = entry.player_id, entry.profile
            else:
                player_id, profile = entry
            if player_id in profiles:
                logger.debug(f"Ignoring duplicate lobby entry for {player_id}")
                continue
            profiles[player_id] = profile
        return profiles
