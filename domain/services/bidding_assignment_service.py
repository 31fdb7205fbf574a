"""
Bidding assignment domain service.

Hands out at most one pooled title per player using ranked bidding.
"""

import logging
import math
from collections.abc import Mapping, Sequence

from domain.models.performance_profile import PerformanceProfile
from domain.models.title import Bid, TitleDefinition, TitleResult

logger = logging.getLogger("lobby_titles.domain.bidding_assignment")


class BiddingAssigner:
    """
    Pure domain service for title assignment.

    Ranked bidding runs in two phases:

    1. Scan the pool in order. For each title, find the best score among
       profiled players. The title produces a bid only if that score reaches
       the title's minimum and exactly one player holds it. Ties produce
       nothing.
    2. Sort the bids by score, highest first (stable, so equal scores keep
       pool order), and walk them. A player's first bid in that order wins;
       their remaining bids are discarded.

    A strong player therefore locks in their best title before anyone else
    picks, and a weaker player can never take a title from them by list order.
    """

    def collect_bids(
        self,
        pool: Sequence[TitleDefinition],
        profiles: Mapping[str, PerformanceProfile],
    ) -> list[Bid]:
        """
        Scan the pool once and return every uncontested winning bid.

        Args:
            pool: Sampled title definitions, in sampler order
            profiles: Profiles of the players allowed to bid

        Returns:
            Bids in pool order
        """
        bids: list[Bid] = []
        if not profiles:
            return bids

        for definition in pool:
            scores = self._score_candidates(definition, profiles)
            if not scores:
                continue

            best = max(scores.values())
            if best < definition.min_score:
                continue

            leaders = [player_id for player_id, score in scores.items() if score == best]
            if len(leaders) != 1:
                logger.debug(
                    f"'{definition.title}' tied at {best} between {len(leaders)} players"
                )
                continue

            bids.append(Bid(player_id=leaders[0], definition=definition, score=best))

        return bids

    def assign(
        self,
        pool: Sequence[TitleDefinition],
        profiles: Mapping[str, PerformanceProfile | None],
    ) -> dict[str, TitleResult | None]:
        """
        Assign titles to players.

        Args:
            pool: Sampled title definitions, in sampler order
            profiles: Every player in the lobby; None means no profile

        Returns:
            Mapping covering every supplied player id; None where no title was won
        """
        result: dict[str, TitleResult | None] = dict.fromkeys(profiles)
        bidders = {
            player_id: profile
            for player_id, profile in profiles.items()
            if profile is not None
        }

        bids = self.collect_bids(pool, bidders)
        for bid in sorted(bids, key=lambda b: b.score, reverse=True):
            if result[bid.player_id] is not None:
                continue
            profile = bidders[bid.player_id]
            result[bid.player_id] = TitleResult(
                title=bid.definition.title,
                stat_line=bid.definition.stat_line(profile),
            )

        return result

    def _score_candidates(
        self,
        definition: TitleDefinition,
        profiles: Mapping[str, PerformanceProfile],
    ) -> dict[str, float]:
        """Score every candidate, dropping players whose score is unusable."""
        scores: dict[str, float] = {}
        for player_id, profile in profiles.items():
            try:
                score = float(definition.score(profile))
            except (ArithmeticError, ValueError, TypeError) as e:
                logger.warning(
                    f"Scoring '{definition.title}' failed for {player_id}: {e}"
                )
                continue
            if not math.isfinite(score):
                logger.warning(
                    f"Scoring '{definition.title}' gave {score} for {player_id}, skipping"
                )
                continue
            scores[player_id] = score
        return scores
