"""
Pool sampling domain service.

Picks which catalogue titles compete in one evaluation.
"""

from collections.abc import Iterable
from typing import Protocol

from config import TITLE_RARE_CHANCE, TITLE_UNCOMMON_CHANCE
from domain.models.title import TitleDefinition, TitleRarity


class RandomSource(Protocol):
    """Anything producing uniform floats in [0, 1). random.Random qualifies."""

    def random(self) -> float: ...


class PoolSampler:
    """
    Pure domain service for rarity-gated pool construction.

    COMMON titles are always pooled without consuming a draw. Every UNCOMMON
    and RARE title consumes exactly one draw, in catalogue order, whether or
    not it is included. Two samplers fed identically seeded sources therefore
    produce identical pools.
    """

    def __init__(
        self,
        uncommon_chance: float | None = None,
        rare_chance: float | None = None,
    ):
        """
        Initialize the sampler.

        Args:
            uncommon_chance: Inclusion probability for UNCOMMON titles (default 0.60)
            rare_chance: Inclusion probability for RARE titles (default 0.25)
        """
        self.uncommon_chance = (
            uncommon_chance if uncommon_chance is not None else TITLE_UNCOMMON_CHANCE
        )
        self.rare_chance = rare_chance if rare_chance is not None else TITLE_RARE_CHANCE
        for name, chance in (
            ("uncommon_chance", self.uncommon_chance),
            ("rare_chance", self.rare_chance),
        ):
            if not 0.0 <= chance <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {chance}")

    def inclusion_chance(self, rarity: TitleRarity) -> float:
        if rarity is TitleRarity.COMMON:
            return 1.0
        if rarity is TitleRarity.UNCOMMON:
            return self.uncommon_chance
        return self.rare_chance

    def sample(
        self, catalogue: Iterable[TitleDefinition], rng: RandomSource
    ) -> list[TitleDefinition]:
        """
        Build this evaluation's pool.

        Args:
            catalogue: Title definitions in catalogue order
            rng: Source of uniform draws

        Returns:
            The included definitions, in catalogue order
        """
        pool = []
        for definition in catalogue:
            if definition.rarity is TitleRarity.COMMON:
                pool.append(definition)
                continue
            if rng.random() < self.inclusion_chance(definition.rarity):
                pool.append(definition)
        return pool
