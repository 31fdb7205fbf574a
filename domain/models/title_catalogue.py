"""
Title catalogue: the ordered registry of every title that can be awarded.

To add a title, append one TitleDefinition to _DEFAULT_TITLES. Nothing else
needs to change.

Rarity guide:
    COMMON   - thematic staples; always in the pool; cover the broad archetypes.
    UNCOMMON - flavorful alternatives; pooled ~60% of evaluations.
    RARE     - very specific or comedic; pooled ~25% of evaluations.
"""

from collections.abc import Iterable, Iterator

from domain.models.performance_profile import PerformanceProfile
from domain.models.title import TitleDefinition, TitleRarity
from utils.formatting import format_decimal, format_kda, format_percent, format_whole


class TitleCatalogue:
    """
    Immutable, ordered collection of title definitions.

    Order matters: the pool sampler draws in catalogue order and the bidding
    scan walks titles in that same order.
    """

    def __init__(self, definitions: Iterable[TitleDefinition]):
        self._definitions: tuple[TitleDefinition, ...] = tuple(definitions)
        self._by_title: dict[str, TitleDefinition] = {}
        for definition in self._definitions:
            if definition.title in self._by_title:
                raise ValueError(f"Duplicate title in catalogue: {definition.title!r}")
            self._by_title[definition.title] = definition

    def __iter__(self) -> Iterator[TitleDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __getitem__(self, index: int) -> TitleDefinition:
        return self._definitions[index]

    def __contains__(self, title: object) -> bool:
        return title in self._by_title

    def get(self, title: str) -> TitleDefinition:
        """Look up a definition by its display title. Raises KeyError if absent."""
        try:
            return self._by_title[title]
        except KeyError as exc:
            raise KeyError(f"No title named {title!r} in catalogue") from exc

    def by_rarity(self, rarity: TitleRarity) -> list[TitleDefinition]:
        """Definitions of one rarity, in catalogue order."""
        return [d for d in self._definitions if d.rarity is rarity]

    @property
    def titles(self) -> list[str]:
        return [d.title for d in self._definitions]

    def __repr__(self) -> str:
        return f"TitleCatalogue({len(self)} titles)"


# --- Score helpers for ratio-based titles -----------------------------------


def _damage_per_taken(s: PerformanceProfile) -> float:
    # Deals a lot, gets hit a little
    return s.avg_damage / s.avg_damage_taken if s.avg_damage_taken > 0 else 0.0


def _damage_per_kill(s: PerformanceProfile) -> float:
    # Chips without finishing
    return s.avg_damage / s.avg_kills if s.avg_kills > 0 else s.avg_damage


def _kills_per_thousand_damage(s: PerformanceProfile) -> float:
    # Finishes champs at low health
    return s.avg_kills / (s.avg_damage / 1000) if s.avg_damage > 0 else s.avg_kills


def _kda_ratio(s: PerformanceProfile) -> float:
    if s.avg_deaths > 0:
        return s.kill_participation / s.avg_deaths
    return s.kill_participation


def _blindness(s: PerformanceProfile) -> float:
    # Inverted so the worst warder scores highest
    return 100 - s.avg_vision_score if s.avg_vision_score >= 0 else 0.0


def _cs_per_ten_thousand_damage(s: PerformanceProfile) -> float:
    # Farms perfectly, doesn't convert
    return s.avg_cs / (s.avg_damage / 10000) if s.avg_damage > 0 else 0.0


_DEFAULT_TITLES: list[TitleDefinition] = [
    # Win / loss streaks
    TitleDefinition(
        title="Who Wants a Piece of the Champ",
        rarity=TitleRarity.COMMON,
        score=lambda s: s.win_streak,
        min_score=3,
        stat_line=lambda s: f"{s.win_streak} win streak",
    ),
    TitleDefinition(
        title="On a Roll",
        rarity=TitleRarity.UNCOMMON,
        score=lambda s: s.win_streak,
        min_score=2,
        stat_line=lambda s: f"{s.win_streak} win streak",
    ),
    TitleDefinition(
        title="Stuck in Bronze",
        rarity=TitleRarity.COMMON,
        score=lambda s: s.loss_streak,
        min_score=3,
        stat_line=lambda s: f"{s.loss_streak} loss streak",
    ),
    TitleDefinition(
        title="It's Just a Bad Day",
        rarity=TitleRarity.UNCOMMON,
        score=lambda s: s.loss_streak,
        min_score=2,
        stat_line=lambda s: f"{s.loss_streak} loss streak",
    ),
    # Damage dealt
    TitleDefinition(
        title="Tons of Damage",
        rarity=TitleRarity.COMMON,
        score=lambda s: s.avg_damage,
        min_score=1,
        stat_line=lambda s: f"{format_whole(s.avg_damage)} avg dmg",
    ),
    TitleDefinition(
        title="Glass Cannon",
        rarity=TitleRarity.UNCOMMON,
        score=_damage_per_taken,
        min_score=1.5,
        stat_line=lambda s: (
            f"{format_whole(s.avg_damage)} dmg / {format_whole(s.avg_damage_taken)} taken"
        ),
    ),
    TitleDefinition(
        title="Poke Master",
        rarity=TitleRarity.RARE,
        score=_damage_per_kill,
        min_score=5000,
        stat_line=lambda s: (
            f"{format_whole(s.avg_damage)} dmg, {format_decimal(s.avg_kills)} kills"
        ),
    ),
    TitleDefinition(
        title="Golden Mop",
        rarity=TitleRarity.RARE,
        score=_kills_per_thousand_damage,
        min_score=0.5,
        stat_line=lambda s: (
            f"{format_decimal(s.avg_kills)} kills, {format_whole(s.avg_damage)} dmg"
        ),
    ),
    # Damage taken / tankiness
    TitleDefinition(
        title="Unkillable Demon King",
        rarity=TitleRarity.COMMON,
        score=lambda s: s.avg_self_mitigated,
        min_score=5000,
        stat_line=lambda s: f"{format_whole(s.avg_self_mitigated)} avg mitigated",
    ),
    TitleDefinition(
        title="Human Shield",
        rarity=TitleRarity.UNCOMMON,
        score=lambda s: s.avg_damage_taken,
        min_score=1,
        stat_line=lambda s: f"{format_whole(s.avg_damage_taken)} avg taken",
    ),
    TitleDefinition(
        title="Frontline Forever",
        rarity=TitleRarity.RARE,
        score=lambda s: s.avg_damage_taken + s.avg_self_mitigated,
        min_score=15000,
        stat_line=lambda s: (
            f"{format_whole(s.avg_damage_taken)} taken, "
            f"{format_whole(s.avg_self_mitigated)} mitigated"
        ),
    ),
    # Healing
    TitleDefinition(
        title="All For You",
        rarity=TitleRarity.COMMON,
        score=lambda s: s.avg_healing,
        min_score=1,
        stat_line=lambda s: f"{format_whole(s.avg_healing)} avg healing",
    ),
    # KDA
    TitleDefinition(
        title="Grey Screen Enjoyer",
        rarity=TitleRarity.COMMON,
        score=lambda s: s.avg_deaths,
        min_score=12,
        stat_line=lambda s: f"{format_decimal(s.avg_deaths)} avg deaths",
    ),
    TitleDefinition(
        title="KDA Player",
        rarity=TitleRarity.UNCOMMON,
        score=_kda_ratio,
        min_score=4,
        stat_line=lambda s: format_kda(s.avg_kills, s.avg_deaths, s.avg_assists),
    ),
    TitleDefinition(
        title="Always a Bridesmaid",
        rarity=TitleRarity.UNCOMMON,
        score=lambda s: s.avg_assists,
        min_score=5,
        stat_line=lambda s: f"{format_decimal(s.avg_assists)} avg assists",
    ),
    TitleDefinition(
        title="Dive Bomber",
        rarity=TitleRarity.RARE,
        # Dies for the team but still frags
        score=lambda s: s.avg_kills if s.avg_deaths >= 10 else 0.0,
        min_score=10,
        stat_line=lambda s: (
            f"{format_decimal(s.avg_kills)} kills, {format_decimal(s.avg_deaths)} deaths"
        ),
    ),
    # Crowd control
    TitleDefinition(
        title="Chain CC Enjoyer",
        rarity=TitleRarity.COMMON,
        score=lambda s: s.avg_cc_time,
        min_score=10,
        stat_line=lambda s: f"{format_decimal(s.avg_cc_time, 0)}s avg CC time",
    ),
    # Vision
    TitleDefinition(
        title="Always Watching",
        rarity=TitleRarity.UNCOMMON,
        score=lambda s: s.avg_vision_score,
        min_score=20,
        stat_line=lambda s: f"{format_decimal(s.avg_vision_score, 0)} avg vision score",
    ),
    TitleDefinition(
        title="Legally Blind",
        rarity=TitleRarity.RARE,
        score=_blindness,
        min_score=85,  # avg vision score <= 15
        stat_line=lambda s: f"{format_decimal(s.avg_vision_score, 0)} avg vision score",
    ),
    TitleDefinition(
        title="Ward Bot",
        rarity=TitleRarity.UNCOMMON,
        score=lambda s: s.avg_wards_placed,
        min_score=5,
        stat_line=lambda s: f"{format_decimal(s.avg_wards_placed)} avg wards",
    ),
    # CS / economy
    TitleDefinition(
        title="CS or Feed",
        rarity=TitleRarity.COMMON,
        score=lambda s: s.avg_cs,
        min_score=100,
        stat_line=lambda s: f"{format_decimal(s.avg_cs, 0)} avg CS",
    ),
    TitleDefinition(
        title="Retired Pro",
        rarity=TitleRarity.RARE,
        score=_cs_per_ten_thousand_damage,
        min_score=5,
        stat_line=lambda s: (
            f"{format_decimal(s.avg_cs, 0)} CS, {format_whole(s.avg_damage)} dmg"
        ),
    ),
    # Surrender
    TitleDefinition(
        title="Rage Quitter",
        rarity=TitleRarity.UNCOMMON,
        score=lambda s: s.surrender_rate,
        min_score=0.5,
        stat_line=lambda s: f"{format_percent(s.surrender_rate)} surrender rate",
    ),
    TitleDefinition(
        title="Never Surrender",
        rarity=TitleRarity.RARE,
        # Inverted so the player who surrenders least scores highest
        score=lambda s: 1.0 - s.surrender_rate,
        min_score=0.9,  # surrender rate <= 10%
        stat_line=lambda s: f"{format_percent(s.surrender_rate)} surrender rate",
    ),
]

DEFAULT_CATALOGUE = TitleCatalogue(_DEFAULT_TITLES)
