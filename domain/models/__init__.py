"""
Domain models - pure data structures representing business entities.
"""

from domain.models.match_record import MatchRecord
from domain.models.performance_profile import PerformanceProfile
from domain.models.title import (
    Bid,
    PlayerEntry,
    TitleDefinition,
    TitleRarity,
    TitleResult,
)
from domain.models.title_catalogue import DEFAULT_CATALOGUE, TitleCatalogue

__all__ = [
    "Bid",
    "DEFAULT_CATALOGUE",
    "MatchRecord",
    "PerformanceProfile",
    "PlayerEntry",
    "TitleCatalogue",
    "TitleDefinition",
    "TitleRarity",
    "TitleResult",
]
