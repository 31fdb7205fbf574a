"""
Service layer interfaces (ABCs).

Services inherit from their interface so tests can substitute fakes with the
same contract.
"""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from domain.models.performance_profile import PerformanceProfile
    from domain.models.title import TitleResult
    from domain.services.pool_sampling_service import RandomSource
    from services.result import Result

HistoryFetcher = Callable[[str], Awaitable[Mapping[str, Any] | None]]


class ITitleEvaluationService(ABC):
    """Interface for one-shot lobby title evaluation."""

    @abstractmethod
    def evaluate(
        self, entries: Iterable[Any], rng: "RandomSource"
    ) -> "dict[str, TitleResult | None]":
        """Return at most one title per player; None where nothing was awarded."""
        ...


class IProfileCacheService(ABC):
    """Interface for the shared player-id -> profile cache."""

    @abstractmethod
    def get(self, player_id: str) -> "PerformanceProfile | None":
        """Cached profile, or None when absent or known to have no profile."""
        ...

    @abstractmethod
    def has(self, player_id: str) -> bool:
        """Whether an outcome (profile or no-profile) is cached for the player."""
        ...

    @abstractmethod
    def resolved_ids(self) -> frozenset[str]:
        """Ids whose cached outcome is an actual profile."""
        ...

    @abstractmethod
    async def refresh(
        self,
        player_ids: Iterable[str],
        fetch_history: HistoryFetcher,
        *,
        force: bool = False,
    ) -> "Result[dict[str, PerformanceProfile | None]]":
        """Fetch and aggregate every uncached player (all of them with force) concurrently."""
        ...


class ILobbyTitleService(ABC):
    """Interface for debounced lobby title lookups."""

    @abstractmethod
    def titles_for(self, player_ids: Iterable[str]) -> "dict[str, TitleResult | None]":
        """Titles for the lobby, re-evaluated only when resolved profiles change."""
        ...
