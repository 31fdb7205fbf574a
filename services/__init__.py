"""
Application services layer.

Services orchestrate domain services and hold the state that surrounds a pure
evaluation (profile cache, debounced lobby lookups).
"""

from services.lobby_title_service import LobbyTitleService
from services.match_history_service import match_history_from_payload, match_record_from_payload
from services.profile_cache_service import ProfileCacheService

# Result type for consistent error handling
from services.result import Result

# Service interfaces (ABCs)
from services.interfaces import (
    ILobbyTitleService,
    IProfileCacheService,
    ITitleEvaluationService,
)
from services.title_evaluation_service import TitleEvaluationService

__all__ = [
    "ILobbyTitleService",
    "IProfileCacheService",
    "ITitleEvaluationService",
    "LobbyTitleService",
    "ProfileCacheService",
    "Result",
    "TitleEvaluationService",
    "match_history_from_payload",
    "match_record_from_payload",
]
