"""
Result type for service-level outcomes that callers branch on.

Services return Result instead of raising when a failure is an expected,
ordinary outcome (a player with no usable history, a fetch that failed).

Usage:
    result = profile_cache.build_profile(player_id, payload)
    if result:
        profile = result.value
    elif result.error_code == NO_RESOLVABLE_MATCHES:
        ...
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Success/failure wrapper.

    Attributes:
        success: Whether the operation succeeded
        value: Payload on success (may be None for void operations)
        error: Human-readable failure message
        error_code: Code from services.error_codes for programmatic handling
    """

    success: bool
    value: T | None = None
    error: str | None = None
    error_code: str | None = None

    @classmethod
    def ok(cls, value: T | None = None) -> "Result[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: str, code: str | None = None) -> "Result[T]":
        return cls(success=False, error=error, error_code=code)

    def __bool__(self) -> bool:
        return self.success

    def unwrap(self) -> T:
        """
        Return the value, raising ValueError on a failed result.
        """
        if not self.success:
            raise ValueError(f"Cannot unwrap failed result: {self.error}")
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        return self.value if self.success else default  # type: ignore[return-value]

    def map(self, fn: "Callable[[T], Result[U]]") -> "Result[U]":
        """Chain another Result-returning step onto a success; failures pass through."""
        if not self.success:
            return self  # type: ignore[return-value]
        return fn(self.value)  # type: ignore[arg-type]
