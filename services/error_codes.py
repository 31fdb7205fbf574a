"""
Standard error codes for the service layer.

Usage:
    from services.error_codes import NO_RESOLVABLE_MATCHES
    from services.result import Result

    if profile is None:
        return Result.fail("No resolvable matches", code=NO_RESOLVABLE_MATCHES)
"""

# General errors
VALIDATION_ERROR = "validation_error"

# Profile errors
NO_RESOLVABLE_MATCHES = "no_resolvable_matches"
FETCH_FAILED = "fetch_failed"
