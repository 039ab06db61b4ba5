"""
Timephrase — Resolution Errors

Usage:
    from timephrase.core.errors import ResolutionError, InvalidDate
    try:
        resolver.resolve(sentence)
    except InvalidDate as exc:
        print(exc.kind, exc)
"""
from __future__ import annotations


class ResolutionError(Exception):
    """Base class for every error a resolution can produce."""
    kind: str = "resolution_error"


class InvalidTime(ResolutionError):
    """Hour or minute out of range (e.g. 24:00, 10:60)."""
    kind = "invalid_time"


class InvalidDate(ResolutionError):
    """Day does not exist in the target month (31st of april, 29th of february off a leap year)."""
    kind = "invalid_date"


class InternalInvariantViolation(ResolutionError):
    """
    A token the grammar guarantees failed to decode.
    Means the matcher and the resolver disagree; that is a defect, not user input.
    """
    kind = "internal_invariant_violation"
