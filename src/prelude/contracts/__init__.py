"""
Contract Module

Предусловия операций prelude и иерархия ошибок их нарушения.
"""

from .preconditions import (
    EmptySequenceError,
    IndexOutOfRange,
    PreconditionViolation,
    WrongAlternativeError,
    require_bounds,
    require_count,
    require_index,
    require_non_empty,
    require_position,
)

__all__ = [
    # Exceptions
    "PreconditionViolation",
    "IndexOutOfRange",
    "EmptySequenceError",
    "WrongAlternativeError",
    # Checks
    "require_non_empty",
    "require_index",
    "require_position",
    "require_bounds",
    "require_count",
]
