"""
Base Contracts and Shared Types

These are the foundational types used across all layers.
All types here are IMMUTABLE and represent pure data.

BOUNDARY ENFORCEMENT:
=====================
- Layers may import types but MUST NOT modify this module
- All types are frozen dataclasses for immutability guarantee
- Failures are returned as Error values inside a Result
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Tuple
from enum import Enum, auto


# =============================================================================
# ERROR STATES (Explicit, never silent)
# =============================================================================

class ErrorCode(Enum):
    """
    Explicit error codes for the graph explorer.
    Every recoverable failure a caller can observe is enumerated here.
    """
    # Vertex errors
    INVALID_VERTEX_NAME = auto()
    UNKNOWN_VERTEX_REFERENCE = auto()

    # Edge errors
    SELF_LOOP_REJECTED = auto()
    INVALID_WEIGHT = auto()

    # Path query errors
    VERTICES_NOT_FOUND = auto()
    NO_PATH_FOUND = auto()


@dataclass(frozen=True)
class Error:
    """
    Immutable error representation with full context.
    Errors are data, not exceptions - they can be stored and shown to the user.
    """
    code: ErrorCode
    message: str
    timestamp: datetime
    context: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    @staticmethod
    def create(code: ErrorCode, message: str, **context: str) -> Error:
        """Build an error stamped with the current UTC time."""
        return Error(
            code=code,
            message=message,
            timestamp=datetime.now(timezone.utc),
            context=tuple((key, str(value)) for key, value in context.items())
        )

    def with_context(self, key: str, value: str) -> Error:
        """Return new Error with additional context (immutable)."""
        return Error(
            code=self.code,
            message=self.message,
            timestamp=self.timestamp,
            context=self.context + ((key, value),)
        )

    def context_value(self, key: str) -> Optional[str]:
        for k, v in self.context:
            if k == key:
                return v
        return None


@dataclass(frozen=True)
class Result:
    """
    Generic result type for operations that can fail.
    Either contains a value OR an error, never both.
    """
    value: Optional[object] = None
    error: Optional[Error] = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    @staticmethod
    def success(value: object = None) -> Result:
        return Result(value=value, error=None)

    @staticmethod
    def failure(error: Error) -> Result:
        return Result(value=None, error=error)


# =============================================================================
# GRAPH IDENTITY TYPES
# =============================================================================

@dataclass(frozen=True)
class Position:
    """Canvas coordinates. Cosmetic only, never read by graph algorithms."""
    x: float
    y: float


@dataclass(frozen=True)
class Vertex:
    """A named vertex with its canvas position."""
    name: str
    position: Position

    def __post_init__(self):
        if not self.name or not isinstance(self.name, str):
            raise ValueError("Vertex name must be a non-empty string")
