"""
Base Contracts and Shared Types

These are the foundational types used across all layers.
All types here are IMMUTABLE and represent pure data.
No behavior, no side effects, no dependencies.

BOUNDARY ENFORCEMENT:
=====================
- This module is READ-ONLY from all layers
- Layers may import types but MUST NOT modify this module
- All types are frozen dataclasses for immutability guarantee
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple
from enum import Enum, auto


# =============================================================================
# ERROR STATES (Explicit, never silent)
# =============================================================================

class ErrorCode(Enum):
    """
    Explicit error codes for capture and replay.
    No silent fallbacks - every error state is enumerated.
    """
    # Input errors
    ARGUMENT_INVALID = auto()

    # Sequence errors
    READ_ONLY_VIOLATION = auto()

    # Cursor errors
    TYPE_MISMATCH = auto()
    END_OF_DATA = auto()
    FAULTED = auto()

    # Protocol errors
    UNSUPPORTED = auto()
    TRANSLATION_UNSUPPORTED = auto()


@dataclass(frozen=True)
class Error:
    """
    Immutable error representation with full context.
    Errors are data, not exceptions - they can be stored and queried.
    """
    code: ErrorCode
    message: str
    context: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    def with_context(self, key: str, value: str) -> Error:
        """Return new Error with additional context (immutable)."""
        return Error(
            code=self.code,
            message=self.message,
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
    def success(value: object) -> Result:
        return Result(value=value, error=None)

    @staticmethod
    def failure(error: Error) -> Result:
        return Result(value=None, error=error)


# =============================================================================
# FILER TYPES
# =============================================================================

class FilerType(Enum):
    """Purpose of a filer pass, reported to the producer on request."""
    FILE_FILER = 0
    COPY_FILER = 1
    UNDO_FILER = 2
    BAG_FILER = 3
    ID_XLATE_FILER = 4
    PAGE_FILER = 5
    DEEP_CLONE_FILER = 6
    ID_FILER = 7
    PURGE_FILER = 8
    WBLOCK_CLONE_FILER = 9


class FilerStatus(Enum):
    """
    Filer status as seen by a producer.

    OK unless a read has recorded a fault; mirrors the fault's ErrorCode.
    """
    OK = "ok"
    TYPE_MISMATCH = "type_mismatch"
    END_OF_DATA = "end_of_data"

    @staticmethod
    def from_code(code: Optional[ErrorCode]) -> FilerStatus:
        if code is None:
            return FilerStatus.OK
        if code == ErrorCode.TYPE_MISMATCH:
            return FilerStatus.TYPE_MISMATCH
        if code == ErrorCode.END_OF_DATA:
            return FilerStatus.END_OF_DATA
        raise ValueError(f"No filer status for error code {code.name}")
