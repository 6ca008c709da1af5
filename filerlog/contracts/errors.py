"""
Filer Exceptions
================

Exception layer over the Error data contract.

Cursor operations report failures as data (Result / Error). The filer
protocol expects failures to surface as exceptions at the call site, so
adapters convert errors with raise_for().

Every exception carries the originating Error in `.error`.
"""

from __future__ import annotations
from typing import Dict, Optional, Type

from .base import Error, ErrorCode


class FilerError(Exception):
    """Base class for all capture/replay failures."""

    code: ErrorCode = ErrorCode.UNSUPPORTED

    def __init__(self, message: str, error: Optional[Error] = None):
        super().__init__(message)
        self.error = error or Error(code=self.code, message=message)


class ArgumentInvalid(FilerError, ValueError):
    """Null or non-conforming input to append or an adapter call."""
    code = ErrorCode.ARGUMENT_INVALID


class ReadOnlyViolation(FilerError):
    """Mutation attempted on a sealed (or append-only) sequence."""
    code = ErrorCode.READ_ONLY_VIOLATION


class TypeMismatch(FilerError, TypeError):
    """Read requested a type not matching the stored element."""
    code = ErrorCode.TYPE_MISMATCH

    @property
    def position(self) -> Optional[int]:
        value = self.error.context_value("position")
        return int(value) if value is not None else None

    @property
    def expected(self) -> Optional[str]:
        return self.error.context_value("expected")

    @property
    def actual(self) -> Optional[str]:
        return self.error.context_value("actual")


class EndOfData(FilerError, EOFError):
    """Read attempted at or past the final element."""
    code = ErrorCode.END_OF_DATA


class Faulted(FilerError):
    """Read attempted while a previous fault is still recorded."""
    code = ErrorCode.FAULTED


class Unsupported(FilerError, NotImplementedError):
    """Operation outside the protocol's contract (e.g. seek)."""
    code = ErrorCode.UNSUPPORTED


class TranslationUnsupported(FilerError):
    """Tag has no interchange counterpart."""
    code = ErrorCode.TRANSLATION_UNSUPPORTED


_EXCEPTIONS: Dict[ErrorCode, Type[FilerError]] = {
    ErrorCode.ARGUMENT_INVALID: ArgumentInvalid,
    ErrorCode.READ_ONLY_VIOLATION: ReadOnlyViolation,
    ErrorCode.TYPE_MISMATCH: TypeMismatch,
    ErrorCode.END_OF_DATA: EndOfData,
    ErrorCode.FAULTED: Faulted,
    ErrorCode.UNSUPPORTED: Unsupported,
    ErrorCode.TRANSLATION_UNSUPPORTED: TranslationUnsupported,
}


def exception_for(error: Error) -> FilerError:
    """Build the exception matching an Error's code."""
    return _EXCEPTIONS[error.code](error.message, error)


def raise_for(error: Error) -> None:
    """Raise the exception matching an Error's code."""
    raise exception_for(error)
