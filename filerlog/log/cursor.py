"""
Read Cursor
===========

Sequential, type-checked reader over a sealed sequence.

STATE:
======
- position: 0 <= position <= length
- fault: None, or the sticky Fault recorded by a failed or
  exhausting read

TRANSITIONS:
============
- try_next/next: END_OF_DATA if position >= length, FAULTED if a fault
  is recorded, TYPE_MISMATCH (fault recorded, position unchanged) if
  the element does not match, otherwise advance and return the value
- rewind: position -> 0, fault untouched
- reset_fault: fault -> None, position untouched
- seek: always UNSUPPORTED

Each reader owns its cursor. Cursors never mutate elements.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Any, Callable, List, Optional

from ..config import DEFAULT_CONFIG, FilerConfig
from ..contracts.base import Error, ErrorCode, FilerStatus, Result
from ..contracts.errors import Unsupported, raise_for
from ..contracts.tags import TypeTag, conforms, representation_of, type_name
from ..contracts.values import TaggedValue

logger = logging.getLogger(__name__)

# Checks a matched value before the cursor advances; returns an Error to
# reject the read without recording a fault.
ValueCheck = Callable[[Any], Optional[Error]]


@dataclass(frozen=True)
class Fault:
    """Sticky read failure recorded on a cursor."""
    code: ErrorCode
    position: int
    message: str
    expected: Optional[TypeTag] = None
    actual: Optional[TypeTag] = None

    def to_error(self) -> Error:
        context = (("position", str(self.position)),)
        if self.expected is not None:
            context += (("expected", self.expected.name),)
        if self.actual is not None:
            context += (("actual", self.actual.name),)
        return Error(code=self.code, message=self.message, context=context)


class ReadCursor:
    """
    Per-reader cursor over the elements of a sealed sequence.

    Obtain through TaggedValueSequence.cursor().

    EXPLICIT FAILURE STATES:
    - END_OF_DATA: read at or past the final element
    - FAULTED: read while an earlier fault is still recorded
    - TYPE_MISMATCH: stored element does not match the requested tag
    """

    def __init__(self, items: List[TaggedValue], config: Optional[FilerConfig] = None):
        self._items = items
        self._config = config or DEFAULT_CONFIG
        self._position = 0
        self._fault: Optional[Fault] = None

    @property
    def position(self) -> int:
        return self._position

    @property
    def length(self) -> int:
        return len(self._items)

    @property
    def fault(self) -> Optional[Fault]:
        return self._fault

    @property
    def status(self) -> FilerStatus:
        return FilerStatus.from_code(self._fault.code if self._fault else None)

    @property
    def is_end_of_data(self) -> bool:
        return self._position > len(self._items) - 1

    def peek(self) -> Optional[TaggedValue]:
        """
        Element at the current position without consuming it.

        Returns None at the final element as well as past the end.
        """
        if self._position < len(self._items) - 1:
            return self._items[self._position]
        return None

    def try_next(self, expected: TypeTag, check: Optional[ValueCheck] = None) -> Result:
        """
        Read the next value as `expected`.

        Returns Result.success(value) or Result.failure(error); never
        raises for data-dependent failures.
        """
        position = self._position
        if self.is_end_of_data:
            return Result.failure(Error(
                code=ErrorCode.END_OF_DATA,
                message=f"End of data at position {position} (count = {len(self._items)})",
                context=(("position", str(position)),)
            ))

        if self._fault is not None:
            return Result.failure(Error(
                code=ErrorCode.FAULTED,
                message=f"Filer is faulted: {self._fault.message}",
                context=(
                    ("position", str(position)),
                    ("fault", self._fault.code.name),
                )
            ))

        item = self._items[position]
        if not self._matches(item, expected):
            self._fault = Fault(
                code=ErrorCode.TYPE_MISMATCH,
                position=position,
                message=(
                    f"Type mismatch at {position} ({item.tag.name}/{type_name(item.value)}, "
                    f"expecting {expected.name}/{representation_of(expected).name})"
                ),
                expected=expected,
                actual=item.tag,
            )
            logger.debug("%s", self._fault.message)
            return Result.failure(self._fault.to_error())

        if check is not None:
            error = check(item.value)
            if error is not None:
                return Result.failure(error.with_context("position", str(position)))

        self._position += 1
        if self.is_end_of_data and self._config.fault_on_exhaustion:
            self._fault = Fault(
                code=ErrorCode.END_OF_DATA,
                position=self._position,
                message=f"All {len(self._items)} values consumed",
            )
        return Result.success(item.value)

    def next(self, expected: TypeTag, check: Optional[ValueCheck] = None) -> Any:
        """Read the next value as `expected`, raising on failure."""
        result = self.try_next(expected, check)
        if result.is_failure:
            raise_for(result.error)
        return result.value

    def _matches(self, item: TaggedValue, expected: TypeTag) -> bool:
        if self._config.strict_tags:
            return item.tag == expected
        return conforms(expected, item.value)

    def rewind(self) -> None:
        """Return to position 0. A recorded fault is kept."""
        self._position = 0

    def reset_fault(self) -> None:
        """Clear the recorded fault. Position is kept."""
        self._fault = None

    def seek(self, offset: int, whence: int = 0) -> None:
        raise Unsupported("Seek is not supported; replay is strictly sequential")

    def __repr__(self) -> str:
        fault = self._fault.code.name if self._fault else "none"
        return f"ReadCursor(position={self._position}, count={len(self._items)}, fault={fault})"
