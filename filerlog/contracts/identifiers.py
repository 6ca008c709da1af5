"""
Identity Types (Immutable, value-compared)

Opaque identifiers exchanged with producers. Only immutability and
structural equality are relied upon by the capture/replay layers.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Handle:
    """
    Persistent object handle.

    Textualizes as upper-case hexadecimal, the form used by the
    interchange vocabulary.
    """
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Handle value must be an integer")
        if self.value < 0:
            raise ValueError("Handle value must be non-negative")

    @staticmethod
    def parse(text: str) -> Handle:
        """Parse the hexadecimal text form produced by str()."""
        if not text or not isinstance(text, str):
            raise ValueError("Handle text must be a non-empty string")
        return Handle(value=int(text, 16))

    def __str__(self) -> str:
        return format(self.value, "X")


@dataclass(frozen=True)
class ObjectId:
    """
    Reference to a persisted object.

    The same representation serves all four id relationship kinds;
    the relationship is carried by the tag, not the value.
    """
    handle: Handle

    @staticmethod
    def null() -> ObjectId:
        return ObjectId(handle=Handle(0))

    @property
    def is_null(self) -> bool:
        return self.handle.value == 0

    def __str__(self) -> str:
        return f"({self.handle})"


@dataclass(frozen=True)
class Address:
    """Raw in-process address. No meaning outside the producing process."""
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Address value must be an integer")
        if self.value < 0:
            raise ValueError("Address value must be non-negative")

    def __str__(self) -> str:
        return f"0x{self.value:X}"
