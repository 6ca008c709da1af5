"""
Capture Adapter
===============

Write half of the filer protocol. Every write call becomes one
append(tag, value) on the bound sequence, in call order.

BOUNDARY ENFORCEMENT:
=====================
- The tag is fixed by the entry point called, never inferred from the value
- Buffers are copied, so later mutation by the producer cannot reach
  the captured value
- No producer-side ordering semantics are inspected
- Numeric scalars (e.g. numpy integers) are normalised to the plain
  Python type of the tag. Integers widen to REAL; no other kind
  conversion happens
"""

from __future__ import annotations
import numbers
from typing import Any

import numpy as np

from ..contracts.errors import ArgumentInvalid, ReadOnlyViolation
from ..contracts.geometry import Point2d, Point3d, Scale3d, Vector2d, Vector3d
from ..contracts.identifiers import Address, Handle, ObjectId
from ..contracts.tags import TypeTag, representation_of
from ..log.sequence import TaggedValueSequence
from .base import Filer


def _copy_buffer(tag: TypeTag, value: Any) -> bytes:
    if value is None:
        raise ArgumentInvalid(f"{tag.name} buffer must not be None")
    try:
        return bytes(memoryview(value))
    except TypeError as exc:
        raise ArgumentInvalid(
            f"{tag.name} requires a bytes-like buffer, got {type(value).__name__}"
        ) from exc


def _scalar(tag: TypeTag, value: Any) -> Any:
    python_type = representation_of(tag).python_type
    if isinstance(value, (bool, np.bool_)):
        return bool(value) if python_type is bool else value
    if python_type is int and isinstance(value, numbers.Integral):
        return int(value)
    # ints widen like a native double parameter would
    if python_type is float and isinstance(value, numbers.Real):
        return float(value)
    return value


class CaptureAdapter(Filer):
    """
    Filer that records a producer's write pass.

    Writing after the bound sequence is sealed raises ReadOnlyViolation;
    the sequence is left unchanged.
    """

    def __init__(self, sequence: TaggedValueSequence):
        super().__init__(sequence.config)
        self._sequence = sequence

    @property
    def sequence(self) -> TaggedValueSequence:
        return self._sequence

    @property
    def position(self) -> int:
        return len(self._sequence)

    def _capture(self, tag: TypeTag, value: Any, copy_buffer: bool = False) -> None:
        if self._sequence.is_sealed:
            raise ReadOnlyViolation(
                f"Cannot capture {tag.name}: the sequence is sealed and read-only"
            )
        if copy_buffer:
            value = _copy_buffer(tag, value)
        else:
            value = _scalar(tag, value)
        self._sequence.append(tag, value)

    def write_address(self, value: Address) -> None:
        self._capture(TypeTag.ADDRESS, value)

    def write_binary_chunk(self, chunk: bytes) -> None:
        self._capture(TypeTag.BINARY_CHUNK, chunk, copy_buffer=True)

    def write_boolean(self, value: bool) -> None:
        self._capture(TypeTag.BOOL, value)

    def write_byte(self, value: int) -> None:
        self._capture(TypeTag.BYTE, value)

    def write_bytes(self, value: bytes) -> None:
        self._capture(TypeTag.BYTE_ARRAY, value, copy_buffer=True)

    def write_double(self, value: float) -> None:
        self._capture(TypeTag.REAL, value)

    def write_handle(self, handle: Handle) -> None:
        self._capture(TypeTag.HANDLE, handle)

    def write_hard_ownership_id(self, value: ObjectId) -> None:
        self._capture(TypeTag.HARD_OWNERSHIP_ID, value)

    def write_hard_pointer_id(self, value: ObjectId) -> None:
        self._capture(TypeTag.HARD_POINTER_ID, value)

    def write_int8(self, value: int) -> None:
        self._capture(TypeTag.INT8, value)

    def write_int16(self, value: int) -> None:
        self._capture(TypeTag.INT16, value)

    def write_int32(self, value: int) -> None:
        self._capture(TypeTag.INT32, value)

    def write_int64(self, value: int) -> None:
        self._capture(TypeTag.INT64, value)

    def write_point2d(self, value: Point2d) -> None:
        self._capture(TypeTag.POINT2D, value)

    def write_point3d(self, value: Point3d) -> None:
        self._capture(TypeTag.POINT3D, value)

    def write_scale3d(self, value: Scale3d) -> None:
        self._capture(TypeTag.SCALE3D, value)

    def write_soft_ownership_id(self, value: ObjectId) -> None:
        self._capture(TypeTag.SOFT_OWNERSHIP_ID, value)

    def write_soft_pointer_id(self, value: ObjectId) -> None:
        self._capture(TypeTag.SOFT_POINTER_ID, value)

    def write_string(self, value: str) -> None:
        self._capture(TypeTag.TEXT, value)

    def write_uint16(self, value: int) -> None:
        self._capture(TypeTag.UINT16, value)

    def write_uint32(self, value: int) -> None:
        self._capture(TypeTag.UINT32, value)

    def write_uint64(self, value: int) -> None:
        self._capture(TypeTag.UINT64, value)

    def write_vector2d(self, value: Vector2d) -> None:
        self._capture(TypeTag.VECTOR2D, value)

    def write_vector3d(self, value: Vector3d) -> None:
        self._capture(TypeTag.VECTOR3D, value)
