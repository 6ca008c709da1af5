"""
Replay Adapter
==============

Read half of the filer protocol, driven by a producer's read pass over
a sealed sequence.

Every read entry point is a type-checked pull from the adapter's own
ReadCursor. Failures surface as FilerError subclasses at the call site;
a failed read never advances the cursor and never touches elements.
"""

from __future__ import annotations
from typing import Any, Optional

from ..contracts.base import Error, ErrorCode, FilerStatus
from ..contracts.errors import ArgumentInvalid
from ..contracts.geometry import Point2d, Point3d, Scale3d, Vector2d, Vector3d
from ..contracts.identifiers import Address, Handle, ObjectId
from ..contracts.tags import TypeTag
from ..contracts.values import TaggedValue
from ..log.cursor import ReadCursor
from ..log.sequence import TaggedValueSequence
from .base import Filer


class ReplayAdapter(Filer):
    """
    Filer that feeds a sealed sequence back to a producer.

    Several adapters may replay the same sequence; each owns a cursor.
    """

    def __init__(self, sequence: TaggedValueSequence, cursor: Optional[ReadCursor] = None):
        super().__init__(sequence.config)
        self._sequence = sequence
        self._cursor = cursor or sequence.cursor()

    @property
    def sequence(self) -> TaggedValueSequence:
        return self._sequence

    @property
    def cursor(self) -> ReadCursor:
        return self._cursor

    @property
    def position(self) -> int:
        return self._cursor.position

    @property
    def is_end_of_data(self) -> bool:
        return self._cursor.is_end_of_data

    @property
    def filer_status(self) -> FilerStatus:
        return self._cursor.status

    def reset_filer_status(self) -> None:
        self._cursor.reset_fault()

    def rewind(self) -> None:
        self._cursor.rewind()

    def peek(self) -> Optional[TaggedValue]:
        return self._cursor.peek()

    def seek(self, offset: int, whence: int = 0) -> None:
        self._cursor.seek(offset, whence)

    def _read(self, tag: TypeTag) -> Any:
        return self._cursor.next(tag)

    def read_address(self) -> Address:
        return self._read(TypeTag.ADDRESS)

    def read_binary_chunk(self) -> bytes:
        return self._read(TypeTag.BINARY_CHUNK)

    def read_boolean(self) -> bool:
        return self._read(TypeTag.BOOL)

    def read_byte(self) -> int:
        return self._read(TypeTag.BYTE)

    def read_bytes(self) -> bytes:
        return self._read(TypeTag.BYTE_ARRAY)

    def read_bytes_into(self, buffer: Any) -> int:
        """
        Copy the next byte array into `buffer`.

        Fails with ArgumentInvalid, without consuming the value, when
        the source is longer than the buffer. Returns bytes copied.
        """
        try:
            target = memoryview(buffer)
        except TypeError as exc:
            raise ArgumentInvalid(
                f"read_bytes_into requires a buffer, got {type(buffer).__name__}"
            ) from exc
        if target.readonly:
            raise ArgumentInvalid("read_bytes_into requires a writable buffer")
        target = target.cast("B")

        def fits(value: bytes) -> Optional[Error]:
            if len(value) > len(target):
                return Error(
                    code=ErrorCode.ARGUMENT_INVALID,
                    message=(
                        f"Byte array of length {len(value)} exceeds "
                        f"buffer capacity {len(target)}"
                    ),
                )
            return None

        value = self._cursor.next(TypeTag.BYTE_ARRAY, fits)
        target[:len(value)] = value
        return len(value)

    def read_double(self) -> float:
        return self._read(TypeTag.REAL)

    def read_handle(self) -> Handle:
        return self._read(TypeTag.HANDLE)

    def read_hard_ownership_id(self) -> ObjectId:
        return self._read(TypeTag.HARD_OWNERSHIP_ID)

    def read_hard_pointer_id(self) -> ObjectId:
        return self._read(TypeTag.HARD_POINTER_ID)

    def read_int8(self) -> int:
        return self._read(TypeTag.INT8)

    def read_int16(self) -> int:
        return self._read(TypeTag.INT16)

    def read_int32(self) -> int:
        return self._read(TypeTag.INT32)

    def read_int64(self) -> int:
        return self._read(TypeTag.INT64)

    def read_point2d(self) -> Point2d:
        return self._read(TypeTag.POINT2D)

    def read_point3d(self) -> Point3d:
        return self._read(TypeTag.POINT3D)

    def read_scale3d(self) -> Scale3d:
        return self._read(TypeTag.SCALE3D)

    def read_soft_ownership_id(self) -> ObjectId:
        return self._read(TypeTag.SOFT_OWNERSHIP_ID)

    def read_soft_pointer_id(self) -> ObjectId:
        return self._read(TypeTag.SOFT_POINTER_ID)

    def read_string(self) -> str:
        return self._read(TypeTag.TEXT)

    def read_uint16(self) -> int:
        return self._read(TypeTag.UINT16)

    def read_uint32(self) -> int:
        return self._read(TypeTag.UINT32)

    def read_uint64(self) -> int:
        return self._read(TypeTag.UINT64)

    def read_vector2d(self) -> Vector2d:
        return self._read(TypeTag.VECTOR2D)

    def read_vector3d(self) -> Vector3d:
        return self._read(TypeTag.VECTOR3D)
