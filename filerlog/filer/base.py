"""
Filer Interface
===============

The fixed visitor protocol producers serialize through: one write and
one read entry point per value kind.

CaptureAdapter implements the write half, ReplayAdapter the read half.
Entry points an implementation does not provide raise Unsupported.
"""

from __future__ import annotations
from typing import Any

from ..config import DEFAULT_CONFIG, FilerConfig
from ..contracts.base import FilerStatus, FilerType
from ..contracts.errors import Unsupported
from ..contracts.geometry import Point2d, Point3d, Scale3d, Vector2d, Vector3d
from ..contracts.identifiers import Address, Handle, ObjectId


class Filer:
    """
    Abstract filer.

    Each implementation covers one direction only. Entry points of the
    other direction raise Unsupported.
    """

    def __init__(self, config: FilerConfig = DEFAULT_CONFIG):
        self._config = config

    @property
    def config(self) -> FilerConfig:
        return self._config

    @property
    def filer_type(self) -> FilerType:
        return self._config.filer_type

    @property
    def filer_status(self) -> FilerStatus:
        return FilerStatus.OK

    def reset_filer_status(self) -> None:
        pass

    @property
    def position(self) -> int:
        raise NotImplementedError

    def seek(self, offset: int, whence: int = 0) -> None:
        raise Unsupported("Seek is not supported; replay is strictly sequential")

    def _unsupported(self, operation: str) -> Unsupported:
        return Unsupported(f"{type(self).__name__} does not support {operation}")

    # =========================================================================
    # WRITE PROTOCOL
    # =========================================================================

    def write_address(self, value: Address) -> None:
        raise self._unsupported("write_address")

    def write_binary_chunk(self, chunk: bytes) -> None:
        raise self._unsupported("write_binary_chunk")

    def write_boolean(self, value: bool) -> None:
        raise self._unsupported("write_boolean")

    def write_byte(self, value: int) -> None:
        raise self._unsupported("write_byte")

    def write_bytes(self, value: bytes) -> None:
        raise self._unsupported("write_bytes")

    def write_double(self, value: float) -> None:
        raise self._unsupported("write_double")

    def write_handle(self, handle: Handle) -> None:
        raise self._unsupported("write_handle")

    def write_hard_ownership_id(self, value: ObjectId) -> None:
        raise self._unsupported("write_hard_ownership_id")

    def write_hard_pointer_id(self, value: ObjectId) -> None:
        raise self._unsupported("write_hard_pointer_id")

    def write_int8(self, value: int) -> None:
        raise self._unsupported("write_int8")

    def write_int16(self, value: int) -> None:
        raise self._unsupported("write_int16")

    def write_int32(self, value: int) -> None:
        raise self._unsupported("write_int32")

    def write_int64(self, value: int) -> None:
        raise self._unsupported("write_int64")

    def write_point2d(self, value: Point2d) -> None:
        raise self._unsupported("write_point2d")

    def write_point3d(self, value: Point3d) -> None:
        raise self._unsupported("write_point3d")

    def write_scale3d(self, value: Scale3d) -> None:
        raise self._unsupported("write_scale3d")

    def write_soft_ownership_id(self, value: ObjectId) -> None:
        raise self._unsupported("write_soft_ownership_id")

    def write_soft_pointer_id(self, value: ObjectId) -> None:
        raise self._unsupported("write_soft_pointer_id")

    def write_string(self, value: str) -> None:
        raise self._unsupported("write_string")

    def write_uint16(self, value: int) -> None:
        raise self._unsupported("write_uint16")

    def write_uint32(self, value: int) -> None:
        raise self._unsupported("write_uint32")

    def write_uint64(self, value: int) -> None:
        raise self._unsupported("write_uint64")

    def write_vector2d(self, value: Vector2d) -> None:
        raise self._unsupported("write_vector2d")

    def write_vector3d(self, value: Vector3d) -> None:
        raise self._unsupported("write_vector3d")

    # =========================================================================
    # READ PROTOCOL
    # =========================================================================

    def read_address(self) -> Address:
        raise self._unsupported("read_address")

    def read_binary_chunk(self) -> bytes:
        raise self._unsupported("read_binary_chunk")

    def read_boolean(self) -> bool:
        raise self._unsupported("read_boolean")

    def read_byte(self) -> int:
        raise self._unsupported("read_byte")

    def read_bytes(self) -> bytes:
        raise self._unsupported("read_bytes")

    def read_bytes_into(self, buffer: Any) -> int:
        raise self._unsupported("read_bytes_into")

    def read_double(self) -> float:
        raise self._unsupported("read_double")

    def read_handle(self) -> Handle:
        raise self._unsupported("read_handle")

    def read_hard_ownership_id(self) -> ObjectId:
        raise self._unsupported("read_hard_ownership_id")

    def read_hard_pointer_id(self) -> ObjectId:
        raise self._unsupported("read_hard_pointer_id")

    def read_int8(self) -> int:
        raise self._unsupported("read_int8")

    def read_int16(self) -> int:
        raise self._unsupported("read_int16")

    def read_int32(self) -> int:
        raise self._unsupported("read_int32")

    def read_int64(self) -> int:
        raise self._unsupported("read_int64")

    def read_point2d(self) -> Point2d:
        raise self._unsupported("read_point2d")

    def read_point3d(self) -> Point3d:
        raise self._unsupported("read_point3d")

    def read_scale3d(self) -> Scale3d:
        raise self._unsupported("read_scale3d")

    def read_soft_ownership_id(self) -> ObjectId:
        raise self._unsupported("read_soft_ownership_id")

    def read_soft_pointer_id(self) -> ObjectId:
        raise self._unsupported("read_soft_pointer_id")

    def read_string(self) -> str:
        raise self._unsupported("read_string")

    def read_uint16(self) -> int:
        raise self._unsupported("read_uint16")

    def read_uint32(self) -> int:
        raise self._unsupported("read_uint32")

    def read_uint64(self) -> int:
        raise self._unsupported("read_uint64")

    def read_vector2d(self) -> Vector2d:
        raise self._unsupported("read_vector2d")

    def read_vector3d(self) -> Vector3d:
        raise self._unsupported("read_vector3d")
