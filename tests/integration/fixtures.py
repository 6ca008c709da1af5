"""
Producer Fixtures

Sample producers that serialize through the filer protocol.

RULES:
======
1. Every producer writes and reads in the same fixed order
2. Values are EXPLICIT, not random
3. Producers never inspect the filer beyond the protocol
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from filerlog import (
    Address, Handle, ObjectId, Point2d, Point3d, Scale3d, Vector2d, Vector3d,
)


def object_id(value: int) -> ObjectId:
    return ObjectId(Handle(value))


# =============================================================================
# FULL-PROTOCOL PRODUCER
# =============================================================================

@dataclass
class EveryKindRecord:
    """Producer exercising every write entry point exactly once."""
    flag: bool = True
    tiny: int = -8
    octet: int = 200
    short: int = -1234
    count: int = 123456
    big: int = -(2 ** 40)
    ushort: int = 65535
    uint: int = 4_000_000_000
    ulong: int = 2 ** 63
    ratio: float = 0.25
    name: str = "Layer-0"
    chunk: bytes = b"\x00\x01\x02"
    payload: bytes = b"payload"
    handle: Handle = field(default_factory=lambda: Handle(0x2A))
    owner: ObjectId = field(default_factory=lambda: object_id(0x10))
    soft_owner: ObjectId = field(default_factory=lambda: object_id(0x11))
    pointer: ObjectId = field(default_factory=lambda: object_id(0x12))
    soft_pointer: ObjectId = field(default_factory=lambda: object_id(0x13))
    origin2: Point2d = field(default_factory=lambda: Point2d(1.0, 2.0))
    origin3: Point3d = field(default_factory=lambda: Point3d(1.0, 2.0, 3.0))
    direction2: Vector2d = field(default_factory=lambda: Vector2d(0.0, 1.0))
    normal: Vector3d = field(default_factory=lambda: Vector3d(0.0, 0.0, 1.0))
    scale: Scale3d = field(default_factory=lambda: Scale3d(1.0, 2.0, 3.0))
    address: Address = field(default_factory=lambda: Address(0xDEADBEEF))

    def file_out(self, filer) -> None:
        filer.write_boolean(self.flag)
        filer.write_int8(self.tiny)
        filer.write_byte(self.octet)
        filer.write_int16(self.short)
        filer.write_int32(self.count)
        filer.write_int64(self.big)
        filer.write_uint16(self.ushort)
        filer.write_uint32(self.uint)
        filer.write_uint64(self.ulong)
        filer.write_double(self.ratio)
        filer.write_string(self.name)
        filer.write_binary_chunk(self.chunk)
        filer.write_bytes(self.payload)
        filer.write_handle(self.handle)
        filer.write_hard_ownership_id(self.owner)
        filer.write_soft_ownership_id(self.soft_owner)
        filer.write_hard_pointer_id(self.pointer)
        filer.write_soft_pointer_id(self.soft_pointer)
        filer.write_point2d(self.origin2)
        filer.write_point3d(self.origin3)
        filer.write_vector2d(self.direction2)
        filer.write_vector3d(self.normal)
        filer.write_scale3d(self.scale)
        filer.write_address(self.address)

    def file_in(self, filer) -> None:
        self.flag = filer.read_boolean()
        self.tiny = filer.read_int8()
        self.octet = filer.read_byte()
        self.short = filer.read_int16()
        self.count = filer.read_int32()
        self.big = filer.read_int64()
        self.ushort = filer.read_uint16()
        self.uint = filer.read_uint32()
        self.ulong = filer.read_uint64()
        self.ratio = filer.read_double()
        self.name = filer.read_string()
        self.chunk = filer.read_binary_chunk()
        self.payload = filer.read_bytes()
        self.handle = filer.read_handle()
        self.owner = filer.read_hard_ownership_id()
        self.soft_owner = filer.read_soft_ownership_id()
        self.pointer = filer.read_hard_pointer_id()
        self.soft_pointer = filer.read_soft_pointer_id()
        self.origin2 = filer.read_point2d()
        self.origin3 = filer.read_point3d()
        self.direction2 = filer.read_vector2d()
        self.normal = filer.read_vector3d()
        self.scale = filer.read_scale3d()
        self.address = filer.read_address()


EVERY_KIND_COUNT = 24


# =============================================================================
# SMALL PRODUCERS
# =============================================================================

@dataclass
class LineRecord:
    """Translatable producer: every value has an interchange counterpart."""
    layer: str = "Walls"
    color: int = 7
    start: Point3d = field(default_factory=lambda: Point3d(0.0, 0.0, 0.0))
    end: Point3d = field(default_factory=lambda: Point3d(10.0, 5.0, 0.0))
    owner: ObjectId = field(default_factory=lambda: object_id(0x1F))
    visible: bool = True

    def file_out(self, filer) -> None:
        filer.write_string(self.layer)
        filer.write_int16(self.color)
        filer.write_point3d(self.start)
        filer.write_point3d(self.end)
        filer.write_soft_pointer_id(self.owner)
        filer.write_boolean(self.visible)

    def file_in(self, filer) -> None:
        self.layer = filer.read_string()
        self.color = filer.read_int16()
        self.start = filer.read_point3d()
        self.end = filer.read_point3d()
        self.owner = filer.read_soft_pointer_id()
        self.visible = filer.read_boolean()


@dataclass
class VersionedRecord:
    """Reads its fields in a different order than it writes them."""
    version: int = 3
    label: str = "v3"

    def file_out(self, filer) -> None:
        filer.write_int32(self.version)
        filer.write_string(self.label)

    def file_in(self, filer) -> None:
        self.label = filer.read_string()
        self.version = filer.read_int32()


@dataclass
class GreedyReader:
    """Reads one value more than VersionedRecord writes."""
    values: List[object] = field(default_factory=list)

    def file_in(self, filer) -> None:
        self.values.append(filer.read_int32())
        self.values.append(filer.read_string())
        self.values.append(filer.read_string())


class FailingProducer:
    """Writes two values, then fails."""

    def file_out(self, filer) -> None:
        filer.write_int32(1)
        filer.write_string("partial")
        raise RuntimeError("producer failed mid-pass")


@dataclass
class LeakyProducer:
    """Keeps a reference to the filer it was given."""
    filer: Optional[object] = None

    def file_out(self, filer) -> None:
        self.filer = filer
        filer.write_int32(42)
