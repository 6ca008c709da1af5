"""
Tag Vocabularies
================

Two independent tag vocabularies:

- TypeTag: the engine's internal, closed tag set. One tag per filer
  entry point. Adding a tag is a protocol versioning event.
- InterchangeTag: external group codes of the legacy interchange
  format. Not in bijection with TypeTag (see translation.table).

INVARIANTS:
- Every TypeTag except NULL has exactly one representation type
- Integer tags are range-checked against their fixed width
- bool is never accepted where an integer is expected
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Type

import numpy as np

from .geometry import Point2d, Point3d, Scale3d, Vector2d, Vector3d
from .identifiers import Address, Handle, ObjectId


class TypeTag(IntEnum):
    """Semantic kind of a captured value."""
    NULL = 0
    REAL = 1
    INT32 = 2
    INT16 = 3
    INT8 = 4
    TEXT = 5
    BINARY_CHUNK = 6
    HANDLE = 7
    HARD_OWNERSHIP_ID = 8
    SOFT_OWNERSHIP_ID = 9
    HARD_POINTER_ID = 10
    SOFT_POINTER_ID = 11
    REAL3 = 12
    INT64 = 13
    NOT_RECOGNIZED = 19

    # Application-specific tags
    POINT3D = 20
    POINT2D = 21
    BYTE_ARRAY = 22
    BYTE = 23
    BOOL = 24
    ADDRESS = 25
    SCALE3D = 26
    VECTOR3D = 27
    VECTOR2D = 28
    UINT16 = 29
    UINT32 = 30
    UINT64 = 31


class InterchangeTag(IntEnum):
    """Group codes of the legacy interchange vocabulary."""
    TEXT = 1
    HANDLE = 5
    X_COORDINATE = 10
    REAL = 40
    X_SCALE_FACTOR = 41
    INT16 = 70
    INT32 = 90
    INT64 = 160
    NORMAL_X = 210
    INT8 = 280
    BOOL = 290
    BINARY_CHUNK = 310
    SOFT_POINTER_ID = 330
    HARD_POINTER_ID = 340
    SOFT_OWNERSHIP_ID = 350
    HARD_OWNERSHIP_ID = 360
    EXTENDED_DATA_INTEGER32 = 1071


# =============================================================================
# REPRESENTATION TYPES
# =============================================================================

@dataclass(frozen=True)
class Representation:
    """
    Python representation of a tag's values.

    `bounds` is set for fixed-width integers.
    """
    python_type: Optional[Type]
    bounds: Optional[Tuple[int, int]] = None

    @property
    def name(self) -> str:
        if self.python_type is None:
            return "null"
        return self.python_type.__name__

    def conforms(self, value: object) -> bool:
        if value is None or self.python_type is None:
            return False
        if self.python_type is object:
            return True
        if self.python_type is int and isinstance(value, bool):
            return False
        if not isinstance(value, self.python_type):
            return False
        if self.bounds is not None:
            low, high = self.bounds
            return low <= value <= high
        return True


def _integer(dtype) -> Representation:
    info = np.iinfo(dtype)
    return Representation(int, (int(info.min), int(info.max)))


_REPRESENTATIONS: Mapping[TypeTag, Representation] = MappingProxyType({
    TypeTag.NULL: Representation(None),
    TypeTag.BOOL: Representation(bool),
    TypeTag.INT8: _integer(np.int8),
    TypeTag.INT16: _integer(np.int16),
    TypeTag.INT32: _integer(np.int32),
    TypeTag.INT64: _integer(np.int64),
    TypeTag.BYTE: _integer(np.uint8),
    TypeTag.UINT16: _integer(np.uint16),
    TypeTag.UINT32: _integer(np.uint32),
    TypeTag.UINT64: _integer(np.uint64),
    TypeTag.REAL: Representation(float),
    TypeTag.TEXT: Representation(str),
    TypeTag.BINARY_CHUNK: Representation(bytes),
    TypeTag.BYTE_ARRAY: Representation(bytes),
    TypeTag.HANDLE: Representation(Handle),
    TypeTag.HARD_OWNERSHIP_ID: Representation(ObjectId),
    TypeTag.SOFT_OWNERSHIP_ID: Representation(ObjectId),
    TypeTag.HARD_POINTER_ID: Representation(ObjectId),
    TypeTag.SOFT_POINTER_ID: Representation(ObjectId),
    TypeTag.REAL3: Representation(Point3d),
    TypeTag.POINT3D: Representation(Point3d),
    TypeTag.POINT2D: Representation(Point2d),
    TypeTag.VECTOR2D: Representation(Vector2d),
    TypeTag.VECTOR3D: Representation(Vector3d),
    TypeTag.SCALE3D: Representation(Scale3d),
    TypeTag.ADDRESS: Representation(Address),
    TypeTag.NOT_RECOGNIZED: Representation(object),
})


def representation_of(tag: TypeTag) -> Representation:
    return _REPRESENTATIONS[tag]


def conforms(tag: TypeTag, value: object) -> bool:
    """Whether `value` is a valid representation for `tag`."""
    return _REPRESENTATIONS[tag].conforms(value)


def type_name(value: object) -> str:
    return type(value).__name__
