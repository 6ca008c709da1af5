"""
Contracts Layer

Immutable data types shared by every other layer:
error data, exceptions, identifiers, geometry, tag vocabularies and
tagged values. Nothing here depends on the log, filer or translation
layers.
"""

from .base import Error, ErrorCode, FilerStatus, FilerType, Result
from .errors import (
    ArgumentInvalid,
    EndOfData,
    Faulted,
    FilerError,
    ReadOnlyViolation,
    TranslationUnsupported,
    TypeMismatch,
    Unsupported,
    exception_for,
    raise_for,
)
from .geometry import Point2d, Point3d, Scale3d, Vector2d, Vector3d
from .identifiers import Address, Handle, ObjectId
from .tags import InterchangeTag, TypeTag, conforms, representation_of
from .values import InterchangeValue, TaggedValue

__all__ = [
    'Error',
    'ErrorCode',
    'FilerStatus',
    'FilerType',
    'Result',
    'ArgumentInvalid',
    'EndOfData',
    'Faulted',
    'FilerError',
    'ReadOnlyViolation',
    'TranslationUnsupported',
    'TypeMismatch',
    'Unsupported',
    'exception_for',
    'raise_for',
    'Point2d',
    'Point3d',
    'Scale3d',
    'Vector2d',
    'Vector3d',
    'Address',
    'Handle',
    'ObjectId',
    'InterchangeTag',
    'TypeTag',
    'conforms',
    'representation_of',
    'InterchangeValue',
    'TaggedValue',
]
