"""
filerlog
========

Capture and replay of typed values exchanged with an opaque producer
through a fixed filer protocol.

INVARIANTS:
- A capture pass appends values in call order, then the log is sealed
- A sealed log is never mutated
- Replay is type-checked; failures are sticky until explicitly cleared
- Translation to the interchange vocabulary is lossy by definition

Layers:
- contracts: immutable data types, errors, tag vocabularies
- log: TaggedValueSequence and per-reader ReadCursor
- translation: TagTranslationTable
- filer: Filer protocol, CaptureAdapter, ReplayAdapter
- session: capture / replay entry points
"""

from .config import DEFAULT_CONFIG, FilerConfig
from .contracts import (
    Address,
    ArgumentInvalid,
    EndOfData,
    Error,
    ErrorCode,
    Faulted,
    FilerError,
    FilerStatus,
    FilerType,
    Handle,
    InterchangeTag,
    InterchangeValue,
    ObjectId,
    Point2d,
    Point3d,
    ReadOnlyViolation,
    Result,
    Scale3d,
    TaggedValue,
    TranslationUnsupported,
    TypeMismatch,
    TypeTag,
    Unsupported,
    Vector2d,
    Vector3d,
)
from .filer import CaptureAdapter, Filer, ReplayAdapter
from .log import Fault, ReadCursor, SequenceState, TaggedValueSequence
from .observability import PassKind, SessionTrace, TraceCollector
from .session import (
    CaptureSession,
    ReadableProducer,
    ReplaySession,
    WritableProducer,
    capture,
    replay,
    to_interchange_array,
)
from .translation import (
    ADDRESS_TRANSLATION_TABLE,
    DEFAULT_TRANSLATION_TABLE,
    TagTranslationTable,
)

__all__ = [
    'DEFAULT_CONFIG',
    'FilerConfig',
    'Address',
    'ArgumentInvalid',
    'EndOfData',
    'Error',
    'ErrorCode',
    'Faulted',
    'FilerError',
    'FilerStatus',
    'FilerType',
    'Handle',
    'InterchangeTag',
    'InterchangeValue',
    'ObjectId',
    'Point2d',
    'Point3d',
    'ReadOnlyViolation',
    'Result',
    'Scale3d',
    'TaggedValue',
    'TranslationUnsupported',
    'TypeMismatch',
    'TypeTag',
    'Unsupported',
    'Vector2d',
    'Vector3d',
    'CaptureAdapter',
    'Filer',
    'ReplayAdapter',
    'Fault',
    'ReadCursor',
    'SequenceState',
    'TaggedValueSequence',
    'PassKind',
    'SessionTrace',
    'TraceCollector',
    'CaptureSession',
    'ReadableProducer',
    'ReplaySession',
    'WritableProducer',
    'capture',
    'replay',
    'to_interchange_array',
    'ADDRESS_TRANSLATION_TABLE',
    'DEFAULT_TRANSLATION_TABLE',
    'TagTranslationTable',
]
