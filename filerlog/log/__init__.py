"""
Log Layer
=========

Append-only storage of captured values and sequential readers.

INVARIANTS:
- A sequence is written by exactly one capture pass, then sealed
- No mutation of stored elements
- Read state belongs to a cursor, never to the sequence

Modules:
- sequence: TaggedValueSequence (append, seal, export)
- cursor: ReadCursor (type-checked sequential reads, sticky faults)
"""

from .cursor import Fault, ReadCursor
from .sequence import SequenceState, TaggedValueSequence

__all__ = [
    'Fault',
    'ReadCursor',
    'SequenceState',
    'TaggedValueSequence',
]
