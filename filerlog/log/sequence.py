"""
Tagged Value Sequence
=====================

Append-only, then sealed, storage of captured values.

INVARIANTS:
- No updates or deletes - append only
- Appends are rejected once sealed
- Sealing is one-way and idempotent
- Read state (position, fault) never lives here; every reader gets
  its own ReadCursor over the shared elements

LIFECYCLE:
1. Created empty and building by a capture session
2. Populated only through a CaptureAdapter during one producer pass
3. Sealed immediately after that pass
4. Consumed read-only (enumerated, indexed, replayed) from then on
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import (
    Any, Callable, Dict, FrozenSet, Iterable, Iterator, List, Optional,
    Sequence, Tuple,
)

from ..config import DEFAULT_CONFIG, FilerConfig
from ..contracts.errors import ArgumentInvalid, ReadOnlyViolation, Unsupported
from ..contracts.tags import InterchangeTag, TypeTag
from ..contracts.values import InterchangeValue, TaggedValue
from ..translation.table import TagTranslationTable
from .cursor import ReadCursor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SequenceState:
    """Immutable snapshot of sequence state."""
    length: int
    sealed: bool
    included_types: FrozenSet[TypeTag]

    @staticmethod
    def empty() -> SequenceState:
        return SequenceState(length=0, sealed=False, included_types=frozenset())


class TaggedValueSequence:
    """
    Ordered log of TaggedValue.

    GUARANTEES:
    ===========
    1. Elements are never replaced or removed
    2. append() fails with ReadOnlyViolation after seal()
    3. A rejected append leaves length and contents unchanged
    4. Indexed access and export never move any cursor

    Not thread-safe: exactly one writer while building. A sealed
    sequence can be shared by any number of readers.
    """

    def __init__(self, config: Optional[FilerConfig] = None):
        self._items: List[TaggedValue] = []
        self._sealed = False
        self._config = config or DEFAULT_CONFIG
        self._interchange: Dict[TagTranslationTable, Tuple[InterchangeValue, ...]] = {}

    @classmethod
    def from_values(
        cls,
        items: Iterable[TaggedValue],
        config: Optional[FilerConfig] = None
    ) -> TaggedValueSequence:
        """Build a sealed sequence from already tagged values."""
        sequence = cls(config)
        for item in items:
            sequence.append_item(item)
        sequence.seal()
        return sequence

    @classmethod
    def from_interchange(
        cls,
        records: Iterable[InterchangeValue],
        hints: Optional[Sequence[Optional[TypeTag]]] = None,
        table: Optional[TagTranslationTable] = None,
        config: Optional[FilerConfig] = None
    ) -> TaggedValueSequence:
        """
        Build a sealed sequence from externally authored interchange data.

        Collapsed codes resolve to the table's defaults unless `hints`
        names the intended tag at that position.
        """
        config = config or DEFAULT_CONFIG
        table = table or TagTranslationTable.from_config(config)
        records = list(records)
        if hints is not None and len(hints) != len(records):
            raise ValueError(
                f"hints length {len(hints)} does not match record count {len(records)}"
            )
        items = [
            table.reconstruct(record, hints[i] if hints is not None else None)
            for i, record in enumerate(records)
        ]
        return cls.from_values(items, config)

    # -------------------------------------------------------------------------
    # Append phase
    # -------------------------------------------------------------------------

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    @property
    def config(self) -> FilerConfig:
        return self._config

    @property
    def state(self) -> SequenceState:
        """Get current sequence state (immutable snapshot)."""
        return SequenceState(
            length=len(self._items),
            sealed=self._sealed,
            included_types=self.included_types()
        )

    def append(self, tag: TypeTag, value: Any) -> TaggedValue:
        """
        Append a value under `tag`.

        This is the ONLY write operation. Validation happens before
        the list is touched.
        """
        self._check_building()
        return self._push(TaggedValue(tag, value))

    def append_item(self, item: TaggedValue) -> TaggedValue:
        self._check_building()
        if not isinstance(item, TaggedValue):
            raise ArgumentInvalid(f"expected a TaggedValue, got {type(item).__name__}")
        return self._push(item)

    def seal(self) -> None:
        """Transition to read-only. Idempotent."""
        if self._sealed:
            return
        self._sealed = True
        logger.debug("Sealed sequence with %d values", len(self._items))

    def _check_building(self) -> None:
        if self._sealed:
            raise ReadOnlyViolation("The sequence is sealed and read-only")

    def _push(self, item: TaggedValue) -> TaggedValue:
        self._items.append(item)
        return item

    def __setitem__(self, index: int, value: Any) -> None:
        raise ReadOnlyViolation("The sequence is read-only")

    def __delitem__(self, index: int) -> None:
        raise ReadOnlyViolation("The sequence is read-only")

    # -------------------------------------------------------------------------
    # Read phase
    # -------------------------------------------------------------------------

    def cursor(self, config: Optional[FilerConfig] = None) -> ReadCursor:
        """New independent read cursor at position 0."""
        if not self._sealed:
            raise Unsupported("Cannot read a sequence that is still being built")
        return ReadCursor(self._items, config or self._config)

    # -------------------------------------------------------------------------
    # Export surface
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TaggedValue]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __getitem__(self, index: int) -> TaggedValue:
        return self._items[self._check_index(index)]

    def _check_index(self, index: int) -> int:
        if index < 0 or index > len(self._items) - 1:
            raise IndexError(f"index = {index} count = {len(self._items)}")
        return index

    def value_at(self, index: int) -> Any:
        return self[index].value

    def tag_at(self, index: int) -> TypeTag:
        return self[index].tag

    def values(self) -> List[Any]:
        """Snapshot copy of all values in order."""
        return [item.value for item in self._items]

    def included_types(self) -> FrozenSet[TypeTag]:
        """The distinct set of tags present."""
        return frozenset(item.tag for item in self._items)

    def contains_tag(self, tag: TypeTag) -> bool:
        return self.index_of_tag(tag) > -1

    def index_of_tag(self, tag: TypeTag) -> int:
        return self.find_index(lambda item: item.tag == tag)

    def index_of_value(self, value: Any) -> int:
        # 1, 1.0 and True are distinct captured values
        return self.find_index(
            lambda item: type(item.value) is type(value) and item.value == value
        )

    def index_of(self, item: TaggedValue) -> int:
        return self.find_index(lambda candidate: candidate == item)

    def find_index(self, predicate: Callable[[TaggedValue], bool]) -> int:
        """First index matching `predicate`, or -1."""
        for i, item in enumerate(self._items):
            if predicate(item):
                return i
        return -1

    def to_interchange(
        self,
        table: Optional[TagTranslationTable] = None
    ) -> Tuple[InterchangeValue, ...]:
        """
        Translate every element for consumers of the interchange format.

        Cached per table once sealed. Raises TranslationUnsupported if any
        element has no interchange counterpart.
        """
        table = table or TagTranslationTable.from_config(self._config)
        cached = self._interchange.get(table)
        if cached is not None:
            return cached
        records = table.translate_all(self._items)
        if self._sealed:
            self._interchange[table] = records
        return records

    def interchange_tags(
        self,
        table: Optional[TagTranslationTable] = None
    ) -> Tuple[InterchangeTag, ...]:
        return tuple(record.code for record in self.to_interchange(table))

    def __repr__(self) -> str:
        state = "sealed" if self._sealed else "building"
        return f"TaggedValueSequence({state}, count={len(self._items)})"
