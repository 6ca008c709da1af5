"""
Tag Translation Table
=====================

Bridges the internal TypeTag vocabulary to the legacy interchange
vocabulary (InterchangeTag).

The mapping is NOT a bijection. Preserved, non-corrected cases:

- BOOL is emitted as a narrow integer 0/1, not a native boolean
- HARD_POINTER_ID and SOFT_POINTER_ID both map to SOFT_POINTER_ID
- POINT2D, POINT3D and REAL3 all map to X_COORDINATE; a POINT2D value
  is lifted to a Point3d and its dimensionality is lost
- BYTE and INT8 both map to INT8
- HANDLE values are textualized
- ADDRESS maps to EXTENDED_DATA_INTEGER32 only when explicitly enabled;
  the code has no semantic counterpart for consumers

Tags with no counterpart (NULL, NOT_RECOGNIZED, BYTE_ARRAY, VECTOR2D,
unsigned integers, and ADDRESS by default) raise TranslationUnsupported.

The reverse direction (to_internal) is a partial, lossy inverse used only
when reconstructing values from externally authored interchange data.
Collapsed codes resolve to a fixed default unless the caller supplies a
hint naming one of the collapsed tags.
"""

from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Callable, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

from ..config import FilerConfig
from ..contracts.errors import ArgumentInvalid, TranslationUnsupported
from ..contracts.geometry import Point2d, Point3d
from ..contracts.identifiers import Address, Handle
from ..contracts.tags import InterchangeTag, TypeTag, conforms
from ..contracts.values import InterchangeValue, TaggedValue

logger = logging.getLogger(__name__)


# =============================================================================
# FORWARD MAPPING
# =============================================================================

_FORWARD: Mapping[TypeTag, InterchangeTag] = MappingProxyType({
    TypeTag.BOOL: InterchangeTag.BOOL,
    TypeTag.BYTE: InterchangeTag.INT8,
    TypeTag.INT8: InterchangeTag.INT8,
    TypeTag.INT16: InterchangeTag.INT16,
    TypeTag.INT32: InterchangeTag.INT32,
    TypeTag.INT64: InterchangeTag.INT64,
    TypeTag.REAL: InterchangeTag.REAL,
    TypeTag.TEXT: InterchangeTag.TEXT,
    TypeTag.BINARY_CHUNK: InterchangeTag.BINARY_CHUNK,
    TypeTag.HANDLE: InterchangeTag.HANDLE,
    TypeTag.HARD_OWNERSHIP_ID: InterchangeTag.HARD_OWNERSHIP_ID,
    TypeTag.SOFT_OWNERSHIP_ID: InterchangeTag.SOFT_OWNERSHIP_ID,
    TypeTag.HARD_POINTER_ID: InterchangeTag.SOFT_POINTER_ID,
    TypeTag.SOFT_POINTER_ID: InterchangeTag.SOFT_POINTER_ID,
    TypeTag.POINT3D: InterchangeTag.X_COORDINATE,
    TypeTag.POINT2D: InterchangeTag.X_COORDINATE,
    TypeTag.REAL3: InterchangeTag.X_COORDINATE,
    TypeTag.VECTOR3D: InterchangeTag.NORMAL_X,
    TypeTag.SCALE3D: InterchangeTag.X_SCALE_FACTOR,
})

_ADDRESS_CODE = InterchangeTag.EXTENDED_DATA_INTEGER32

# Value re-encoding applied on the way out; identity when absent.
_ENCODERS: Mapping[TypeTag, Callable[[object], object]] = MappingProxyType({
    TypeTag.BOOL: lambda value: 1 if value else 0,
    TypeTag.HANDLE: str,
    TypeTag.POINT2D: lambda value: value.to_point3d(),
    TypeTag.ADDRESS: lambda value: value.value,
})


# =============================================================================
# REVERSE MAPPING
# =============================================================================

# Chosen tag when several internal tags collapse onto one code.
_REVERSE_DEFAULTS: Mapping[InterchangeTag, TypeTag] = MappingProxyType({
    InterchangeTag.SOFT_POINTER_ID: TypeTag.HARD_POINTER_ID,
    InterchangeTag.X_COORDINATE: TypeTag.REAL3,
    InterchangeTag.INT8: TypeTag.INT8,
})


def _decode_bool(value: object) -> object:
    if isinstance(value, bool):
        return value
    if value in (0, 1):
        return bool(value)
    raise ArgumentInvalid(f"interchange boolean must be 0 or 1, got {value!r}")


def _decode_handle(value: object) -> object:
    if isinstance(value, Handle):
        return value
    try:
        return Handle.parse(value)
    except (TypeError, ValueError) as exc:
        raise ArgumentInvalid(f"invalid handle text {value!r}") from exc


def _decode_point2d(value: object) -> object:
    if isinstance(value, Point3d):
        return Point2d(value.x, value.y)
    return value


def _decode_address(value: object) -> object:
    if isinstance(value, int) and not isinstance(value, bool):
        return Address(value)
    return value


_DECODERS: Mapping[TypeTag, Callable[[object], object]] = MappingProxyType({
    TypeTag.BOOL: _decode_bool,
    TypeTag.HANDLE: _decode_handle,
    TypeTag.POINT2D: _decode_point2d,
    TypeTag.ADDRESS: _decode_address,
})


def _decode(tag: TypeTag, value: object) -> object:
    decode = _DECODERS.get(tag)
    return decode(value) if decode else value


def _decodes_as(tag: TypeTag, value: object) -> bool:
    try:
        return conforms(tag, _decode(tag, value))
    except ArgumentInvalid:
        return False


class TagTranslationTable:
    """
    Immutable translation between TypeTag and InterchangeTag.

    GUARANTEES:
    ===========
    1. Stateless after construction - safe to share process-wide
    2. Unsupported tags fail with TranslationUnsupported, never a guess
    3. Reverse lookups never claim to recover a collapsed distinction
       without a caller-supplied hint
    """

    def __init__(self, translate_addresses: bool = False):
        forward: Dict[TypeTag, InterchangeTag] = dict(_FORWARD)
        if translate_addresses:
            forward[TypeTag.ADDRESS] = _ADDRESS_CODE
        self._forward: Mapping[TypeTag, InterchangeTag] = MappingProxyType(forward)

        reverse: Dict[InterchangeTag, FrozenSet[TypeTag]] = {}
        for tag, code in forward.items():
            reverse[code] = reverse.get(code, frozenset()) | {tag}
        self._reverse: Mapping[InterchangeTag, FrozenSet[TypeTag]] = MappingProxyType(reverse)
        self._translate_addresses = translate_addresses

    @staticmethod
    def from_config(config: FilerConfig) -> TagTranslationTable:
        if config.translate_addresses:
            return ADDRESS_TRANSLATION_TABLE
        return DEFAULT_TRANSLATION_TABLE

    @property
    def translates_addresses(self) -> bool:
        return self._translate_addresses

    def supports(self, tag: TypeTag) -> bool:
        return tag in self._forward

    # -------------------------------------------------------------------------
    # Internal -> interchange
    # -------------------------------------------------------------------------

    def to_interchange(self, tag: TypeTag) -> InterchangeTag:
        """Interchange code for `tag`; raises TranslationUnsupported."""
        code = self._forward.get(tag)
        if code is None:
            raise TranslationUnsupported(f"Unsupported data type: {TypeTag(tag).name}")
        return code

    def translate(self, item: TaggedValue) -> InterchangeValue:
        """Translate one tagged value, re-encoding its value where required."""
        code = self.to_interchange(item.tag)
        encode = _ENCODERS.get(item.tag)
        value = encode(item.value) if encode else item.value
        return InterchangeValue(code=code, value=value)

    def translate_all(self, items: Iterable[TaggedValue]) -> Tuple[InterchangeValue, ...]:
        """
        Translate in order. The first unsupported tag aborts the whole
        translation; no partial output is returned.
        """
        return tuple(self.translate(item) for item in items)

    # -------------------------------------------------------------------------
    # Interchange -> internal (partial, lossy)
    # -------------------------------------------------------------------------

    def collapsed_tags(self, code: InterchangeTag) -> FrozenSet[TypeTag]:
        """All internal tags that translate to `code` (empty if none)."""
        return self._reverse.get(code, frozenset())

    def to_internal(
        self,
        code: InterchangeTag,
        hint: Optional[TypeTag] = None
    ) -> TypeTag:
        """
        Reconstruct an internal tag from an interchange code.

        Args:
            code: Interchange code read from external data.
            hint: Disambiguating tag, e.g. the accessor that will read it.
                  Must be one of collapsed_tags(code).
        """
        candidates = self.collapsed_tags(code)
        if not candidates:
            raise TranslationUnsupported(f"Unsupported interchange code: {int(code)}")

        if hint is not None:
            if hint not in candidates:
                raise TranslationUnsupported(
                    f"{TypeTag(hint).name} cannot be reconstructed from interchange code "
                    f"{InterchangeTag(code).name}"
                )
            return hint

        if len(candidates) == 1:
            return next(iter(candidates))
        default = _REVERSE_DEFAULTS[code]
        logger.debug(
            "Interchange code %s is ambiguous (%s); using %s",
            InterchangeTag(code).name,
            sorted(t.name for t in candidates),
            default.name,
        )
        return default

    def reconstruct(
        self,
        item: InterchangeValue,
        hint: Optional[TypeTag] = None
    ) -> TaggedValue:
        """
        Rebuild a TaggedValue from an interchange record.

        Without a hint, a value the default tag cannot hold (e.g. a byte
        above 127 under INT8) resolves to the first other collapsed tag
        that can hold it. A hint is always taken as given.
        """
        tag = self.to_internal(item.code, hint)
        if hint is None and not _decodes_as(tag, item.value):
            for candidate in sorted(self.collapsed_tags(item.code) - {tag}):
                if _decodes_as(candidate, item.value):
                    logger.debug(
                        "Value %r does not fit %s; using %s",
                        item.value, tag.name, candidate.name,
                    )
                    tag = candidate
                    break
        return TaggedValue(tag, _decode(tag, item.value))


DEFAULT_TRANSLATION_TABLE = TagTranslationTable()
ADDRESS_TRANSLATION_TABLE = TagTranslationTable(translate_addresses=True)
