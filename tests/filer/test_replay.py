"""
Replay Adapter Tests
====================

INVARIANTS TESTED:
1. Reads return values in capture order, type-checked by entry point
2. read_bytes_into never consumes a value that does not fit
3. Status reflects the cursor's recorded fault
"""

import pytest

from filerlog.contracts import (
    ArgumentInvalid,
    EndOfData,
    Faulted,
    FilerStatus,
    TypeMismatch,
    TypeTag,
    Unsupported,
)
from filerlog.filer import ReplayAdapter
from filerlog.log import TaggedValueSequence


def make_adapter(*pairs) -> ReplayAdapter:
    """Factory for adapters over a sealed sequence."""
    sequence = TaggedValueSequence()
    for tag, value in pairs:
        sequence.append(tag, value)
    sequence.seal()
    return ReplayAdapter(sequence)


class TestReads:
    """Read entry points."""

    def test_reads_in_order(self):
        adapter = make_adapter(
            (TypeTag.INT16, 5),
            (TypeTag.TEXT, "a"),
            (TypeTag.REAL, 0.5),
        )

        assert adapter.read_int16() == 5
        assert adapter.read_string() == "a"
        assert adapter.read_double() == 0.5
        assert adapter.is_end_of_data

    def test_wrong_entry_point_is_mismatch(self):
        adapter = make_adapter((TypeTag.BYTE, 7), (TypeTag.INT8, 7))

        with pytest.raises(TypeMismatch):
            adapter.read_int8()

        assert adapter.position == 0
        assert adapter.filer_status == FilerStatus.TYPE_MISMATCH

    def test_reset_filer_status_allows_retry(self):
        adapter = make_adapter((TypeTag.BYTE, 7), (TypeTag.INT8, 7))

        with pytest.raises(TypeMismatch):
            adapter.read_int8()
        with pytest.raises(Faulted):
            adapter.read_byte()

        adapter.reset_filer_status()
        assert adapter.filer_status == FilerStatus.OK
        assert adapter.read_byte() == 7

    def test_peek_and_rewind(self):
        adapter = make_adapter((TypeTag.INT32, 1), (TypeTag.INT32, 2))

        assert adapter.peek().value == 1
        adapter.read_int32()
        assert adapter.peek() is None

        adapter.rewind()
        assert adapter.position == 0

    def test_independent_adapters(self):
        first = make_adapter((TypeTag.INT32, 1))
        second = ReplayAdapter(first.sequence)

        first.read_int32()
        assert second.position == 0
        assert second.read_int32() == 1


class TestReadBytesInto:
    """Caller-supplied buffers."""

    def test_copies_into_buffer(self):
        adapter = make_adapter((TypeTag.BYTE_ARRAY, b"abc"))
        buffer = bytearray(5)

        count = adapter.read_bytes_into(buffer)

        assert count == 3
        assert bytes(buffer) == b"abc\x00\x00"
        assert adapter.position == 1

    def test_too_small_buffer_does_not_advance(self):
        adapter = make_adapter((TypeTag.BYTE_ARRAY, b"abcdef"))
        buffer = bytearray(2)

        with pytest.raises(ArgumentInvalid):
            adapter.read_bytes_into(buffer)

        assert adapter.position == 0
        assert bytes(buffer) == b"\x00\x00"
        assert adapter.filer_status == FilerStatus.OK
        assert adapter.read_bytes() == b"abcdef"

    def test_readonly_buffer_rejected(self):
        adapter = make_adapter((TypeTag.BYTE_ARRAY, b"a"))

        with pytest.raises(ArgumentInvalid):
            adapter.read_bytes_into(b"\x00")

        assert adapter.position == 0

    def test_non_buffer_rejected(self):
        adapter = make_adapter((TypeTag.BYTE_ARRAY, b"a"))
        with pytest.raises(ArgumentInvalid):
            adapter.read_bytes_into([0])

    def test_type_checked(self):
        adapter = make_adapter((TypeTag.BINARY_CHUNK, b"a"))
        with pytest.raises(TypeMismatch):
            adapter.read_bytes_into(bytearray(4))


class TestFilerSurface:
    """Filer-level behavior on the replay side."""

    def test_writes_unsupported(self):
        adapter = make_adapter((TypeTag.INT32, 1))

        with pytest.raises(Unsupported, match="write_int32"):
            adapter.write_int32(2)

        assert len(adapter.sequence) == 1

    def test_seek_unsupported(self):
        adapter = make_adapter((TypeTag.INT32, 1))
        with pytest.raises(Unsupported):
            adapter.seek(0)

    def test_end_of_data_after_exhaustion(self):
        adapter = make_adapter((TypeTag.INT32, 1))
        adapter.read_int32()

        assert adapter.filer_status == FilerStatus.END_OF_DATA
        with pytest.raises(EndOfData):
            adapter.read_int32()

    def test_requires_sealed_sequence(self):
        sequence = TaggedValueSequence()
        sequence.append(TypeTag.INT32, 1)

        with pytest.raises(Unsupported):
            ReplayAdapter(sequence)
