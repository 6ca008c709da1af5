"""
Capture / Replay Round Trip Tests

AXIOMS UNDER TEST:
==================
1. Values written v1..vn replay as v1..vn, then EndOfData
2. A sealed capture rejects every further write
3. Sessions run once and leave a trace
"""

import pytest

from filerlog import (
    ArgumentInvalid,
    CaptureSession,
    EndOfData,
    ErrorCode,
    FilerConfig,
    FilerStatus,
    InterchangeTag,
    PassKind,
    ReadOnlyViolation,
    ReplaySession,
    TraceCollector,
    TranslationUnsupported,
    TypeMismatch,
    TypeTag,
    Unsupported,
    capture,
    replay,
    to_interchange_array,
)

from .fixtures import (
    EVERY_KIND_COUNT,
    EveryKindRecord,
    FailingProducer,
    GreedyReader,
    LeakyProducer,
    LineRecord,
    VersionedRecord,
)


# =============================================================================
# ROUND TRIP
# =============================================================================

class TestRoundTrip:
    """Capture then replay reproduces the producer state."""

    def test_every_entry_point_round_trips(self):
        """All typed writes come back through the matching reads."""
        original = EveryKindRecord()
        sequence = capture(original)

        assert sequence.is_sealed
        assert len(sequence) == EVERY_KIND_COUNT

        restored = EveryKindRecord(
            flag=False, tiny=0, octet=0, short=0, count=0, big=0,
            ushort=0, uint=0, ulong=0, ratio=0.0, name="", chunk=b"", payload=b"",
        )
        adapter = replay(sequence, restored)

        assert restored == original
        assert adapter.position == EVERY_KIND_COUNT
        assert adapter.is_end_of_data

    def test_read_after_last_value_is_end_of_data(self):
        """A further read after a full replay fails with EndOfData."""
        sequence = capture(LineRecord())
        adapter = replay(sequence, LineRecord())

        with pytest.raises(EndOfData):
            adapter.read_string()

    def test_exhaustion_is_recorded_as_status(self):
        """Consuming the final value records END_OF_DATA."""
        sequence = capture(LineRecord())
        adapter = replay(sequence, LineRecord())

        assert adapter.filer_status == FilerStatus.END_OF_DATA

    def test_tags_follow_call_order(self):
        """Tags are fixed by the entry points, in call order."""
        sequence = capture(LineRecord())

        assert [item.tag for item in sequence] == [
            TypeTag.TEXT,
            TypeTag.INT16,
            TypeTag.POINT3D,
            TypeTag.POINT3D,
            TypeTag.SOFT_POINTER_ID,
            TypeTag.BOOL,
        ]

    def test_same_sequence_replays_into_many_producers(self):
        """Each replay has its own cursor."""
        sequence = capture(LineRecord(layer="Doors", color=3))

        first = LineRecord()
        second = LineRecord()
        replay(sequence, first)
        replay(sequence, second)

        assert first.layer == second.layer == "Doors"
        assert first.color == second.color == 3


# =============================================================================
# FAILURE MODES
# =============================================================================

class TestReplayFailures:
    """Replay failures surface at the read call."""

    def test_out_of_order_read_is_type_mismatch(self):
        """Reading text where an int32 was written fails at position 0."""
        sequence = capture(VersionedRecord())

        with pytest.raises(TypeMismatch) as exc_info:
            replay(sequence, VersionedRecord())

        assert exc_info.value.position == 0
        assert exc_info.value.expected == TypeTag.TEXT.name
        assert exc_info.value.actual == TypeTag.INT32.name

    def test_overreading_producer_hits_end_of_data(self):
        sequence = capture(VersionedRecord(version=9, label="nine"))
        reader = GreedyReader()

        with pytest.raises(EndOfData):
            replay(sequence, reader)

        assert reader.values == [9, "nine"]

    def test_replay_requires_reading_producer(self):
        sequence = capture(VersionedRecord())

        with pytest.raises(ArgumentInvalid):
            replay(sequence, object())

    def test_replay_requires_sequence(self):
        with pytest.raises(ArgumentInvalid):
            ReplaySession(None, VersionedRecord())
        with pytest.raises(ArgumentInvalid):
            replay([1, "one"], VersionedRecord())


class TestCaptureFailures:
    """Capture failures are explicit and leave a sealed log behind."""

    def test_producer_failure_propagates(self):
        with pytest.raises(RuntimeError):
            capture(FailingProducer())

    def test_none_producer_rejected(self):
        with pytest.raises(ArgumentInvalid):
            capture(None)

    def test_producer_without_write_routine_rejected(self):
        with pytest.raises(ArgumentInvalid):
            CaptureSession(GreedyReader())

    def test_leaked_filer_cannot_write_after_seal(self):
        """A producer holding the filer cannot extend the sealed log."""
        producer = LeakyProducer()
        sequence = capture(producer)

        with pytest.raises(ReadOnlyViolation):
            producer.filer.write_int32(7)

        assert len(sequence) == 1
        assert sequence.values() == [42]


# =============================================================================
# SESSIONS AND TRACES
# =============================================================================

class TestSessions:
    """Sessions run once and are traced."""

    def test_session_runs_exactly_once(self):
        session = CaptureSession(LineRecord())
        session.run()

        with pytest.raises(Unsupported):
            session.run()

    def test_capture_trace_recorded(self):
        collector = TraceCollector()
        capture(LineRecord(), collector=collector)

        traces = collector.get_traces(kind=PassKind.CAPTURE)
        assert len(traces) == 1
        assert traces[0].success
        assert traces[0].value_count == 6
        assert traces[0].producer_type == "LineRecord"
        assert traces[0].duration_ms() >= 0.0

    def test_failed_replay_trace_carries_error_code(self):
        collector = TraceCollector()
        sequence = capture(VersionedRecord())

        session = ReplaySession(sequence, VersionedRecord(), collector=collector)
        with pytest.raises(TypeMismatch):
            session.run()

        failed = collector.get_traces(failed_only=True)
        assert len(failed) == 1
        assert failed[0].kind == PassKind.REPLAY
        assert failed[0].error_code == ErrorCode.TYPE_MISMATCH
        assert session.trace == failed[0]

    def test_failed_capture_trace_counts_partial_values(self):
        collector = TraceCollector()

        with pytest.raises(RuntimeError):
            capture(FailingProducer(), collector=collector)

        trace = collector.get_traces()[0]
        assert not trace.success
        assert trace.value_count == 2
        assert trace.error_code is None

    def test_tracing_can_be_disabled(self):
        collector = TraceCollector()
        session = CaptureSession(
            LineRecord(), FilerConfig(trace_sessions=False), collector
        )
        session.run()

        assert session.trace is None
        assert collector.trace_count == 0


# =============================================================================
# INTERCHANGE EXPORT
# =============================================================================

class TestInterchangeExport:
    """Captured producers can be exported to the interchange vocabulary."""

    def test_line_record_exports(self):
        records = to_interchange_array(LineRecord())

        assert [r.code for r in records] == [
            InterchangeTag.TEXT,
            InterchangeTag.INT16,
            InterchangeTag.X_COORDINATE,
            InterchangeTag.X_COORDINATE,
            InterchangeTag.SOFT_POINTER_ID,
            InterchangeTag.BOOL,
        ]
        assert records[-1].value == 1

    def test_unsupported_value_aborts_export(self):
        """EveryKindRecord writes unsigned integers, which have no code."""
        with pytest.raises(TranslationUnsupported):
            to_interchange_array(EveryKindRecord())
