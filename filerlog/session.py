"""
Capture and Replay Sessions
===========================

Entry points that drive one producer pass each.

CAPTURE FLOW:
1. New building sequence + CaptureAdapter bound to it
2. producer.file_out(adapter) issues typed writes
3. Sequence is sealed (also when the producer fails)
4. Sealed sequence is returned; ownership passes to the caller

REPLAY FLOW:
1. ReplayAdapter with its own cursor over a sealed sequence
2. producer.file_in(adapter) issues typed reads
3. Adapter is returned for status/position inspection

A session runs exactly once; a sequence is never reused across
producers for capture.
"""

from __future__ import annotations
from datetime import datetime, timezone
import logging
from typing import Optional, Protocol, Tuple, runtime_checkable
import uuid

from .config import DEFAULT_CONFIG, FilerConfig
from .contracts.errors import ArgumentInvalid, FilerError, Unsupported
from .contracts.values import InterchangeValue
from .filer.base import Filer
from .filer.capture import CaptureAdapter
from .filer.replay import ReplayAdapter
from .log.sequence import TaggedValueSequence
from .observability import PassKind, SessionTrace, TraceCollector
from .translation.table import TagTranslationTable

logger = logging.getLogger(__name__)


@runtime_checkable
class WritableProducer(Protocol):
    """Object that serializes its state through a filer's write protocol."""

    def file_out(self, filer: Filer) -> None:
        ...


@runtime_checkable
class ReadableProducer(Protocol):
    """Object that restores its state through a filer's read protocol."""

    def file_in(self, filer: Filer) -> None:
        ...


class _Session:
    """Shared single-use and tracing behavior."""

    _kind: PassKind

    def __init__(
        self,
        producer: object,
        config: Optional[FilerConfig],
        collector: Optional[TraceCollector]
    ):
        if producer is None:
            raise ArgumentInvalid("producer must not be None")
        self._producer = producer
        self._config = config or DEFAULT_CONFIG
        self._collector = collector
        self._used = False
        self._trace: Optional[SessionTrace] = None

    @property
    def trace(self) -> Optional[SessionTrace]:
        """Trace of the completed pass, if tracing is enabled."""
        return self._trace

    def _start(self) -> datetime:
        if self._used:
            raise Unsupported(f"A {self._kind.value} session runs exactly once")
        self._used = True
        return datetime.now(timezone.utc)

    def _record(
        self,
        started_at: datetime,
        value_count: int,
        error: Optional[BaseException] = None
    ) -> None:
        if not self._config.trace_sessions:
            return
        self._trace = SessionTrace(
            trace_id=uuid.uuid4().hex,
            kind=self._kind,
            producer_type=type(self._producer).__name__,
            started_at=started_at,
            completed_at=datetime.now(timezone.utc),
            success=error is None,
            value_count=value_count,
            error_code=error.error.code if isinstance(error, FilerError) else None,
            error_message=str(error) if error is not None else None,
        )
        if self._collector is not None:
            self._collector.collect(self._trace)


class CaptureSession(_Session):
    """Drives one capture pass against one producer."""

    _kind = PassKind.CAPTURE

    def __init__(
        self,
        producer: WritableProducer,
        config: Optional[FilerConfig] = None,
        collector: Optional[TraceCollector] = None
    ):
        super().__init__(producer, config, collector)
        if not isinstance(producer, WritableProducer):
            raise ArgumentInvalid(
                f"{type(producer).__name__} does not implement file_out(filer)"
            )

    def run(self) -> TaggedValueSequence:
        """Capture the producer's write pass and return the sealed sequence."""
        started_at = self._start()
        sequence = TaggedValueSequence(self._config)
        adapter = CaptureAdapter(sequence)
        try:
            self._producer.file_out(adapter)
        except Exception as exc:
            logger.warning(
                "Capture from %s failed after %d values: %s",
                type(self._producer).__name__, len(sequence), exc
            )
            self._record(started_at, len(sequence), exc)
            raise
        finally:
            sequence.seal()

        logger.debug(
            "Captured %d values from %s", len(sequence), type(self._producer).__name__
        )
        self._record(started_at, len(sequence))
        return sequence


class ReplaySession(_Session):
    """Drives one replay pass of a sealed sequence into a producer."""

    _kind = PassKind.REPLAY

    def __init__(
        self,
        sequence: TaggedValueSequence,
        producer: ReadableProducer,
        config: Optional[FilerConfig] = None,
        collector: Optional[TraceCollector] = None
    ):
        if not isinstance(sequence, TaggedValueSequence):
            raise ArgumentInvalid(
                f"replay requires a TaggedValueSequence, got {type(sequence).__name__}"
            )
        super().__init__(producer, config or sequence.config, collector)
        if not isinstance(producer, ReadableProducer):
            raise ArgumentInvalid(
                f"{type(producer).__name__} does not implement file_in(filer)"
            )
        self._sequence = sequence

    def run(self) -> ReplayAdapter:
        """Replay into the producer; returns the adapter for inspection."""
        started_at = self._start()
        adapter = ReplayAdapter(self._sequence, self._sequence.cursor(self._config))
        try:
            self._producer.file_in(adapter)
        except Exception as exc:
            logger.warning(
                "Replay into %s failed at position %d: %s",
                type(self._producer).__name__, adapter.position, exc
            )
            self._record(started_at, adapter.position, exc)
            raise

        logger.debug(
            "Replayed %d of %d values into %s",
            adapter.position, len(self._sequence), type(self._producer).__name__
        )
        self._record(started_at, adapter.position)
        return adapter


# =============================================================================
# CONVENIENCE ENTRY POINTS
# =============================================================================

def capture(
    producer: WritableProducer,
    config: Optional[FilerConfig] = None,
    collector: Optional[TraceCollector] = None
) -> TaggedValueSequence:
    """Capture one producer's write pass into a sealed sequence."""
    return CaptureSession(producer, config, collector).run()


def replay(
    sequence: TaggedValueSequence,
    producer: ReadableProducer,
    config: Optional[FilerConfig] = None,
    collector: Optional[TraceCollector] = None
) -> ReplayAdapter:
    """Replay a sealed sequence through one producer's read pass."""
    return ReplaySession(sequence, producer, config, collector).run()


def to_interchange_array(
    producer: WritableProducer,
    config: Optional[FilerConfig] = None,
    table: Optional[TagTranslationTable] = None
) -> Tuple[InterchangeValue, ...]:
    """Capture a producer and translate the result to interchange records."""
    return capture(producer, config).to_interchange(table)
