"""
Observability Layer

RESPONSIBILITY: Trace records for capture and replay passes
ALLOWED INPUTS: SessionTrace records produced by sessions
OUTPUTS: Read-only trace listings

WHAT THIS LAYER MUST NOT DO:
============================
- Modify sequences, cursors or adapters
- Block or alter a capture/replay pass
- Make decisions based on recorded traces
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional

from ..contracts.base import ErrorCode


class PassKind(Enum):
    """Direction of a producer pass."""
    CAPTURE = "capture"
    REPLAY = "replay"


@dataclass(frozen=True)
class SessionTrace:
    """
    Complete trace of one producer pass.

    `value_count` is the number of values captured (capture) or
    consumed (replay) when the pass ended.
    """
    trace_id: str
    kind: PassKind
    producer_type: str
    started_at: datetime
    completed_at: Optional[datetime]
    success: bool
    value_count: int = 0
    error_code: Optional[ErrorCode] = None
    error_message: Optional[str] = None

    def duration_ms(self) -> float:
        """Compute pass duration."""
        if self.completed_at and self.started_at:
            return (self.completed_at - self.started_at).total_seconds() * 1000
        return 0.0


class TraceCollector:
    """
    Append-only collector of session traces.

    No modification of collected data.
    """

    def __init__(self):
        self._traces: List[SessionTrace] = []

    def collect(self, trace: SessionTrace) -> None:
        """Collect a trace (append-only)."""
        self._traces.append(trace)

    def get_traces(
        self,
        kind: Optional[PassKind] = None,
        failed_only: bool = False
    ) -> List[SessionTrace]:
        """Get traces, optionally filtered."""
        traces = self._traces

        if kind:
            traces = [t for t in traces if t.kind == kind]

        if failed_only:
            traces = [t for t in traces if not t.success]

        return list(traces)

    @property
    def trace_count(self) -> int:
        return len(self._traces)


__all__ = [
    'PassKind',
    'SessionTrace',
    'TraceCollector',
]
