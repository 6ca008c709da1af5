"""
Filer Configuration
===================

Immutable configuration shared by sessions, cursors and adapters.
A changed setting requires a new FilerConfig instance.
"""

from __future__ import annotations
from dataclasses import dataclass

from .contracts.base import FilerType


@dataclass(frozen=True)
class FilerConfig:
    """
    Configuration for capture and replay passes.

    strict_tags:
        Reads must name the stored tag exactly. When False only the
        representation type is compared, so e.g. a soft pointer id can
        be read through the hard pointer accessor.
    fault_on_exhaustion:
        Record an END_OF_DATA fault on the read that consumes the last
        element, without waiting for a further failed read.
    translate_addresses:
        Allow ADDRESS values into the interchange vocabulary as a raw
        32-bit extended-data integer. Off by default; the code carries
        no meaning for consumers.
    trace_sessions:
        Record a SessionTrace for every capture/replay pass.
    """
    filer_type: FilerType = FilerType.COPY_FILER
    strict_tags: bool = True
    fault_on_exhaustion: bool = True
    translate_addresses: bool = False
    trace_sessions: bool = True


DEFAULT_CONFIG = FilerConfig()
