"""
Filer Layer

Producer-facing visitor protocol and its two implementations:
- CaptureAdapter: write pass -> append-only sequence
- ReplayAdapter: sealed sequence -> type-checked read pass
"""

from .base import Filer
from .capture import CaptureAdapter
from .replay import ReplayAdapter

__all__ = [
    'Filer',
    'CaptureAdapter',
    'ReplayAdapter',
]
