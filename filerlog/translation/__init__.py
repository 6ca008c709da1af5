"""
Translation Layer

Mapping between internal type tags and the legacy interchange
vocabulary. Only needed when producing or consuming interchange
records; pure capture/replay never touches it.
"""

from .table import (
    ADDRESS_TRANSLATION_TABLE,
    DEFAULT_TRANSLATION_TABLE,
    TagTranslationTable,
)

__all__ = [
    'ADDRESS_TRANSLATION_TABLE',
    'DEFAULT_TRANSLATION_TABLE',
    'TagTranslationTable',
]
