"""
Value Contracts
===============

TaggedValue: the atomic unit of a captured log.
InterchangeValue: a (group code, value) record in the legacy
interchange vocabulary, handed to external consumers.

INVARIANTS:
- A TaggedValue is never constructed with a None value
- The runtime type of `value` always conforms to `tag`
- Both types are immutable; equality is structural
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from .errors import ArgumentInvalid
from .tags import InterchangeTag, TypeTag, conforms, representation_of, type_name


@dataclass(frozen=True)
class TaggedValue:
    """
    Immutable (tag, value) pair.

    Construction validates the tag/representation pairing and raises
    ArgumentInvalid before any caller state is touched.
    """
    tag: TypeTag
    value: Any

    def __post_init__(self):
        if not isinstance(self.tag, TypeTag):
            raise ArgumentInvalid(f"tag must be a TypeTag, got {self.tag!r}")
        if self.value is None:
            raise ArgumentInvalid(f"value for {self.tag.name} must not be None")
        if not conforms(self.tag, self.value):
            expected = representation_of(self.tag)
            raise ArgumentInvalid(
                f"{type_name(self.value)} value {self.value!r} does not conform "
                f"to {self.tag.name} (expecting {expected.name})"
            )

    def __str__(self) -> str:
        return f"DataType: {self.tag.name} Value: {self.value}"


class InterchangeValue(BaseModel):
    """
    Record in the legacy interchange vocabulary.

    `value` is whatever the translation produced (text for handles,
    0/1 for booleans); it carries no type tag of its own.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    code: InterchangeTag
    value: Any

    @field_validator("value")
    @classmethod
    def _value_present(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("interchange value must not be None")
        return value
