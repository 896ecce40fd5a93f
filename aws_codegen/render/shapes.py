"""Shapes handed to the renderer, and what it gives back."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple

CATEGORY_REQUEST = "request"
CATEGORY_RESPONSE = "response"
CATEGORY_OTHER = "other"


class Variant(NamedTuple):
    """One enum constructor and the string it is sent as."""

    name: str
    wire: str


class MemberValue(NamedTuple):
    """Pre-rendered type and decoder fragments for a member's own shape."""

    type: str
    decoder: str


class Member(NamedTuple):
    key: str
    required: bool
    value: MemberValue


@dataclass(frozen=True)
class Shape:
    kind = "shape"

    type: str | None


@dataclass(frozen=True)
class NothingShape(Shape):
    """Payload-less input or output of an operation."""

    kind = "nothing"

    type: str | None = None


@dataclass(frozen=True)
class EnumShape(Shape):
    kind = "enum"

    type: str
    variants: tuple[Variant, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "variants", tuple(Variant(*variant) for variant in self.variants)
        )


@dataclass(frozen=True)
class StructureShape(Shape):
    kind = "structure"

    type: str
    category: str = CATEGORY_OTHER
    members: tuple[Member, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "members",
            tuple(
                Member(key, required, MemberValue(*value))
                for key, required, value in self.members
            ),
        )


@dataclass(frozen=True)
class RenderedShape:
    """Generated source for a shape.

    Attributes the renderer does not produce are read from the original
    shape, so ``rendered.members`` still works for a structure.
    """

    shape: Any
    expose_as: str | None = None
    type_def: str | None = None
    decoder_def: str | None = None

    def __getattr__(self, name: str) -> Any:
        if name == "shape" or name.startswith("__"):
            raise AttributeError(name)
        return getattr(self.shape, name)
