"""Builds renderer input from a botocore service model.

Member fragments are resolved here so that the renderer only ever sees
flat, pre-rendered ``MemberValue`` pairs.  Named structures and enums are
referenced by type and decoder name, which is also what keeps recursive
shapes from looping.
"""

from __future__ import annotations

import logging
import re

from aws_codegen.render.shapes import (
    CATEGORY_OTHER,
    CATEGORY_REQUEST,
    CATEGORY_RESPONSE,
    EnumShape,
    Member,
    MemberValue,
    NothingShape,
    Shape,
    StructureShape,
    Variant,
)
from aws_codegen.render.templates import decoder_name

LOG = logging.getLogger(__name__)

PRIMITIVES = {
    "string": MemberValue("String", "JD.string"),
    "character": MemberValue("String", "JD.string"),
    "integer": MemberValue("Int", "JD.int"),
    "long": MemberValue("Int", "JD.int"),
    "float": MemberValue("Float", "JD.float"),
    "double": MemberValue("Float", "JD.float"),
    "boolean": MemberValue("Bool", "JD.bool"),
    # Timestamps and blobs arrive as strings and are left to the caller.
    "timestamp": MemberValue("String", "JD.string"),
    "blob": MemberValue("String", "JD.string"),
}
UNTYPED = MemberValue("JD.Value", "JD.value")

_word_split = re.compile(r"[^A-Za-z0-9]+")


def type_name(shape_name: str) -> str:
    return shape_name[:1].upper() + shape_name[1:]


def constructor_name(enum_type: str, wire: str) -> str:
    """Elm constructor for one enum value, e.g. ``Status`` + ``in-use``
    gives ``StatusInUse``.

    The type name prefix keeps constructors of different enums apart in
    the single namespace of a generated module.
    """
    words = [word for word in _word_split.split(wire) if word]
    return enum_type + "".join(word[:1].upper() + word[1:] for word in words)


def _parenthesize(fragment: str) -> str:
    if " " in fragment and not fragment.startswith("("):
        return f"({fragment})"
    return fragment


class ShapeResolver:
    """Collects every named shape reachable from a service's operations.

    :param service_model: A ``botocore.model.ServiceModel``, usually the
        :class:`aws_codegen.core.model.ServiceModel` facade.
    """

    def __init__(self, service_model):
        self.service_model = service_model
        self._shapes: dict[str, Shape | None] = {}

    def operation_shapes(self, operation_name: str) -> tuple[Shape, Shape]:
        operation = self.service_model.operation_model(operation_name)
        return (
            self._top_level(operation.input_shape, CATEGORY_REQUEST),
            self._top_level(operation.output_shape, CATEGORY_RESPONSE),
        )

    def shapes(self) -> list[Shape]:
        """Named shapes of all operations, each once, in first-reached order."""
        for operation_name in self.service_model.operation_names:
            self.operation_shapes(operation_name)
        return [shape for shape in self._shapes.values() if shape is not None]

    def _top_level(self, shape, category: str) -> Shape:
        if shape is None:
            return NothingShape()
        self._resolve_named(shape, category)
        return self._shapes.get(shape.name) or NothingShape(type_name(shape.name))

    def _resolve_named(self, shape, category: str) -> None:
        existing = self._shapes.get(shape.name)
        if shape.name in self._shapes:
            # A request type that turns out to be shared is exported after all.
            if (
                isinstance(existing, StructureShape)
                and existing.category == CATEGORY_REQUEST
                and category != CATEGORY_REQUEST
            ):
                self._shapes[shape.name] = StructureShape(
                    existing.type, category, existing.members
                )
            return
        # Reserve the slot before descending so recursive references stop here.
        self._shapes[shape.name] = None
        handler = getattr(self, "_resolve_%s" % shape.type_name, None)
        if handler is None:
            LOG.debug(
                "Not generating a type for %s shape %s", shape.type_name, shape.name
            )
            del self._shapes[shape.name]
            return
        self._shapes[shape.name] = handler(shape, category)

    def _resolve_structure(self, shape, category: str) -> StructureShape:
        required = set(shape.required_members)
        members = []
        for key, member_shape in shape.members.items():
            value = self._member_value(member_shape)
            is_required = key in required
            if not is_required:
                value = MemberValue(
                    "Maybe " + _parenthesize(value.type),
                    f"(JD.nullable {value.decoder}) Nothing",
                )
            members.append(Member(key, is_required, value))
        return StructureShape(type_name(shape.name), category, tuple(members))

    def _resolve_string(self, shape, category: str) -> EnumShape:
        name = type_name(shape.name)
        variants = tuple(
            Variant(constructor_name(name, wire), wire) for wire in shape.enum
        )
        return EnumShape(name, variants)

    def _member_value(self, shape) -> MemberValue:
        if shape.type_name == "structure" or (
            shape.type_name == "string" and shape.enum
        ):
            self._resolve_named(shape, CATEGORY_OTHER)
            name = type_name(shape.name)
            return MemberValue(name, decoder_name(name))
        if shape.type_name == "list":
            item = self._member_value(shape.member)
            return MemberValue(
                "List " + _parenthesize(item.type), f"(JD.list {item.decoder})"
            )
        if shape.type_name == "map":
            item = self._member_value(shape.value)
            return MemberValue(
                "Dict String " + _parenthesize(item.type), f"(JD.dict {item.decoder})"
            )
        if shape.type_name in PRIMITIVES:
            return PRIMITIVES[shape.type_name]
        LOG.debug("Falling back to an untyped value for %s", shape.name)
        return UNTYPED
