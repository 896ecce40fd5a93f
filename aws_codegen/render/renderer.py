"""Turns shapes into generated Elm source.

``render`` looks the shape's ``kind`` up in :data:`RENDERERS`; the table is
closed, a shape of any other kind raises :class:`UnknownShapeKind` rather than
producing a half-filled result.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from aws_codegen.core.exceptions import UnknownShapeKind
from aws_codegen.render import templates
from aws_codegen.render.shapes import (
    CATEGORY_REQUEST,
    EnumShape,
    Member,
    NothingShape,
    RenderedShape,
    StructureShape,
)

LOG = logging.getLogger(__name__)


def member_type(member: Member) -> str:
    return f"{member.key} : {member.value.type}"


def member_decoder(member: Member) -> str:
    step = "required" if member.required else "optional"
    return " ".join(
        [f"JDP.{step}", templates.quote(member.key), member.value.decoder]
    )


def render_nothing(shape: NothingShape) -> RenderedShape:
    return RenderedShape(shape, expose_as=None)


def render_enum(shape: EnumShape) -> RenderedShape:
    return RenderedShape(
        shape,
        expose_as=f"{shape.type}(..)",
        type_def=templates.define_union_type(shape),
        decoder_def=templates.define_union_decoder(shape),
    )


def render_structure(shape: StructureShape) -> RenderedShape:
    # Request types stay private to the generated module.
    expose_as = shape.type if shape.category != CATEGORY_REQUEST else None
    return RenderedShape(
        shape,
        expose_as=expose_as,
        type_def=templates.define_record_type(shape, member_type),
        decoder_def=templates.define_record_decoder(shape, member_decoder),
    )


RENDERERS: dict[str, Callable[[Any], RenderedShape]] = {
    NothingShape.kind: render_nothing,
    EnumShape.kind: render_enum,
    StructureShape.kind: render_structure,
}


def render(shape: Any) -> RenderedShape:
    kind = getattr(shape, "kind", None)
    try:
        renderer = RENDERERS[kind]
    except (KeyError, TypeError):
        raise UnknownShapeKind(kind) from None
    LOG.debug("Rendering %s shape %s", kind, shape.type)
    return renderer(shape)


def enum_doc(shape: EnumShape) -> str:
    return templates.define_union_doc(shape)
