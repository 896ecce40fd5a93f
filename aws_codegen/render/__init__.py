from .renderer import RENDERERS, enum_doc, render  # noqa
from .shapes import (  # noqa
    EnumShape,
    Member,
    MemberValue,
    NothingShape,
    RenderedShape,
    StructureShape,
    Variant,
)
