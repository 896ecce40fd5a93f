from collections import namedtuple

import pytest

from aws_codegen.core.exceptions import UnknownShapeKind
from aws_codegen.render import (
    EnumShape,
    Member,
    MemberValue,
    NothingShape,
    RenderedShape,
    StructureShape,
    enum_doc,
    render,
)

MEMBERS = [
    Member("Id", True, MemberValue("String", "JD.string")),
    Member("Name", False, MemberValue("Maybe String", "(JD.nullable JD.string) Nothing")),
]


def test_render_nothing():
    shape = NothingShape()
    rendered = render(shape)
    assert isinstance(rendered, RenderedShape)
    assert rendered.expose_as is None
    assert rendered.type_def is None
    assert rendered.decoder_def is None
    assert rendered.shape is shape


def test_render_enum():
    shape = EnumShape("Letter", [("A", "a"), ("B", "b")])
    rendered = render(shape)
    assert rendered.expose_as == "Letter(..)"
    assert rendered.type_def == "type Letter\n    = A\n    | B"
    assert rendered.decoder_def.index('"a" ->') < rendered.decoder_def.index('"b" ->')
    assert rendered.decoder_def.index("JD.succeed A") < rendered.decoder_def.index(
        "JD.succeed B"
    )


def test_render_enum_keeps_input_order():
    shape = EnumShape("Letter", [("B", "b"), ("A", "a")])
    rendered = render(shape)
    assert rendered.type_def == "type Letter\n    = B\n    | A"
    assert rendered.decoder_def.index('"b" ->') < rendered.decoder_def.index('"a" ->')


def test_rendering_is_deterministic():
    shape = EnumShape("Letter", [("A", "a"), ("B", "b")])
    assert render(shape) == render(shape)
    structure = StructureShape("Thing", "response", MEMBERS)
    first, second = render(structure), render(structure)
    assert first.type_def == second.type_def
    assert first.decoder_def == second.decoder_def


@pytest.mark.parametrize(
    "category, expose_as",
    [("request", None), ("response", "Thing"), ("other", "Thing")],
)
def test_structure_exposure_by_category(category, expose_as):
    rendered = render(StructureShape("Thing", category, MEMBERS))
    assert rendered.expose_as == expose_as
    assert rendered.type_def is not None
    assert rendered.decoder_def is not None


def test_structure_members_are_required_or_optional_in_order():
    rendered = render(StructureShape("Thing", "response", MEMBERS))
    assert rendered.type_def == (
        "type alias Thing =\n"
        "    { Id : String\n"
        "    , Name : Maybe String\n"
        "    }"
    )
    decoder = rendered.decoder_def
    required = '|> JDP.required "Id" JD.string'
    optional = '|> JDP.optional "Name" (JD.nullable JD.string) Nothing'
    assert required in decoder
    assert optional in decoder
    assert decoder.index(required) < decoder.index(optional)


def test_structure_members_are_not_sorted():
    members = list(reversed(MEMBERS))
    rendered = render(StructureShape("Thing", "response", members))
    assert rendered.type_def.index("Name :") < rendered.type_def.index("Id :")


def test_rendered_shape_reads_through_to_original():
    shape = StructureShape("Thing", "response", MEMBERS)
    rendered = render(shape)
    assert rendered.type == "Thing"
    assert rendered.category == "response"
    assert rendered.members == tuple(MEMBERS)
    assert rendered.kind == "structure"
    with pytest.raises(AttributeError):
        rendered.does_not_exist


def test_unknown_shape_kind_fails_fast():
    FakeShape = namedtuple("FakeShape", ["kind", "type"])
    with pytest.raises(UnknownShapeKind) as exc:
        render(FakeShape("list", "Things"))
    assert exc.value.kind == "list"
    with pytest.raises(UnknownShapeKind):
        render({"type": "Thing"})


def test_enum_doc():
    doc = enum_doc(EnumShape("Letter", [("A", "a"), ("B", "b")]))
    assert "`A` is sent as `a`" in doc
    assert doc.index("`A`") < doc.index("`B`")
