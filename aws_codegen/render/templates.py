"""Elm source templates for union and record types.

Each ``define_*`` function takes shape metadata and returns literal source
text.  Output never ends in a newline; callers join definitions themselves.
"""

from __future__ import annotations

from typing import Callable

from jinja2 import Template

from aws_codegen.render.shapes import EnumShape, Member, StructureShape

UNION_TYPE = """type {{ shape.type }}
{% for variant in shape.variants %}
    {{ "=" if loop.first else "|" }} {{ variant.name }}
{% endfor %}
"""

UNION_DECODER = r"""{{ decoder }} : JD.Decoder {{ shape.type }}
{{ decoder }} =
    JD.string
        |> JD.andThen
            (\str ->
                case str of
{% for variant in shape.variants %}
                    {{ quote(variant.wire) }} ->
                        JD.succeed {{ variant.name }}

{% endfor %}
                    _ ->
                        JD.fail ("Unknown {{ shape.type }}: " ++ str)
            )
"""

UNION_DOC = """{-| The {{ shape.type }} enumeration.

{% for variant in shape.variants %}
  - `{{ variant.name }}` is sent as `{{ variant.wire }}`
{% endfor %}

-}
"""

RECORD_TYPE = """type alias {{ shape.type }} =
{% for member in members %}
    {{ "{" if loop.first else "," }} {{ member }}
{% endfor %}
{% if members %}
    }
{% else %}
    {}
{% endif %}
"""

RECORD_DECODER = """{{ decoder }} : JD.Decoder {{ shape.type }}
{{ decoder }} =
    JD.succeed {{ shape.type }}
{% for member in members %}
        |> {{ member }}
{% endfor %}
"""


def _template(source: str) -> Template:
    return Template(source, trim_blocks=True, lstrip_blocks=True)


_UNION_TYPE = _template(UNION_TYPE)
_UNION_DECODER = _template(UNION_DECODER)
_UNION_DOC = _template(UNION_DOC)
_RECORD_TYPE = _template(RECORD_TYPE)
_RECORD_DECODER = _template(RECORD_DECODER)


def quote(value: str) -> str:
    """Elm string literal for ``value``."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def decoder_name(type_name: str) -> str:
    return type_name[:1].lower() + type_name[1:] + "Decoder"


def _render(template: Template, **context) -> str:
    return template.render(quote=quote, **context).rstrip("\n")


def define_union_type(shape: EnumShape) -> str:
    return _render(_UNION_TYPE, shape=shape)


def define_union_decoder(shape: EnumShape) -> str:
    return _render(_UNION_DECODER, shape=shape, decoder=decoder_name(shape.type))


def define_union_doc(shape: EnumShape) -> str:
    return _render(_UNION_DOC, shape=shape)


def define_record_type(
    shape: StructureShape, member_type: Callable[[Member], str]
) -> str:
    members = [member_type(member) for member in shape.members]
    return _render(_RECORD_TYPE, shape=shape, members=members)


def define_record_decoder(
    shape: StructureShape,
    member_decoder: Callable[[Member], str],
) -> str:
    members = [member_decoder(member) for member in shape.members]
    return _render(
        _RECORD_DECODER,
        shape=shape,
        members=members,
        decoder=decoder_name(shape.type),
    )
