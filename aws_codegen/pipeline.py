"""One generation pass over a service model.

The service descriptor and the rendered shapes are produced side by side
from the same model; neither is derived from the other.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from aws_codegen.core.model import ServiceModel
from aws_codegen.render import render
from aws_codegen.render.resolver import ShapeResolver
from aws_codegen.render.shapes import RenderedShape
from aws_codegen.service import Service

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedService:
    service: Service
    shapes: list[RenderedShape] = field(default_factory=list)

    @property
    def exposing(self) -> list[str]:
        """Names the generated module exports, in shape order."""
        return [shape.expose_as for shape in self.shapes if shape.expose_as]

    @property
    def type_defs(self) -> list[str]:
        return [shape.type_def for shape in self.shapes if shape.type_def]

    @property
    def decoder_defs(self) -> list[str]:
        return [shape.decoder_def for shape in self.shapes if shape.decoder_def]


def generate(service_model: ServiceModel, region: str | None = None) -> GeneratedService:
    service = service_model.service_descriptor(region)
    shapes = [render(shape) for shape in ShapeResolver(service_model).shapes()]
    LOG.debug(
        "Generated %d shapes for %s (%s)",
        len(shapes),
        service.endpoint_prefix,
        service.api_version,
    )
    return GeneratedService(service, shapes)
