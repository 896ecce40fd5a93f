"""A facade over the botocore model to derive generator inputs."""

from __future__ import annotations

import logging

from botocore.loaders import Loader
from botocore.model import ServiceModel as BotocoreServiceModel
from botocore.utils import CachedProperty

from aws_codegen.core.enums import (
    PROTOCOLS,
    SIGNERS,
    TIMESTAMP_FORMATS,
    Protocol,
    Signer,
)
from aws_codegen.core.exceptions import (
    UnknownEnumValue,
    UnsupportedProtocol,
    UnsupportedSigner,
)
from aws_codegen.service import Service, define_global, define_regional

LOG = logging.getLogger(__name__)

# botocore spells some signature versions differently from the generator.
SIGNER_ALIASES = {"s3v4": Signer.SIGN_S3}


class ServiceModel(BotocoreServiceModel):
    """Service description with the metadata the generator needs.

    :ivar metadata: The ``metadata`` block of the service description.
    """

    @CachedProperty
    def supported_protocol(self) -> Protocol:
        """The protocol the generator targets for this service.

        Newer descriptions list several protocols in order of preference,
        the first one the generator knows about wins.
        """
        candidates = [self.metadata.get("protocol")]
        candidates.extend(self.metadata.get("protocols", []))
        for candidate in candidates:
            if candidate in (None, ""):
                continue
            try:
                return PROTOCOLS.from_wire(candidate)
            except UnknownEnumValue:
                LOG.debug("Skipping unsupported protocol %s", candidate)
        raise UnsupportedProtocol(self.metadata.get("protocol"))

    @CachedProperty
    def signer(self) -> Signer:
        signature_version = self.metadata.get("signatureVersion")
        if signature_version in SIGNER_ALIASES:
            return SIGNER_ALIASES[signature_version]
        try:
            return SIGNERS.from_wire(signature_version)
        except UnknownEnumValue:
            raise UnsupportedSigner(signature_version) from None

    @property
    def xml_namespace(self) -> str | None:
        namespace = self.metadata.get("xmlNamespace")
        if isinstance(namespace, dict):
            return namespace.get("uri")
        return namespace

    @property
    def has_global_endpoint(self) -> bool:
        return "globalEndpoint" in self.metadata

    def service_descriptor(self, region: str | None = None) -> Service:
        """Build a :class:`Service` from the model metadata.

        :param region: The region to pin a regional service to.  Services
            whose metadata declares a ``globalEndpoint``, or calls without a
            region, produce a global descriptor.
        """
        metadata = self.metadata
        endpoint_prefix = metadata["endpointPrefix"]
        api_version = metadata["apiVersion"]
        args = (endpoint_prefix, api_version, self.supported_protocol, self.signer)
        if region is None or self.has_global_endpoint:
            service = define_global(*args)
        else:
            service = define_regional(*args, region)

        if "jsonVersion" in metadata:
            service = service.set_json_version(metadata["jsonVersion"])
        if "signingName" in metadata:
            service = service.set_signing_name(metadata["signingName"])
        if "targetPrefix" in metadata:
            service = service.set_target_prefix(metadata["targetPrefix"])
        if "timestampFormat" in metadata:
            service = service.set_timestamp_format(
                TIMESTAMP_FORMATS.from_wire(metadata["timestampFormat"])
            )
        if self.xml_namespace is not None:
            service = service.set_xml_namespace(self.xml_namespace)
        return service


def load_service_model(
    service_name: str, api_version: str | None = None, loader: Loader | None = None
) -> ServiceModel:
    """Load a ``service-2`` description through the botocore data loader."""
    if loader is None:
        loader = Loader()
    description = loader.load_service_model(
        service_name, "service-2", api_version=api_version
    )
    LOG.debug("Loaded service model for %s", service_name)
    return ServiceModel(description, service_name=service_name)
