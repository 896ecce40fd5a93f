"""Service descriptors.

A :class:`Service` describes how one AWS-style API is addressed and signed.
Descriptors are immutable: they are created with :func:`define_global` or
:func:`define_regional` and every setter hands back a new descriptor::

    service = (
        define_regional("dynamodb", "2012-08-10", Protocol.JSON, Signer.SIGN_V4, "eu-west-1")
        .set_json_version("1.0")
    )
    service.host          # 'dynamodb.eu-west-1.amazonaws.com'
    service.content_type  # 'application/x-amz-json-1.0; charset=utf-8'
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass

from aws_codegen.core.enums import (
    Protocol,
    Signer,
    TimestampFormat,
    default_timestamp_format,
)
from aws_codegen.endpoints import (
    AWS,
    DIGITAL_OCEAN_SPACES,
    GLOBAL,
    Endpoint,
    EndpointResolver,
    RegionalEndpoint,
    get_provider,
)

LOG = logging.getLogger(__name__)

XML_CONTENT_TYPE = "application/xml"
JSON_CONTENT_TYPE = "application/json"
CHARSET = "charset=utf-8"


def default_target_prefix(endpoint_prefix: str, api_version: str) -> str:
    return "AWS{prefix}_{version}".format(
        prefix=endpoint_prefix.upper(), version=api_version.replace("-", "")
    )


@dataclass(frozen=True)
class Service:
    endpoint_prefix: str
    api_version: str
    protocol: Protocol
    signer: Signer
    target_prefix: str
    timestamp_format: TimestampFormat
    endpoint: Endpoint = GLOBAL
    json_version: str | None = None
    signing_name: str | None = None
    xml_namespace: str | None = None
    resolver: EndpointResolver = AWS

    def _replace(self, **changes) -> Service:
        return dataclasses.replace(self, **changes)

    def set_json_version(self, json_version: str) -> Service:
        return self._replace(json_version=json_version)

    def set_signing_name(self, signing_name: str) -> Service:
        return self._replace(signing_name=signing_name)

    def set_target_prefix(self, target_prefix: str) -> Service:
        return self._replace(target_prefix=target_prefix)

    def set_timestamp_format(self, timestamp_format: TimestampFormat) -> Service:
        return self._replace(timestamp_format=timestamp_format)

    def set_xml_namespace(self, xml_namespace: str) -> Service:
        return self._replace(xml_namespace=xml_namespace)

    def with_resolver(self, resolver: EndpointResolver) -> Service:
        """Retarget the descriptor to another provider.

        Hostname and signing region are swapped together since both come
        from the one resolver.
        """
        return self._replace(resolver=resolver)

    def with_provider(self, name: str) -> Service:
        return self.with_resolver(get_provider(name))

    @property
    def is_global(self) -> bool:
        return self.endpoint.is_global

    @property
    def host(self) -> str:
        return self.resolver.resolve_host(self.endpoint, self.endpoint_prefix)

    @property
    def region(self) -> str:
        return self.resolver.resolve_region(self.endpoint)

    @property
    def signing_service(self) -> str:
        return self.signing_name or self.endpoint_prefix

    @property
    def content_type(self) -> str:
        if self.protocol is Protocol.REST_XML:
            return f"{XML_CONTENT_TYPE}; {CHARSET}"
        if self.json_version is not None:
            return f"application/x-amz-json-{self.json_version}; {CHARSET}"
        return f"{JSON_CONTENT_TYPE}; {CHARSET}"

    @property
    def accept_type(self) -> str:
        if self.protocol is Protocol.REST_XML:
            return XML_CONTENT_TYPE
        return JSON_CONTENT_TYPE


def define_global(
    endpoint_prefix: str, api_version: str, protocol: Protocol, signer: Signer
) -> Service:
    """Describe a service reached through a single, region-less hostname."""
    LOG.debug(
        "Defining global service %s (%s, %s)",
        endpoint_prefix,
        api_version,
        protocol.value,
    )
    return Service(
        endpoint_prefix=endpoint_prefix,
        api_version=api_version,
        protocol=protocol,
        signer=signer,
        target_prefix=default_target_prefix(endpoint_prefix, api_version),
        timestamp_format=default_timestamp_format(protocol),
    )


def define_regional(
    endpoint_prefix: str,
    api_version: str,
    protocol: Protocol,
    signer: Signer,
    region: str,
) -> Service:
    """Describe a service with one hostname per region, pinned to ``region``."""
    service = define_global(endpoint_prefix, api_version, protocol, signer)
    return dataclasses.replace(service, endpoint=RegionalEndpoint(region))


def to_digital_ocean_spaces(service: Service) -> Service:
    return service.with_resolver(DIGITAL_OCEAN_SPACES)
