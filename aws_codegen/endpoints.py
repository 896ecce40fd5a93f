"""Resolves hostnames and signing regions for service endpoints.

A service is addressed either globally (one hostname for every region) or
regionally (one hostname per region).  How those two cases turn into a
hostname and a signing region depends on the provider hosting the API, so
that mapping lives in an :class:`EndpointResolver`.  Host and region are
always resolved by the same resolver object, which keeps both answers in
agreement for a given endpoint.

Providers can be registered by name and looked up later::

    register_provider("my-cloud", MyCloudEndpointResolver())
    service = service.with_provider("my-cloud")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from aws_codegen.core.exceptions import UnknownProvider

LOG = logging.getLogger(__name__)

# Global services sign as if they lived in us-east-1.
DEFAULT_SIGNING_REGION = "us-east-1"
AWS_DNS_SUFFIX = "amazonaws.com"
SPACES_DNS_SUFFIX = "digitaloceanspaces.com"
SPACES_DEFAULT_REGION = "nyc3"


class Endpoint:
    """Base class for the two ways of addressing a service."""

    @property
    def is_global(self) -> bool:
        return isinstance(self, GlobalEndpoint)


@dataclass(frozen=True)
class GlobalEndpoint(Endpoint):
    def __repr__(self) -> str:
        return "GLOBAL"


@dataclass(frozen=True)
class RegionalEndpoint(Endpoint):
    region: str


GLOBAL = GlobalEndpoint()


class EndpointResolver:
    """Maps an endpoint to a hostname and a signing region."""

    def resolve_host(self, endpoint: Endpoint, prefix: str) -> str:
        raise NotImplementedError

    def resolve_region(self, endpoint: Endpoint) -> str:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash((type(self), tuple(sorted(vars(self).items()))))


class AWSEndpointResolver(EndpointResolver):
    """The standard AWS host naming rule.

    ``<prefix>.amazonaws.com`` for global endpoints and
    ``<prefix>.<region>.amazonaws.com`` for regional ones.
    """

    def __init__(
        self,
        dns_suffix: str = AWS_DNS_SUFFIX,
        global_region: str = DEFAULT_SIGNING_REGION,
    ):
        self.dns_suffix = dns_suffix
        self.global_region = global_region

    def resolve_host(self, endpoint: Endpoint, prefix: str) -> str:
        if isinstance(endpoint, RegionalEndpoint):
            return f"{prefix}.{endpoint.region}.{self.dns_suffix}"
        return f"{prefix}.{self.dns_suffix}"

    def resolve_region(self, endpoint: Endpoint) -> str:
        if isinstance(endpoint, RegionalEndpoint):
            return endpoint.region
        return self.global_region


class DigitalOceanSpacesEndpointResolver(EndpointResolver):
    """S3-compatible DigitalOcean Spaces.

    The endpoint prefix plays no part in the hostname; a global endpoint
    points at the default ``nyc3`` datacenter.
    """

    def __init__(self, default_region: str = SPACES_DEFAULT_REGION):
        self.default_region = default_region

    def resolve_host(self, endpoint: Endpoint, prefix: str) -> str:
        return f"{self.resolve_region(endpoint)}.{SPACES_DNS_SUFFIX}"

    def resolve_region(self, endpoint: Endpoint) -> str:
        if isinstance(endpoint, RegionalEndpoint):
            return endpoint.region
        return self.default_region


AWS = AWSEndpointResolver()
DIGITAL_OCEAN_SPACES = DigitalOceanSpacesEndpointResolver()

_PROVIDERS: dict[str, EndpointResolver] = {
    "aws": AWS,
    "digitalocean-spaces": DIGITAL_OCEAN_SPACES,
}


def register_provider(name: str, resolver: EndpointResolver) -> None:
    if name in _PROVIDERS:
        LOG.debug("Replacing endpoint provider %s with %r", name, resolver)
    _PROVIDERS[name] = resolver


def get_provider(name: str) -> EndpointResolver:
    try:
        return _PROVIDERS[name]
    except KeyError:
        raise UnknownProvider(name) from None


def list_providers() -> list[str]:
    return list(_PROVIDERS)
