"""Closed value sets describing a service, and their wire representations.

Every enum-like type that has to travel through service metadata is paired
with an :class:`EnumTable`, which maps members to the strings used in the
botocore service descriptions and back again.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from aws_codegen.core.exceptions import DuplicateEnumValue, UnknownEnumValue

T = TypeVar("T")


class EnumTable(Generic[T]):
    """Bidirectional lookup between a fixed list of values and wire strings.

    :param values: The values, in the order they should be reported.
    :param serializer: Callable turning a value into its wire string.
    """

    def __init__(self, values: Iterable[T], serializer: Callable[[T], str]):
        self._values: list[T] = []
        self._to_wire: dict[T, str] = {}
        self._from_wire: dict[str, T] = {}
        for value in values:
            if value in self._to_wire:
                raise DuplicateEnumValue(value)
            wire = serializer(value)
            if wire in self._from_wire:
                raise DuplicateEnumValue(wire)
            self._values.append(value)
            self._to_wire[value] = wire
            self._from_wire[wire] = value

    @property
    def values(self) -> list[T]:
        return list(self._values)

    def to_wire(self, value: T) -> str:
        try:
            return self._to_wire[value]
        except KeyError:
            raise UnknownEnumValue(value) from None

    def from_wire(self, wire: str) -> T:
        try:
            return self._from_wire[wire]
        except KeyError:
            raise UnknownEnumValue(wire) from None

    def __contains__(self, value: Any) -> bool:
        return value in self._to_wire

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"EnumTable({self._to_wire!r})"


def _wire_value(member: Enum) -> str:
    return member.value


class Protocol(Enum):
    EC2 = "ec2"
    JSON = "json"
    QUERY = "query"
    REST_JSON = "rest-json"
    REST_XML = "rest-xml"


class Signer(Enum):
    SIGN_V4 = "v4"
    SIGN_S3 = "s3"


class TimestampFormat(Enum):
    ISO8601 = "iso8601"
    RFC822 = "rfc822"
    UNIX_TIMESTAMP = "unixTimestamp"


PROTOCOLS: EnumTable[Protocol] = EnumTable(list(Protocol), _wire_value)
SIGNERS: EnumTable[Signer] = EnumTable(list(Signer), _wire_value)
TIMESTAMP_FORMATS: EnumTable[TimestampFormat] = EnumTable(
    list(TimestampFormat), _wire_value
)

JSON_PROTOCOLS = (Protocol.JSON, Protocol.REST_JSON)


def default_timestamp_format(protocol: Protocol) -> TimestampFormat:
    # JSON bodies carry epoch seconds, everything else ISO 8601. RFC 822 is
    # only ever chosen explicitly.
    if protocol in JSON_PROTOCOLS:
        return TimestampFormat.UNIX_TIMESTAMP
    return TimestampFormat.ISO8601
