"""Exceptions raised by the code generator core."""

from typing import Any


class CodegenException(Exception):
    """Base class for code generator errors."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class UnknownShapeKind(CodegenException):
    """The renderer was handed a shape it has no rule for."""

    def __init__(self, kind: Any):
        super().__init__(
            "UnknownShapeKind",
            f"Cannot render shape of kind {kind!r}; expected one of nothing, enum, structure",
        )
        self.kind = kind


class DuplicateEnumValue(CodegenException):
    def __init__(self, value: Any):
        super().__init__(
            "DuplicateEnumValue",
            f"Value {value!r} appears more than once in the enum table",
        )


class UnknownEnumValue(CodegenException):
    def __init__(self, value: Any):
        super().__init__(
            "UnknownEnumValue", f"Value {value!r} is not present in the enum table"
        )
        self.value = value


class UnknownProvider(CodegenException):
    """No endpoint resolver is registered under the requested name."""

    def __init__(self, name: str):
        super().__init__(
            "UnknownProvider", f"No endpoint provider registered as '{name}'"
        )


class UnsupportedProtocol(CodegenException):
    def __init__(self, protocol: Any):
        super().__init__(
            "UnsupportedProtocol",
            f"Service protocol {protocol!r} is not supported by the generator",
        )


class UnsupportedSigner(CodegenException):
    def __init__(self, signature_version: Any):
        super().__init__(
            "UnsupportedSigner",
            f"Signature version {signature_version!r} is not supported by the generator",
        )
