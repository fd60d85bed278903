"""Quantized dispatch.

Quantized kernels usually operate on the raw integer storage while still
reporting the logical quantized type. The body therefore receives a whole
`QuantizedBinding`, not just a representation:

    def _dequant(qb: QuantizedBinding):
        raw = buf.view(qb.underlying_representation.storage)
        ...

    dispatch_qint_types(tag, "dequantize", _dequant)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeVar

from typedispatch.dispatch.adapter import dispatch
from typedispatch.dispatch.capabilities import PlatformCapabilities
from typedispatch.dispatch.errors import ProfileBuildError
from typedispatch.dispatch.profile import DispatchProfile
from typedispatch.types import (
    QuantizedRepresentation,
    Representation,
    ScalarType,
    is_quantized,
    representation_of,
    to_underlying,
)

R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class QuantizedBinding:
    """A quantized type plus the unquantized type that holds its storage.

    Attributes:
        tag: Logical quantized type (e.g. QInt8).
        representation: Quantized representation.
        underlying_tag: Storage type (e.g. Char).
        underlying_representation: Storage representation.

    Invariants:
        - representation.itemsize == underlying_representation.itemsize
    """

    tag: ScalarType
    representation: QuantizedRepresentation
    underlying_tag: ScalarType
    underlying_representation: Representation

    def __post_init__(self) -> None:
        if self.representation.itemsize != self.underlying_representation.itemsize:
            raise ProfileBuildError(
                f"{self.tag.name} is {self.representation.itemsize} bytes but its storage "
                f"{self.underlying_tag.name} is {self.underlying_representation.itemsize} bytes"
            )


def qbind(tag: ScalarType) -> QuantizedBinding:
    tag = ScalarType(tag)
    if not is_quantized(tag):
        raise ProfileBuildError(f"{tag.name} is not a quantized type")
    underlying = to_underlying(tag)
    return QuantizedBinding(
        tag=tag,
        representation=representation_of(tag),
        underlying_tag=underlying,
        underlying_representation=representation_of(underlying),
    )


@dataclass(frozen=True, slots=True)
class QuantizedProfile(DispatchProfile):
    """Profile whose bodies receive the full QuantizedBinding.

    Quantized profiles are closed: they cannot be extended.
    """

    def argument(self, binding: QuantizedBinding) -> QuantizedBinding:  # type: ignore[override]
        return binding

    def extend(self, *tags: ScalarType) -> DispatchProfile:
        if not tags:
            return self
        raise ProfileBuildError(f"quantized profile {self.name!r} does not accept extra tags")


QINT_TYPES = QuantizedProfile(
    name="qint",
    bindings=(
        qbind(ScalarType.QInt8),
        qbind(ScalarType.QUInt8),
        qbind(ScalarType.QInt32),
    ),
)


def dispatch_qint_types(
    tag: object,
    op_name: str,
    body: Callable[[QuantizedBinding], R],
    *,
    capabilities: PlatformCapabilities | None = None,
) -> R:
    """Dispatch over QInt8, QUInt8 and QInt32."""
    return dispatch(tag, op_name, QINT_TYPES, body, capabilities=capabilities)
