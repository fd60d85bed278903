"""Invocation adapter: select a binding for a runtime tag and run the body.

Kernel authors write one generic body that takes the bound representation
(the Python stand-in for a compile-time `scalar_t`) and pick the family of
types it supports:

    def _sum(scalar_t):
        return np.add.reduce(x.astype(scalar_t.storage, copy=False))

    total = dispatch_all_types(x.dtype, "sum", _sum, ScalarType.Bool)

Selection is a single ordinal index into the profile table. A type outside
the profile, or one the platform cannot run, raises UnsupportedTypeError and
the body is not called.
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

import numpy as np

from typedispatch.dispatch.capabilities import PlatformCapabilities, default_capabilities
from typedispatch.dispatch.errors import report
from typedispatch.dispatch.profile import (
    ALL_TYPES,
    ALL_TYPES_AND_COMPLEX,
    COMPLEX_TYPES,
    FLOATING_AND_COMPLEX_TYPES,
    FLOATING_TYPES,
    FLOATING_TYPES_AND_HALF,
    INTEGRAL_TYPES,
    DispatchProfile,
)
from typedispatch.types import ScalarType, display_name_of

logger = logging.getLogger(__name__)

R = TypeVar("R")


def normalize_tag(tag: object) -> ScalarType:
    """Turn any accepted tag form into a ScalarType.

    Accepts a ScalarType (or its ordinal), a numpy dtype-like, an object with
    a numpy `dtype` attribute such as an ndarray, or a legacy type-properties
    object exposing `scalar_type()`. The legacy form is deprecated.

    Raises:
        TypeError: If `tag` is none of the above or has no scalar type.
        ValueError: If an integer is not a valid ordinal.
    """
    if isinstance(tag, ScalarType):
        return tag
    if tag is None or isinstance(tag, bool):
        raise TypeError(f"{tag!r} is not a scalar type tag")
    if isinstance(tag, int):
        return ScalarType(tag)

    scalar_type = getattr(tag, "scalar_type", None)
    if callable(scalar_type):
        from typedispatch.dispatch.deprecated import warn_type_properties

        warn_type_properties(stacklevel=3)
        return ScalarType(scalar_type())

    dtype = getattr(tag, "dtype", None)
    if isinstance(dtype, np.dtype):
        return ScalarType.from_numpy(dtype)
    return ScalarType.from_numpy(tag)


def dispatch(
    tag: object,
    op_name: str,
    profile: DispatchProfile,
    body: Callable[..., R],
    *,
    capabilities: PlatformCapabilities | None = None,
) -> R:
    """Run `body` specialized for the runtime scalar type `tag`.

    Args:
        tag: Runtime scalar type (any form `normalize_tag` accepts). It is
            read exactly once.
        op_name: Operation name, used only in the error message.
        profile: Types the operation supports.
        body: Generic body; called once with the bound representation.
        capabilities: Platform flags. Defaults to the detected ones.

    Returns:
        Whatever `body` returns.

    Raises:
        UnsupportedTypeError: The type is not in `profile`, or the platform
            cannot run it.
    """
    scalar_type = normalize_tag(tag)

    binding = profile.lookup(scalar_type)
    if binding is None:
        logger.debug("%s: %s not in profile %s", op_name, scalar_type.name, profile.name)
        raise report(op_name, display_name_of(scalar_type))

    caps = default_capabilities() if capabilities is None else capabilities
    if not caps.supports(scalar_type):
        logger.debug("%s: %s not supported on this platform", op_name, scalar_type.name)
        raise report(op_name, display_name_of(scalar_type))

    return body(profile.argument(binding))


# =============================================================================
# Named entry points
# =============================================================================


def dispatch_floating_types(
    tag: object,
    op_name: str,
    body: Callable[..., R],
    *extra_tags: ScalarType,
    capabilities: PlatformCapabilities | None = None,
) -> R:
    """Double and Float, plus up to three `extra_tags`."""
    profile = FLOATING_TYPES.extend(*extra_tags)
    return dispatch(tag, op_name, profile, body, capabilities=capabilities)


def dispatch_floating_types_and_half(
    tag: object,
    op_name: str,
    body: Callable[..., R],
    *extra_tags: ScalarType,
    capabilities: PlatformCapabilities | None = None,
) -> R:
    """Double, Float and Half, plus up to three `extra_tags`."""
    profile = FLOATING_TYPES_AND_HALF.extend(*extra_tags)
    return dispatch(tag, op_name, profile, body, capabilities=capabilities)


def dispatch_integral_types(
    tag: object,
    op_name: str,
    body: Callable[..., R],
    *extra_tags: ScalarType,
    capabilities: PlatformCapabilities | None = None,
) -> R:
    """Byte, Char, Int, Long and Short, plus up to three `extra_tags`."""
    profile = INTEGRAL_TYPES.extend(*extra_tags)
    return dispatch(tag, op_name, profile, body, capabilities=capabilities)


def dispatch_all_types(
    tag: object,
    op_name: str,
    body: Callable[..., R],
    *extra_tags: ScalarType,
    capabilities: PlatformCapabilities | None = None,
) -> R:
    """Integral and floating types (no Half, Bool or complex), plus extras."""
    profile = ALL_TYPES.extend(*extra_tags)
    return dispatch(tag, op_name, profile, body, capabilities=capabilities)


def dispatch_complex_types(
    tag: object,
    op_name: str,
    body: Callable[..., R],
    *extra_tags: ScalarType,
    capabilities: PlatformCapabilities | None = None,
) -> R:
    profile = COMPLEX_TYPES.extend(*extra_tags)
    return dispatch(tag, op_name, profile, body, capabilities=capabilities)


def dispatch_floating_and_complex_types(
    tag: object,
    op_name: str,
    body: Callable[..., R],
    *extra_tags: ScalarType,
    capabilities: PlatformCapabilities | None = None,
) -> R:
    profile = FLOATING_AND_COMPLEX_TYPES.extend(*extra_tags)
    return dispatch(tag, op_name, profile, body, capabilities=capabilities)


def dispatch_all_types_and_complex(
    tag: object,
    op_name: str,
    body: Callable[..., R],
    *extra_tags: ScalarType,
    capabilities: PlatformCapabilities | None = None,
) -> R:
    profile = ALL_TYPES_AND_COMPLEX.extend(*extra_tags)
    return dispatch(tag, op_name, profile, body, capabilities=capabilities)
