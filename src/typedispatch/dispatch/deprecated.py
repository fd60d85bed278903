"""Deprecated profile names and tag forms, kept for backward compatibility.

Do not add new entries here. Each use warns with the replacement to migrate to.
"""

from __future__ import annotations

import logging
import warnings
from typing import Callable, NamedTuple, TypeVar

from typedispatch.dispatch.adapter import dispatch
from typedispatch.dispatch.capabilities import PlatformCapabilities
from typedispatch.dispatch.profile import BASE_PROFILES, DispatchProfile
from typedispatch.types import ScalarType

logger = logging.getLogger(__name__)

R = TypeVar("R")


class LegacyProfile(NamedTuple):
    base: str
    extra: ScalarType
    replacement: str


LEGACY_PROFILES: dict[str, LegacyProfile] = {
    "all+half": LegacyProfile(
        base="all",
        extra=ScalarType.Half,
        replacement="dispatch_all_types(tag, name, body, ScalarType.Half)",
    ),
    "all+half+complex": LegacyProfile(
        base="all+complex",
        extra=ScalarType.Half,
        replacement="dispatch_all_types_and_complex(tag, name, body, ScalarType.Half)",
    ),
}


def resolve_legacy(name: str, *, stacklevel: int = 2) -> DispatchProfile:
    """Build the current equivalent of a legacy profile name, with a warning."""
    legacy = LEGACY_PROFILES[name]
    warnings.warn(
        f"dispatch profile {name!r} is deprecated, use {legacy.replacement} instead",
        DeprecationWarning,
        stacklevel=stacklevel,
    )
    logger.debug("resolved legacy profile %s -> %s + %s", name, legacy.base, legacy.extra.name)
    return BASE_PROFILES[legacy.base].extend(legacy.extra)


def warn_type_properties(*, stacklevel: int = 2) -> None:
    warnings.warn(
        "passing a type-properties object as a dispatch tag is deprecated, "
        "pass a ScalarType instead",
        DeprecationWarning,
        stacklevel=stacklevel + 1,
    )


def dispatch_all_types_and_half(
    tag: object,
    op_name: str,
    body: Callable[..., R],
    *,
    capabilities: PlatformCapabilities | None = None,
) -> R:
    """Deprecated: use `dispatch_all_types(tag, op_name, body, ScalarType.Half)`."""
    profile = resolve_legacy("all+half", stacklevel=3)
    return dispatch(tag, op_name, profile, body, capabilities=capabilities)


def dispatch_all_types_and_half_and_complex(
    tag: object,
    op_name: str,
    body: Callable[..., R],
    *,
    capabilities: PlatformCapabilities | None = None,
) -> R:
    """Deprecated: use `dispatch_all_types_and_complex(tag, op_name, body, ScalarType.Half)`."""
    profile = resolve_legacy("all+half+complex", stacklevel=3)
    return dispatch(tag, op_name, profile, body, capabilities=capabilities)
