"""Scalar-type dispatch: profiles, invocation, quantized bindings, errors."""

from typedispatch.dispatch.adapter import (
    dispatch,
    dispatch_all_types,
    dispatch_all_types_and_complex,
    dispatch_complex_types,
    dispatch_floating_and_complex_types,
    dispatch_floating_types,
    dispatch_floating_types_and_half,
    dispatch_integral_types,
    normalize_tag,
)
from typedispatch.dispatch.capabilities import (
    PlatformCapabilities,
    default_capabilities,
)
from typedispatch.dispatch.deprecated import (
    LEGACY_PROFILES,
    dispatch_all_types_and_half,
    dispatch_all_types_and_half_and_complex,
)
from typedispatch.dispatch.errors import (
    DispatchError,
    ProfileBuildError,
    UnsupportedTypeError,
    report,
)
from typedispatch.dispatch.profile import (
    ALL_TYPES,
    ALL_TYPES_AND_COMPLEX,
    BASE_PROFILES,
    COMPLEX_TYPES,
    FLOATING_AND_COMPLEX_TYPES,
    FLOATING_TYPES,
    FLOATING_TYPES_AND_HALF,
    INTEGRAL_TYPES,
    MAX_EXTRA_TAGS,
    Binding,
    DispatchProfile,
    build_profile,
)
from typedispatch.dispatch.quantized import (
    QINT_TYPES,
    QuantizedBinding,
    QuantizedProfile,
    dispatch_qint_types,
)

__all__ = [
    # adapter.py: invocation
    "dispatch",
    "normalize_tag",
    "dispatch_floating_types",
    "dispatch_floating_types_and_half",
    "dispatch_integral_types",
    "dispatch_all_types",
    "dispatch_complex_types",
    "dispatch_floating_and_complex_types",
    "dispatch_all_types_and_complex",
    # profile.py: profile builder
    "Binding",
    "DispatchProfile",
    "build_profile",
    "BASE_PROFILES",
    "MAX_EXTRA_TAGS",
    "FLOATING_TYPES",
    "FLOATING_TYPES_AND_HALF",
    "INTEGRAL_TYPES",
    "ALL_TYPES",
    "COMPLEX_TYPES",
    "FLOATING_AND_COMPLEX_TYPES",
    "ALL_TYPES_AND_COMPLEX",
    # quantized.py: quantized bindings
    "QuantizedBinding",
    "QuantizedProfile",
    "QINT_TYPES",
    "dispatch_qint_types",
    # capabilities.py: platform guard
    "PlatformCapabilities",
    "default_capabilities",
    # errors.py: error reporter
    "DispatchError",
    "UnsupportedTypeError",
    "ProfileBuildError",
    "report",
    # deprecated.py: legacy names
    "LEGACY_PROFILES",
    "dispatch_all_types_and_half",
    "dispatch_all_types_and_half_and_complex",
]
