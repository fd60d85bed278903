"""typedispatch: run one generic kernel body for whichever scalar type shows up.

A small, closed set of scalar type tags is mapped to numpy-backed
representations. Kernels pick a dispatch profile (the types they support) and
hand over a generic body; the dispatcher binds the body to the runtime type's
representation or raises a uniform UnsupportedTypeError.
"""

from .dispatch import (
    ALL_TYPES,
    FLOATING_TYPES,
    QINT_TYPES,
    DispatchProfile,
    ProfileBuildError,
    UnsupportedTypeError,
    build_profile,
    dispatch,
)
from .types import Representation, ScalarType

__all__ = [
    "ScalarType",
    "Representation",
    "DispatchProfile",
    "build_profile",
    "dispatch",
    "FLOATING_TYPES",
    "ALL_TYPES",
    "QINT_TYPES",
    "UnsupportedTypeError",
    "ProfileBuildError",
]
