import warnings

import pytest

from typedispatch.dispatch import (
    ALL_TYPES,
    ALL_TYPES_AND_COMPLEX,
    LEGACY_PROFILES,
    UnsupportedTypeError,
    build_profile,
    dispatch_all_types_and_half,
    dispatch_all_types_and_half_and_complex,
)
from typedispatch.types import ScalarType

S = ScalarType


def test_legacy_names_are_closed() -> None:
    assert set(LEGACY_PROFILES) == {"all+half", "all+half+complex"}


def test_all_and_half_maps_to_all_plus_half() -> None:
    with pytest.warns(DeprecationWarning, match="'all\\+half' is deprecated"):
        profile = build_profile("all+half")
    assert set(profile.tags) == set(ALL_TYPES.tags) | {S.Half}


def test_all_and_half_and_complex() -> None:
    with pytest.warns(DeprecationWarning, match="dispatch_all_types_and_complex"):
        profile = build_profile("all+half+complex")
    assert set(profile.tags) == set(ALL_TYPES_AND_COMPLEX.tags) | {S.Half}


def test_legacy_profile_can_still_be_extended() -> None:
    with pytest.warns(DeprecationWarning):
        profile = build_profile("all+half", S.Bool)
    assert S.Bool in profile


def test_legacy_entry_point_dispatches() -> None:
    with pytest.warns(DeprecationWarning):
        assert dispatch_all_types_and_half(S.Half, "fill", lambda t: t.itemsize) == 2


def test_legacy_notice_is_advisory() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", DeprecationWarning)
        assert dispatch_all_types_and_half_and_complex(S.ComplexFloat, "fill", lambda t: t.itemsize) == 8


def test_legacy_entry_point_rejects_like_any_other() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", DeprecationWarning)
        with pytest.raises(UnsupportedTypeError, match="fill not implemented for 'Bool'"):
            dispatch_all_types_and_half(S.Bool, "fill", lambda t: t)
