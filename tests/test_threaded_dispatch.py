"""Concurrent dispatch tests.

Dispatch holds no mutable state, so independent calls from many threads must
each see exactly their own binding and their own errors.
"""

from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from typedispatch.dispatch import (
    ALL_TYPES,
    PlatformCapabilities,
    UnsupportedTypeError,
    dispatch,
    dispatch_all_types,
)
from typedispatch.types import ScalarType

S = ScalarType
CAPS = PlatformCapabilities()

TAGS = [S.Byte, S.Char, S.Short, S.Int, S.Long, S.Float, S.Double, S.Bool, S.ComplexFloat]


def _one_call(i: int):
    tag = TAGS[i % len(TAGS)]
    try:
        rep = dispatch(tag, "identity", ALL_TYPES, lambda t: t, capabilities=CAPS)
    except UnsupportedTypeError as e:
        return tag, e.type_name
    return tag, rep


@pytest.mark.parametrize("workers", [2, 8])
def test_concurrent_dispatch_sees_own_binding(workers: int) -> None:
    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(_one_call, range(2000)))

    for tag, outcome in results:
        if tag in ALL_TYPES:
            assert outcome is tag.representation
        else:
            assert outcome == tag.name


def test_concurrent_kernels_match_sequential() -> None:
    rng = np.random.default_rng(7)
    arrays = [rng.standard_normal(256).astype(dt) for dt in (np.float32, np.float64, np.int32, np.int64)]

    def run(arr):
        return dispatch_all_types(arr, "sum", lambda t: np.sum(arr, dtype=t.storage))

    sequential = [run(a) for a in arrays]
    with ThreadPoolExecutor(max_workers=4) as pool:
        for _ in range(20):
            threaded = list(pool.map(run, arrays))
            for got, want in zip(threaded, sequential):
                assert got.tobytes() == want.tobytes()
