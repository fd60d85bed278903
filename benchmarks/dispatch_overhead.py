#!/usr/bin/env python3
"""
Dispatch overhead benchmark.

Measures the cost the dispatcher adds on top of calling a generic body
directly, for a base profile, an extended profile built per call, and the
rejection path.

Usage:
    python benchmarks/dispatch_overhead.py

Output:
    - Time per call for each path (ns)
    - Overhead relative to a direct body call
"""

import sys
import time
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from typedispatch.dispatch import (
    ALL_TYPES,
    PlatformCapabilities,
    UnsupportedTypeError,
    dispatch,
    dispatch_all_types,
)
from typedispatch.types import ScalarType


# =============================================================================
# Configuration
# =============================================================================

WARMUP_ITERS = 10_000
BENCH_ITERS = 200_000

CAPS = PlatformCapabilities()


def _body(scalar_t):
    return scalar_t.itemsize


def bench(fn, iters: int) -> float:
    """
    Time `iters` calls of `fn`.

    Returns:
        Nanoseconds per call
    """
    for _ in range(WARMUP_ITERS):
        fn()

    start = time.perf_counter_ns()
    for _ in range(iters):
        fn()
    end = time.perf_counter_ns()

    return (end - start) / iters


def _reject():
    try:
        dispatch(ScalarType.ComplexFloat, "bench", ALL_TYPES, _body, capabilities=CAPS)
    except UnsupportedTypeError:
        pass


def main():
    """Run the benchmark suite."""
    print("=" * 60)
    print("Scalar-Type Dispatch Overhead")
    print("=" * 60)

    rep = ScalarType.Float.representation
    cases = {
        "direct body call": lambda: _body(rep),
        "dispatch (base profile)": lambda: dispatch(ScalarType.Float, "bench", ALL_TYPES, _body, capabilities=CAPS),
        "dispatch_all_types + 2 extras": lambda: dispatch_all_types(
            ScalarType.Float, "bench", _body, ScalarType.Bool, ScalarType.Half, capabilities=CAPS
        ),
        "rejected type": _reject,
    }

    results = {}
    for label, fn in cases.items():
        results[label] = bench(fn, BENCH_ITERS)

    baseline = results["direct body call"]
    print(f"\n{'path':<32}{'ns/call':>10}{'overhead':>12}")
    print("-" * 54)
    for label, ns in results.items():
        print(f"{label:<32}{ns:>10.1f}{ns - baseline:>9.1f} ns")


if __name__ == "__main__":
    main()
