from __future__ import annotations

import logging
import sys
from pathlib import Path

import numpy as np

repo_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(repo_root / "src"))

from typedispatch.dispatch import (
    QuantizedBinding,
    UnsupportedTypeError,
    dispatch_all_types,
    dispatch_floating_types,
    dispatch_qint_types,
)
from typedispatch.types import ScalarType


def fill(arr: np.ndarray, value: float) -> np.ndarray:
    """Fill supports every integral/floating type plus Bool and Half."""

    def body(scalar_t):
        out = np.empty(arr.shape, dtype=scalar_t.storage)
        out[...] = value
        return out

    return dispatch_all_types(arr, "fill", body, ScalarType.Bool, ScalarType.Half)


def softmax(arr: np.ndarray) -> np.ndarray:
    """Floating only; integer inputs are rejected."""

    def body(scalar_t):
        x = arr.astype(scalar_t.storage, copy=False)
        e = np.exp(x - x.max())
        return e / e.sum()

    return dispatch_floating_types(arr, "softmax", body)


def dequantize(raw: np.ndarray, qtype: ScalarType, scale: float, zero_point: int) -> np.ndarray:
    def body(qb: QuantizedBinding):
        values = raw.view(qb.underlying_representation.storage).astype(np.int64)
        return ((values - zero_point) * scale).astype(np.float32)

    return dispatch_qint_types(qtype, "dequantize", body)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("fill:")
    for dt in (np.float32, np.int16, np.bool_, np.float16):
        print(f"  {np.dtype(dt).name:>8} -> {fill(np.zeros(3, dtype=dt), 1)}")

    print("\nsoftmax:")
    print(f"  float64 -> {softmax(np.array([1.0, 2.0, 3.0]))}")
    try:
        softmax(np.array([1, 2, 3], dtype=np.int32))
    except UnsupportedTypeError as e:
        print(f"  int32   -> error: {e}")

    print("\ndequantize:")
    raw = np.array([3, 5, 1, 7], dtype=np.uint8)
    print(f"  QUInt8 -> {dequantize(raw, ScalarType.QUInt8, scale=0.5, zero_point=3)}")


if __name__ == "__main__":
    main()
