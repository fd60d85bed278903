from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np


class Category(str, Enum):
	"""Broad numeric family of a scalar type."""

	SIGNED_INT = "signed-int"
	UNSIGNED_INT = "unsigned-int"
	FLOATING = "floating"
	COMPLEX = "complex"
	QUANTIZED = "quantized"
	BOOLEAN = "boolean"


@dataclass(frozen=True, slots=True)
class Representation:
	"""In-memory representation bound to a scalar type during dispatch.

	This is what a generic body receives in place of a compile-time `scalar_t`.
	`storage` is the numpy dtype used to hold the elements. For types numpy
	has no native dtype for, `storage` is the physical layout (e.g. bfloat16
	is held as raw uint16 bits).
	"""

	name: str
	itemsize: int
	category: Category
	storage: np.dtype

	def __post_init__(self) -> None:
		if self.storage.itemsize != self.itemsize:
			raise ValueError(
				f"{self.name}: storage dtype {self.storage} is {self.storage.itemsize} bytes, "
				f"expected {self.itemsize}"
			)

	@property
	def is_native(self) -> bool:
		"""True when numpy can do arithmetic on `storage` directly."""
		return self.storage.kind in "biufc" and self.storage.name == self.name

	def __str__(self) -> str:  # pragma: no cover
		return self.name


@dataclass(frozen=True, slots=True)
class QuantizedRepresentation(Representation):
	"""Quantized representation viewing the storage of an unquantized type."""

	underlying: Representation | None = None

	def __post_init__(self) -> None:
		Representation.__post_init__(self)
		if self.underlying is None:
			raise ValueError(f"{self.name}: quantized representation needs an underlying type")
		if self.itemsize != self.underlying.itemsize:
			raise ValueError(
				f"{self.name}: width {self.itemsize} != underlying "
				f"{self.underlying.name} width {self.underlying.itemsize}"
			)


def _native(name: str, category: Category) -> Representation:
	dt = np.dtype(name)
	return Representation(name=name, itemsize=dt.itemsize, category=category, storage=dt)


uint8 = _native("uint8", Category.UNSIGNED_INT)
int8 = _native("int8", Category.SIGNED_INT)
int16 = _native("int16", Category.SIGNED_INT)
int32 = _native("int32", Category.SIGNED_INT)
int64 = _native("int64", Category.SIGNED_INT)
float16 = _native("float16", Category.FLOATING)
float32 = _native("float32", Category.FLOATING)
float64 = _native("float64", Category.FLOATING)
complex64 = _native("complex64", Category.COMPLEX)
complex128 = _native("complex128", Category.COMPLEX)
bool_ = Representation(name="bool", itemsize=1, category=Category.BOOLEAN, storage=np.dtype(np.bool_))

# numpy has neither a half-precision complex nor bfloat16; describe their layout.
complex32 = Representation(
	name="complex32",
	itemsize=4,
	category=Category.COMPLEX,
	storage=np.dtype([("real", np.float16), ("imag", np.float16)]),
)
bfloat16 = Representation(name="bfloat16", itemsize=2, category=Category.FLOATING, storage=np.dtype(np.uint16))

qint8 = QuantizedRepresentation(
	name="qint8", itemsize=1, category=Category.QUANTIZED, storage=np.dtype(np.int8), underlying=int8
)
quint8 = QuantizedRepresentation(
	name="quint8", itemsize=1, category=Category.QUANTIZED, storage=np.dtype(np.uint8), underlying=uint8
)
qint32 = QuantizedRepresentation(
	name="qint32", itemsize=4, category=Category.QUANTIZED, storage=np.dtype(np.int32), underlying=int32
)
