from __future__ import annotations

from enum import IntEnum

import numpy as np

from . import representation as rep
from .representation import Category, Representation


class ScalarType(IntEnum):
	"""Closed enumeration of tensor element types.

	Ordinals are dense and stable; dispatch tables are indexed by them.
	"""

	Byte = 0
	Char = 1
	Short = 2
	Int = 3
	Long = 4
	Half = 5
	Float = 6
	Double = 7
	ComplexHalf = 8
	ComplexFloat = 9
	ComplexDouble = 10
	Bool = 11
	QInt8 = 12
	QUInt8 = 13
	QInt32 = 14
	BFloat16 = 15

	@property
	def representation(self) -> Representation:
		return _REPRESENTATIONS[self]

	@property
	def display_name(self) -> str:
		return self.name

	@property
	def itemsize(self) -> int:
		return _REPRESENTATIONS[self].itemsize

	@property
	def category(self) -> Category:
		return _REPRESENTATIONS[self].category

	@classmethod
	def from_numpy(cls, dtype_like: object) -> ScalarType:
		"""Map a numpy dtype (or anything `np.dtype` accepts) to its tag."""
		dt = np.dtype(dtype_like)
		try:
			return _FROM_NUMPY[dt]
		except KeyError:
			raise TypeError(f"no scalar type corresponds to numpy dtype {dt}") from None

	def __str__(self) -> str:  # pragma: no cover
		return self.name


# Indexed by ordinal.
_REPRESENTATIONS: tuple[Representation, ...] = (
	rep.uint8,
	rep.int8,
	rep.int16,
	rep.int32,
	rep.int64,
	rep.float16,
	rep.float32,
	rep.float64,
	rep.complex32,
	rep.complex64,
	rep.complex128,
	rep.bool_,
	rep.qint8,
	rep.quint8,
	rep.qint32,
	rep.bfloat16,
)

assert len(_REPRESENTATIONS) == len(ScalarType)

_FROM_NUMPY: dict[np.dtype, ScalarType] = {
	r.storage: tag
	for tag, r in zip(ScalarType, _REPRESENTATIONS)
	if r.is_native
}

_UNDERLYING: dict[ScalarType, ScalarType] = {
	ScalarType.QInt8: ScalarType.Char,
	ScalarType.QUInt8: ScalarType.Byte,
	ScalarType.QInt32: ScalarType.Int,
}

_INTEGRAL = frozenset({ScalarType.Byte, ScalarType.Char, ScalarType.Short, ScalarType.Int, ScalarType.Long})


def representation_of(tag: ScalarType) -> Representation:
	return _REPRESENTATIONS[tag]


def display_name_of(tag: ScalarType) -> str:
	return ScalarType(tag).name


def to_underlying(tag: ScalarType) -> ScalarType:
	"""Storage tag of a quantized type; other tags map to themselves."""
	return _UNDERLYING.get(tag, tag)


def is_floating(tag: ScalarType) -> bool:
	return tag in (ScalarType.Half, ScalarType.Float, ScalarType.Double, ScalarType.BFloat16)


def is_complex(tag: ScalarType) -> bool:
	return tag in (ScalarType.ComplexHalf, ScalarType.ComplexFloat, ScalarType.ComplexDouble)


def is_integral(tag: ScalarType, *, include_bool: bool = False) -> bool:
	return tag in _INTEGRAL or (include_bool and tag == ScalarType.Bool)


def is_quantized(tag: ScalarType) -> bool:
	return tag in _UNDERLYING
