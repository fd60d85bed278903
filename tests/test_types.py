import numpy as np
import pytest

from typedispatch.types import (
	Category,
	QuantizedRepresentation,
	Representation,
	ScalarType,
	display_name_of,
	is_complex,
	is_floating,
	is_integral,
	is_quantized,
	representation_of,
	to_underlying,
)


def test_ordinals_are_dense() -> None:
	assert [int(t) for t in ScalarType] == list(range(len(ScalarType)))
	assert ScalarType.Byte == 0
	assert ScalarType.BFloat16 == 15


def test_every_tag_has_a_representation() -> None:
	for tag in ScalarType:
		rep = representation_of(tag)
		assert isinstance(rep, Representation)
		assert rep.itemsize == tag.itemsize
		assert rep.storage.itemsize == rep.itemsize


@pytest.mark.parametrize(
	"tag, itemsize, category",
	[
		(ScalarType.Byte, 1, Category.UNSIGNED_INT),
		(ScalarType.Char, 1, Category.SIGNED_INT),
		(ScalarType.Long, 8, Category.SIGNED_INT),
		(ScalarType.Half, 2, Category.FLOATING),
		(ScalarType.Float, 4, Category.FLOATING),
		(ScalarType.Double, 8, Category.FLOATING),
		(ScalarType.ComplexHalf, 4, Category.COMPLEX),
		(ScalarType.ComplexDouble, 16, Category.COMPLEX),
		(ScalarType.Bool, 1, Category.BOOLEAN),
		(ScalarType.QInt32, 4, Category.QUANTIZED),
		(ScalarType.BFloat16, 2, Category.FLOATING),
	],
)
def test_width_and_category(tag: ScalarType, itemsize: int, category: Category) -> None:
	assert tag.itemsize == itemsize
	assert tag.category == category


def test_display_names() -> None:
	assert display_name_of(ScalarType.Bool) == "Bool"
	assert display_name_of(ScalarType.ComplexFloat) == "ComplexFloat"
	assert ScalarType.QUInt8.display_name == "QUInt8"


def test_invalid_ordinal_is_a_precondition_violation() -> None:
	with pytest.raises(ValueError):
		display_name_of(99)


def test_from_numpy() -> None:
	assert ScalarType.from_numpy(np.float32) == ScalarType.Float
	assert ScalarType.from_numpy("float64") == ScalarType.Double
	assert ScalarType.from_numpy(np.dtype(np.bool_)) == ScalarType.Bool
	assert ScalarType.from_numpy(np.complex64) == ScalarType.ComplexFloat
	assert ScalarType.from_numpy(np.uint8) == ScalarType.Byte


def test_from_numpy_rejects_unmapped_dtypes() -> None:
	with pytest.raises(TypeError):
		ScalarType.from_numpy(np.uint32)


def test_non_native_types_are_not_reachable_from_numpy() -> None:
	# bfloat16 is stored as uint16 bits; uint16 itself has no tag.
	with pytest.raises(TypeError):
		ScalarType.from_numpy(np.uint16)
	assert not ScalarType.BFloat16.representation.is_native
	assert not ScalarType.QInt8.representation.is_native


def test_quantized_underlying() -> None:
	assert to_underlying(ScalarType.QInt8) == ScalarType.Char
	assert to_underlying(ScalarType.QUInt8) == ScalarType.Byte
	assert to_underlying(ScalarType.QInt32) == ScalarType.Int
	assert to_underlying(ScalarType.Float) == ScalarType.Float

	qrep = ScalarType.QInt8.representation
	assert isinstance(qrep, QuantizedRepresentation)
	assert qrep.underlying is ScalarType.Char.representation


def test_quantized_width_must_match_underlying() -> None:
	with pytest.raises(ValueError):
		QuantizedRepresentation(
			name="qbad",
			itemsize=2,
			category=Category.QUANTIZED,
			storage=np.dtype(np.int16),
			underlying=ScalarType.Char.representation,
		)


def test_predicates() -> None:
	assert is_floating(ScalarType.Half)
	assert is_floating(ScalarType.BFloat16)
	assert not is_floating(ScalarType.ComplexFloat)
	assert is_complex(ScalarType.ComplexHalf)
	assert is_integral(ScalarType.Short)
	assert not is_integral(ScalarType.Bool)
	assert is_integral(ScalarType.Bool, include_bool=True)
	assert is_quantized(ScalarType.QUInt8)
	assert not is_quantized(ScalarType.Byte)
