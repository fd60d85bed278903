from .representation import Category, QuantizedRepresentation, Representation
from .scalar_type import (
	ScalarType,
	display_name_of,
	is_complex,
	is_floating,
	is_integral,
	is_quantized,
	representation_of,
	to_underlying,
)

__all__ = [
	"Category",
	"Representation",
	"QuantizedRepresentation",
	"ScalarType",
	"representation_of",
	"display_name_of",
	"to_underlying",
	"is_floating",
	"is_complex",
	"is_integral",
	"is_quantized",
]
