"""Unsigned fixed-width integer helpers."""

import structlog

from ..errors import DimensionRangeError

logger = structlog.get_logger(__name__)

UINT16_BITS = 16
UINT32_BITS = 32


def uint_max(bits: int) -> int:
    """Largest value an unsigned integer of ``bits`` width can hold."""
    return (1 << bits) - 1


def ensure_uint(value: int, bits: int = UINT16_BITS, field: str = "value") -> int:
    """
    Validate that ``value`` fits an unsigned integer of ``bits`` width.

    Args:
        value: Candidate integer
        bits: Width of the modeled unsigned type
        field: Name reported in the error

    Returns:
        The value unchanged

    Raises:
        DimensionRangeError: If value is not an int or is out of range
    """
    max_value = uint_max(bits)

    if not isinstance(value, int) or isinstance(value, bool):
        logger.warning("Rejected non-integer value", field=field, value=repr(value))
        raise DimensionRangeError(
            f"{field} must be an integer, got {type(value).__name__}",
            field=field,
            value=value,
            max_value=max_value,
        )

    if value < 0 or value > max_value:
        logger.warning("Rejected out of range value", field=field, value=value, bits=bits)
        raise DimensionRangeError(
            f"{field} must be between 0 and {max_value}, got {value}",
            field=field,
            value=value,
            max_value=max_value,
        )

    return value


def widen_product(a: int, b: int, bits: int = UINT32_BITS) -> int:
    """
    Multiply two unsigned values in a widened range.

    Raises:
        DimensionRangeError: If the product does not fit ``bits``
    """
    product = a * b
    max_value = uint_max(bits)

    if product > max_value:
        logger.warning("Rejected out of range product", field="area", value=product, bits=bits)
        raise DimensionRangeError(
            f"area must be between 0 and {max_value}, got {product}",
            field="area",
            value=product,
            max_value=max_value,
        )

    return product
