"""Tests for unsigned integer helpers"""

import pytest

from solid_app.errors import DimensionRangeError, SolidAppError
from solid_app.utils.ints import ensure_uint, uint_max, widen_product


class TestEnsureUint:
    """Test range validation"""

    def test_bounds_accepted(self):
        """Test both ends of the 16-bit range"""
        assert ensure_uint(0) == 0
        assert ensure_uint(65535) == 65535

    def test_above_range(self):
        """Test one past the top of the range"""
        with pytest.raises(DimensionRangeError) as exc_info:
            ensure_uint(65536, field="side")
        assert exc_info.value.field == "side"
        assert exc_info.value.value == 65536
        assert "between 0 and 65535" in str(exc_info.value)

    def test_negative(self):
        """Test that negative values are rejected"""
        with pytest.raises(DimensionRangeError):
            ensure_uint(-1)

    @pytest.mark.parametrize("value", [1.0, "3", True, None])
    def test_non_integer(self, value):
        """Test that only real integers are accepted"""
        with pytest.raises(DimensionRangeError):
            ensure_uint(value)

    def test_error_hierarchy(self):
        """Test that range errors are also ValueErrors"""
        with pytest.raises(ValueError):
            ensure_uint(-5)
        with pytest.raises(SolidAppError):
            ensure_uint(-5)


class TestWidenProduct:
    """Test widened multiplication"""

    def test_uint_max(self):
        """Test range limits"""
        assert uint_max(16) == 65535
        assert uint_max(32) == 4294967295

    def test_product_fits(self):
        """Test that the largest 16-bit product fits 32 bits"""
        assert widen_product(65535, 65535) == 4294836225

    def test_product_out_of_range(self):
        """Test that a product past the widened range raises a typed error"""
        with pytest.raises(DimensionRangeError) as exc_info:
            widen_product(1_000_000, 1_000_000)

        assert exc_info.value.field == "area"
        assert exc_info.value.max_value == 4294967295
        assert exc_info.value.value == 1_000_000_000_000
