"""Unit tests for numeric domain checks"""

import math
import pytest
from fynp_gateway.utils.numbers import is_finite


def test_is_finite_accepts_ordinary_values():
    """Test ints and floats inside float range"""
    assert is_finite(0, 10.5, 500000, -12)


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, 10**400, -(10**400)])
def test_is_finite_rejects_out_of_range(value):
    """Test NaN, infinities and ints too large for a float"""
    assert not is_finite(value)
    assert not is_finite(500000, value)
