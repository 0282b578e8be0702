"""Numeric domain checks shared by the calculators"""

import math


def is_finite(*values: float) -> bool:
    """True when every value is a finite float; ints beyond float range are not"""
    try:
        return all(math.isfinite(v) for v in values)
    except OverflowError:
        return False
