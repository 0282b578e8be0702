"""Range-input helpers shared by the configuration endpoints"""

import math

from fynp_gateway.domain.exceptions import InvalidRangeError
from fynp_gateway.utils.numbers import is_finite


def snap_to_step(value: float, minimum: float, maximum: float, step: float) -> float:
    """
    Snap a raw range-input value to the nearest step and clamp it into bounds.

    Example:
        snap_to_step(123456, 50_000, 1_000_000, 1000) -> 123000

    Raises:
        InvalidRangeError: If the bounds are inverted or the step is not positive
    """
    if maximum < minimum:
        raise InvalidRangeError(f"Range maximum {maximum} is below minimum {minimum}")
    if not step > 0:
        raise InvalidRangeError(f"Range step must be positive, got {step}")

    if not is_finite(value):
        return minimum

    stepped = math.floor(value / step + 0.5) * step
    return max(minimum, min(stepped, maximum))
