"""
Weight rounding utilities.

Rounding is half-up on the step grid (2.25 -> 2.5, 2.2 -> 2.0) so results do
not depend on Python's round-half-to-even. Non-finite and negative values
clamp to zero: a lifter can never be prescribed a negative load.
"""

import math

from progression_api.core.constants import WEIGHT_STEP


def round_to_nearest(value: float, step: float) -> float:
    """
    Round a weight to the nearest multiple of step.

    Args:
        value: Raw weight
        step: Grid size (must be positive)

    Returns:
        Non-negative multiple of step, or 0.0 for non-finite/negative input
    """
    if step <= 0:
        raise ValueError(f"Rounding step must be positive, got {step}")
    if not math.isfinite(value):
        return 0.0
    rounded = math.floor(value / step + 0.5) * step
    if not math.isfinite(rounded) or rounded < 0:
        return 0.0
    # Strip float noise such as 2.5000000000000004
    return float(round(rounded, 6))


def round_to_nearest_half(value: float) -> float:
    """Round a weight to the nearest 0.5."""
    return round_to_nearest(value, WEIGHT_STEP)
