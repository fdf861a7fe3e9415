"""Math helpers — rounding, angle normalization. No engine imports."""

from __future__ import annotations

import math


def round_half_up(value: float, decimals: int = 0) -> float | int:
    """Round half away from -inf: 2.5 → 3, -2.5 → -2.

    Returns an int when ``decimals`` is 0 so offset coordinates stay in the
    integer domain of the input path.
    """
    if decimals == 0:
        return int(math.floor(value + 0.5))
    factor = 10**decimals
    return math.floor(value * factor + 0.5) / factor


def heading(dx: float, dy: float) -> float:
    """Direction of the vector (dx, dy) in degrees, in (-180, 180]."""
    return math.degrees(math.atan2(dy, dx))


def normalize_turn(degrees: float) -> float:
    """Map a turn angle into (-180, 180], counting an exact reversal as no turn."""
    turn = degrees % 360.0
    if turn == 180.0:
        return 0.0
    if turn > 180.0:
        return turn - 360.0
    return turn
