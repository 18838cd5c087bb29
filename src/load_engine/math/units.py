"""Distance unit normalisation and rounding helpers.

Miles are the canonical unit; every distance is converted before it
contributes to a load or a mileage total.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from load_engine.models.enums import KM_TO_MILES, MAX_EFFORT_LEVEL, DistanceUnit


def to_canonical_miles(value: float | None, unit: DistanceUnit | str | None) -> float:
    """Convert a logged distance to miles.

    Args:
        value: Logged distance, or None when not recorded.
        unit: ``"km"`` or ``"mile"``. Anything else (including None) is
            treated as miles.

    Returns:
        Distance in miles. None becomes 0.0.
    """
    if value is None:
        return 0.0
    if unit == DistanceUnit.KM:
        return value * KM_TO_MILES
    return float(value)


def sanitize_distance(value: float | None) -> float | None:
    """Clamp a logged distance to a usable value.

    Negative and non-finite values become 0.0, as does any distance too
    large for its maximum-effort load to stay finite.
    """
    if value is None:
        return None
    if not math.isfinite(value) or value < 0:
        return 0.0
    if not math.isfinite(value * MAX_EFFORT_LEVEL):
        return 0.0
    return float(value)


def round_half_up(value: float, ndigits: int) -> float:
    """Round half away from zero to *ndigits* decimals.

    Uses the shortest repr of *value*, so ``round_half_up(1.005, 2)``
    gives 1.01 where the built-in ``round`` would give 1.0. Non-finite
    values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))
