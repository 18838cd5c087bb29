"""Enumerations and constants for the training-load engine.

All thresholds and constants cite their published research source or
the coaching convention they come from.
"""

from enum import Enum


class Zone(str, Enum):
    """ACWR risk category.

    Membership matters, ordering does not. ``INSUFFICIENT`` means the
    ratio could not be computed from the available history.
    """

    INSUFFICIENT = "insufficient"
    UNDERTRAINING = "undertraining"
    OPTIMAL = "optimal"
    CAUTION = "caution"
    DANGER = "danger"
    CRITICAL = "critical"


class DistanceUnit(str, Enum):
    """Units a workout log may record distance in."""

    MILE = "mile"
    KM = "km"


class TrendDirection(str, Enum):
    """Short-range direction of the ACWR history."""

    STABLE = "stable"
    INCREASING = "increasing"
    DECREASING = "decreasing"


# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------
KM_TO_MILES = 0.621371

# ---------------------------------------------------------------------------
# Session load = effort (session RPE, 1-10) x distance, Foster et al. (2001)
# ---------------------------------------------------------------------------
DEFAULT_EFFORT_LEVEL = 5  # "Moderate" when the athlete did not log effort
MIN_EFFORT_LEVEL = 1
MAX_EFFORT_LEVEL = 10

# ---------------------------------------------------------------------------
# Windows (days)
# ---------------------------------------------------------------------------
LOAD_WINDOW_DAYS = 35  # 28-day chronic window + 7-day buffer
WEEKLY_WINDOW_DAYS = 7
RAW_TREND_DAYS = 14

# EWMA spans for ACWR calculation, Williams et al. (2017)
EWMA_ACUTE_SPAN = 7
EWMA_CHRONIC_SPAN = 28

# Decay constant lambda = 2 / (N + 1)
ACUTE_LAMBDA = 2 / (EWMA_ACUTE_SPAN + 1)  # 0.25
CHRONIC_LAMBDA = 2 / (EWMA_CHRONIC_SPAN + 1)  # ~0.069

# Fewer non-zero load days than this and the ratio is not reported
MIN_DAYS_WITH_DATA = 7

# ---------------------------------------------------------------------------
# ACWR zone upper bounds, Gabbett (2016), Br J Sports Med 50(5):273-280
# ---------------------------------------------------------------------------
ACWR_UNDERTRAINING_BELOW = 0.8  # Exclusive: < 0.8 is undertraining
ACWR_OPTIMAL_MAX = 1.3  # Inclusive "sweet spot" upper bound
ACWR_CAUTION_MAX = 1.5
ACWR_DANGER_MAX = 2.0  # Above this = critical

# History points are "stable" when they move less than this
TREND_STABLE_TOLERANCE = 0.05
TREND_LOOKBACK_POINTS = 3

# Display label and description per zone
ZONE_DESCRIPTIONS: dict[Zone, tuple[str, str]] = {
    Zone.INSUFFICIENT: ("Insufficient Data", "Need more workout logs to calculate ACWR"),
    Zone.UNDERTRAINING: ("Undertraining", "Training load is low - fitness may decline"),
    Zone.OPTIMAL: ("Optimal", "Training load is in the sweet spot"),
    Zone.CAUTION: ("Caution", "Training load is elevated - monitor closely"),
    Zone.DANGER: ("High Risk", "Training spike detected - injury risk elevated"),
    Zone.CRITICAL: ("Critical", "Severe training spike - high injury risk"),
}
