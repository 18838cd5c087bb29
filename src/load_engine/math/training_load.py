"""Training load smoothing: EWMA-based ACWR and its risk zones.

References:
    - Williams et al. (2017): EWMA-based ACWR
    - Gabbett (2016): ACWR injury risk thresholds
"""

from __future__ import annotations

import math

import numpy as np
import pandas as pd

from load_engine.math.units import round_half_up
from load_engine.models.acwr_result import ACWRResult
from load_engine.models.daily_load import DailyLoadSeries
from load_engine.models.enums import (
    ACUTE_LAMBDA,
    ACWR_CAUTION_MAX,
    ACWR_DANGER_MAX,
    ACWR_OPTIMAL_MAX,
    ACWR_UNDERTRAINING_BELOW,
    CHRONIC_LAMBDA,
    EWMA_ACUTE_SPAN,
    MIN_DAYS_WITH_DATA,
    Zone,
)


def calculate_ewma(values: list[float] | tuple[float, ...], lam: float) -> float:
    """Calculate the most recent value of an exponentially weighted moving average.

    The first value seeds the average; each following value updates it as
    ``avg = lam * v + (1 - lam) * avg``. Pass exactly the slice to be
    smoothed: the seed weighs heavily on short slices.

    Args:
        values: Time series of daily values (oldest first).
        lam: Decay constant, 0 < lam <= 1 (e.g. 2 / (7 + 1) for acute).

    Returns:
        The most recent EWMA value, 0.0 for an empty series.

    Reference:
        Williams et al. (2017). J Sci Med Sport 20(5):493-497.
    """
    if len(values) == 0:
        return 0.0
    series = pd.Series(values, dtype=np.float64)
    ewma = series.ewm(alpha=lam, adjust=False).mean()
    return float(ewma.iloc[-1])


def acwr_ratio(acute: float, chronic: float) -> float | None:
    """Acute / chronic rounded to 2 decimals.

    None when chronic is not positive or the ratio is not finite.
    """
    if chronic <= 0:
        return None
    ratio = acute / chronic
    if not math.isfinite(ratio):
        return None
    return round_half_up(ratio, 2)


def classify_zone(acwr: float | None) -> Zone:
    """Classify an ACWR value into a risk zone.

    Each band includes its upper bound: 1.3 is optimal, 1.5 is caution,
    2.0 is danger.

    Args:
        acwr: Acute:Chronic Workload Ratio, or None when unavailable.

    Returns:
        The matching Zone; ``Zone.INSUFFICIENT`` for None.

    Reference:
        Gabbett (2016), Br J Sports Med 50(5):273-280.
        Sweet spot: 0.8 - 1.3. Danger zone: >1.5.
    """
    if acwr is None:
        return Zone.INSUFFICIENT
    if acwr < ACWR_UNDERTRAINING_BELOW:
        return Zone.UNDERTRAINING
    if acwr <= ACWR_OPTIMAL_MAX:
        return Zone.OPTIMAL
    if acwr <= ACWR_CAUTION_MAX:
        return Zone.CAUTION
    if acwr <= ACWR_DANGER_MAX:
        return Zone.DANGER
    return Zone.CRITICAL


def compute_acwr(series: DailyLoadSeries) -> ACWRResult:
    """Calculate the current Acute:Chronic Workload Ratio using the EWMA method.

    The acute EWMA runs over the last 7 days only; the chronic EWMA runs
    over the whole series. Fewer than 7 days with load yields an
    ``insufficient`` result with zeroed loads.

    Args:
        series: Dense daily load series ending on the anchor day.

    Returns:
        ACWRResult with loads rounded to 1 decimal and the ratio to 2.
    """
    days_with_data = series.days_with_data
    if days_with_data < MIN_DAYS_WITH_DATA:
        return ACWRResult(
            acwr=None,
            acute_load=0.0,
            chronic_load=0.0,
            zone=Zone.INSUFFICIENT,
            days_with_data=days_with_data,
        )

    acute = calculate_ewma(series.last(EWMA_ACUTE_SPAN), ACUTE_LAMBDA)
    chronic = calculate_ewma(series.loads, CHRONIC_LAMBDA)
    acwr = acwr_ratio(acute, chronic)

    return ACWRResult(
        acwr=acwr,
        acute_load=round_half_up(acute, 1),
        chronic_load=round_half_up(chronic, 1),
        zone=classify_zone(acwr),
        days_with_data=days_with_data,
    )
