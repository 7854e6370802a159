"""Year-by-year compound growth with periodic contributions."""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import List, Optional, Sequence

from compound_interest.schemas.scenario import ScenarioParameters, YearlyResult

logger = logging.getLogger(__name__)

_CENT = Decimal("0.01")

# wide enough for every finite float (max ~1.8e308) plus two decimals
_WIDE = Context(prec=400)


def round2(value: float) -> float:
    """Round to cents, halves away from zero, on the exact binary value."""
    if not math.isfinite(value):
        return value
    return float(Decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP, context=_WIDE))


def simulate(params: ScenarioParameters, carry_rounded: bool = True) -> List[YearlyResult]:
    """
    Build the yearly series for one scenario.

    Order of operations (per year):
      1) Apply growth to the balance carried from the previous year.
      2) Add the year's contributions (they earn nothing this year).
      3) Round balance and invested total to cents.

    With ``carry_rounded`` the rounded figures are the running state for the
    next year; otherwise the running state keeps full precision and only the
    emitted row is rounded.
    """
    results: List[YearlyResult] = []
    if params.years < 1:
        return results

    current_value = float(params.starting_amount)
    total_invested = float(params.starting_amount)

    growth = 1 + params.rate_of_return / 100
    yearly_addition = params.incremental_addition * params.incremental_frequency.periods_per_year

    for year in range(1, params.years + 1):
        current_value *= growth
        current_value += yearly_addition
        total_invested += yearly_addition

        value_rounded = round2(current_value)
        invested_rounded = round2(total_invested)
        gained_rounded = round2(current_value - total_invested)

        if carry_rounded:
            current_value, total_invested = value_rounded, invested_rounded
            gained_rounded = round2(value_rounded - invested_rounded)

        results.append(
            YearlyResult(
                year=year,
                total_value=value_rounded,
                invested=invested_rounded,
                gained=gained_rounded,
            )
        )

    logger.debug(
        "simulated %d years (%s contributions), final value %.2f",
        params.years,
        params.incremental_frequency.value,
        results[-1].total_value,
    )
    return results


def ensure_contiguous(series: Sequence[YearlyResult]) -> None:
    """Raise ``ValueError`` unless ``series[i].year == i + 1`` throughout."""
    for index, row in enumerate(series):
        if row.year != index + 1:
            raise ValueError(f"series is not contiguous: position {index} holds year {row.year}")


def result_at_year(series: Sequence[YearlyResult], year: int) -> Optional[YearlyResult]:
    """Year N lives at index N - 1; ``None`` when the series does not reach it."""
    if 1 <= year <= len(series):
        return series[year - 1]
    return None


def final_value(series: Sequence[YearlyResult]) -> float:
    return series[-1].total_value if series else 0.0
