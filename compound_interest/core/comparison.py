"""Side-by-side comparison of up to two scenarios."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from compound_interest.core.simulation import final_value, result_at_year, simulate
from compound_interest.schemas.scenario import (
    JointPoint,
    ResolvedPoint,
    ScenarioParameters,
    YearlyResult,
)

logger = logging.getLogger(__name__)

TICK_STEP = 5


class ComparisonStateError(RuntimeError):
    """Coordinator used in a way its current state does not allow."""


def merge(
    series_a: Sequence[YearlyResult],
    series_b: Optional[Sequence[YearlyResult]] = None,
) -> List[JointPoint]:
    """Align two series by year; the shorter one simply stops contributing."""
    series_b = series_b or []
    joint: List[JointPoint] = []
    for year in range(1, max(len(series_a), len(series_b)) + 1):
        row_a = result_at_year(series_a, year)
        row_b = result_at_year(series_b, year)
        joint.append(
            JointPoint(
                year=year,
                value_a=row_a.total_value if row_a is not None else None,
                value_b=row_b.total_value if row_b is not None else None,
            )
        )
    return joint


def x_axis_ticks(max_years: int) -> List[int]:
    """Ticks at 0 and every 5th year up to the last multiple of 5 <= max_years."""
    return [i * TICK_STEP for i in range(max(max_years // TICK_STEP + 1, 0))]


class ComparisonCoordinator:
    """
    Holds the primary scenario (A) and, while comparing, a second one (B).

    Every mutation recomputes the affected series in full. B starts as a copy
    of A when comparison is enabled and is independent from then on.
    """

    merge = staticmethod(merge)

    def __init__(self, primary: Optional[ScenarioParameters] = None):
        self._primary: Optional[ScenarioParameters] = None
        self._secondary: Optional[ScenarioParameters] = None
        self._results_a: List[YearlyResult] = []
        self._results_b: List[YearlyResult] = []
        self._comparing = False
        self._selected_year: Optional[int] = None
        if primary is not None:
            self.set_primary(primary)

    @property
    def primary(self) -> Optional[ScenarioParameters]:
        return self._primary

    @property
    def secondary(self) -> Optional[ScenarioParameters]:
        return self._secondary

    @property
    def is_comparing(self) -> bool:
        return self._comparing

    @property
    def results_a(self) -> List[YearlyResult]:
        return list(self._results_a)

    @property
    def results_b(self) -> List[YearlyResult]:
        return list(self._results_b)

    @property
    def selected_year(self) -> Optional[int]:
        return self._selected_year

    def set_primary(self, params: ScenarioParameters) -> None:
        self._primary = params
        self._results_a = simulate(params)

    def enable_comparison(self) -> None:
        if self._primary is None:
            raise ComparisonStateError("cannot compare without a primary scenario")
        self._comparing = True
        self._secondary = self._primary.model_copy()
        self._results_b = simulate(self._secondary)
        logger.debug("comparison enabled from a %d year primary", self._primary.years)

    def disable_comparison(self) -> None:
        self._comparing = False
        self._secondary = None
        self._results_b = []
        self._selected_year = None
        logger.debug("comparison disabled")

    def set_secondary(self, params: ScenarioParameters) -> None:
        if not self._comparing:
            raise ComparisonStateError("comparison is not enabled")
        self._secondary = params
        self._results_b = simulate(params)

    @property
    def joint_series(self) -> List[JointPoint]:
        return merge(self._results_a, self._results_b if self._comparing else None)

    def select_point(self, year: int) -> None:
        self._selected_year = year

    def resolve(self, year: Optional[int] = None) -> Optional[ResolvedPoint]:
        """Look up ``year`` (default: the selected one) in each active series."""
        if year is None:
            year = self._selected_year
        if year is None:
            return None
        return ResolvedPoint(
            year=year,
            result_a=result_at_year(self._results_a, year),
            result_b=result_at_year(self._results_b, year) if self._comparing else None,
            comparing=self._comparing,
        )

    def x_axis_ticks(self) -> List[int]:
        years_a = self._primary.years if self._primary is not None else 0
        years_b = self._secondary.years if self._secondary is not None else 0
        return x_axis_ticks(max(years_a, years_b))

    @property
    def final_values(self) -> Dict[str, Optional[float]]:
        return {
            "a": final_value(self._results_a),
            "b": final_value(self._results_b) if self._comparing else None,
        }
