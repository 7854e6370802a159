"""Data contracts for compound interest simulations and comparisons."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ContributionFrequency(str, Enum):
    """How often the incremental addition is paid in during a year."""

    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"

    @property
    def periods_per_year(self) -> int:
        return _PERIODS_PER_YEAR[self]


_PERIODS_PER_YEAR = {
    ContributionFrequency.MONTHLY: 12,
    ContributionFrequency.QUARTERLY: 4,
    ContributionFrequency.YEARLY: 1,
}


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class ScenarioParameters(_CamelModel):
    """Inputs for one scenario. Replaced wholesale, never edited in place."""

    model_config = ConfigDict(frozen=True)

    starting_amount: float = Field(..., ge=0, description="Initial principal.")
    rate_of_return: float = Field(
        ...,
        description="Annual rate applied once per year, in percent (10 means 10%).",
    )
    incremental_addition: float = Field(
        0.0,
        description="Amount added per contribution period.",
    )
    incremental_frequency: ContributionFrequency = ContributionFrequency.MONTHLY
    years: int = Field(..., description="Number of yearly steps; below 1 yields no rows.")


class YearlyResult(_CamelModel):
    """Single row of a result series."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=1)
    total_value: float
    invested: float
    gained: float


class JointPoint(_CamelModel):
    """One year of the merged series; ``None`` where a scenario has stopped."""

    year: int = Field(..., ge=1)
    value_a: Optional[float] = None
    value_b: Optional[float] = None


class ResolvedPoint(_CamelModel):
    """Detail for a picked year, per scenario."""

    year: int
    result_a: Optional[YearlyResult] = None
    result_b: Optional[YearlyResult] = None
    comparing: bool = False


class SimulationResponse(_CamelModel):
    results: List[YearlyResult]
    final_value: float
    final_value_display: str


class ComparisonRequest(_CamelModel):
    primary: ScenarioParameters
    secondary: Optional[ScenarioParameters] = None
    selected_year: Optional[int] = None


class FinalValues(_CamelModel):
    a: float
    b: Optional[float] = None


class ComparisonResponse(_CamelModel):
    joint_series: List[JointPoint]
    x_axis_ticks: List[int]
    selected: Optional[ResolvedPoint] = None
    final_values: FinalValues


class FrequencyOption(_CamelModel):
    value: ContributionFrequency
    periods_per_year: int
