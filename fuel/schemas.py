"""
Pydantic models for fuel log entries and the statistics derived from them.

``FuelEntry`` is the only input of the statistics engine. Every other model
here is derived output and is rebuilt from scratch on each computation.
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from date_utils import parse_calendar_date


class FuelEntry(BaseModel):
    """A single fuel purchase as recorded by the driver."""

    id: int | str | None = None
    date: date
    # 0 means the odometer was not recorded (cost-only entry)
    odometer_reading: float = Field(0.0, ge=0, allow_inf_nan=False)
    liters: float = Field(..., ge=0, allow_inf_nan=False)
    price_per_liter: float = Field(..., ge=0, allow_inf_nan=False)
    # Entries logged before the flag existed were all full tanks
    is_full_tank: bool = True

    model_config = ConfigDict(frozen=True)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date_field(cls, v: Any) -> date:
        """Accept ``YYYY-MM-DD`` strings and ISO timestamps."""
        parsed = parse_calendar_date(v)
        if parsed is None:
            raise ValueError(f"Invalid date value: {v}")
        return parsed


class EnrichedEntry(FuelEntry):
    """A fuel entry together with the metrics derived for it."""

    distance_since_reference: float = 0.0
    total_cost: float = 0.0
    consumption_rate: float = 0.0
    cost_per_distance: float = 0.0


class AggregateStats(BaseModel):
    """Lifetime totals plus the recent-window averages."""

    total_distance: float = 0.0
    total_liters: float = 0.0
    total_cost: float = 0.0
    average_consumption: float = 0.0
    average_cost_per_liter: float = 0.0
    average_cost_per_distance: float = 0.0
    sliding_average_consumption: float = 0.0
    recent_average_price_per_liter: float = 0.0
    estimated_range: float = 0.0


class MonthlyBucket(BaseModel):
    """Fill-ups of one calendar month."""

    month: str = Field(..., description="Bucket key, YYYY-MM")
    year: int
    month_number: int
    label: str
    total_cost: float = 0.0
    total_liters: float = 0.0
    average_consumption: float = 0.0
    fillup_count: int = 0


class CalculatedData(BaseModel):
    """Complete output of one statistics computation."""

    enriched_entries: list[EnrichedEntry] = Field(default_factory=list)
    stats: AggregateStats = Field(default_factory=AggregateStats)
    monthly_stats: list[MonthlyBucket] = Field(default_factory=list)


class TripEstimate(BaseModel):
    """Fuel and cost projected for a planned trip."""

    distance: float
    liters_estimated: float
    cost_estimated: float


class DashboardSummary(BaseModel):
    """Headline figures shown above the entry list."""

    tank_capacity: float
    current_month_cost: float = 0.0
    full_tank_cost: float = 0.0
    # None until at least one consumption sample exists
    trip_estimate: TripEstimate | None = None
    stats: AggregateStats = Field(default_factory=AggregateStats)


# ============================================================================
# Request Models
# ============================================================================


class FuelStatisticsRequest(BaseModel):
    """Request body carrying the full entry list to analyse."""

    entries: list[FuelEntry] = Field(default_factory=list)
    tank_capacity: float | None = Field(
        None, allow_inf_nan=False, description="Tank capacity in liters"
    )
    window_size: int | None = Field(
        None, description="Number of recent samples for rolling averages"
    )


class TripEstimateRequest(BaseModel):
    """Request body for a trip cost estimate."""

    distance: float = Field(..., ge=0, allow_inf_nan=False)
    consumption_rate: float = Field(..., ge=0, allow_inf_nan=False)
    price_per_liter: float = Field(..., ge=0, allow_inf_nan=False)


class DashboardRequest(FuelStatisticsRequest):
    """Statistics request plus an optional planned trip distance."""

    trip_distance: float | None = Field(
        None, ge=0, allow_inf_nan=False, description="Planned trip distance in km"
    )
