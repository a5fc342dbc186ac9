"""API routes for fuel statistics and cost estimates."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Query

from config import get_default_tank_capacity, get_recent_window_size
from core.api import api_route
from core.exceptions import ValidationException
from fuel.schemas import (
    CalculatedData,
    DashboardRequest,
    DashboardSummary,
    FuelStatisticsRequest,
    TripEstimate,
    TripEstimateRequest,
)
from fuel.services import EstimatorService, StatisticsService

logger = logging.getLogger(__name__)
router = APIRouter()


def resolve_tank_capacity(tank_capacity: float | None) -> float:
    """Return the requested tank capacity or the configured default."""
    if tank_capacity is None:
        return get_default_tank_capacity()
    if tank_capacity <= 0:
        raise ValidationException(
            "Tank capacity must be positive",
            {"tank_capacity": tank_capacity},
        )
    return tank_capacity


def resolve_window_size(window_size: int | None) -> int:
    """Return the requested rolling window size or the configured default."""
    if window_size is None:
        return get_recent_window_size()
    if window_size <= 0:
        raise ValidationException(
            "Window size must be positive",
            {"window_size": window_size},
        )
    return window_size


@router.post("/api/fuel-statistics", response_model=CalculatedData)
@api_route(logger)
async def calculate_fuel_statistics(request: FuelStatisticsRequest) -> CalculatedData:
    """Compute enriched entries, lifetime statistics and monthly rollups."""
    return StatisticsService.calculate_stats(
        request.entries,
        tank_capacity=resolve_tank_capacity(request.tank_capacity),
        window_size=resolve_window_size(request.window_size),
    )


@router.post("/api/fuel-statistics/dashboard", response_model=DashboardSummary)
@api_route(logger)
async def fuel_dashboard(request: DashboardRequest) -> DashboardSummary:
    """Return the current month cost, full-tank cost and trip estimate."""
    tank_capacity = resolve_tank_capacity(request.tank_capacity)
    data = StatisticsService.calculate_stats(
        request.entries,
        tank_capacity=tank_capacity,
        window_size=resolve_window_size(request.window_size),
    )
    return StatisticsService.build_dashboard(
        data, tank_capacity, request.trip_distance
    )


@router.post("/api/fuel-statistics/trip-estimate", response_model=TripEstimate)
@api_route(logger)
async def estimate_trip(request: TripEstimateRequest) -> TripEstimate:
    """Estimate fuel and cost for a planned trip."""
    return EstimatorService.estimate_trip(
        request.distance,
        request.consumption_rate,
        request.price_per_liter,
    )


@router.get("/api/fuel-statistics/full-tank-cost")
@api_route(logger)
async def estimate_full_tank_cost(
    price_per_liter: Annotated[
        float,
        Query(ge=0, allow_inf_nan=False, description="Fuel price per liter"),
    ],
    tank_capacity: Annotated[
        float | None,
        Query(allow_inf_nan=False, description="Tank capacity in liters"),
    ] = None,
) -> dict[str, Any]:
    """Estimate the cost of filling the whole tank."""
    capacity = resolve_tank_capacity(tank_capacity)
    return {
        "tank_capacity": capacity,
        "price_per_liter": price_per_liter,
        "estimated_cost": EstimatorService.estimate_full_tank_cost(
            capacity, price_per_liter
        ),
    }


@router.get("/api/fuel-statistics/config")
@api_route(logger)
async def get_statistics_config() -> dict[str, Any]:
    """Return the defaults applied when a request omits them."""
    return {
        "tank_capacity": get_default_tank_capacity(),
        "window_size": get_recent_window_size(),
    }
