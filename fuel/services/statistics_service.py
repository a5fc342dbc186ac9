"""Statistics engine for fuel consumption, cost and range.

The engine is a pure transformation: it takes the full list of fuel entries
(in any order) and returns per-entry metrics, lifetime aggregates and monthly
rollups. Nothing is cached between calls.

Consumption rules:
1. Only a full tank with a recorded odometer closes a measurement interval.
2. The interval starts at the previous full tank with a recorded odometer
   (the reference entry).
3. Every liter bought inside the interval counts, partial fills included,
   so topping off does not understate consumption.
4. Partial fills never produce a consumption value of their own.
"""

import logging
from collections.abc import Iterable, Sequence
from datetime import date
from typing import Any

from config import get_default_tank_capacity, get_recent_window_size
from date_utils import month_key, month_label
from fuel.schemas import (
    AggregateStats,
    CalculatedData,
    DashboardSummary,
    EnrichedEntry,
    FuelEntry,
    MonthlyBucket,
)
from fuel.services.estimator_service import EstimatorService

logger = logging.getLogger(__name__)

EFFICIENT_CONSUMPTION_THRESHOLD = 6.0
MODERATE_CONSUMPTION_THRESHOLD = 8.0


def _mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def _per_hundred(amount: float, distance: float) -> float:
    if distance <= 0:
        return 0.0
    return amount / distance * 100


class StatisticsService:
    """Service class for fuel statistics derivation."""

    @staticmethod
    def sort_entries(entries: Iterable[FuelEntry]) -> list[FuelEntry]:
        """Return entries in ascending date order.

        ``sorted`` is stable, so entries sharing a date keep the order the
        caller gave them.
        """
        return sorted(entries, key=lambda entry: entry.date)

    @staticmethod
    def enrich_entries(
        sorted_entries: Sequence[FuelEntry],
    ) -> tuple[list[EnrichedEntry], list[float], float]:
        """Derive distance, cost and consumption for each entry.

        Args:
            sorted_entries: Entries already in chronological order

        Returns:
            Tuple of (enriched_entries, consumption_samples, total_distance)
            where the samples are the valid full-tank consumption rates in
            chronological order and total_distance only sums the distances of
            those full-tank intervals.
        """
        enriched: list[EnrichedEntry] = []
        samples: list[float] = []
        total_distance = 0.0

        # Last full tank with an odometer, and what was bought since then
        reference: FuelEntry | None = None
        liters_since_reference = 0.0
        cost_since_reference = 0.0

        previous: FuelEntry | None = None

        for entry in sorted_entries:
            total_cost = entry.liters * entry.price_per_liter
            distance = 0.0
            consumption_rate = 0.0
            cost_per_distance = 0.0

            liters_since_reference += entry.liters
            cost_since_reference += total_cost

            if entry.is_full_tank and entry.odometer_reading > 0:
                if reference is not None:
                    interval = entry.odometer_reading - reference.odometer_reading
                    if interval > 0:
                        distance = interval
                        consumption_rate = _per_hundred(
                            liters_since_reference, interval
                        )
                        cost_per_distance = _per_hundred(
                            cost_since_reference, interval
                        )
                        samples.append(consumption_rate)
                        total_distance += interval

                reference = entry
                liters_since_reference = 0.0
                cost_since_reference = 0.0

            elif (
                previous is not None
                and entry.odometer_reading > 0
                and previous.odometer_reading > 0
            ):
                # Shown in the history only, never part of the averages
                distance = max(
                    entry.odometer_reading - previous.odometer_reading, 0.0
                )

            enriched.append(
                EnrichedEntry(
                    **entry.model_dump(),
                    distance_since_reference=distance,
                    total_cost=total_cost,
                    consumption_rate=consumption_rate,
                    cost_per_distance=cost_per_distance,
                )
            )
            previous = entry

        return enriched, samples, total_distance

    @staticmethod
    def aggregate_stats(
        enriched_entries: Sequence[EnrichedEntry],
        consumption_samples: Sequence[float],
        total_distance: float,
        tank_capacity: float,
        window_size: int,
    ) -> AggregateStats:
        """Reduce enriched entries to lifetime and recent-window statistics."""
        total_liters = sum(entry.liters for entry in enriched_entries)
        total_cost = sum(entry.total_cost for entry in enriched_entries)

        sliding_average = _mean(list(consumption_samples)[-window_size:])

        recent_prices = [
            entry.price_per_liter for entry in enriched_entries if entry.liters > 0
        ][-window_size:]

        estimated_range = 0.0
        if sliding_average > 0:
            estimated_range = tank_capacity / sliding_average * 100

        return AggregateStats(
            total_distance=total_distance,
            total_liters=total_liters,
            total_cost=total_cost,
            average_consumption=_per_hundred(total_liters, total_distance),
            average_cost_per_liter=(
                total_cost / total_liters if total_liters > 0 else 0.0
            ),
            average_cost_per_distance=_per_hundred(total_cost, total_distance),
            sliding_average_consumption=sliding_average,
            recent_average_price_per_liter=_mean(recent_prices),
            estimated_range=estimated_range,
        )

    @staticmethod
    def monthly_rollup(enriched_entries: Iterable[EnrichedEntry]) -> list[MonthlyBucket]:
        """Group entries by calendar month.

        The monthly consumption is weighted by distance: liters of the entries
        that produced a consumption value, over the distance they covered.
        """
        buckets: dict[tuple[int, int], dict[str, Any]] = {}

        for entry in enriched_entries:
            key = (entry.date.year, entry.date.month)
            bucket = buckets.setdefault(
                key,
                {
                    "total_cost": 0.0,
                    "total_liters": 0.0,
                    "fillup_count": 0,
                    "measured_liters": 0.0,
                    "measured_distance": 0.0,
                },
            )
            bucket["total_cost"] += entry.total_cost
            bucket["total_liters"] += entry.liters
            bucket["fillup_count"] += 1

            if entry.distance_since_reference > 0 and entry.consumption_rate > 0:
                bucket["measured_liters"] += entry.liters
                bucket["measured_distance"] += entry.distance_since_reference

        return [
            MonthlyBucket(
                month=month_key(date(year, month, 1)),
                year=year,
                month_number=month,
                label=month_label(year, month),
                total_cost=values["total_cost"],
                total_liters=values["total_liters"],
                average_consumption=_per_hundred(
                    values["measured_liters"], values["measured_distance"]
                ),
                fillup_count=values["fillup_count"],
            )
            for (year, month), values in sorted(buckets.items())
        ]

    @staticmethod
    def calculate_stats(
        entries: Iterable[FuelEntry],
        tank_capacity: float | None = None,
        window_size: int | None = None,
    ) -> CalculatedData:
        """Compute every derived statistic for a set of fuel entries.

        Args:
            entries: Fuel entries in any order
            tank_capacity: Tank capacity in liters, defaults to the configured value
            window_size: Recent samples used for rolling averages, defaults to
                the configured value

        Returns:
            Enriched entries, aggregate statistics and monthly buckets
        """
        if tank_capacity is None:
            tank_capacity = get_default_tank_capacity()
        if window_size is None:
            window_size = get_recent_window_size()

        sorted_entries = StatisticsService.sort_entries(entries)
        enriched, samples, total_distance = StatisticsService.enrich_entries(
            sorted_entries
        )
        stats = StatisticsService.aggregate_stats(
            enriched, samples, total_distance, tank_capacity, window_size
        )
        monthly = StatisticsService.monthly_rollup(enriched)

        logger.debug(
            "Computed fuel statistics: %d entries, %d consumption samples, %d months",
            len(enriched),
            len(samples),
            len(monthly),
        )

        return CalculatedData(
            enriched_entries=enriched,
            stats=stats,
            monthly_stats=monthly,
        )

    @staticmethod
    def rate_consumption(consumption_rate: float) -> str | None:
        """Classify a consumption rate (L/100km) for display badges."""
        if consumption_rate <= 0:
            return None
        if consumption_rate < EFFICIENT_CONSUMPTION_THRESHOLD:
            return "efficient"
        if consumption_rate < MODERATE_CONSUMPTION_THRESHOLD:
            return "moderate"
        return "high"

    @staticmethod
    def current_month_cost(monthly_stats: Sequence[MonthlyBucket]) -> float:
        """Return the cost of the most recent month with fill-ups."""
        if not monthly_stats:
            return 0.0
        return monthly_stats[-1].total_cost

    @staticmethod
    def build_dashboard(
        data: CalculatedData,
        tank_capacity: float,
        trip_distance: float | None = None,
    ) -> DashboardSummary:
        """Summarize computed statistics for the dashboard view.

        The full-tank cost uses the recent average price. The trip estimate
        uses the rolling consumption average and is left empty while that
        average is not positive or no trip distance was given.

        Args:
            data: Output of ``calculate_stats``
            tank_capacity: Tank capacity in liters
            trip_distance: Planned trip distance in km

        Returns:
            DashboardSummary with cost headlines and the optional trip estimate
        """
        stats = data.stats
        trip_estimate = None
        if trip_distance is not None and stats.sliding_average_consumption > 0:
            trip_estimate = EstimatorService.estimate_trip(
                trip_distance,
                stats.sliding_average_consumption,
                stats.recent_average_price_per_liter,
            )

        return DashboardSummary(
            tank_capacity=tank_capacity,
            current_month_cost=StatisticsService.current_month_cost(
                data.monthly_stats
            ),
            full_tank_cost=EstimatorService.estimate_full_tank_cost(
                tank_capacity, stats.recent_average_price_per_liter
            ),
            trip_estimate=trip_estimate,
            stats=stats,
        )
