"""Trip and fill-up cost projections."""

from fuel.schemas import TripEstimate


class EstimatorService:
    """Service class for fuel and cost estimates."""

    @staticmethod
    def estimate_trip(
        distance: float,
        consumption_rate: float,
        price_per_liter: float,
    ) -> TripEstimate:
        """Estimate the fuel and cost of a trip.

        Args:
            distance: Trip distance in km
            consumption_rate: Expected consumption in L/100km
            price_per_liter: Expected fuel price

        Returns:
            TripEstimate with the projected liters and cost
        """
        liters_estimated = distance * consumption_rate / 100
        return TripEstimate(
            distance=distance,
            liters_estimated=liters_estimated,
            cost_estimated=liters_estimated * price_per_liter,
        )

    @staticmethod
    def estimate_full_tank_cost(tank_capacity: float, price_per_liter: float) -> float:
        """Cost of filling an empty tank at the given price."""
        return tank_capacity * price_per_liter
