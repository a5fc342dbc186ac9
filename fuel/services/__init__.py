"""Fuel log services."""

from fuel.services.estimator_service import EstimatorService
from fuel.services.export_service import ExportService
from fuel.services.statistics_service import StatisticsService

__all__ = [
    "EstimatorService",
    "ExportService",
    "StatisticsService",
]
