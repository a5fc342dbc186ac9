"""Export of fuel entries and their statistics as JSON or CSV downloads."""

import csv
import json
import logging
from collections.abc import AsyncIterator
from datetime import UTC, datetime
from io import StringIO
from typing import Any

from date_utils import format_display_date
from fuel.schemas import CalculatedData
from fuel.services.statistics_service import StatisticsService

logger = logging.getLogger(__name__)

CSV_FIELDNAMES = [
    "id",
    "date",
    "display_date",
    "odometer_reading",
    "liters",
    "price_per_liter",
    "is_full_tank",
    "total_cost",
    "distance_since_reference",
    "consumption_rate",
    "cost_per_distance",
    "consumption_rating",
]


class ExportService:
    """Service class for fuel log exports."""

    @staticmethod
    def build_filename(fmt: str, now: datetime | None = None) -> str:
        """Return the download filename, e.g. ``fuel-log-2025-01-31.json``."""
        now = now or datetime.now(UTC)
        return f"fuel-log-{now.date().isoformat()}.{fmt}"

    @staticmethod
    def build_json_payload(
        data: CalculatedData,
        tank_capacity: float,
        now: datetime | None = None,
    ) -> dict[str, Any]:
        """Assemble the JSON export document."""
        now = now or datetime.now(UTC)
        return {
            "exported_at": now.isoformat(),
            "tank_capacity": tank_capacity,
            "entries": [
                entry.model_dump(mode="json") for entry in data.enriched_entries
            ],
            "stats": data.stats.model_dump(mode="json"),
            "monthly_stats": [
                bucket.model_dump(mode="json") for bucket in data.monthly_stats
            ],
        }

    @staticmethod
    def build_csv_rows(data: CalculatedData) -> list[dict[str, Any]]:
        """Flatten enriched entries into CSV rows."""
        rows = []
        for entry in data.enriched_entries:
            row = entry.model_dump(mode="json")
            row["display_date"] = format_display_date(entry.date)
            row["consumption_rating"] = (
                StatisticsService.rate_consumption(entry.consumption_rate) or ""
            )
            rows.append(row)
        return rows

    @staticmethod
    async def stream_json(payload: dict[str, Any]) -> AsyncIterator[str]:
        """Stream the JSON export document."""
        yield json.dumps(payload, indent=2, default=str)

    @staticmethod
    async def stream_csv(rows: list[dict[str, Any]]) -> AsyncIterator[str]:
        """Stream CSV data, one chunk per row."""
        buf = StringIO()
        writer = csv.DictWriter(buf, fieldnames=CSV_FIELDNAMES, extrasaction="ignore")

        writer.writeheader()
        yield buf.getvalue()
        buf.seek(0)
        buf.truncate(0)

        for row in rows:
            writer.writerow(row)
            yield buf.getvalue()
            buf.seek(0)
            buf.truncate(0)

        logger.debug("Streamed %d CSV export rows", len(rows))
