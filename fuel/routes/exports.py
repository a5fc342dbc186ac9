"""API routes for downloading the fuel log with its statistics."""

import logging
from collections.abc import AsyncIterator
from typing import Annotated, Literal

from fastapi import APIRouter, Query
from fastapi.responses import StreamingResponse

from core.api import api_route
from fuel.routes.statistics import resolve_tank_capacity, resolve_window_size
from fuel.schemas import FuelStatisticsRequest
from fuel.services import ExportService, StatisticsService

logger = logging.getLogger(__name__)
router = APIRouter()


def create_streaming_response(
    generator: AsyncIterator[str],
    media_type: str,
    filename: str,
) -> StreamingResponse:
    """Create a StreamingResponse with download headers."""
    return StreamingResponse(
        generator,
        media_type=media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
            "Cache-Control": "no-cache",
        },
    )


@router.post("/api/fuel-statistics/export")
@api_route(logger)
async def export_fuel_log(
    request: FuelStatisticsRequest,
    fmt: Annotated[
        Literal["json", "csv"],
        Query(alias="format", description="Export format"),
    ] = "json",
) -> StreamingResponse:
    """Export entries with their derived statistics."""
    tank_capacity = resolve_tank_capacity(request.tank_capacity)
    data = StatisticsService.calculate_stats(
        request.entries,
        tank_capacity=tank_capacity,
        window_size=resolve_window_size(request.window_size),
    )
    filename = ExportService.build_filename(fmt)
    logger.info("Exporting %d fuel entries as %s", len(data.enriched_entries), fmt)

    if fmt == "csv":
        return create_streaming_response(
            ExportService.stream_csv(ExportService.build_csv_rows(data)),
            "text/csv",
            filename,
        )

    payload = ExportService.build_json_payload(data, tank_capacity)
    return create_streaming_response(
        ExportService.stream_json(payload),
        "application/json",
        filename,
    )
