"""Fuel log statistics package.

This package provides modular functionality for:
- Per-fill-up distance, cost and consumption derivation
- Lifetime and recent-window statistics with range estimation
- Monthly cost and consumption rollups
- Trip and full-tank cost estimates
- JSON and CSV exports

The package is organized into:
- routes/: API endpoint handlers organized by domain
- services/: Business logic and data processing
- schemas.py: Entry and statistics models
"""

from fastapi import APIRouter

from fuel.routes import exports, statistics

# Create main router that aggregates all fuel-related routes
router = APIRouter()

router.include_router(statistics.router, tags=["fuel-statistics"])
router.include_router(exports.router, tags=["fuel-exports"])

__all__ = ["router"]
