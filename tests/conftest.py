import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from fuel.schemas import FuelEntry  # noqa: E402


@pytest.fixture(autouse=True)
def _default_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DEFAULT_TANK_CAPACITY_LITERS", raising=False)
    monkeypatch.delenv("RECENT_WINDOW_SIZE", raising=False)


@pytest.fixture
def full_partial_entries() -> list[FuelEntry]:
    """Two full tanks, two partial top-ups, then two more full tanks."""
    return [
        FuelEntry(
            id=1,
            date="2025-01-01",
            odometer_reading=100000,
            liters=45,
            price_per_liter=1.70,
            is_full_tank=True,
        ),
        FuelEntry(
            id=2,
            date="2025-01-15",
            odometer_reading=100650,
            liters=42,
            price_per_liter=1.72,
            is_full_tank=True,
        ),
        FuelEntry(
            id=3,
            date="2025-01-20",
            odometer_reading=101000,
            liters=20,
            price_per_liter=1.71,
            is_full_tank=False,
        ),
        FuelEntry(
            id=4,
            date="2025-01-25",
            odometer_reading=101300,
            liters=15,
            price_per_liter=1.69,
            is_full_tank=False,
        ),
        FuelEntry(
            id=5,
            date="2025-02-01",
            odometer_reading=101750,
            liters=48,
            price_per_liter=1.73,
            is_full_tank=True,
        ),
        FuelEntry(
            id=6,
            date="2025-02-15",
            odometer_reading=102450,
            liters=44,
            price_per_liter=1.74,
            is_full_tank=True,
        ),
    ]
