import importlib
from unittest.mock import patch

from fastapi.testclient import TestClient

import app as app_module


def test_health_endpoint() -> None:
    client = TestClient(app_module.app)

    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_fuel_routes_are_mounted() -> None:
    paths = {route.path for route in app_module.app.routes}

    assert "/api/fuel-statistics" in paths
    assert "/api/fuel-statistics/dashboard" in paths
    assert "/api/fuel-statistics/export" in paths


def test_app_import_leaves_dotenv_to_config() -> None:
    with patch("dotenv.load_dotenv") as load_dotenv:
        importlib.reload(app_module)

    load_dotenv.assert_not_called()
    importlib.reload(app_module)
