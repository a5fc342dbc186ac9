import importlib
import os
import unittest
from unittest.mock import patch

import pytest

import config


class TankCapacityConfigTests(unittest.TestCase):
    def test_get_default_tank_capacity_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert config.get_default_tank_capacity() == 45.0

    def test_get_default_tank_capacity_reads_env(self) -> None:
        with patch.dict(
            os.environ,
            {"DEFAULT_TANK_CAPACITY_LITERS": "60.5"},
            clear=True,
        ):
            assert config.get_default_tank_capacity() == 60.5

    def test_get_default_tank_capacity_rejects_garbage(self) -> None:
        with patch.dict(
            os.environ,
            {"DEFAULT_TANK_CAPACITY_LITERS": "lots"},
            clear=True,
        ), pytest.raises(RuntimeError):
            config.get_default_tank_capacity()

    def test_get_default_tank_capacity_rejects_non_positive(self) -> None:
        for raw in ("0", "-10", "nan", "inf"):
            with patch.dict(
                os.environ,
                {"DEFAULT_TANK_CAPACITY_LITERS": raw},
                clear=True,
            ), pytest.raises(RuntimeError):
                config.get_default_tank_capacity()


class RecentWindowConfigTests(unittest.TestCase):
    def test_get_recent_window_size_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert config.get_recent_window_size() == 5

    def test_get_recent_window_size_reads_env(self) -> None:
        with patch.dict(os.environ, {"RECENT_WINDOW_SIZE": "8"}, clear=True):
            assert config.get_recent_window_size() == 8

    def test_get_recent_window_size_rejects_invalid(self) -> None:
        for raw in ("0", "-1", "2.5", "five"):
            with patch.dict(
                os.environ,
                {"RECENT_WINDOW_SIZE": raw},
                clear=True,
            ), pytest.raises(RuntimeError):
                config.get_recent_window_size()


class CorsConfigTests(unittest.TestCase):
    def test_get_cors_allowed_origins_splits_and_strips(self) -> None:
        with patch.dict(
            os.environ,
            {"CORS_ALLOWED_ORIGINS": "http://a.test, http://b.test ,,"},
            clear=True,
        ):
            assert config.get_cors_allowed_origins() == [
                "http://a.test",
                "http://b.test",
            ]

    def test_get_cors_allowed_origins_empty(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert config.get_cors_allowed_origins() == []


class ConfigImportTests(unittest.TestCase):
    def test_reload_tolerates_malformed_statistics_env(self) -> None:
        with patch.dict(
            os.environ,
            {"RECENT_WINDOW_SIZE": "zero", "DEFAULT_TANK_CAPACITY_LITERS": "lots"},
            clear=True,
        ):
            reloaded = importlib.reload(config)
            assert reloaded.RECENT_WINDOW_SIZE == 5
            assert reloaded.DEFAULT_TANK_CAPACITY_LITERS == 45.0
            with pytest.raises(RuntimeError):
                reloaded.get_recent_window_size()
        importlib.reload(config)
