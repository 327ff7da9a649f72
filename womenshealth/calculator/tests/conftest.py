"""Shared fixtures for calculator tests."""

from __future__ import annotations

import logging
from datetime import date

import pytest

from womenshealth.calculator import config_loader
from womenshealth.calculator.config_loader import CalculatorConfig, load_calculator_config
from womenshealth.calculator.cycle_calculator import CycleCalculator
from womenshealth.config import get_settings

# Fixed "today" so pregnancy dating is reproducible
REFERENCE_DATE = date(2024, 6, 1)


@pytest.fixture(autouse=True)
def _isolate_globals(monkeypatch: pytest.MonkeyPatch):
    """Drop the cached settings and config singleton around every test."""
    monkeypatch.delenv("WOMENSHEALTH_CALCULATOR_CONFIG_PATH", raising=False)
    monkeypatch.setattr(config_loader, "_config", None)
    get_settings.cache_clear()
    package_logger = logging.getLogger("womenshealth")
    level = package_logger.level
    yield
    package_logger.setLevel(level)
    get_settings.cache_clear()


@pytest.fixture
def calculator_config() -> CalculatorConfig:
    """Load the bundled calculator config."""
    return load_calculator_config()


@pytest.fixture
def calculator(calculator_config: CalculatorConfig) -> CycleCalculator:
    return CycleCalculator(calculator_config)


@pytest.fixture
def as_of() -> date:
    return REFERENCE_DATE
