"""Fertility and pregnancy calculator.

Pure, deterministic calculations over calendar dates and body measurements.
No I/O happens here beyond reading the bundled configuration once.

Modules:
    cycle_calculator  CycleCalculator (fertility window, due dates,
                      weight gain, calendar-method estimate)
    weight_gain       BMI and trimester-by-trimester gain interpolation
    dates             strict YYYY-MM-DD parsing and day arithmetic
    config_loader     load/validate/hot-reload calculator_config.yaml
    errors            CalculatorError hierarchy
"""

from womenshealth.calculator.config_loader import CalculatorConfig, get_calculator_config
from womenshealth.calculator.cycle_calculator import CycleCalculator
from womenshealth.calculator.errors import CalculatorError, DateOutOfRange, InvalidDateFormat

__all__ = [
    "CycleCalculator",
    "CalculatorConfig",
    "get_calculator_config",
    "CalculatorError",
    "InvalidDateFormat",
    "DateOutOfRange",
]
