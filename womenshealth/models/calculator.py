"""Result records and enumerations returned by the CycleCalculator."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import NamedTuple

from pydantic import Field, model_validator

from womenshealth.models.base import WomensHealthBase


class GainRange(NamedTuple):
    """Recommended gain in kilograms, ``low <= high``."""

    low: float
    high: float


class BMICategory(str, Enum):
    """Pre-pregnancy BMI band.

    Bands are half-open and cover every positive BMI:
        UNDERWEIGHT  < 18.5
        NORMAL       18.5 to < 25
        OVERWEIGHT   25 to < 30
        OBESE        >= 30
    """

    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"

    @classmethod
    def from_bmi(cls, bmi: float) -> "BMICategory":
        if bmi < 18.5:
            return cls.UNDERWEIGHT
        if bmi < 25.0:
            return cls.NORMAL
        if bmi < 30.0:
            return cls.OVERWEIGHT
        return cls.OBESE

    @property
    def total_gain(self) -> GainRange:
        """Total recommended gain over the whole pregnancy."""
        return _TOTAL_GAIN_KG[self]


_TOTAL_GAIN_KG: dict[BMICategory, GainRange] = {
    BMICategory.UNDERWEIGHT: GainRange(12.5, 18.0),
    BMICategory.NORMAL: GainRange(11.5, 16.0),
    BMICategory.OVERWEIGHT: GainRange(7.0, 11.5),
    BMICategory.OBESE: GainRange(5.0, 9.0),
}


class FertilityResult(WomensHealthBase):
    """Fertile window for one cycle.

    Attributes:
        ovulation_date:         Estimated ovulation day.
        fertility_window_start: First fertile day (5 days before ovulation).
        fertility_window_end:   Last fertile day (1 day after ovulation).
        next_period_date:       Expected start of the next period.
        fertile_days:           Every day of the window, ascending.
    """

    ovulation_date: date
    fertility_window_start: date
    fertility_window_end: date
    next_period_date: date
    fertile_days: tuple[date, ...]

    @model_validator(mode="after")
    def _window_is_ordered(self) -> "FertilityResult":
        if self.fertility_window_start > self.fertility_window_end:
            raise ValueError("fertility window start is after its end")
        return self


class DueDateResult(WomensHealthBase):
    """Pregnancy dating relative to a reference day.

    ``current_week`` is negative when the anchor date is still in the future;
    ``days_to_go`` turns negative once the due date has passed.
    """

    due_date: date
    conception_date: date
    current_week: int
    trimester: int = Field(ge=1, le=3)
    days_to_go: int


class WeightRecommendationResult(WomensHealthBase):
    bmi_category: BMICategory
    recommended_total_gain: GainRange
    current_recommended_gain: GainRange
    bmi: float


class CalendarMethodEstimate(NamedTuple):
    """Fertile days of the cycle (1-indexed) estimated by the rhythm method."""

    fertile_start_day: int
    fertile_end_day: int
