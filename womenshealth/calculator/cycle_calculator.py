"""Fertility, due-date and weight-gain calculator.

Five independent, pure calculations:

- fertility window from the last period and cycle length
- due date from the last menstrual period (Naegele's rule)
- due date from a known conception date
- weight-gain recommendation from pre-pregnancy BMI and gestational age
- calendar (rhythm) method estimate from historical cycle lengths

Nothing reads the system clock implicitly: the due-date calculations take an
``as_of_date`` and only fall back to ``date.today()`` when it is omitted.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from womenshealth.calculator.config_loader import CalculatorConfig, get_calculator_config
from womenshealth.calculator.dates import (
    date_range,
    days_between,
    parse_calendar_date,
    shift_date,
    weeks_between,
)
from womenshealth.calculator.weight_gain import compute_bmi, current_gain_range
from womenshealth.models.calculator import (
    BMICategory,
    CalendarMethodEstimate,
    DueDateResult,
    FertilityResult,
    WeightRecommendationResult,
)

logger = logging.getLogger("womenshealth.calculator.cycle_calculator")


class CycleCalculator:
    """Compute fertility windows, due dates and weight-gain targets.

    Usage::

        calculator = CycleCalculator()
        window = calculator.calculate_fertility_window("2024-01-01", cycle_length=28)
        print(window.ovulation_date)            # 2024-01-15

        pregnancy = calculator.calculate_due_date("2024-01-01", as_of_date=date(2024, 4, 1))
        print(pregnancy.due_date, pregnancy.trimester)
    """

    def __init__(self, config: CalculatorConfig | None = None) -> None:
        self._config = config or get_calculator_config()

    @property
    def config(self) -> CalculatorConfig:
        return self._config

    # ------------------------------------------------------------------
    # Fertility
    # ------------------------------------------------------------------

    def calculate_fertility_window(
        self,
        last_period_date: str | date,
        cycle_length: int | None = None,
    ) -> FertilityResult:
        """Estimate ovulation and the fertile window for one cycle.

        Ovulation is placed a fixed luteal phase before the next period.  The
        window spans the five days before ovulation through the day after.

        Args:
            last_period_date: First day of the last period (``YYYY-MM-DD``).
            cycle_length:     Cycle length in days.  Defaults to 28.

        Returns:
            FertilityResult with the window and every fertile day.

        Raises:
            InvalidDateFormat: If ``last_period_date`` cannot be parsed.
            DateOutOfRange:    If the window falls outside the supported calendar.
        """
        cc = self._config.cycle
        lmp = parse_calendar_date(last_period_date)
        if cycle_length is None:
            cycle_length = cc.default_cycle_length

        if not cc.typical_min_cycle_length <= cycle_length <= cc.typical_max_cycle_length:
            logger.warning(
                "Cycle length %d is outside the typical %d-%d day range",
                cycle_length,
                cc.typical_min_cycle_length,
                cc.typical_max_cycle_length,
            )

        ovulation = shift_date(lmp, cycle_length - cc.luteal_phase_days)
        window_start = shift_date(ovulation, -cc.days_before_ovulation)
        window_end = shift_date(ovulation, cc.days_after_ovulation)
        next_period = shift_date(lmp, cycle_length)

        logger.debug(
            "Fertility window for LMP %s (%d-day cycle): %s..%s, ovulation %s",
            lmp,
            cycle_length,
            window_start,
            window_end,
            ovulation,
        )

        return FertilityResult(
            ovulation_date=ovulation,
            fertility_window_start=window_start,
            fertility_window_end=window_end,
            next_period_date=next_period,
            fertile_days=tuple(date_range(window_start, window_end)),
        )

    def calculate_fertility_calendar_method(
        self, cycle_lengths: Iterable[int]
    ) -> CalendarMethodEstimate:
        """Estimate fertile cycle days from past cycle lengths.

        Standard rhythm-method rule: the window opens on (shortest − 18) and
        closes on (longest − 11), clamped to the configured day range.  Too
        little history yields the default window.

        Args:
            cycle_lengths: Historical cycle lengths in days.

        Returns:
            CalendarMethodEstimate of 1-indexed cycle days.
        """
        cm = self._config.calendar_method
        lengths = list(cycle_lengths)

        if len(lengths) < cm.min_history:
            logger.debug(
                "Only %d cycle(s) of history; using default window", len(lengths)
            )
            return CalendarMethodEstimate(
                cm.default_fertile_start_day, cm.default_fertile_end_day
            )

        fertile_start = max(min(lengths) - cm.shortest_cycle_offset, cm.earliest_fertile_day)
        fertile_end = min(max(lengths) - cm.longest_cycle_offset, cm.latest_fertile_day)
        return CalendarMethodEstimate(fertile_start, fertile_end)

    # ------------------------------------------------------------------
    # Pregnancy dating
    # ------------------------------------------------------------------

    def calculate_due_date(
        self,
        last_period_date: str | date,
        as_of_date: str | date | None = None,
    ) -> DueDateResult:
        """Due date and progress from the last menstrual period.

        Args:
            last_period_date: First day of the LMP (``YYYY-MM-DD``).
            as_of_date:       Reference date (defaults to today).

        Raises:
            InvalidDateFormat: If ``last_period_date`` or ``as_of_date`` cannot be parsed.
            DateOutOfRange:    If the due date falls outside the supported calendar.
        """
        pc = self._config.pregnancy
        lmp = parse_calendar_date(last_period_date)
        return self._dating(
            lmp=lmp,
            due_date=shift_date(lmp, pc.days_from_lmp),
            conception_date=shift_date(lmp, pc.conception_offset_days),
            as_of_date=as_of_date,
        )

    def calculate_due_date_from_conception(
        self,
        conception_date: str | date,
        as_of_date: str | date | None = None,
    ) -> DueDateResult:
        """Due date and progress from a known conception date.

        Gestational weeks are still counted from an estimated LMP two weeks
        before conception.

        Args:
            conception_date: Date of conception (``YYYY-MM-DD``).
            as_of_date:      Reference date (defaults to today).

        Raises:
            InvalidDateFormat: If ``conception_date`` or ``as_of_date`` cannot be parsed.
            DateOutOfRange:    If the dating falls outside the supported calendar.
        """
        pc = self._config.pregnancy
        conception = parse_calendar_date(conception_date)
        return self._dating(
            lmp=shift_date(conception, -pc.conception_offset_days),
            due_date=shift_date(conception, pc.days_from_conception),
            conception_date=conception,
            as_of_date=as_of_date,
        )

    def trimester_for_week(self, week: int) -> int:
        """Map a gestational week to trimester 1, 2 or 3."""
        pc = self._config.pregnancy
        if week < pc.second_trimester_week:
            return 1
        if week < pc.third_trimester_week:
            return 2
        return 3

    def _dating(
        self,
        lmp: date,
        due_date: date,
        conception_date: date,
        as_of_date: str | date | None,
    ) -> DueDateResult:
        today = parse_calendar_date(as_of_date) if as_of_date is not None else date.today()

        week = weeks_between(lmp, today)
        if week < 0:
            logger.warning("LMP %s is after the reference date %s", lmp, today)

        result = DueDateResult(
            due_date=due_date,
            conception_date=conception_date,
            current_week=week,
            trimester=self.trimester_for_week(week),
            days_to_go=days_between(today, due_date),
        )
        logger.debug(
            "Due %s as of %s: week %d, trimester %d, %d day(s) to go",
            result.due_date,
            today,
            result.current_week,
            result.trimester,
            result.days_to_go,
        )
        return result

    # ------------------------------------------------------------------
    # Weight gain
    # ------------------------------------------------------------------

    def calculate_weight_recommendation(
        self,
        pre_pregnancy_weight: float,
        height: float,
        gestational_age: int,
    ) -> WeightRecommendationResult:
        """Recommended gestational weight gain for a pre-pregnancy BMI.

        Inputs are assumed numeric and positive; range checks belong to the
        caller.

        Args:
            pre_pregnancy_weight: Weight in kilograms.
            height:               Height in metres.
            gestational_age:      Completed weeks of pregnancy.

        Returns:
            WeightRecommendationResult with BMI band, total and current ranges.
        """
        bmi = compute_bmi(pre_pregnancy_weight, height)
        category = BMICategory.from_bmi(bmi)
        total = category.total_gain
        current = current_gain_range(gestational_age, total)

        logger.debug(
            "BMI %.2f (%s) at week %s: total %.1f-%.1f kg, now %.2f-%.2f kg",
            bmi,
            category.value,
            gestational_age,
            total.low,
            total.high,
            current.low,
            current.high,
        )

        return WeightRecommendationResult(
            bmi_category=category,
            recommended_total_gain=total,
            current_recommended_gain=current,
            bmi=bmi,
        )
