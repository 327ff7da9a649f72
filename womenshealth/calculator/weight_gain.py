"""Gestational weight-gain recommendations.

Pre-pregnancy BMI selects one of four ``BMICategory`` bands, each with a fixed
total gain range for the whole pregnancy.  The gain expected *so far* is
interpolated over gestational age:

- weeks ≤ 13: a flat 0.5–2.0 kg regardless of band
- weeks 14–27: linear from the 2.0 kg first-trimester ceiling toward 40% of
  the total range at week 27
- weeks ≥ 28: linear from 40% toward 100% of the total range at week 40

Ages past week 40 extrapolate beyond the total range; nothing is clamped.
"""

from __future__ import annotations

import logging

from womenshealth.models.calculator import GainRange

logger = logging.getLogger("womenshealth.calculator.weight_gain")

FIRST_TRIMESTER_LAST_WEEK = 13
SECOND_TRIMESTER_LAST_WEEK = 27
TERM_WEEK = 40

# Share of the total range expected by the end of week 27.
SECOND_TRIMESTER_SHARE = 0.4

FIRST_TRIMESTER_GAIN = GainRange(0.5, 2.0)


def compute_bmi(weight_kg: float, height_m: float) -> float:
    """Body-mass index from weight (kg) and height (m)."""
    return weight_kg / (height_m * height_m)


def current_gain_range(gestational_age: float, total: GainRange) -> GainRange:
    """Gain expected by ``gestational_age`` completed weeks.

    Args:
        gestational_age: Completed weeks since LMP.  Negative values are
                         accepted and treated as first trimester.
        total:           Total recommended gain for the BMI band.

    Returns:
        GainRange for the current week.
    """
    if gestational_age <= FIRST_TRIMESTER_LAST_WEEK:
        return FIRST_TRIMESTER_GAIN

    if gestational_age <= SECOND_TRIMESTER_LAST_WEEK:
        progress = (gestational_age - FIRST_TRIMESTER_LAST_WEEK) / (
            SECOND_TRIMESTER_LAST_WEEK - FIRST_TRIMESTER_LAST_WEEK
        )
        ceiling = FIRST_TRIMESTER_GAIN.high
        return GainRange(
            ceiling + (total.low * SECOND_TRIMESTER_SHARE - ceiling) * progress,
            ceiling + (total.high * SECOND_TRIMESTER_SHARE - ceiling) * progress,
        )

    if gestational_age > TERM_WEEK:
        logger.debug("Gestational age %s is past term; extrapolating gain", gestational_age)

    progress = (gestational_age - SECOND_TRIMESTER_LAST_WEEK) / (
        TERM_WEEK - SECOND_TRIMESTER_LAST_WEEK
    )
    remaining = 1.0 - SECOND_TRIMESTER_SHARE
    return GainRange(
        total.low * SECOND_TRIMESTER_SHARE + total.low * remaining * progress,
        total.high * SECOND_TRIMESTER_SHARE + total.high * remaining * progress,
    )
