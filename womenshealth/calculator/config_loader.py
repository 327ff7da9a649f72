"""Load, validate, and hot-reload the calculator configuration.

The config lives in ``calculator_config.yaml`` alongside this module.  It is
loaded once and cached.  ``WOMENSHEALTH_CALCULATOR_CONFIG_PATH`` points the
loader at a different file; ``reload_calculator_config()`` re-reads it without
a restart.

Usage::

    from womenshealth.calculator.config_loader import get_calculator_config

    config = get_calculator_config()
    config.cycle.luteal_phase_days        # 14
    config.pregnancy.days_from_lmp        # 280
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from womenshealth.config import get_settings

logger = logging.getLogger("womenshealth.calculator.config")

# Path to the YAML file sitting next to this module
_CONFIG_PATH = Path(__file__).parent / "calculator_config.yaml"


# ---------------------------------------------------------------------------
# Typed config sections
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CycleConfig:
    """Fertility-window settings."""

    default_cycle_length: int = 28
    luteal_phase_days: int = 14
    days_before_ovulation: int = 5
    days_after_ovulation: int = 1
    typical_min_cycle_length: int = 21
    typical_max_cycle_length: int = 35


@dataclass(frozen=True)
class PregnancyConfig:
    """Due-date and trimester settings."""

    days_from_lmp: int = 280
    days_from_conception: int = 266
    conception_offset_days: int = 14
    second_trimester_week: int = 14
    third_trimester_week: int = 28


@dataclass(frozen=True)
class CalendarMethodConfig:
    """Rhythm-method settings.

    Attributes:
        min_history:           Cycles needed before history is used at all.
        default_fertile_*_day: Window returned when history is too short.
        shortest_cycle_offset: Subtracted from the shortest cycle for the start.
        longest_cycle_offset:  Subtracted from the longest cycle for the end.
        earliest_fertile_day:  Lower clamp on the start day.
        latest_fertile_day:    Upper clamp on the end day.
    """

    min_history: int = 2
    default_fertile_start_day: int = 8
    default_fertile_end_day: int = 20
    shortest_cycle_offset: int = 18
    longest_cycle_offset: int = 11
    earliest_fertile_day: int = 1
    latest_fertile_day: int = 35


@dataclass(frozen=True)
class CalculatorConfig:
    """Complete, validated calculator configuration.

    This is the single in-memory representation of calculator_config.yaml.

    Attributes:
        version:         Config schema version string.
        cycle:           Fertility-window settings.
        pregnancy:       Due-date and trimester settings.
        calendar_method: Rhythm-method settings.
        source:          File the config was read from, if any.
    """

    version: str = "1.0"
    cycle: CycleConfig = field(default_factory=CycleConfig)
    pregnancy: PregnancyConfig = field(default_factory=PregnancyConfig)
    calendar_method: CalendarMethodConfig = field(default_factory=CalendarMethodConfig)
    source: Path | None = field(default=None, compare=False)


# ---------------------------------------------------------------------------
# Loader / validation
# ---------------------------------------------------------------------------


class ConfigValidationError(ValueError):
    """Raised when calculator_config.yaml fails validation."""


def _load_yaml(path: Path) -> dict:
    """Read and parse a YAML file.

    Raises:
        FileNotFoundError:     If the file does not exist.
        ConfigValidationError: If the YAML is malformed or not a mapping.
    """
    if not path.exists():
        raise FileNotFoundError(f"Calculator config not found: {path}")

    with path.open("r", encoding="utf-8") as fh:
        try:
            raw = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise ConfigValidationError(f"YAML parse error in {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigValidationError(f"{path} must contain a mapping at the top level")
    return raw


def _build_section(
    cls: type,
    raw: Any,
    section: str,
    errors: list[str],
) -> Any:
    """Build one dataclass section, collecting problems into ``errors``.

    Missing keys take the dataclass default.  Every value must be a
    non-negative integer.
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        errors.append(f"'{section}' must be a mapping")
        return cls()

    known = cls.__dataclass_fields__
    for key in raw:
        if key not in known:
            errors.append(f"Unknown key '{key}' in section '{section}'")

    values: dict[str, int] = {}
    for key in known:
        if key not in raw:
            continue
        val = raw[key]
        if isinstance(val, bool) or not isinstance(val, int):
            errors.append(f"{section}.{key} must be an integer, got {val!r}")
            continue
        if val < 0:
            errors.append(f"{section}.{key} must be >= 0, got {val}")
            continue
        values[key] = val
    return cls(**values)


def _validate_and_build(raw: dict, source: Path | None = None) -> CalculatorConfig:
    """Validate the raw YAML dict and construct a CalculatorConfig.

    Args:
        raw:    Parsed YAML dict.
        source: Path the dict was read from (for logging only).

    Returns:
        Validated CalculatorConfig instance.

    Raises:
        ConfigValidationError: If any value is missing its type or ordering.
    """
    errors: list[str] = []

    version = str(raw.get("version", "1.0"))

    cycle = _build_section(CycleConfig, raw.get("cycle"), "cycle", errors)
    pregnancy = _build_section(PregnancyConfig, raw.get("pregnancy"), "pregnancy", errors)
    calendar_method = _build_section(
        CalendarMethodConfig, raw.get("calendar_method"), "calendar_method", errors
    )

    # ── Cross-field checks ──
    if cycle.default_cycle_length == 0:
        errors.append("cycle.default_cycle_length must be positive")
    if cycle.typical_min_cycle_length > cycle.typical_max_cycle_length:
        errors.append(
            "cycle.typical_min_cycle_length must not exceed cycle.typical_max_cycle_length"
        )
    if pregnancy.second_trimester_week >= pregnancy.third_trimester_week:
        errors.append(
            "pregnancy.second_trimester_week must be below pregnancy.third_trimester_week"
        )
    if calendar_method.min_history < 1:
        errors.append("calendar_method.min_history must be at least 1")
    if calendar_method.earliest_fertile_day > calendar_method.latest_fertile_day:
        errors.append(
            "calendar_method.earliest_fertile_day must not exceed calendar_method.latest_fertile_day"
        )
    if calendar_method.default_fertile_start_day > calendar_method.default_fertile_end_day:
        errors.append(
            "calendar_method.default_fertile_start_day must not exceed "
            "calendar_method.default_fertile_end_day"
        )

    if errors:
        raise ConfigValidationError(
            f"calculator_config.yaml has {len(errors)} validation error(s):\n"
            + "\n".join(f"  • {e}" for e in errors)
        )

    return CalculatorConfig(
        version=version,
        cycle=cycle,
        pregnancy=pregnancy,
        calendar_method=calendar_method,
        source=source,
    )


def _default_path() -> Path:
    return get_settings().calculator_config_path or _CONFIG_PATH


def load_calculator_config(path: Path | None = None) -> CalculatorConfig:
    """Load and validate the calculator config from disk.

    Args:
        path: Override path to YAML. Falls back to the settings override,
              then the bundled calculator_config.yaml.

    Returns:
        Validated CalculatorConfig instance.
    """
    target = Path(path) if path else _default_path()
    raw = _load_yaml(target)
    config = _validate_and_build(raw, source=target)
    logger.info("Loaded calculator config v%s from %s", config.version, target)
    return config


# ---------------------------------------------------------------------------
# Global singleton with hot-reload support
# ---------------------------------------------------------------------------

_config: CalculatorConfig | None = None
_config_lock = threading.Lock()


def get_calculator_config() -> CalculatorConfig:
    """Return the global CalculatorConfig singleton, loading it on first call.

    Thread-safe.  Use ``reload_calculator_config()`` to refresh after YAML changes.
    """
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:  # double-checked locking
                _config = load_calculator_config()
    return _config


def reload_calculator_config(path: Path | None = None) -> CalculatorConfig:
    """Reload the calculator config from disk and replace the global singleton.

    If validation fails, the old config is retained and the error is re-raised.

    Args:
        path: Override path to YAML.

    Returns:
        The newly loaded CalculatorConfig.

    Raises:
        ConfigValidationError: If the new config is invalid.
        FileNotFoundError:     If the config file is missing.
    """
    global _config
    new_config = load_calculator_config(path)  # validate before acquiring lock
    with _config_lock:
        old_version = _config.version if _config else "none"
        _config = new_config
    logger.info(
        "Reloaded calculator config: %s → %s",
        old_version,
        new_config.version,
    )
    return new_config
