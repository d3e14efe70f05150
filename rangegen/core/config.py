"""Configuration for stepper construction and logging."""

import os
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dotenv import dotenv_values, find_dotenv
from loguru import logger
from pydantic import BaseModel

if TYPE_CHECKING:
    from rangegen.steppers.range_stepper import RangeStepper

DEBUG_CHECKS_ENV = "RANGEGEN_DEBUG_CHECKS"
LOG_LEVEL_ENV = "RANGEGEN_LOG_LEVEL"

_TRUTHY = frozenset(["1", "true", "yes", "on"])


@dataclass
class StepperSettings:
    """Process-wide settings for rangegen."""

    debug_checks: bool = False
    """Reject non-terminating ranges at construction. Off by default."""

    log_level: str = "WARNING"
    """Level used by configure_logging when none is given."""

    @classmethod
    def from_env(cls) -> "StepperSettings":
        """
        Build settings from the environment and the nearest .env file.

        The .env file is searched upward from the current working directory.
        Its values are read without touching os.environ, and variables already
        set in the environment take precedence over it.
        """
        dotenv_path = find_dotenv(usecwd=True)
        values: dict[str, str] = {}
        if dotenv_path:
            values = {k: v for k, v in dotenv_values(dotenv_path).items() if v is not None}
        values.update(os.environ)

        debug_checks = values.get(DEBUG_CHECKS_ENV, "").strip().lower() in _TRUTHY
        log_level = values.get(LOG_LEVEL_ENV, "WARNING").strip().upper() or "WARNING"
        return cls(debug_checks=debug_checks, log_level=log_level)


_settings: StepperSettings | None = None


def get_settings() -> StepperSettings:
    """Return the active settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = StepperSettings.from_env()
    return _settings


def set_settings(settings: StepperSettings | None) -> None:
    """Replace the active settings. Passing None re-reads the environment on next use."""
    global _settings
    _settings = settings


def configure_logging(level: str | None = None) -> int:
    """
    Route loguru output to stderr at the given level.

    Args:
        level: Loguru level name. Defaults to the active settings' log_level.

    Returns:
        The loguru handler id of the new sink.
    """
    level = level or get_settings().log_level
    logger.remove()
    return logger.add(sys.stderr, level=level)


def _parse_number(text: str) -> int | float:
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        return float(text)


class RangeConfig(BaseModel):
    """
    Declarative description of a numeric range.

    Example:
        >>> RangeConfig(min_value=0, step_size=5, max_value=20).build().visit_each(print)
        >>> RangeConfig.parse("-2.3:1.2:5.7")
    """

    model_config = {"frozen": True}

    min_value: int | float
    max_value: int | float
    step_size: int | float = 1

    @classmethod
    def parse(cls, text: str) -> "RangeConfig":
        """
        Parse a ``min:step:max`` or ``min:max`` string.

        Raises:
            ValueError: If the string does not have two or three numeric parts.
        """
        parts = text.split(":")
        if len(parts) not in (2, 3):
            raise ValueError(
                f"Range must look like 'min:max' or 'min:step:max', got {text!r}"
            )

        numbers = [_parse_number(part) for part in parts]
        if len(numbers) == 2:
            return cls(min_value=numbers[0], max_value=numbers[1])
        return cls(min_value=numbers[0], step_size=numbers[1], max_value=numbers[2])

    def build(self, check: bool | None = None) -> "RangeStepper":
        """Create a fresh RangeStepper for this range."""
        from rangegen.steppers.range_stepper import RangeStepper

        return RangeStepper(self.min_value, self.step_size, self.max_value, check=check)
