"""Core types, configuration and the base Stepper for rangegen."""

from rangegen.core.config import (
    RangeConfig,
    StepperSettings,
    configure_logging,
    get_settings,
    set_settings,
)
from rangegen.core.errors import InvalidRangeError, StepperError
from rangegen.core.stepper import Stepper

__all__ = [
    "RangeConfig",
    "StepperSettings",
    "configure_logging",
    "get_settings",
    "set_settings",
    "InvalidRangeError",
    "StepperError",
    "Stepper",
]
