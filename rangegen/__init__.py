"""rangegen - Stateful numeric range steppers and nested (row-major) composition."""

from rangegen.core.types import Pair
from rangegen.core.stepper import Stepper
from rangegen.core.config import (
    RangeConfig,
    StepperSettings,
    configure_logging,
    get_settings,
    set_settings,
)
from rangegen.core.errors import InvalidRangeError, StepperError
from rangegen.steppers.range_stepper import RangeStepper, range_stepper
from rangegen.steppers.nested import NestedStepper, nest

__all__ = [
    "Pair",
    "Stepper",
    "RangeConfig",
    "StepperSettings",
    "configure_logging",
    "get_settings",
    "set_settings",
    "InvalidRangeError",
    "StepperError",
    "RangeStepper",
    "range_stepper",
    "NestedStepper",
    "nest",
]
