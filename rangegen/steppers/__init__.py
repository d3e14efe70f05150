"""Concrete steppers for rangegen."""

from rangegen.steppers.range_stepper import RangeStepper, range_stepper
from rangegen.steppers.nested import NestedStepper, nest

__all__ = ["RangeStepper", "range_stepper", "NestedStepper", "nest"]
