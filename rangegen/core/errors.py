"""Exceptions raised by rangegen.

Steppers trust their callers by default and never raise. These exceptions only
surface when debug checks are switched on.
"""


class StepperError(Exception):
    """Base class for all rangegen errors."""


class InvalidRangeError(StepperError, ValueError):
    """Raised when a range can never terminate under debug checks."""

    def __init__(self, min_value, step_size, max_value, reason: str) -> None:
        self.min_value = min_value
        self.step_size = step_size
        self.max_value = max_value
        self.reason = reason
        super().__init__(
            f"Invalid range (min: {min_value}, step: {step_size}, max: {max_value}): {reason}"
        )
