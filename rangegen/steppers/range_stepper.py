"""Numeric range stepper."""

from collections.abc import Iterator

from loguru import logger

from rangegen.core.config import get_settings
from rangegen.core.errors import InvalidRangeError
from rangegen.core.stepper import Stepper
from rangegen.core.types import Pair, PairVisitor, T


class RangeStepper(Stepper[T]):
    """
    Step through ``[min_value, max_value)`` by a fixed step.

    Accepts ``RangeStepper(min, max)`` with a unit step, or
    ``RangeStepper(min, step, max)``. The stepper is exhausted once the cursor
    reaches or passes ``max_value``. That test only terminates for positive
    steps, so zero or negative steps over a non-empty range loop forever
    unless debug checks are enabled.

    Examples:
        >>> RangeStepper(0, 5, 20).visit_each(print)   # 0 5 10 15
        >>> list(RangeStepper(3, 6))                    # [3, 4, 5]
    """

    def __init__(self, min_value: T, *args: T, check: bool | None = None) -> None:
        """
        Initialize a RangeStepper.

        Args:
            min_value: First value produced, and the value reset() returns to.
            *args: Either ``(max_value,)`` or ``(step_size, max_value)``.
            check: Reject ranges that can never terminate. Defaults to the
                active settings' debug_checks, which is off unless configured.

        Raises:
            TypeError: If args does not hold one or two values.
            InvalidRangeError: If check is enabled and the range never ends.
        """
        if len(args) == 1:
            step_size, max_value = type(min_value)(1), args[0]
        elif len(args) == 2:
            step_size, max_value = args
        else:
            raise TypeError(
                f"RangeStepper expected 2 or 3 positional arguments, got {len(args) + 1}"
            )

        self._min_value = min_value
        self._step_size = step_size
        self._max_value = max_value
        self._current_value = min_value

        if check is None:
            check = get_settings().debug_checks
        if check:
            self._check_terminates()

    def _check_terminates(self) -> None:
        reason = None
        if self._step_size == 0:
            reason = "step size is zero"
        elif self._step_size < 0 and self._min_value < self._max_value:
            reason = "negative step never reaches max"

        if reason is not None:
            logger.error(
                f"Rejected range | min: {self._min_value}, step: {self._step_size}, "
                f"max: {self._max_value} | {reason}"
            )
            raise InvalidRangeError(self._min_value, self._step_size, self._max_value, reason)

    @property
    def min_value(self) -> T:
        return self._min_value

    @property
    def step_size(self) -> T:
        return self._step_size

    @property
    def max_value(self) -> T:
        return self._max_value

    def is_done(self) -> bool:
        return self._current_value >= self._max_value

    def current(self) -> T:
        return self._current_value

    def advance(self) -> T:
        value = self._current_value
        self._current_value += self._step_size
        return value

    def reset(self) -> None:
        self._current_value = self._min_value

    def subranges(self) -> Iterator[Pair[T, T]]:
        """
        Lazily yield ``(value, value + step_size)`` for each remaining value.

        The second element is computed from the step, so the last pair may end
        beyond max_value.
        """
        while not self.is_done():
            value = self.advance()
            yield value, value + self._step_size

    def visit_each_pair(self, fn: PairVisitor) -> None:
        """
        Call fn(low, high) for each subrange.

        Useful for splitting a range into extents, e.g. tiles:

            >>> RangeStepper(0, 5, 20).visit_each_pair(lambda lo, hi: print(lo, hi))
            # 0 5 / 5 10 / 10 15 / 15 20
        """
        count = 0
        for low, high in self.subranges():
            fn(low, high)
            count += 1
        logger.debug(f"{self.__class__.__name__}.visit_each_pair visited {count} subranges")

    def __repr__(self) -> str:
        return (
            f"RangeStepper(min={self._min_value!r}, step={self._step_size!r}, "
            f"max={self._max_value!r}, current={self._current_value!r})"
        )


def range_stepper(min_value: T, *args: T, check: bool | None = None) -> RangeStepper[T]:
    """Create a RangeStepper. Takes the same arguments as the constructor."""
    return RangeStepper(min_value, *args, check=check)
