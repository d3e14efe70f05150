"""Nested (row-major) composition of two steppers."""

import copy
from typing import Generic

from loguru import logger

from rangegen.core.stepper import Stepper
from rangegen.core.types import Pair, PairVisitor, TInner, TOuter


class NestedStepper(Stepper[Pair[TOuter, TInner]], Generic[TOuter, TInner]):
    """
    Walk the inner stepper fully for every value of the outer stepper.

    Produces ``(outer, inner)`` pairs in row-major order. The stepper is done
    exactly when the outer stepper is done. Both steppers are copied at
    construction, so the originals are never advanced.

    An empty inner range still yields one pair per outer value, carrying the
    inner stepper's out-of-range current value.

    Examples:
        >>> nest(RangeStepper(0, 2), RangeStepper(0, 3)).visit_pairs(print)
        # (0, 0) (0, 1) (0, 2) (1, 0) (1, 1) (1, 2)

        >>> # Three-way nesting composes pairwise, yielding ((a, b), c)
        >>> nest(nest(a, b), c)
    """

    def __init__(self, outer: Stepper[TOuter], inner: Stepper[TInner]) -> None:
        self._outer = copy.deepcopy(outer)
        self._inner = copy.deepcopy(inner)

    @property
    def outer(self) -> Stepper[TOuter]:
        return self._outer

    @property
    def inner(self) -> Stepper[TInner]:
        return self._inner

    def is_done(self) -> bool:
        return self._outer.is_done()

    def current(self) -> Pair[TOuter, TInner]:
        return self._outer.current(), self._inner.current()

    def advance_pair(self) -> Pair[TOuter, TInner]:
        """Return the current pair, then step the inner stepper, carrying into the outer."""
        pair = self.current()
        self._inner.advance()
        if self._inner.is_done():
            self._outer.advance()
            self._inner.reset()
        return pair

    def advance(self) -> Pair[TOuter, TInner]:
        return self.advance_pair()

    def reset(self) -> None:
        self._outer.reset()
        self._inner.reset()

    def visit_pairs(self, fn: PairVisitor) -> None:
        """Call fn(outer, inner) for each remaining pair, in row-major order."""
        count = 0
        for outer_value, inner_value in self:
            fn(outer_value, inner_value)
            count += 1
        logger.debug(f"{self.__class__.__name__}.visit_pairs visited {count} pairs")

    def __repr__(self) -> str:
        return f"NestedStepper(outer={self._outer!r}, inner={self._inner!r})"


def nest(outer: Stepper[TOuter], inner: Stepper[TInner]) -> NestedStepper[TOuter, TInner]:
    """
    Compose two steppers into a NestedStepper.

    Args:
        outer: Stepper advanced once per full pass of the inner stepper.
        inner: Stepper walked completely for each outer value.

    Returns:
        A NestedStepper holding independent copies of both steppers.
    """
    nested = NestedStepper(outer, inner)
    logger.debug(f"Nested {outer!r} with {inner!r}")
    return nested
