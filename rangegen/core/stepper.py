"""Base Stepper capability shared by range and nested steppers."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import TYPE_CHECKING, Generic

from loguru import logger

from rangegen.core.types import T, Visitor

if TYPE_CHECKING:
    from rangegen.steppers.nested import NestedStepper


class Stepper(ABC, Generic[T]):
    """
    A stateful cursor that produces values until it is exhausted.

    Subclasses provide the four primitives. Visitation and iteration are built
    on top of them and drain the stepper as they go.
    """

    @abstractmethod
    def is_done(self) -> bool:
        """Return True once the stepper has no more values."""
        ...

    @abstractmethod
    def current(self) -> T:
        """Return the value the next advance() will produce, without advancing."""
        ...

    @abstractmethod
    def advance(self) -> T:
        """Return the current value and move the cursor forward."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Move the cursor back to the start."""
        ...

    def visit_each(self, fn: Visitor) -> None:
        """Call fn once per remaining value, in order, leaving the stepper exhausted."""
        count = 0
        for value in self:
            fn(value)
            count += 1
        logger.debug(f"{self.__class__.__name__}.visit_each visited {count} values")

    def __iter__(self) -> Iterator[T]:
        """Lazily drain the stepper. Call reset() to iterate again."""
        while not self.is_done():
            yield self.advance()

    def __mul__(self, other: "Stepper") -> "NestedStepper":
        """Enable a * b as shorthand for nest(a, b)."""
        from rangegen.steppers.nested import nest

        if not isinstance(other, Stepper):
            return NotImplemented
        return nest(self, other)
