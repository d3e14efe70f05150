"""Type aliases shared across rangegen."""

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")
TOuter = TypeVar("TOuter")
TInner = TypeVar("TInner")

Pair = tuple[TOuter, TInner]
Visitor = Callable[[Any], None]
PairVisitor = Callable[[Any, Any], None]
