"""Nested ranges: an integer outer range and a float inner range.

Demonstrates: nest, range_stepper, visit_pairs, configure_logging
Output: 4 outer values x 5 inner values = 20 pairs
"""

from rangegen import configure_logging, nest, range_stepper

configure_logging("DEBUG")

nested = nest(
    range_stepper(0, 5, 20),
    range_stepper(1.4, 0.93, 5.7),
)
print("--- Nested Ranges (outer: 0:5:20, inner: 1.4:0.93:5.7) ---")

nested.visit_pairs(lambda outer, inner: print(f"{outer}, {inner:g}"))
