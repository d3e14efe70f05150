"""Walk each subrange of a range with a second stepper.

Demonstrates: visit_each_pair, RangeStepper(min, max), visit_each
Output: 4 subranges of 5 integers each
"""

from rangegen import RangeStepper


def walk_subrange(low: int, high: int) -> None:
    print(f"{low} - {high}")
    RangeStepper(low, high).visit_each(lambda v: print(v, end="  "))
    print()


minval, step, maxval = 0, 5, 20
print(f"--- Range For Each Walk Subrange Manual (min: {minval}, step: {step}, max: {maxval}) ---")

RangeStepper(minval, step, maxval).visit_each_pair(walk_subrange)
