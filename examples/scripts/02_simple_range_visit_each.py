"""visit_each calling a function on every element of a range.

Demonstrates: RangeStepper, visit_each
Output: 0, 5, 10, 15
"""

from rangegen import RangeStepper

minval, step, maxval = 0, 5, 20
print(f"--- Simple Range For Each (min: {minval}, step: {step}, max: {maxval}) ---")

RangeStepper(minval, step, maxval).visit_each(print)
