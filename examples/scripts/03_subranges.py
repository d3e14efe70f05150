"""visit_each_pair calling a function for each subrange of a float range.

Demonstrates: RangeStepper, visit_each_pair
Output: 7 subranges from -2.3 : -1.1 to 4.9 : 6.1
"""

from rangegen import RangeStepper

minval, step, maxval = -2.3, 1.2, 5.7
print(f"--- Simple Range For Each SubRange (min: {minval}, step: {step}, max: {maxval}) ---")

RangeStepper(minval, step, maxval).visit_each_pair(
    lambda low, high: print(f"{low:g} : {high:g}")
)
