"""Manual iteration through a range with is_done/advance.

Demonstrates: RangeStepper, is_done, advance
Output: 0, 5, 10, 15
"""

from rangegen import RangeStepper

minval, step, maxval = 0, 5, 20
print(f"--- Simple Range Manual (min: {minval}, step: {step}, max: {maxval}) ---")

stepper = RangeStepper(minval, step, maxval)
while not stepper.is_done():
    print(stepper.advance())
