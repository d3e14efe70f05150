"""Build steppers from range strings, with debug checks on.

Demonstrates: RangeConfig.parse, RangeConfig.build, InvalidRangeError
Output: the values of each valid range, and the rejection of a bad one
"""

from loguru import logger

from rangegen import InvalidRangeError, RangeConfig

ranges = ["0:5:20", "3:6", "-2.3:1.2:5.7", "0:-1:10"]

for text in ranges:
    config = RangeConfig.parse(text)
    try:
        stepper = config.build(check=True)
    except InvalidRangeError as e:
        logger.warning(f"Skipping {text}: {e.reason}")
        continue
    print(f"{text} -> {[round(v, 6) for v in stepper]}")
