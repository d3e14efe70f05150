"""Walk the pixels of each tile over a 2D domain, in raster order.

Demonstrates: nesting steppers inside a visit_pairs callback, clipping
the last row/column of tiles for imperfect tilings.
Output: 6 tiles over a 5x4 domain with tile size 2
"""

from rangegen import RangeStepper, nest

NUM_ROWS, NUM_COLS = 5, 4
TILE_SIZE = 2


def walk_tile(start_row: int, start_col: int) -> None:
    print(f"tile {start_row:2d} {start_col:2d}")
    pixels = nest(
        RangeStepper(start_row, min(NUM_ROWS, start_row + TILE_SIZE)),
        RangeStepper(start_col, min(NUM_COLS, start_col + TILE_SIZE)),
    )
    pixels.visit_pairs(lambda row, col: print(f"  px {row:2d} {col:2d}"))


print("--- Walk Tile Pixels In Raster Order ---")
tiles = RangeStepper(0, TILE_SIZE, NUM_ROWS) * RangeStepper(0, TILE_SIZE, NUM_COLS)
tiles.visit_pairs(walk_tile)
