from __future__ import annotations

TILE_WIDTH = 101
TILE_HEIGHT = 83
# 스프라이트 아트가 타일 위쪽에 여백을 두고 있어서 y 좌표를 살짝 끌어올린다
VERTICAL_OFFSET = 25

NUM_COLUMNS = 5
NUM_ROWS = 6

GOAL_ROW = 0
START_ROW = NUM_ROWS - 1
START_COLUMN = 2
LAST_COLUMN = NUM_COLUMNS - 1

# 물(0행)은 목표 지점이라 적이 다니지 않는다. 풀밭(5행)도 출발 지점이라 제외.
ENEMY_LANES = (1, 2, 3, 4)

BOARD_WIDTH = NUM_COLUMNS * TILE_WIDTH

ROW_IMAGES = (
    "water-block.png",
    "stone-block.png",
    "stone-block.png",
    "stone-block.png",
    "grass-block.png",
    "grass-block.png",
)


def grid_to_pixel(row: int, column: int) -> tuple[int, int]:
    """Sprite position for the tile at (row, column)."""
    return column * TILE_WIDTH, row * TILE_HEIGHT - VERTICAL_OFFSET


def tile_origin(row: int, column: int) -> tuple[int, int]:
    """Top-left corner of a background tile, without the sprite offset."""
    return column * TILE_WIDTH, row * TILE_HEIGHT


def iter_tiles():
    """Yield (image_key, x, y) for every background tile, top row first."""
    for row, image_key in enumerate(ROW_IMAGES):
        for column in range(NUM_COLUMNS):
            x, y = tile_origin(row, column)
            yield image_key, x, y
