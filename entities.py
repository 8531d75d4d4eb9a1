from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Literal, Optional, Sequence

from tile_grid import (
    BOARD_WIDTH,
    ENEMY_LANES,
    GOAL_ROW,
    LAST_COLUMN,
    START_COLUMN,
    START_ROW,
    TILE_WIDTH,
    grid_to_pixel,
)

logger = logging.getLogger(__name__)

NUM_ENEMIES = 4
ENEMY_WIDTH = 101
# 플레이어 스프라이트가 타일 폭을 다 채우지 않아서 좌우로 판정 여백을 둔다
PLAYER_SIDE_MARGIN = 25

MIN_ENEMY_SPEED = TILE_WIDTH / 1.25  # 1.25 seconds per tile
MAX_ENEMY_SPEED = TILE_WIDTH / 0.3  # 0.3 seconds per tile

MAX_ENEMIES_PER_LANE = 2
MAX_LANE_DRAWS = 32

WIN_BONUS = 50

ENEMY_SPRITE = "enemy-bug.png"
PLAYER_SPRITE = "char-boy.png"

Direction = Literal["left", "right", "up", "down"]
DIRECTIONS: tuple[Direction, ...] = ("left", "right", "up", "down")


def _lane_count(enemies: Sequence["Enemy"], lane: int) -> int:
    return sum(1 for enemy in enemies if enemy.lane == lane)


def pick_lane(
    player_row: int,
    enemies: Sequence["Enemy"],
    *,
    exclude: Optional["Enemy"] = None,
    rng: Optional[random.Random] = None,
) -> int:
    """Choose the lane for a (re)spawning enemy.

    The player's lane always gets an enemy when it has none. Otherwise a
    random lane is drawn until one holds fewer than two other enemies.
    The draw is capped; past the cap the least crowded lane wins so the
    choice always terminates, whatever the enemy count.
    """
    rng = rng or random.Random()
    others = [enemy for enemy in enemies if enemy is not exclude]

    if player_row in ENEMY_LANES and _lane_count(others, player_row) == 0:
        return player_row

    for _ in range(MAX_LANE_DRAWS):
        lane = rng.choice(ENEMY_LANES)
        if _lane_count(others, lane) < MAX_ENEMIES_PER_LANE:
            return lane

    lane = min(ENEMY_LANES, key=lambda candidate: _lane_count(others, candidate))
    logger.debug("lane draw limit hit, falling back to lane %d", lane)
    return lane


@dataclass(eq=False)
class Enemy:
    """A bug that crawls left to right along one stone lane."""

    x: float = 0.0
    y: float = 0.0
    # 0 means "not spawned yet": the water row never holds an enemy
    lane: int = GOAL_ROW
    speed: float = 0.0
    rng: random.Random = field(default_factory=random.Random, repr=False)
    sprite: str = ENEMY_SPRITE

    def spawn(self, player_row: int, enemies: Sequence["Enemy"]) -> None:
        """Put the enemy just off the left edge with a fresh lane and speed."""
        self.lane = pick_lane(player_row, enemies, exclude=self, rng=self.rng)
        _, lane_y = grid_to_pixel(self.lane, 0)
        self.x = float(-TILE_WIDTH)
        self.y = float(lane_y)
        self.speed = self.rng.uniform(MIN_ENEMY_SPEED, MAX_ENEMY_SPEED)
        logger.debug("enemy spawned on lane %d at %.1f px/s", self.lane, self.speed)

    def update(self, dt: float, player_row: int, enemies: Sequence["Enemy"]) -> None:
        """Advance by ``dt`` seconds; respawn once past the right edge."""
        self.x += self.speed * dt
        if self.is_off_board():
            self.spawn(player_row, enemies)

    def is_off_board(self) -> bool:
        return self.x > BOARD_WIDTH

    def collides_with(self, player: "Player") -> bool:
        """Same lane and the horizontal spans overlap (edges exclusive)."""
        if self.lane != player.row:
            return False
        left = player.x + PLAYER_SIDE_MARGIN
        right = player.x + TILE_WIDTH - PLAYER_SIDE_MARGIN
        return self.x + ENEMY_WIDTH > left and self.x < right


@dataclass(eq=False)
class Player:
    """The character crossing the board, one tile per key press."""

    row: int = START_ROW
    column: int = START_COLUMN
    x: int = 0
    y: int = 0
    won_game: bool = False
    lost_game: bool = False
    sprite: str = PLAYER_SPRITE

    def __post_init__(self) -> None:
        self._sync_pixels()

    def _sync_pixels(self) -> None:
        self.x, self.y = grid_to_pixel(self.row, self.column)

    @property
    def is_finished(self) -> bool:
        return self.won_game or self.lost_game

    def reset(self) -> None:
        self.row = START_ROW
        self.column = START_COLUMN
        self.won_game = False
        self.lost_game = False
        self._sync_pixels()

    def update(self, dt: float) -> None:
        # 플레이어는 키 입력으로만 움직인다
        return None

    def handle_input(self, direction: str) -> int:
        """Apply one move and return the points it earned.

        Moves that would leave the grid are no-ops worth nothing. Reaching
        the water row wins the game and adds ``WIN_BONUS``.
        """
        if self.is_finished:
            return 0

        points = 0
        if direction == "left":
            if self.column > 0:
                self.column -= 1
                points = 1
        elif direction == "right":
            if self.column < LAST_COLUMN:
                self.column += 1
                points = 1
        elif direction == "up":
            if self.row > GOAL_ROW:
                self.row -= 1
                points = 1
                if self.row == GOAL_ROW:
                    self.won_game = True
                    points += WIN_BONUS
        elif direction == "down":
            if self.row < START_ROW:
                self.row += 1
                points = 1

        self._sync_pixels()
        return points
