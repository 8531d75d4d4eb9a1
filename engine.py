"""Game loop controller.

Owns the player, the enemies, both scores and the running/result state
machine. Drawing goes through a renderer object with two calls:

- ``draw_sprite(image_key, x, y)``
- ``draw_overlay(name, x, y, value)``: a cached text panel that is only
  redrawn when ``value`` changes

so this module never touches pygame directly.
"""

from __future__ import annotations

import logging
import random
from typing import Literal, Optional

from config import (
    OVERLAY_RESULTS,
    OVERLAY_SCOREBOARD_BG,
    OVERLAY_SCOREBOARD_FG,
    SCORE_FG_POS,
    get_start_high_score,
)
from entities import DIRECTIONS, NUM_ENEMIES, Enemy, Player
from tile_grid import iter_tiles

logger = logging.getLogger(__name__)

GameState = Literal["running", "show_result"]
RESTART = "restart"


class Game:
    def __init__(
        self,
        *,
        high_score: Optional[int] = None,
        rng: Optional[random.Random] = None,
        num_enemies: int = NUM_ENEMIES,
    ) -> None:
        self.rng = rng or random.Random()
        self.state: GameState = "running"
        self.current_score = 0
        self.high_score = get_start_high_score() if high_score is None else high_score
        self.elapsed = 0.0
        # 이미지 로딩이 끝나기 전에는 틱을 돌리지 않는다
        self.started = False

        self.player = Player()
        self.enemies: list[Enemy] = []
        for _ in range(num_enemies):
            enemy = Enemy(rng=self.rng)
            self.enemies.append(enemy)
            enemy.spawn(self.player.row, self.enemies)

    # -------------------
    # 라이프사이클
    # -------------------
    def start(self) -> None:
        """Called once every sprite is loaded; the loop may tick afterwards."""
        self.reset()
        self.started = True
        logger.info("game started (high score %d)", self.high_score)

    def reset(self) -> None:
        """Start a fresh round, banking the finished score first."""
        if self.current_score > self.high_score:
            logger.info("new high score %d (was %d)", self.current_score, self.high_score)
            self.high_score = self.current_score
        self.current_score = 0
        self.elapsed = 0.0
        self.player.reset()
        for enemy in self.enemies:
            enemy.spawn(self.player.row, self.enemies)
        self.state = "running"

    def restart(self) -> None:
        if self.state != "show_result":
            return
        self.reset()

    # -------------------
    # 업데이트
    # -------------------
    def update(self, dt: float) -> None:
        if not self.started or self.state != "running":
            return

        self._update_entities(dt)
        self.elapsed += dt

        if self.player.won_game or self.player.lost_game:
            self.state = "show_result"
            self._log_outcome()

    def _update_entities(self, dt: float) -> None:
        player = self.player
        for enemy in self.enemies:
            enemy.update(dt, player.row, self.enemies)
            # 같은 틱에 물에 닿았다면 승리가 우선
            if not player.won_game and enemy.collides_with(player):
                player.lost_game = True
        player.update(dt)

    def _log_outcome(self) -> None:
        outcome = "won" if self.player.won_game else "lost"
        logger.info("game %s after %.1fs with score %d", outcome, self.elapsed, self.current_score)

    def handle_input(self, value: Optional[str]) -> bool:
        """Apply a logical input; returns False when nothing changed.

        Clamped moves and moves after the round is decided count as
        unchanged, as do inputs that do not apply to the current state.
        """
        if value == RESTART:
            if self.state != "show_result":
                return False
            self.restart()
            return True

        if value in DIRECTIONS and self.started and self.state == "running":
            points = self.player.handle_input(value)
            self.current_score += points
            return points > 0
        return False

    def result_message(self) -> str:
        if self.current_score > self.high_score:
            return f"NEW HIGH SCORE:  {self.current_score}"
        if self.player.won_game:
            return "You Made It!"
        return "Smushed!"

    # -------------------
    # 렌더링
    # -------------------
    def render(self, renderer) -> None:
        for image_key, x, y in iter_tiles():
            renderer.draw_sprite(image_key, x, y)

        renderer.draw_overlay(OVERLAY_SCOREBOARD_BG, 0, 0, self.high_score)
        renderer.draw_overlay(OVERLAY_SCOREBOARD_FG, *SCORE_FG_POS, self.current_score)

        for enemy in self.enemies:
            renderer.draw_sprite(enemy.sprite, enemy.x, enemy.y)
        renderer.draw_sprite(self.player.sprite, self.player.x, self.player.y)

        if self.state == "show_result":
            renderer.draw_overlay(OVERLAY_RESULTS, 0, 0, self.result_message())
