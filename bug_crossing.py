from __future__ import annotations

import logging
import sys
from typing import Optional

import pygame

from config import SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_TITLE, get_fps, get_log_level
from crash_log import install_crash_handler
from engine import RESTART, Game
from resources import IMAGE_KEYS, Resources
from ui_common import SpriteRenderer

logger = logging.getLogger(__name__)

# 원작처럼 키를 뗄 때(KEYUP) 입력을 처리한다
KEY_INPUTS = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_SPACE: RESTART,
}


def translate_event(event: pygame.event.Event) -> Optional[str]:
    """Map a pygame event to a logical game input, or None."""
    if event.type != pygame.KEYUP:
        return None
    return KEY_INPUTS.get(event.key)


class BugCrossingApp:
    def __init__(self) -> None:
        pygame.init()
        pygame.display.set_caption(WINDOW_TITLE)
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        self.clock = pygame.time.Clock()
        self.fps = get_fps()
        self.running = True

        self.game = Game()
        self.resources = Resources()
        self.renderer = SpriteRenderer(self.screen, self.resources)

        # 스프라이트가 모두 준비되면 게임 루프가 돌기 시작한다
        self.resources.on_ready(self.game.start)
        self.resources.load(IMAGE_KEYS)
        # 로딩에 걸린 시간이 첫 프레임 dt에 섞이지 않도록 시계를 다시 맞춘다
        self.clock.tick()

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
            return
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False
            return
        self.game.handle_input(translate_event(event))

    def run(self, quit_on_exit: bool = True) -> None:
        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0

            for event in pygame.event.get():
                self.handle_event(event)
            if not self.running:
                break

            self.game.update(dt)
            if self.game.started:
                self.renderer.clear()
                self.game.render(self.renderer)
            pygame.display.flip()

        if quit_on_exit:
            pygame.quit()


def run_game(*, quit_on_exit: bool = True) -> None:
    BugCrossingApp().run(quit_on_exit=quit_on_exit)


def main() -> None:
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    install_crash_handler(wait_for_key=getattr(sys, "frozen", False))
    run_game()


if __name__ == "__main__":
    main()
