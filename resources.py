from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, Optional

import pygame

from config import get_asset_dir
from entities import ENEMY_SPRITE, PLAYER_SPRITE

logger = logging.getLogger(__name__)

# 모든 스프라이트는 같은 크기의 투명 캔버스(타일 + 위쪽 여백)로 그려진다
SPRITE_SIZE = (101, 171)
BLOCK_TOP = 50
BLOCK_FACE_HEIGHT = 80

IMAGE_KEYS = (
    "stone-block.png",
    "water-block.png",
    "grass-block.png",
    ENEMY_SPRITE,
    PLAYER_SPRITE,
)

BLOCK_COLORS = {
    "stone-block.png": ((170, 170, 170), (128, 128, 128)),
    "water-block.png": ((110, 170, 255), (60, 110, 220)),
    "grass-block.png": ((120, 200, 90), (70, 140, 50)),
}


def _draw_block(surface: pygame.Surface, top: tuple[int, int, int], side: tuple[int, int, int]) -> None:
    width, height = surface.get_size()
    pygame.draw.rect(surface, side, (0, BLOCK_TOP, width, height - BLOCK_TOP))
    pygame.draw.rect(surface, top, (0, BLOCK_TOP, width, BLOCK_FACE_HEIGHT))


def _draw_bug(surface: pygame.Surface) -> None:
    body = pygame.Rect(4, 78, 93, 62)
    pygame.draw.ellipse(surface, (200, 40, 40), body)
    pygame.draw.ellipse(surface, (40, 20, 20), body, width=3)
    pygame.draw.circle(surface, (255, 255, 255), (78, 100), 8)
    pygame.draw.circle(surface, (20, 20, 20), (81, 100), 4)


def _draw_boy(surface: pygame.Surface) -> None:
    pygame.draw.rect(surface, (60, 90, 200), (30, 100, 41, 38), border_radius=8)
    pygame.draw.circle(surface, (250, 215, 170), (50, 84), 20)
    pygame.draw.circle(surface, (20, 20, 20), (43, 82), 3)
    pygame.draw.circle(surface, (20, 20, 20), (57, 82), 3)


def make_placeholder(key: str) -> pygame.Surface:
    """Draw a stand-in sprite for an image whose file is missing."""
    surface = pygame.Surface(SPRITE_SIZE, pygame.SRCALPHA)
    if key in BLOCK_COLORS:
        _draw_block(surface, *BLOCK_COLORS[key])
    elif key == ENEMY_SPRITE:
        _draw_bug(surface)
    elif key == PLAYER_SPRITE:
        _draw_boy(surface)
    else:
        surface.fill((255, 0, 255, 255))
    return surface


class Resources:
    """Image cache that tells its listeners when everything is loaded."""

    def __init__(self, asset_dir: Optional[Path] = None) -> None:
        self.asset_dir = asset_dir if asset_dir is not None else get_asset_dir()
        self._cache: dict[str, pygame.Surface] = {}
        self._pending: set[str] = set()
        self._ready_callbacks: list[Callable[[], None]] = []

    def load(self, keys: Iterable[str]) -> None:
        for key in keys:
            if key not in self._cache:
                self._pending.add(key)

        for key in sorted(self._pending):
            self._cache[key] = self._load_one(key)
            self._pending.discard(key)

        if self.is_ready():
            self._notify_ready()

    def _load_one(self, key: str) -> pygame.Surface:
        path = self.asset_dir / key
        if path.exists():
            image = pygame.image.load(path.as_posix())
        else:
            logger.warning("missing asset %s, drawing a placeholder", path)
            image = make_placeholder(key)
        # convert_alpha()는 디스플레이가 열린 뒤에만 가능하다
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        return image

    def is_ready(self) -> bool:
        return bool(self._cache) and not self._pending

    def on_ready(self, callback: Callable[[], None]) -> None:
        """Run ``callback`` once all requested images are in the cache."""
        if self.is_ready():
            callback()
            return
        self._ready_callbacks.append(callback)

    def _notify_ready(self) -> None:
        callbacks, self._ready_callbacks = self._ready_callbacks, []
        for callback in callbacks:
            callback()

    def get(self, key: str) -> pygame.Surface:
        try:
            return self._cache[key]
        except KeyError:
            raise KeyError(f"image not loaded: {key}") from None
