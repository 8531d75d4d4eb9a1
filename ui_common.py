from __future__ import annotations

from typing import Any, Optional

import pygame

from config import (
    FONT_CANDIDATES,
    OVERLAY_RESULTS,
    OVERLAY_SCOREBOARD_BG,
    OVERLAY_SCOREBOARD_FG,
    PROMPT_FONT_SIZE,
    RESTART_PROMPT,
    RESULT_DIM_ALPHA,
    RESULT_FONT_SIZE,
    RESULT_OUTLINE,
    RESULT_TEXT,
    SCORE_FG_SIZE,
    SCORE_FONT_SIZE,
    SCOREBOARD_BORDER,
    SCOREBOARD_FILL,
    SCOREBOARD_HEIGHT,
    SCOREBOARD_INK,
)

_font_cache: dict[tuple[int, bool], pygame.font.Font] = {}


def get_font(size: int, bold: bool = False) -> pygame.font.Font:
    """설치된 폰트 후보 중 첫 번째를 골라 캐시해 둔다."""
    if not pygame.font.get_init():
        # pygame.quit() 이후 캐시된 폰트는 더 이상 쓸 수 없다
        pygame.font.init()
        _font_cache.clear()
    cached = _font_cache.get((size, bold))
    if cached is not None:
        return cached

    font: Optional[pygame.font.Font] = None
    for name in FONT_CANDIDATES:
        font_path = pygame.font.match_font(name, bold=bold)
        if font_path:
            font = pygame.font.Font(font_path, size)
            break
    if font is None:
        font = pygame.font.SysFont(None, size, bold=bold)
    _font_cache[(size, bold)] = font
    return font


def draw_overlay(surface: pygame.Surface, *, alpha: int = 120) -> None:
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, max(0, min(255, alpha))))
    surface.blit(overlay, (0, 0))


def draw_outlined_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    center: tuple[int, int],
    *,
    color=RESULT_TEXT,
    outline=RESULT_OUTLINE,
    thickness: int = 2,
) -> None:
    """흰 글씨 + 검은 테두리 텍스트를 중앙 정렬로 그린다."""
    shadow = font.render(text, True, outline)
    for dx in (-thickness, 0, thickness):
        for dy in (-thickness, 0, thickness):
            if dx or dy:
                surface.blit(shadow, shadow.get_rect(center=(center[0] + dx, center[1] + dy)))
    rendered = font.render(text, True, color)
    surface.blit(rendered, rendered.get_rect(center=center))


class CachedOverlay:
    """Off-screen panel that is only redrawn when its value changes.

    Text rendering every frame is slow, so each panel keeps the value it
    last drew and reuses its surface until that value (or a forced
    redraw) says otherwise.
    """

    def __init__(self, size: tuple[int, int]) -> None:
        self.surface = pygame.Surface(size, pygame.SRCALPHA)
        self.force_draw = True
        self.drawn_value: Any = None
        self.redraw_count = 0

    def set_force_draw(self) -> None:
        self.force_draw = True

    def should_redraw(self, value: Any) -> bool:
        return self.force_draw or value != self.drawn_value

    def draw(self, target: pygame.Surface, x: int, y: int, value: Any) -> None:
        if self.should_redraw(value):
            self.surface.fill((0, 0, 0, 0))
            self.draw_to_surface(value)
            self.drawn_value = value
            self.force_draw = False
            self.redraw_count += 1
        target.blit(self.surface, (x, y))

    def draw_to_surface(self, value: Any) -> None:
        raise NotImplementedError


class ScoreboardBackground(CachedOverlay):
    """Grey strip with the high score and the static "Score:" label."""

    def draw_to_surface(self, value: Any) -> None:
        rect = self.surface.get_rect()
        pygame.draw.rect(self.surface, SCOREBOARD_FILL, rect)
        pygame.draw.rect(self.surface, SCOREBOARD_INK, rect, width=SCOREBOARD_BORDER)

        font = get_font(SCORE_FONT_SIZE)
        high = font.render(f"High:  {value}", True, SCOREBOARD_INK)
        self.surface.blit(high, high.get_rect(midleft=(20, rect.centery)))
        label = font.render("Score:", True, SCOREBOARD_INK)
        self.surface.blit(label, label.get_rect(midleft=(rect.width - 220, rect.centery)))


class ScoreboardForeground(CachedOverlay):
    def draw_to_surface(self, value: Any) -> None:
        font = get_font(SCORE_FONT_SIZE)
        rendered = font.render(str(value), True, SCOREBOARD_INK)
        self.surface.blit(rendered, rendered.get_rect(midleft=(10, self.surface.get_height() // 2)))


class ResultsScreen(CachedOverlay):
    """게임 종료 화면: 결과 문구 + 재시작 안내."""

    def draw_to_surface(self, value: Any) -> None:
        draw_overlay(self.surface, alpha=RESULT_DIM_ALPHA)
        w, h = self.surface.get_size()
        draw_outlined_text(self.surface, get_font(RESULT_FONT_SIZE), str(value), (w // 2, h // 2), thickness=3)
        draw_outlined_text(self.surface, get_font(PROMPT_FONT_SIZE), RESTART_PROMPT, (w // 2, h // 2 + 82))


def build_overlays(width: int, height: int) -> dict[str, CachedOverlay]:
    return {
        OVERLAY_SCOREBOARD_BG: ScoreboardBackground((width, SCOREBOARD_HEIGHT)),
        OVERLAY_SCOREBOARD_FG: ScoreboardForeground(SCORE_FG_SIZE),
        OVERLAY_RESULTS: ResultsScreen((width, height)),
    }


class SpriteRenderer:
    """Draws sprites and cached overlays onto the main window surface."""

    def __init__(self, surface: pygame.Surface, resources, overlays: Optional[dict[str, CachedOverlay]] = None) -> None:
        self.surface = surface
        self.resources = resources
        if overlays is None:
            overlays = build_overlays(*surface.get_size())
        self.overlays = overlays

    def clear(self, color=(255, 255, 255)) -> None:
        self.surface.fill(color)

    def draw_sprite(self, image_key: str, x: float, y: float) -> None:
        self.surface.blit(self.resources.get(image_key), (int(x), int(y)))

    def draw_overlay(self, name: str, x: int, y: int, value: Any) -> None:
        self.overlays[name].draw(self.surface, x, y, value)
