"""Game-wide constants and environment overrides.

Constants live at module level like the rest of the game. Anything a
player might want to tweak without editing code is read from the
environment at call time through the ``get_*`` helpers below.
"""

from __future__ import annotations

import os
from pathlib import Path

from path_utils import get_asset_path

SCREEN_WIDTH = 505
SCREEN_HEIGHT = 606
WINDOW_TITLE = "Bug Crossing"
DEFAULT_FPS = 60

# 세션을 시작할 때 보여 줄 최고 점수
DEFAULT_HIGH_SCORE = 53

DEFAULT_LOG_LEVEL = "INFO"

SCOREBOARD_HEIGHT = 50
SCOREBOARD_FILL = (221, 221, 221)
SCOREBOARD_INK = (68, 68, 170)
SCOREBOARD_BORDER = 7
SCORE_FG_SIZE = (80, 40)
SCORE_FG_POS = (400, 5)

RESULT_TEXT = (255, 255, 255)
RESULT_OUTLINE = (0, 0, 0)
RESULT_DIM_ALPHA = 90
RESTART_PROMPT = "Press space bar to play again"

# Overlay names shared by the game loop and the renderer
OVERLAY_SCOREBOARD_BG = "scoreboard_bg"
OVERLAY_SCOREBOARD_FG = "scoreboard_fg"
OVERLAY_RESULTS = "results"

FONT_CANDIDATES = [
    "Impact",
    "Haettenschweiler",
    "Arial Black",
    "DejaVu Sans",
]
SCORE_FONT_SIZE = 40
RESULT_FONT_SIZE = 56
PROMPT_FONT_SIZE = 32

ENV_FPS = "BUG_CROSSING_FPS"
ENV_HIGH_SCORE = "BUG_CROSSING_HIGH_SCORE"
ENV_ASSET_DIR = "BUG_CROSSING_ASSET_DIR"
ENV_LOG_LEVEL = "BUG_CROSSING_LOG_LEVEL"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from e


def get_fps() -> int:
    fps = _env_int(ENV_FPS, DEFAULT_FPS)
    if fps <= 0:
        raise RuntimeError(f"{ENV_FPS} must be positive, got {fps}")
    return fps


def get_start_high_score() -> int:
    """High score shown before anyone has played this session."""
    return max(0, _env_int(ENV_HIGH_SCORE, DEFAULT_HIGH_SCORE))


def get_asset_dir() -> Path:
    override = os.getenv(ENV_ASSET_DIR, "").strip()
    if override:
        return Path(override).expanduser()
    return get_asset_path("bug_crossing")


def get_log_level() -> str:
    return os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL
