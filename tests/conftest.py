"""pygame을 화면 없이 돌리기 위한 공통 설정."""
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pygame
import pytest


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def pygame_fonts():
    pygame.font.init()
    yield
