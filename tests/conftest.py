import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from game_context import DuelConfig
from duel.entities import Floor, Player, PLAYER1_CONTROLS, PLAYER2_CONTROLS
from duel.world import DuelWorld


@pytest.fixture
def config():
    return DuelConfig()


@pytest.fixture
def floor(config):
    return Floor(config)


@pytest.fixture
def p1(config):
    return Player("player1", 100, 300, PLAYER1_CONTROLS, config)


@pytest.fixture
def p2(config):
    return Player("player2", 600, 300, PLAYER2_CONTROLS, config, invert_colors=True)


@pytest.fixture
def world(config):
    return DuelWorld(config)


@pytest.fixture
def display():
    pygame.init()
    yield
    pygame.quit()
