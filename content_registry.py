from __future__ import annotations

import logging
import sys
from pathlib import Path

import pygame

logger = logging.getLogger(__name__)

SPRITES = {
    # name: (file, fallback colour)
    "character": ("character.png", (200, 240, 255)),
    "floor": ("floor.png", (90, 70, 50)),
    "projectile": ("projectile.png", (255, 210, 120)),
}


def asset_root(asset_dir: str | Path = "assets") -> Path:
    """Asset folder for dev runs and PyInstaller bundles."""
    asset_dir = Path(asset_dir)
    if asset_dir.is_absolute():
        return asset_dir
    # PyInstaller sets sys._MEIPASS to the temp extraction dir.
    base = getattr(sys, "_MEIPASS", None)
    base_path = Path(base) if base else Path(__file__).resolve().parent
    return base_path / asset_dir


def load_game_fonts():
    """Return (big, small) default fonts."""
    if not pygame.font.get_init():
        pygame.font.init()

    big = pygame.font.Font(None, 48)
    small = pygame.font.Font(None, 20)
    return big, small


def _placeholder(color) -> pygame.Surface:
    surf = pygame.Surface((1, 1))
    surf.fill(color)
    return surf


def load_sprite(name: str, asset_dir: str | Path = "assets") -> pygame.Surface:
    """Load one sprite; a missing or broken file falls back to a flat colour."""
    filename, color = SPRITES[name]
    path = asset_root(asset_dir) / filename
    if not path.exists():
        logger.warning("Missing sprite %s, drawing a flat %s block", path, name)
        return _placeholder(color)
    try:
        image = pygame.image.load(str(path))
    except pygame.error as exc:
        logger.warning("Could not load sprite %s: %s", path, exc)
        return _placeholder(color)
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def load_duel_sprites(asset_dir: str | Path = "assets") -> dict[str, pygame.Surface]:
    """Load every sprite the duel draws, once, at startup."""
    return {name: load_sprite(name, asset_dir) for name in SPRITES}
