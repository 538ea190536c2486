"""Sprite Duel: two local players sharing one keyboard."""

from .entities import Player, Projectile, Floor, Hitbox, Controls
from .world import DuelWorld

__all__ = [
    "Player",
    "Projectile",
    "Floor",
    "Hitbox",
    "Controls",
    "DuelWorld",
]
