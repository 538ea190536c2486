"""
game_context.py
---------------
Shared match configuration and session context for Sprite Duel.
Tracks matches played, wins per side, draws, and the last result.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict

COLLISION_MODES = ("block", "contact")


@dataclass
class DuelConfig:
    width: int = 800
    height: int = 400
    fps: int = 60
    floor_height: int = 50

    # per-frame physics, in pixels
    gravity: float = 0.5
    player_size: int = 50
    crouch_height: int = 30
    move_speed: float = 5.0
    jump_strength: float = 10.0
    max_jumps: int = 2
    max_health: int = 20

    projectile_width: int = 40
    projectile_height: int = 20
    projectile_speed: float = 8.0
    projectile_damage: int = 2
    contact_damage: int = 1

    collision_mode: str = "block"  # "block" or "contact"
    asset_dir: str = "assets"

    def validate(self) -> "DuelConfig":
        if self.collision_mode not in COLLISION_MODES:
            raise ValueError(
                f"collision_mode must be one of {COLLISION_MODES}, got {self.collision_mode!r}"
            )
        for name in (
            "width", "height", "fps", "floor_height", "player_size", "crouch_height",
            "move_speed", "jump_strength",
            "projectile_width", "projectile_height", "projectile_speed",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.crouch_height > self.player_size:
            raise ValueError("crouch_height cannot exceed player_size")
        if self.floor_height >= self.height:
            raise ValueError("floor_height must leave room for the players")
        if self.max_jumps < 1:
            raise ValueError("max_jumps must be at least 1")
        if self.max_health < 1:
            raise ValueError("max_health must be at least 1")
        return self

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height


class GameContext:
    def __init__(self, config: DuelConfig | None = None):
        self.config = (config or DuelConfig()).validate()
        self.stats = {
            "matches": 0,
            "wins": {"player1": 0, "player2": 0},
            "draws": 0,
            "total_frames": 0,
        }

        self.last_result: Dict[str, Any] = {}  # filled after each match

    # -----------------------------------------------------
    #   Core logic
    # -----------------------------------------------------
    def apply_result(self):
        """Apply the most recent match result to cumulative stats."""
        if not self.last_result:
            return

        r = self.last_result
        self.stats["matches"] += 1
        self.stats["total_frames"] += int(r.get("frames", 0))

        winner = r.get("winner")
        if winner in self.stats["wins"]:
            self.stats["wins"][winner] += 1
        elif r.get("outcome") == "draw":
            self.stats["draws"] += 1

    def summary(self):
        return {
            "config": asdict(self.config),
            "stats": self.stats,
            "last_result": self.last_result,
        }

    def __repr__(self):
        return (
            f"<GameContext matches={self.stats['matches']} "
            f"p1={self.stats['wins']['player1']} p2={self.stats['wins']['player2']} "
            f"draws={self.stats['draws']}>"
        )
