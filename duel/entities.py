"""Players, projectiles and the floor. Pure state, no drawing."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List

import pygame

from game_context import DuelConfig

logger = logging.getLogger(__name__)


# --- Hitbox ---
@dataclass
class Hitbox:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def overlaps(self, other: "Hitbox") -> bool:
        # touching edges do not count
        return (
            self.x < other.right
            and self.right > other.x
            and self.y < other.bottom
            and self.bottom > other.y
        )


# --- Controls ---
@dataclass(frozen=True)
class Controls:
    left: int
    right: int
    jump: int
    crouch: int
    fire: int
    fire_direction: int  # +1 shoots toward +x, -1 toward -x


PLAYER1_CONTROLS = Controls(
    left=pygame.K_a,
    right=pygame.K_d,
    jump=pygame.K_w,
    crouch=pygame.K_s,
    fire=pygame.K_SPACE,
    fire_direction=1,
)
PLAYER2_CONTROLS = Controls(
    left=pygame.K_LEFT,
    right=pygame.K_RIGHT,
    jump=pygame.K_UP,
    crouch=pygame.K_DOWN,
    fire=pygame.K_SLASH,
    fire_direction=-1,
)


# --- Floor ---
class Floor:
    def __init__(self, config: DuelConfig):
        self.x = 0
        self.y = config.height - config.floor_height
        self.width = config.width
        self.height = config.floor_height

    @property
    def top(self) -> float:
        return self.y

    def hitbox(self) -> Hitbox:
        return Hitbox(self.x, self.y, self.width, self.height)


# --- Projectile ---
class Projectile:
    def __init__(self, x, y, direction, owner, width=40, height=20, speed=8.0):
        self.x, self.y = x, y
        self.width, self.height = width, height
        self.direction = 1 if direction >= 0 else -1
        self.speed = speed
        self.owner = owner  # attribution only

    def update(self, field_width: float) -> bool:
        """Advance one frame. Returns True once it has left the field."""
        self.x += self.speed * self.direction
        return self.x + self.width < 0 or self.x > field_width

    def hitbox(self) -> Hitbox:
        return Hitbox(self.x, self.y, self.width, self.height)


# --- Player ---
class Player:
    def __init__(self, name: str, x: float, y: float, controls: Controls,
                 config: DuelConfig, invert_colors: bool = False):
        self.name = name
        self.config = config
        self.x, self.y = float(x), float(y)
        self.dy = 0.0
        self.width = config.player_size
        self.original_height = config.player_size
        self.crouch_height = config.crouch_height
        self.height = self.original_height
        self.speed = config.move_speed
        self.jump_strength = config.jump_strength
        self.jumps_used = 0
        self.max_jumps = config.max_jumps
        self.on_ground = False
        self.controls = controls
        self.invert_colors = invert_colors

        self.blocked_left = False
        self.blocked_right = False
        self.blocked_top = False

        # 10 hearts at 2 points each with the default config
        self.max_health = config.max_health
        self.health = config.max_health
        self.alive = True

        self.projectiles: List[Projectile] = []

    # --- physics ---
    def update(self, floor: Floor, field_width: float):
        if self.blocked_top and self.dy < 0:
            self.dy = 0.0
        self.dy += self.config.gravity
        self.y += self.dy

        if self.y + self.height >= floor.top:
            self.y = floor.top - self.height
            self.dy = 0.0
            self.on_ground = True
            self.jumps_used = 0
        else:
            self.on_ground = False

        # screen wrapping
        if self.x + self.width < 0:
            self.x = field_width
        elif self.x > field_width:
            self.x = -self.width

        self.projectiles = [p for p in self.projectiles if not p.update(field_width)]

    def move(self, held: Dict[int, bool], pressed: Dict[int, bool]):
        c = self.controls
        if held.get(c.left) and not self.blocked_left:
            self.x -= self.speed
        if held.get(c.right) and not self.blocked_right:
            self.x += self.speed

        if pressed.get(c.jump):
            self.jump()

        if held.get(c.crouch):
            self.height = self.crouch_height
        else:
            self.height = self.original_height

        if pressed.get(c.fire):
            self.fire()

    def jump(self) -> bool:
        if self.jumps_used >= self.max_jumps:
            return False
        self.dy = -self.jump_strength
        self.jumps_used += 1
        logger.debug("%s jump %d/%d", self.name, self.jumps_used, self.max_jumps)
        return True

    def fire(self) -> Projectile:
        cfg = self.config
        direction = self.controls.fire_direction
        if direction > 0:
            px = self.x + self.width
        else:
            px = self.x - cfg.projectile_width
        py = self.y + (self.height - cfg.projectile_height) / 2
        proj = Projectile(
            px,
            py,
            direction,
            owner=self,
            width=cfg.projectile_width,
            height=cfg.projectile_height,
            speed=cfg.projectile_speed,
        )
        self.projectiles.append(proj)
        logger.debug("%s fired toward %+d", self.name, direction)
        return proj

    def land_on(self, other: "Player"):
        """Rest on top of another player."""
        self.y = other.y - self.height
        self.dy = 0.0
        self.on_ground = True
        self.jumps_used = 0

    def clear_blocks(self):
        self.blocked_left = self.blocked_right = self.blocked_top = False

    # --- health ---
    def take_damage(self, amount: int):
        if not self.alive:
            return
        self.health = max(0, min(self.max_health, self.health - amount))
        if self.health == 0:
            self.alive = False
            logger.info("%s is down", self.name)

    def hitbox(self) -> Hitbox:
        return Hitbox(self.x, self.y, self.width, self.height)

    @property
    def health_ratio(self) -> float:
        return self.health / self.max_health

    def __repr__(self):
        return f"<Player {self.name} x={self.x:.1f} y={self.y:.1f} hp={self.health}>"

