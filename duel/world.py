"""
One match worth of state, stepped one frame at a time.

The world never draws and never touches the window, so it can be run
headlessly; ``DuelScene`` feeds it input and hands it to ``graphics``.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from game_context import DuelConfig
from input_state import InputTracker
from .collisions import apply_contact_damage, resolve_blocking, resolve_projectile_hits
from .entities import Floor, Player, PLAYER1_CONTROLS, PLAYER2_CONTROLS

logger = logging.getLogger(__name__)

PLAYER1_START_X = 100
PLAYER2_START_X = 600
START_Y = 300


class DuelWorld:
    def __init__(self, config: DuelConfig | None = None, inputs: InputTracker | None = None):
        self.config = config or DuelConfig()
        self.inputs = inputs or InputTracker()
        self.floor = Floor(self.config)

        # keep the default spawn points on a resized field
        scale = self.config.width / 800
        self.player1 = Player(
            "player1", PLAYER1_START_X * scale, START_Y, PLAYER1_CONTROLS, self.config
        )
        self.player2 = Player(
            "player2",
            PLAYER2_START_X * scale,
            START_Y,
            PLAYER2_CONTROLS,
            self.config,
            invert_colors=True,
        )

        self.frame = 0
        self.finished = False
        self.winner: Optional[Player] = None

    @property
    def players(self) -> List[Player]:
        return [self.player1, self.player2]

    @property
    def outcome(self) -> Optional[str]:
        """None while running, then "player1", "player2" or "draw"."""
        if not self.finished:
            return None
        return self.winner.name if self.winner else "draw"

    # --- frame ---
    def step(self):
        if self.finished:
            self.inputs.clear_pressed()
            return

        cfg = self.config
        for player in self.players:
            player.update(self.floor, cfg.width)
            player.move(self.inputs.held, self.inputs.pressed)

        a, b = self.player1, self.player2
        if cfg.collision_mode == "contact":
            apply_contact_damage(a, b, cfg.contact_damage)
        else:
            resolve_blocking(a, b)
            resolve_blocking(b, a)

        resolve_projectile_hits(a, b, cfg.projectile_damage)
        resolve_projectile_hits(b, a, cfg.projectile_damage)

        self.frame += 1
        self._check_winner()
        self.inputs.clear_pressed()

    def _check_winner(self):
        a, b = self.player1, self.player2
        if a.alive and b.alive:
            return
        self.finished = True
        if a.alive:
            self.winner = a
        elif b.alive:
            self.winner = b
        logger.info("Match over after %d frames: %s", self.frame, self.outcome)

    def result(self) -> dict:
        outcome = None
        if self.finished:
            outcome = "win" if self.winner else "draw"
        return {
            "outcome": outcome,
            "winner": self.winner.name if self.winner else None,
            "health": {p.name: p.health for p in self.players},
            "frames": self.frame,
        }
