import logging

import pygame

from scene_manager import Scene
from content_registry import load_game_fonts, load_duel_sprites
from game_context import GameContext
from . import graphics
from .end_banner import EndBanner
from .world import DuelWorld

TITLE = "Sprite Duel"

logger = logging.getLogger(__name__)


class DuelScene(Scene):
    def __init__(self, manager, context=None, callback=None):
        super().__init__(manager)
        self.manager = manager
        self.context = context or getattr(manager, "context", None) or GameContext()
        self.callback = callback
        self.screen = manager.screen
        self.w, self.h = manager.size
        self.font_big, self.font_small = load_game_fonts()

        cfg = self.context.config
        self.sprites = graphics.SpriteSet(load_duel_sprites(cfg.asset_dir))
        self.world = DuelWorld(cfg)
        self.banner = EndBanner()
        self._completed = False
        logger.info(
            "Match start: %dx%d, collision=%s, max_jumps=%d",
            cfg.width, cfg.height, cfg.collision_mode, cfg.max_jumps,
        )

    def handle_event(self, event):
        if event.type == pygame.WINDOWFOCUSLOST:
            self.world.inputs.release_all()
            return
        self.world.inputs.handle_event(event)

    def update(self, dt):
        # fixed per-frame physics; dt only paces the clock
        self.world.step()
        if self.world.finished and not self._completed:
            self._finalize()

    def draw(self):
        graphics.draw_world(self.screen, self.world, self.sprites)
        self.banner.draw(self.screen, self.font_big, self.font_small, (self.w, self.h))

    def _finalize(self):
        self._completed = True
        result = self.world.result()
        self.context.last_result = result
        self.context.apply_result()

        hp = result["health"]
        self.banner.show(
            self.world.outcome,
            subtitle=f"P1 {hp['player1']} hp  -  P2 {hp['player2']} hp",
        )
        logger.info("Result recorded: %r", self.context)
        if callable(self.callback):
            self.callback(self.context)


def launch(manager, context=None, callback=None):
    return DuelScene(manager, context, callback)
