"""End-of-match banner overlay naming the winner."""

from __future__ import annotations

import pygame

DEFAULT_TITLES = {
    "player1": "Player 1 Wins!",
    "player2": "Player 2 Wins!",
    "draw": "Draw!",
    None: "Match Over",
}


class EndBanner:
    def __init__(self, titles: dict | None = None):
        self.titles = {**DEFAULT_TITLES, **(titles or {})}
        self.active = False
        self.outcome = None
        self.title = ""
        self.subtitle = ""

    def show(self, outcome: str | None, title: str | None = None, subtitle: str | None = None):
        self.outcome = outcome
        self.title = title or self.titles.get(outcome, self.titles[None])
        self.subtitle = subtitle or ""
        self.active = True

    def draw(
        self,
        screen: pygame.Surface,
        font_big: pygame.font.Font,
        font_small: pygame.font.Font,
        size: tuple[int, int],
    ):
        if not self.active:
            return
        w, h = size
        dim = pygame.Surface(size, pygame.SRCALPHA)
        dim.fill((0, 0, 0, 150))
        screen.blit(dim, (0, 0))
        title = font_big.render(self.title, True, (255, 235, 160))
        screen.blit(title, title.get_rect(center=(w // 2, h // 2 - 12)))
        if self.subtitle:
            sub = font_small.render(self.subtitle, True, (230, 240, 250))
            screen.blit(sub, sub.get_rect(center=(w // 2, h // 2 + 22)))
