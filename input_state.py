"""Keyboard state shared by both local players."""

from __future__ import annotations

from typing import Dict

import pygame


class InputTracker:
    """
    Two key-indexed maps:
      - held:    True while the key is down (level-triggered)
      - pressed: True only on the frame the key went down (edge-triggered)

    Keys are pygame key codes. ``pressed`` must be cleared once per frame,
    after the players have consumed it.
    """

    def __init__(self):
        self.held: Dict[int, bool] = {}
        self.pressed: Dict[int, bool] = {}

    def key_down(self, key: int) -> None:
        # key repeat would otherwise re-fire the edge while the key is held
        if not self.held.get(key):
            self.pressed[key] = True
        self.held[key] = True

    def key_up(self, key: int) -> None:
        self.held[key] = False
        self.pressed[key] = False

    def handle_event(self, event) -> bool:
        """Feed a pygame event. Returns True if it was a key event."""
        if event.type == pygame.KEYDOWN:
            self.key_down(event.key)
            return True
        if event.type == pygame.KEYUP:
            self.key_up(event.key)
            return True
        return False

    def clear_pressed(self) -> None:
        for key in self.pressed:
            self.pressed[key] = False

    def release_all(self) -> None:
        """Drop every held key (window lost focus)."""
        self.held.clear()
        self.pressed.clear()
