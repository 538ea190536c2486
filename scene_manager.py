import logging

import pygame

logger = logging.getLogger(__name__)


class Scene:
    """Base scene with no-op event/update/draw hooks."""

    def __init__(self, manager):
        self.manager = manager

    def handle_event(self, event):
        pass

    def update(self, dt):
        pass

    def draw(self):
        pass


class SceneManager:
    """
    Owns the render target (the window surface) and the frame clock, and
    drives the top scene once per frame.
    """

    def __init__(self, first_scene_class, context=None, size=(800, 400), fps=60,
                 caption="Sprite Duel"):
        pygame.init()
        self.screen = pygame.display.set_mode(size)
        self.size = self.screen.get_size()
        pygame.display.set_caption(caption)
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.running = True
        self.frames = 0
        self.scenes = []
        self.context = context

        # Initialize first scene
        if callable(first_scene_class):
            first_scene = first_scene_class(self)
            self.scenes.append(first_scene)
        else:
            raise ValueError("First scene must be a class reference.")

    def push(self, scene):
        self.scenes.append(scene)

    def switch(self, scene):
        if self.scenes:
            self.scenes.pop()
        self.push(scene)

    def step(self, dt, events=()):
        """Run one frame of the top scene: events, update, draw."""
        if not self.scenes:
            self.running = False
            return
        current = self.scenes[-1]

        for event in events:
            if event.type == pygame.QUIT:
                self.running = False
                return
            try:
                current.handle_event(event)
            except Exception:
                logger.exception("Scene %s failed handling %s", type(current).__name__, event)

        try:
            current.update(dt)
            current.draw()
        except Exception:
            logger.exception("Scene %s failed to update/draw", type(current).__name__)

        self.frames += 1

    def run(self, max_frames=None):
        """Main loop. Stops on window close, empty stack or after max_frames."""
        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0
            self.step(dt, pygame.event.get())
            pygame.display.flip()
            if max_frames is not None and self.frames >= max_frames:
                self.running = False

        pygame.quit()
