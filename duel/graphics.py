import pygame

from .entities import Floor, Player, Projectile

BACKGROUND = (24, 26, 38)

HEALTH_BAR_W, HEALTH_BAR_H = 50, 5
HEART_SIZE, HEART_GAP = 10, 5
HEART_FULL = (255, 0, 0)
HEART_HALF = (255, 192, 203)
HEART_EMPTY = (128, 128, 128)


def invert_surface(image: pygame.Surface) -> pygame.Surface:
    """Colour-inverted copy of ``image`` that keeps its alpha."""
    size = image.get_size()
    inverted = pygame.Surface(size, pygame.SRCALPHA)
    inverted.fill((255, 255, 255, 255))
    inverted.blit(image, (0, 0), special_flags=pygame.BLEND_RGB_SUB)
    # rgb forced to white so the MIN pass only copies the alpha channel
    mask = image.convert_alpha() if pygame.display.get_surface() else image.copy()
    mask.fill((255, 255, 255, 0), special_flags=pygame.BLEND_RGB_MAX)
    inverted.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MIN)
    return inverted


class SpriteSet:
    """Sprites loaded once at startup plus the inverted character for player 2."""

    def __init__(self, sprites: dict):
        self.character = sprites["character"]
        self.character_inverted = invert_surface(self.character)
        self.floor = sprites["floor"]
        self.projectile = sprites["projectile"]


def _blit_scaled(surface, image, x, y, w, h):
    if w <= 0 or h <= 0:
        return
    surface.blit(pygame.transform.scale(image, (int(w), int(h))), (int(x), int(y)))


# --- Health ---
def health_color(ratio: float):
    """Green at full health fading to red at zero."""
    ratio = max(0.0, min(1.0, ratio))
    return int((1 - ratio) * 255), int(ratio * 255), 0


def heart_states(health: int, hearts: int = 10):
    """Per heart: "full", "half" or "empty" (2 health points per heart)."""
    states = []
    for i in range(hearts):
        if health >= (i + 1) * 2:
            states.append("full")
        elif health >= i * 2 + 1:
            states.append("half")
        else:
            states.append("empty")
    return states


def draw_hearts(surface, player: Player, x, y):
    colors = {"full": HEART_FULL, "half": HEART_HALF, "empty": HEART_EMPTY}
    hearts = (player.max_health + 1) // 2
    for i, state in enumerate(heart_states(player.health, hearts)):
        rect = (int(x + i * (HEART_SIZE + HEART_GAP)), int(y), HEART_SIZE, HEART_SIZE)
        pygame.draw.rect(surface, colors[state], rect)


def draw_health_bar(surface, player: Player):
    bar_x = player.x + (player.width - HEALTH_BAR_W) / 2
    bar_y = player.y - 15
    ratio = player.health_ratio
    fill_w = int(HEALTH_BAR_W * ratio)
    if fill_w > 0:
        pygame.draw.rect(
            surface, health_color(ratio), (int(bar_x), int(bar_y), fill_w, HEALTH_BAR_H)
        )
    draw_hearts(surface, player, bar_x, bar_y - 15)


# --- Entities ---
def draw_floor(surface, floor: Floor, sprites: SpriteSet):
    box = floor.hitbox()
    _blit_scaled(surface, sprites.floor, box.x, box.y, box.width, box.height)


def draw_projectile(surface, proj: Projectile, sprites: SpriteSet):
    image = sprites.projectile
    if proj.direction < 0:
        image = pygame.transform.flip(image, True, False)
    _blit_scaled(surface, image, proj.x, proj.y, proj.width, proj.height)


def draw_player(surface, player: Player, sprites: SpriteSet):
    image = sprites.character_inverted if player.invert_colors else sprites.character
    _blit_scaled(surface, image, player.x, player.y, player.width, player.height)
    for proj in player.projectiles:
        draw_projectile(surface, proj, sprites)
    draw_health_bar(surface, player)


def draw_world(surface, world, sprites: SpriteSet):
    surface.fill(BACKGROUND)
    draw_floor(surface, world.floor, sprites)
    for player in world.players:
        draw_player(surface, player, sprites)
