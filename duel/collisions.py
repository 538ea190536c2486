"""Player-vs-player and projectile-vs-player collision handling."""

from __future__ import annotations

import logging

from .entities import Player

logger = logging.getLogger(__name__)


def players_overlap(a: Player, b: Player) -> bool:
    return a.hitbox().overlaps(b.hitbox())


def overlap_depths(a: Player, b: Player) -> tuple[float, float]:
    """Horizontal and vertical overlap of two hitboxes (<= 0 when apart)."""
    ha, hb = a.hitbox(), b.hitbox()
    dx = min(ha.right, hb.right) - max(ha.x, hb.x)
    dy = min(ha.bottom, hb.bottom) - max(ha.y, hb.y)
    return dx, dy


def resolve_blocking(mover: Player, other: Player) -> str | None:
    """
    Resolve ``mover`` against ``other`` along the axis of least overlap.

    Horizontal: the mover is blocked on the side facing ``other``; no
    position correction, it just cannot keep walking in.
    Vertical: a mover above lands on top of ``other``; a mover below is
    blocked on top.

    Returns the side that was resolved ("left", "right", "top", "landed")
    or None when the two do not overlap or the mover is jumping off the top.
    """
    mover.clear_blocks()
    if not players_overlap(mover, other):
        return None

    dx, dy = overlap_depths(mover, other)
    if dx < dy:
        if mover.x < other.x:
            mover.blocked_right = True
            return "right"
        mover.blocked_left = True
        return "left"

    if mover.y < other.y:
        # a rising mover is jumping off, not landing
        if mover.dy < 0:
            return None
        mover.land_on(other)
        return "landed"
    mover.blocked_top = True
    return "top"


def apply_contact_damage(a: Player, b: Player, amount: int = 1) -> bool:
    """Both players lose ``amount`` while their hitboxes overlap."""
    if not players_overlap(a, b):
        return False
    a.take_damage(amount)
    b.take_damage(amount)
    return True


def resolve_projectile_hits(shooter: Player, victim: Player, damage: int = 2) -> int:
    """Remove the shooter's projectiles touching the victim and apply damage."""
    target = victim.hitbox()
    remaining = []
    hits = 0
    for proj in shooter.projectiles:
        if proj.hitbox().overlaps(target):
            victim.take_damage(damage)
            hits += 1
        else:
            remaining.append(proj)
    shooter.projectiles = remaining
    if hits:
        logger.debug("%s hit %s x%d (hp=%d)", shooter.name, victim.name, hits, victim.health)
    return hits
