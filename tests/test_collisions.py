from duel.collisions import (
    apply_contact_damage,
    overlap_depths,
    players_overlap,
    resolve_blocking,
    resolve_projectile_hits,
)
from duel.entities import Projectile


def test_overlap_detection_is_symmetric(p1, p2):
    p2.x = p1.x + 30
    assert players_overlap(p1, p2) and players_overlap(p2, p1)
    p2.x = p1.x + 50
    assert not players_overlap(p1, p2) and not players_overlap(p2, p1)


def test_overlap_depths(p1, p2):
    p2.x, p2.y = 120, 290
    assert overlap_depths(p1, p2) == (30, 40)


def test_player_above_lands_on_other(p1, p2):
    p2.x, p2.y = 100, 300
    p1.x, p1.y, p1.dy = 100, 260, 3.5
    p1.jumps_used = 2

    assert resolve_blocking(p1, p2) == "landed"
    assert p1.y == p2.y - p1.height == 250
    assert p1.dy == 0
    assert p1.jumps_used == 0
    assert p1.on_ground


def test_player_below_is_blocked_on_top(p1, p2):
    p2.x, p2.y = 100, 290
    p1.x, p1.y = 100, 320
    assert resolve_blocking(p1, p2) == "top"
    assert p1.blocked_top
    assert not p1.blocked_left and not p1.blocked_right


def test_horizontal_overlap_blocks_facing_side(p1, p2):
    p1.x, p1.y = 80, 300
    p2.x, p2.y = 100, 300
    assert resolve_blocking(p1, p2) == "right"
    assert resolve_blocking(p2, p1) == "left"
    assert p1.blocked_right and not p1.blocked_left
    assert p2.blocked_left and not p2.blocked_right
    # blocking never moves anyone
    assert (p1.x, p2.x) == (80, 100)


def test_separation_clears_block_flags(p1, p2):
    p1.blocked_left = p1.blocked_right = p1.blocked_top = True
    assert resolve_blocking(p1, p2) is None
    assert not (p1.blocked_left or p1.blocked_right or p1.blocked_top)


def test_contact_damage_hits_both(p1, p2):
    p2.x = p1.x + 10
    assert apply_contact_damage(p1, p2, 1)
    assert p1.health == p2.health == 19


def test_contact_damage_needs_overlap(p1, p2):
    assert not apply_contact_damage(p1, p2, 1)
    assert p1.health == p2.health == 20


def test_projectile_hit_damages_and_removes(p1, p2):
    hit = Projectile(p2.x - 10, p2.y + 10, 1, owner=p1)
    miss = Projectile(300, p2.y + 10, 1, owner=p1)
    p1.projectiles = [hit, miss]

    assert resolve_projectile_hits(p1, p2, 2) == 1
    assert p2.health == 18
    assert p1.projectiles == [miss]


def test_projectiles_ignore_their_owner(p1, p2):
    p1.projectiles = [Projectile(p1.x, p1.y, 1, owner=p1)]
    assert resolve_projectile_hits(p1, p2, 2) == 0
    assert p1.health == 20
    assert len(p1.projectiles) == 1


def test_rising_player_is_not_pulled_back_down(p1, p2):
    p2.x, p2.y = 100, 300
    p1.x, p1.y, p1.dy = 100, 250.5, -10
    p1.jumps_used = 1

    assert resolve_blocking(p1, p2) is None
    assert p1.dy == -10
    assert p1.jumps_used == 1
    assert p1.y == 250.5
