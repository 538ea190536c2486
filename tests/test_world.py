import random

import pygame
import pytest

from game_context import DuelConfig
from duel.world import DuelWorld

ALL_KEYS = [
    pygame.K_a, pygame.K_d, pygame.K_w, pygame.K_s, pygame.K_SPACE,
    pygame.K_LEFT, pygame.K_RIGHT, pygame.K_UP, pygame.K_DOWN, pygame.K_SLASH,
]


def tap(world, key):
    world.inputs.key_down(key)
    world.step()
    world.inputs.key_up(key)


def test_idle_players_settle_on_floor(world):
    for _ in range(60):
        world.step()
    assert world.player1.y == world.player2.y == 300
    assert world.frame == 60
    assert not world.finished


def test_held_key_moves_player(world):
    world.step()
    world.inputs.key_down(pygame.K_d)
    world.step()
    world.step()
    assert world.player1.x == 110
    assert world.player2.x == 600


def test_pressed_state_cleared_after_frame(world):
    tap(world, pygame.K_SPACE)
    assert world.inputs.pressed[pygame.K_SPACE] is False
    world.inputs.key_down(pygame.K_SPACE)
    world.step()
    world.step()
    assert len(world.player1.projectiles) == 2


def test_projectile_crosses_field_and_hits(world):
    tap(world, pygame.K_SLASH)
    assert len(world.player2.projectiles) == 1
    for _ in range(100):
        world.step()
    assert world.player1.health == 18
    assert world.player2.projectiles == []


def test_missed_projectile_leaves_field(world):
    # player 2 stands behind player 1, so the shot flies off the right edge
    world.player2.x = 20
    tap(world, pygame.K_SPACE)
    assert len(world.player1.projectiles) == 1
    for _ in range(120):
        world.step()
    assert world.player1.projectiles == []


def test_win_detection_stops_the_match(world):
    world.step()
    world.player2.take_damage(100)
    world.step()
    assert world.finished
    assert world.winner is world.player1
    assert world.outcome == "player1"

    frame = world.frame
    world.inputs.key_down(pygame.K_d)
    x = world.player1.x
    for _ in range(10):
        world.step()
    assert world.player1.x == x
    assert world.frame == frame


def test_both_down_is_a_draw(world):
    world.player1.take_damage(100)
    world.player2.take_damage(100)
    world.step()
    assert world.finished
    assert world.winner is None
    assert world.outcome == "draw"
    assert world.result()["outcome"] == "draw"


def test_result_payload(world):
    world.player1.take_damage(4)
    world.player2.take_damage(100)
    world.step()
    assert world.result() == {
        "outcome": "win",
        "winner": "player1",
        "health": {"player1": 16, "player2": 0},
        "frames": 1,
    }


def test_contact_mode_drains_both_players():
    world = DuelWorld(DuelConfig(collision_mode="contact"))
    world.player2.x = world.player1.x + 10
    world.step()
    assert world.player1.health == world.player2.health == 19
    assert not world.player1.blocked_right


def test_block_mode_stacks_players(world):
    world.player2.x = world.player1.x
    world.player1.y = 200
    for _ in range(60):
        world.step()
    assert world.player1.y == world.player2.y - world.player1.height
    assert world.player1.health == world.player2.health == 20


@pytest.mark.parametrize("seed", [1, 7, 42])
def test_invariants_hold_under_random_input(seed):
    rng = random.Random(seed)
    world = DuelWorld()
    jumps_since_ground = {p.name: 0 for p in world.players}

    for _ in range(600):
        for key in ALL_KEYS:
            if rng.random() < 0.1:
                if world.inputs.held.get(key):
                    world.inputs.key_up(key)
                else:
                    world.inputs.key_down(key)

        before = {p.name: p.jumps_used for p in world.players}
        world.step()

        for p in world.players:
            assert p.height in (p.original_height, p.crouch_height)
            assert 0 <= p.health <= p.max_health
            assert p.alive == (p.health > 0)
            assert 0 <= p.jumps_used <= p.max_jumps
            if p.jumps_used > before[p.name]:
                jumps_since_ground[p.name] += 1
            if p.on_ground:
                jumps_since_ground[p.name] = p.jumps_used
            assert jumps_since_ground[p.name] <= p.max_jumps


def test_player_can_jump_off_stacked_opponent(world):
    world.player2.x = world.player1.x
    world.player1.y = 200
    for _ in range(60):
        world.step()
    assert world.player1.y == 250

    tap(world, pygame.K_w)
    assert world.player1.dy == -10
    assert world.player1.jumps_used == 1
    world.step()
    world.step()
    assert world.player1.y < 250 - 5
    assert world.player1.jumps_used == 1
