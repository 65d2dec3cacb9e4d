import math

import pytest

from systems.input_state import IDLE, InputSnapshot
from systems.movement_system import (
    accrue_gold, move_player, player_aim_target, resolve_player_attack,
)
from systems.projectile_system import Faction, ProjectileSystem


def test_accrue_gold(player):
    earned = accrue_gold(player, 0.25)
    assert earned == pytest.approx(2.5)
    assert player.gold == pytest.approx(102.5)


def test_move_single_axis(player, arena):
    move_player(player, InputSnapshot(right=True), 0.1, arena)
    assert player.x == pytest.approx(400 + 3.0 * 100 * 0.1)
    assert player.y == pytest.approx(300)


def test_diagonal_movement_is_normalised(player, arena):
    move_player(player, InputSnapshot(right=True, down=True), 0.1, arena)
    step = 30 / math.sqrt(2)
    assert player.x == pytest.approx(400 + step)
    assert player.y == pytest.approx(300 + step)


def test_opposite_directions_cancel(player, arena):
    move_player(player, InputSnapshot(left=True, right=True), 0.1, arena)
    assert player.position == (400, 300)


def test_clamped_even_when_idle(player, arena):
    player.x, player.y = 5, 2000
    move_player(player, IDLE, 0.016, arena)
    assert player.x == 32
    assert player.y == 600 - 32


def test_cannot_walk_out_of_arena(player, arena):
    player.x = 790
    move_player(player, InputSnapshot(right=True), 1.0, arena)
    assert player.x == 800 - 32


def test_aim_falls_back_to_straight_up(player):
    assert player_aim_target(player, None) == (400, 200)
    assert player_aim_target(player, (10, 20)) == (10, 20)


def test_attack_sets_cooldown_then_ticks(player):
    projectiles = ProjectileSystem()
    shot = resolve_player_attack(player, InputSnapshot(attack=True), 0.1, projectiles)
    assert shot is not None
    assert shot.faction is Faction.PLAYER
    assert player.attack_cooldown == pytest.approx(0.4)

    again = resolve_player_attack(player, InputSnapshot(attack=True), 0.1, projectiles)
    assert again is None
    assert len(projectiles) == 1
    assert player.attack_cooldown == pytest.approx(0.3)


def test_attack_aims_at_pointer(player):
    projectiles = ProjectileSystem()
    shot = resolve_player_attack(
        player, InputSnapshot(attack=True, pointer=(700, 300)), 0.0, projectiles)
    assert shot.vx == pytest.approx(350)
    assert shot.vy == pytest.approx(0)


def test_no_attack_without_intent(player):
    projectiles = ProjectileSystem()
    assert resolve_player_attack(player, IDLE, 0.1, projectiles) is None
    assert player.attack_cooldown == 0.0
