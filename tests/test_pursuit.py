import pytest

from ai.pursuit import PursuitController
from entities import ARCHETYPES, Enemy
from systems.projectile_system import Faction, ProjectileSystem


def make_enemy(x, y):
    return Enemy.from_archetype(ARCHETYPES[2], x, y)


def test_enemy_in_range_fires_once_at_player(player):
    enemy = make_enemy(player.x - 350, player.y)
    projectiles = ProjectileSystem()
    controller = PursuitController()

    shot = controller.update(enemy, player, projectiles, 0.016)

    assert len(projectiles) == 1
    assert shot.faction is Faction.ENEMY
    assert shot.speed == pytest.approx(350)
    assert shot.damage == pytest.approx(enemy.attack_damage)
    # Aimed along the line to the player's position
    assert shot.vx == pytest.approx(350)
    assert shot.vy == pytest.approx(0)
    assert enemy.attack_cooldown == pytest.approx(1.2 - 0.016)


def test_enemy_out_of_range_does_not_fire(player):
    enemy = make_enemy(player.x - 450, player.y)
    projectiles = ProjectileSystem()
    assert PursuitController().update(enemy, player, projectiles, 0.016) is None
    assert len(projectiles) == 0


def test_range_uses_distance_before_moving(player):
    # 401 px away: one step closes the gap below 400, but the shot is not taken
    enemy = make_enemy(player.x - 401, player.y)
    projectiles = ProjectileSystem()
    PursuitController().update(enemy, player, projectiles, 0.1)
    assert enemy.x > player.x - 400
    assert len(projectiles) == 0


def test_enemy_steps_toward_player(player):
    enemy = make_enemy(player.x, player.y - 500)
    PursuitController().update(enemy, player, ProjectileSystem(), 0.5)
    assert enemy.x == pytest.approx(player.x)
    assert enemy.y == pytest.approx(player.y - 500 + enemy.speed * 80 * 0.5)


def test_enemy_on_top_of_player_does_not_move(player):
    enemy = make_enemy(player.x, player.y)
    enemy.attack_cooldown = 5.0
    PursuitController().update(enemy, player, ProjectileSystem(), 0.1)
    assert enemy.position == player.position


def test_cooldown_blocks_repeat_fire(player):
    enemy = make_enemy(player.x - 200, player.y)
    projectiles = ProjectileSystem()
    controller = PursuitController()
    shots = []
    for _ in range(10):
        shots.append(controller.update(enemy, player, projectiles, 0.1))
    assert sum(s is not None for s in shots) == 1


def test_update_all_collects_shots(player):
    enemies = [make_enemy(player.x - 100, player.y), make_enemy(player.x + 100, player.y)]
    shots = PursuitController().update_all(enemies, player, ProjectileSystem(), 0.016)
    assert len(shots) == 2
