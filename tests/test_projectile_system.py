import pytest

from entities import Arena, Player
from systems.projectile_system import Faction, Projectile, ProjectileSystem


def test_spawn_at_aims_at_target_with_fixed_speed():
    system = ProjectileSystem()
    proj = system.spawn_at(0, 0, 30, 40, damage=5, faction=Faction.PLAYER)
    assert proj.speed == pytest.approx(350)
    assert proj.vx == pytest.approx(210)
    assert proj.vy == pytest.approx(280)
    assert proj.life == pytest.approx(2.0)
    assert len(system) == 1


def test_target_on_origin_fires_straight_up():
    system = ProjectileSystem()
    proj = system.spawn_at(100, 100, 100, 100, damage=5, faction=Faction.ENEMY)
    assert proj.vx == 0
    assert proj.vy == pytest.approx(-350)


def test_fire_snapshots_owner_damage():
    system = ProjectileSystem()
    owner = Player(x=10, y=10, max_health=100, speed=3, attack_damage=22)
    proj = system.fire(owner, 10, 200, Faction.PLAYER)
    owner.attack_damage = 99
    assert proj.damage == 22
    assert (proj.x, proj.y) == (10, 10)


def test_advance_moves_and_ages():
    system = ProjectileSystem()
    proj = system.spawn_at(0, 0, 10, 0, damage=1, faction=Faction.PLAYER)
    system.advance(0.5)
    assert proj.x == pytest.approx(175)
    assert proj.life == pytest.approx(1.5)


def test_cull_drops_expired_and_out_of_bounds():
    arena = Arena(800, 600)
    system = ProjectileSystem()
    keep = Projectile(-49, 300, 0, 0, damage=1, faction=Faction.PLAYER)
    outside = Projectile(-51, 300, 0, 0, damage=1, faction=Faction.PLAYER)
    on_margin = Projectile(400, 650, 0, 0, damage=1, faction=Faction.ENEMY)
    expired = Projectile(400, 300, 0, 0, damage=1, faction=Faction.ENEMY, life=0.0)
    system.projectiles.extend([keep, outside, on_margin, expired])

    assert system.cull(arena) == 3
    assert system.projectiles == [keep]


def test_consume_marks_inactive():
    proj = Projectile(0, 0, 0, 0, damage=1, faction=Faction.PLAYER)
    proj.consume()
    assert not proj.active

