import pytest

from entities import ARCHETYPES, Enemy
from systems.combat_system import CombatSystem
from systems.projectile_system import Faction, Projectile, ProjectileSystem


def shot_at(x, y, damage, faction):
    return Projectile(x, y, 0, 0, damage=damage, faction=faction)


def test_player_shot_damages_enemy(player, arena, rng):
    enemy = Enemy.from_archetype(ARCHETYPES[1], 100, 100)
    projectiles = ProjectileSystem()
    proj = shot_at(110, 100, 20, Faction.PLAYER)
    projectiles.projectiles.append(proj)

    result = CombatSystem().resolve(projectiles, player, [enemy], arena, rng)

    assert enemy.health == 80
    assert not proj.active
    assert result.kills == 0
    assert result.damage_to_enemies == 20


def test_first_hit_wins_for_overlapping_enemies(player, arena, rng):
    first = Enemy.from_archetype(ARCHETYPES[1], 100, 100)
    second = Enemy.from_archetype(ARCHETYPES[2], 105, 100)
    projectiles = ProjectileSystem()
    projectiles.projectiles.append(shot_at(102, 100, 20, Faction.PLAYER))

    CombatSystem().resolve(projectiles, player, [first, second], arena, rng)

    assert first.health == first.max_health - 20
    assert second.health == second.max_health


def test_kill_pays_bounty_and_respawns_on_edge(player, arena, rng):
    enemy = Enemy.from_archetype(ARCHETYPES[3], 200, 200)
    enemy.health = 5
    projectiles = ProjectileSystem()
    projectiles.projectiles.append(shot_at(200, 200, 20, Faction.PLAYER))

    result = CombatSystem().resolve(projectiles, player, [enemy], arena, rng)

    assert result.kills == 1
    assert result.bounty == 50
    assert player.gold == 150
    assert enemy.health == enemy.max_health
    assert (enemy.x in (-50, 850)) or (enemy.y in (-50, 650))


def test_hit_requires_centre_strictly_inside(player, arena, rng):
    projectiles = ProjectileSystem()
    projectiles.projectiles.append(
        shot_at(player.x + player.radius, player.y, 10, Faction.ENEMY))
    result = CombatSystem().resolve(projectiles, player, [], arena, rng)
    assert result.hits == []
    assert player.health == 100


def test_enemy_shot_ignores_enemies(player, arena, rng):
    enemy = Enemy.from_archetype(ARCHETYPES[1], 100, 100)
    projectiles = ProjectileSystem()
    projectiles.projectiles.append(shot_at(100, 100, 20, Faction.ENEMY))
    CombatSystem().resolve(projectiles, player, [enemy], arena, rng)
    assert enemy.health == enemy.max_health


def test_player_shot_ignores_player(player, arena, rng):
    projectiles = ProjectileSystem()
    projectiles.projectiles.append(shot_at(player.x, player.y, 20, Faction.PLAYER))
    CombatSystem().resolve(projectiles, player, [], arena, rng)
    assert player.health == 100


def test_spent_projectiles_are_skipped(player, arena, rng):
    proj = shot_at(player.x, player.y, 20, Faction.ENEMY)
    proj.consume()
    projectiles = ProjectileSystem()
    projectiles.projectiles.append(proj)
    CombatSystem().resolve(projectiles, player, [], arena, rng)
    assert player.health == 100


def test_player_death_stops_resolution(player, arena, rng):
    player.health = 10
    projectiles = ProjectileSystem()
    lethal = shot_at(player.x, player.y, 15, Faction.ENEMY)
    after = shot_at(player.x, player.y, 15, Faction.ENEMY)
    projectiles.projectiles.extend([lethal, after])

    result = CombatSystem().resolve(projectiles, player, [], arena, rng)

    assert result.player_died
    assert player.health == pytest.approx(-5)
    assert after.active
    assert result.damage_to_player == 15
