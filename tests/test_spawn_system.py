import random

from entities import ARCHETYPES, Arena, opponents_for
from systems.spawn_system import random_edge_position, respawn_enemy, spawn_enemies


def on_spawn_ring(x, y, arena, margin=50):
    return ((y == -margin or y == arena.height + margin) and 0 <= x <= arena.width) or \
           ((x == -margin or x == arena.width + margin) and 0 <= y <= arena.height)


def test_edge_positions_sit_outside_the_arena():
    arena = Arena(800, 600)
    rng = random.Random(7)
    for _ in range(200):
        assert on_spawn_ring(*random_edge_position(arena, rng), arena)


def test_same_seed_same_spawns():
    arena = Arena(800, 600)
    a = [random_edge_position(arena, random.Random(3)) for _ in range(5)]
    b = [random_edge_position(arena, random.Random(3)) for _ in range(5)]
    assert a == b


def test_spawn_cycles_through_opponents(arena, rng):
    enemies = spawn_enemies(opponents_for(0), arena, rng, count=4)
    assert [e.archetype_id for e in enemies] == ["aether", "titan", "nix", "aether"]
    assert all(on_spawn_ring(e.x, e.y, arena) for e in enemies)


def test_respawn_restores_health(arena, rng):
    enemy = spawn_enemies([ARCHETYPES[2]], arena, rng, count=1)[0]
    enemy.health = -3
    enemy.x, enemy.y = 400, 300
    respawn_enemy(enemy, arena, rng)
    assert enemy.health == enemy.max_health == 200
    assert on_spawn_ring(enemy.x, enemy.y, arena)
