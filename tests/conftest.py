import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from entities import ARCHETYPES, Arena, Enemy, Player
from systems.game_state import GameSession
from systems.projectile_system import ProjectileSystem
from systems.simulation import SimulationContext


@pytest.fixture
def arena():
    return Arena(800, 600)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def player(arena):
    cx, cy = arena.center
    return Player(x=cx, y=cy, max_health=100, speed=3.0, attack_damage=20)


@pytest.fixture
def far_enemy():
    """An enemy well outside engagement range of the arena centre."""
    return Enemy.from_archetype(ARCHETYPES[1], -1000, -1000)


@pytest.fixture
def ctx(player, far_enemy, arena, rng):
    return SimulationContext(
        player=player,
        enemies=[far_enemy],
        arena=arena,
        projectiles=ProjectileSystem(),
        rng=rng,
    )


@pytest.fixture
def session(arena):
    return GameSession(arena, seed=42, chart_file=None)


@pytest.fixture
def started_session(session):
    session.select_archetype(0)
    session.start(now_ms=1000)
    return session
