import pygame
import pytest

from settings import GREEN, RED
from systems.projectile_system import Faction
from systems.renderer import Renderer, SkinCache


@pytest.fixture
def skins(tmp_path):
    return SkinCache(assets_dir=str(tmp_path))


def test_missing_skin_cached_as_none(skins, monkeypatch):
    assert skins.get("nope.png") is None
    assert "nope.png" in skins._images

    def load_again(path):
        raise AssertionError(f"reloaded {path}")

    monkeypatch.setattr(pygame.image, "load", load_again)
    assert skins.get("nope.png") is None
    assert skins.scaled("nope.png", 64) is None


def test_unreadable_skin_path_falls_back(skins, tmp_path):
    (tmp_path / "dir.png").mkdir()
    assert skins.get("dir.png") is None


def test_draw_uses_circles_and_leaves_context_alone(skins, ctx):
    enemy = ctx.enemies[0]
    enemy.x, enemy.y = 100, 100
    ctx.projectiles.spawn_at(700, 500, 701, 500, damage=1, faction=Faction.ENEMY)
    before = [(c.x, c.y, c.health) for c in (ctx.player, enemy)]
    projectiles = [(p.x, p.y) for p in ctx.projectiles]

    surface = pygame.Surface((800, 600))
    Renderer(skins).draw(surface, ctx)

    assert tuple(surface.get_at((400, 300)))[:3] == GREEN
    assert tuple(surface.get_at((100, 100)))[:3] == RED
    assert [(c.x, c.y, c.health) for c in (ctx.player, enemy)] == before
    assert [(p.x, p.y) for p in ctx.projectiles] == projectiles
