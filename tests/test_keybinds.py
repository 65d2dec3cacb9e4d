import json

import pygame
import pytest

import keybinds
from keybinds import (
    ALTERNATE_KEYS, PRIMARY_KEYS, find_conflicts, keys_for,
    load_keybinds, reset_keybinds, save_keybinds, shop_key_label,
)


@pytest.fixture(autouse=True)
def default_bindings():
    PRIMARY_KEYS.update(keybinds._DEFAULT_PRIMARY)
    ALTERNATE_KEYS.update(keybinds._DEFAULT_ALTERNATE)
    yield
    PRIMARY_KEYS.update(keybinds._DEFAULT_PRIMARY)
    ALTERNATE_KEYS.update(keybinds._DEFAULT_ALTERNATE)


def test_keys_for_merges_sets():
    assert set(keys_for("move_left")) == {pygame.K_a, pygame.K_LEFT}
    assert keys_for("attack") == (pygame.K_SPACE,)


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "controls.json"
    PRIMARY_KEYS["attack"] = pygame.K_j
    save_keybinds(str(path))
    PRIMARY_KEYS["attack"] = pygame.K_SPACE

    load_keybinds(str(path))
    assert PRIMARY_KEYS["attack"] == pygame.K_j


def test_partial_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "controls.json"
    path.write_text(json.dumps({"primary": {"move_up": pygame.K_i, "shop": "nope"}}))
    load_keybinds(str(path))
    assert PRIMARY_KEYS["move_up"] == pygame.K_i
    assert PRIMARY_KEYS["shop"] == pygame.K_b
    assert ALTERNATE_KEYS["move_up"] == pygame.K_UP


def test_corrupt_file_is_ignored(tmp_path):
    path = tmp_path / "controls.json"
    path.write_text("{not json")
    PRIMARY_KEYS["attack"] = pygame.K_j
    load_keybinds(str(path))
    assert PRIMARY_KEYS["attack"] == pygame.K_j


def test_missing_file_is_ignored(tmp_path):
    load_keybinds(str(tmp_path / "absent.json"))
    assert PRIMARY_KEYS["move_down"] == pygame.K_s


def test_reset_restores_and_saves(tmp_path):
    path = tmp_path / "controls.json"
    PRIMARY_KEYS["move_up"] = pygame.K_i
    reset_keybinds(str(path))
    assert PRIMARY_KEYS["move_up"] == pygame.K_w
    assert json.loads(path.read_text())["primary"]["move_up"] == pygame.K_w


def test_conflicts():
    bindings = {"attack": pygame.K_SPACE, "shop": pygame.K_SPACE, "move_up": pygame.K_w}
    assert find_conflicts(bindings) == [("attack", "shop", pygame.K_SPACE)]


def test_shop_label_uses_primary_key():
    assert shop_key_label() == "B"
    PRIMARY_KEYS["shop"] = pygame.K_p
    assert shop_key_label() == "P"
