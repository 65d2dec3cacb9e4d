from collections import defaultdict

import pygame

from systems.input_state import (
    IDLE, InputSnapshot, PointerTracker, TouchControls, combine, keyboard_snapshot,
)


def pressed(*keys):
    state = defaultdict(bool)
    for k in keys:
        state[k] = True
    return state


def test_sources_are_ored():
    merged = combine(InputSnapshot(up=True), InputSnapshot(attack=True), IDLE)
    assert merged == InputSnapshot(up=True, attack=True)


def test_first_pointer_wins():
    merged = combine(InputSnapshot(), InputSnapshot(pointer=(1, 2)),
                     InputSnapshot(pointer=(3, 4)))
    assert merged.pointer == (1, 2)


def test_move_vector():
    assert InputSnapshot(up=True, right=True).move_vector == (1.0, -1.0)
    assert InputSnapshot(up=True, down=True).move_vector == (0.0, 0.0)


def test_keyboard_reads_both_binding_sets():
    snap = keyboard_snapshot(pressed(pygame.K_a, pygame.K_UP, pygame.K_SPACE))
    assert snap.left and snap.up and snap.attack
    assert not snap.right and not snap.down


def test_keyboard_idle():
    assert keyboard_snapshot(pressed()) == IDLE


def test_pointer_only_tracked_while_playing():
    tracker = PointerTracker()
    tracker.on_move((10, 20), playing=False)
    assert tracker.snapshot().pointer is None
    tracker.on_move((10, 20), playing=True)
    assert tracker.snapshot().pointer == (10.0, 20.0)
    tracker.on_leave()
    assert tracker.snapshot().pointer is None


def test_touch_controls_only_on_narrow_screens():
    assert TouchControls.wanted_for(600)
    assert not TouchControls.wanted_for(768)
    assert not TouchControls.wanted_for(1024)


def test_touch_button_held_until_release():
    touch = TouchControls(600, 400)
    assert touch.on_pointer_down(touch.rects["up"].center)
    assert touch.snapshot().up
    touch.on_pointer_up()
    assert touch.snapshot() == IDLE


def test_sliding_off_releases_button():
    touch = TouchControls(600, 400)
    touch.on_pointer_down(touch.rects["attack"].center)
    assert touch.snapshot().attack
    touch.on_pointer_move((300, 50))
    assert not touch.snapshot().attack


def test_touch_miss():
    touch = TouchControls(600, 400)
    assert not touch.on_pointer_down((300, 50))
    assert touch.button_at((300, 50)) is None


def test_touch_and_keyboard_combine():
    touch = TouchControls(600, 400)
    touch.on_pointer_down(touch.rects["left"].center)
    snap = combine(keyboard_snapshot(pressed(pygame.K_SPACE)), touch.snapshot())
    assert snap.left and snap.attack
