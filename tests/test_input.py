import pygame

from chip8emu.input import KEYMAP, handle_event, key_index


def test_key_index_layout():
    assert key_index(pygame.K_x) == 0
    assert key_index(pygame.K_1) == 1
    assert key_index(pygame.K_v) == 15


def test_unmapped_key():
    assert key_index(pygame.K_p) is None


def test_every_mapped_key_round_trips():
    assert [key_index(key) for key in KEYMAP] == list(range(16))


def test_keydown_then_keyup():
    keypad = [False] * 16
    down = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w)
    assert handle_event(keypad, down) == 5
    assert keypad[5] is True
    assert sum(keypad) == 1
    up = pygame.event.Event(pygame.KEYUP, key=pygame.K_w)
    handle_event(keypad, up)
    assert not any(keypad)


def test_non_key_event_ignored():
    keypad = [False] * 16
    click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1)
    assert handle_event(keypad, click) is None
    assert not any(keypad)


def test_unmapped_key_event_ignored():
    keypad = [False] * 16
    press = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_p)
    assert handle_event(keypad, press) is None
    assert not any(keypad)