"""Mapping of keyboard keys onto the 16-key hexadecimal keypad."""

from __future__ import annotations

import pygame

KEYMAP = (
    pygame.K_x, pygame.K_1, pygame.K_2, pygame.K_3,
    pygame.K_q, pygame.K_w, pygame.K_e, pygame.K_a,
    pygame.K_s, pygame.K_d, pygame.K_z, pygame.K_c,
    pygame.K_4, pygame.K_r, pygame.K_f, pygame.K_v,
)

_INDEX = {key: index for index, key in enumerate(KEYMAP)}


def key_index(key):
    """Return the keypad index bound to keyboard ``key``, or None."""
    return _INDEX.get(key)


def handle_event(keypad, event):
    """Update ``keypad`` from a key event; return the keypad index touched, or None."""
    if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
        return None
    index = key_index(event.key)
    if index is not None:
        keypad[index] = event.type == pygame.KEYDOWN
    return index