"""Monochrome framebuffer and the window that shows it."""

from __future__ import annotations

from collections.abc import Iterator

WIDTH = 64
HEIGHT = 32
SCALE = 10
TITLE = "CHIP-8 Emulator"


class Framebuffer:
    """A WIDTH x HEIGHT grid of on/off pixels."""

    def __init__(self):
        self._rows = [bytearray(WIDTH) for _ in range(HEIGHT)]

    def clear(self):
        """Switch every pixel off."""
        for row in self._rows:
            row[:] = bytes(WIDTH)

    def xor_pixel(self, x, y, value):
        """XOR ``value`` into the pixel at (x, y); return True if a lit pixel was erased."""
        value = 1 if value else 0
        row = self._rows[y]
        collided = bool(value and row[x])
        row[x] ^= value
        return collided

    def lit_pixels(self) -> Iterator[tuple[int, int]]:
        """Yield the (x, y) coordinates of every lit pixel, row by row."""
        for y, row in enumerate(self._rows):
            for x, pixel in enumerate(row):
                if pixel:
                    yield x, y


class Screen:
    """A window that draws a framebuffer scaled up by ``scale``."""

    def __init__(self, scale=SCALE):
        import pygame

        self._pygame = pygame
        self.scale = scale
        pygame.display.init()
        try:
            self._surface = pygame.display.set_mode((WIDTH * scale, HEIGHT * scale))
            pygame.display.set_caption(TITLE)
        except pygame.error:
            pygame.display.quit()
            raise

    def render(self, framebuffer):
        """Draw the lit pixels of ``framebuffer`` in white on black."""
        pygame = self._pygame
        self._surface.fill((0, 0, 0))
        for x, y in framebuffer.lit_pixels():
            rect = pygame.Rect(x * self.scale, y * self.scale, self.scale, self.scale)
            self._surface.fill((255, 255, 255), rect)
        pygame.display.flip()

    def close(self):
        """Close the window and shut the display down."""
        self._pygame.display.quit()
        self._pygame.quit()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()