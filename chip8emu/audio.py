"""Square-wave beeper for the sound timer."""

from __future__ import annotations

SAMPLE_RATE = 44100
BUFFER_SAMPLES = 512
HALF_PERIOD = 200
PERIOD = 2 * HALF_PERIOD


def square_wave(length, phase=0):
    """Return ``length`` unsigned 8-bit samples starting at ``phase``, and the next phase."""
    samples = bytearray(length)
    for n in range(length):
        samples[n] = 0xFF if phase < HALF_PERIOD else 0x00
        phase = (phase + 1) % PERIOD
    return bytes(samples), phase


class Beeper:
    """A looping tone that can be switched on and off."""

    def __init__(self):
        import pygame

        self._pygame = pygame
        pygame.mixer.init(
            frequency=SAMPLE_RATE,
            size=8,
            channels=1,
            buffer=BUFFER_SAMPLES,
            allowedchanges=0,
        )
        samples, _ = square_wave(PERIOD)
        self._sound = pygame.mixer.Sound(buffer=samples)
        self._channel = None

    @property
    def playing(self):
        return self._channel is not None

    def on(self):
        """Start the tone if it is not already sounding."""
        if self._channel is None:
            self._channel = self._sound.play(loops=-1)

    def off(self):
        """Silence the tone."""
        if self._channel is not None:
            self._channel.stop()
            self._channel = None

    def close(self):
        """Stop the tone and shut the mixer down."""
        self.off()
        self._pygame.mixer.quit()