"""Command-line entry point: run a ROM in a window."""

from __future__ import annotations

import sys

CYCLES_PER_FRAME = 8
TIMER_INTERVAL_MS = 16


def step_timers(chip8, beeper):
    """Count both timers down by one tick, sounding the beeper while the sound timer runs."""
    if chip8.delay_timer > 0:
        chip8.delay_timer -= 1
    if chip8.sound_timer > 0:
        beeper.on()
        chip8.sound_timer -= 1
        if chip8.sound_timer == 0:
            beeper.off()
    else:
        beeper.off()


def main(argv=None):
    """Run the emulator on the ROM named in ``argv``; return an exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: chip8emu <ROM file>", file=sys.stderr)
        return 1

    import pygame

    from .audio import Beeper
    from .cpu import Chip8, RomTooLargeError
    from .display import Framebuffer, Screen
    from .input import handle_event

    try:
        screen = Screen()
    except pygame.error as exc:
        print(f"Display init failed: {exc}", file=sys.stderr)
        return 1

    try:
        try:
            beeper = Beeper()
        except pygame.error as exc:
            print(f"Audio init failed: {exc}", file=sys.stderr)
            return 1

        framebuffer = Framebuffer()
        chip8 = Chip8(framebuffer)
        try:
            chip8.load_rom(args[0])
        except RomTooLargeError:
            print("ROM too large to fit in memory.", file=sys.stderr)
            return 1
        except OSError:
            print(f"Failed to open ROM: {args[0]}", file=sys.stderr)
            return 1

        running = True
        tick_time = pygame.time.get_ticks()
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                handle_event(chip8.keypad, event)

            for _ in range(CYCLES_PER_FRAME):
                chip8.cycle()
            screen.render(framebuffer)

            if pygame.time.get_ticks() - tick_time >= TIMER_INTERVAL_MS:
                step_timers(chip8, beeper)
                tick_time = pygame.time.get_ticks()
            pygame.time.delay(1)
        beeper.close()
    finally:
        screen.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())