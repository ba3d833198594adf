# chip8emu

A CHIP-8 interpreter. It draws the 64×32 screen in a pygame window, reads
the hexadecimal keypad from your keyboard and beeps while the sound timer
is running.

## Installing

```
pip install .
```

The tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Running a ROM

```
chip8emu path/to/game.ch8
```

You need exactly one argument, the path to the ROM. Otherwise the command
prints a usage line and exits with status 1. ROMs are loaded at address
`0x200`. A ROM bigger than the 3,584 bytes left above that address is
refused, as is a file that cannot be read. Both exit with status 1. Close
the window to quit.

The window is 640×320: each CHIP-8 pixel is drawn as a 10×10 white square
on black. The interpreter runs 8 instructions per frame. The delay and
sound timers count down about every 16 ms, which is roughly 60 Hz.

## Keypad

The CHIP-8 keypad is mapped onto the left side of a QWERTY keyboard:

```
CHIP-8 keypad        Keyboard
1 2 3 C              1 2 3 4
4 5 6 D              Q W E R
7 8 9 E              A S D F
A 0 B F              Z X C V
```

`Fx0A` (wait for a key) finishes only after a key has been pressed and
then released.

## Using it as a library

The interpreter core in `chip8emu.cpu` and `chip8emu.display` does not open
a window. You can drive it directly:

```python
from chip8emu.display import Framebuffer
from chip8emu.cpu import Chip8

fb = Framebuffer()
chip8 = Chip8(fb)
chip8.load_bytes(bytes([0x60, 0x2A]))  # LD V0, 0x2A
chip8.cycle()
assert chip8.v[0] == 0x2A
```

- `chip8emu.display.Framebuffer` holds the monochrome screen.
  `xor_pixel(x, y, value)` XORs a pixel and returns `True` if a lit pixel
  was erased. `clear()` turns every pixel off. `lit_pixels()` yields the
  `(x, y)` coordinates of the pixels that are on.
- `chip8emu.display.Screen(scale)` opens the pygame window.
  `render(framebuffer)` draws a framebuffer into it. `close()` shuts it
  down. It can also be used as a context manager.
- `chip8emu.cpu.Chip8(framebuffer)` holds memory, the `v` registers, `i`,
  `pc`, the timers, the stack and the `keypad`. If you pass no framebuffer,
  it creates its own. `reset()` clears the state, loads the built-in font
  at `0x50` and blanks the screen. `load_rom(path)` and `load_bytes(data)`
  put a program in memory. A program that does not fit raises
  `RomTooLargeError`. `cycle()` runs one instruction. Its `rng` attribute
  is a `random.Random` that you can seed for repeatable `Cxkk` results.
  Unknown opcodes are logged as warnings and skipped. A return with an
  empty call stack, or a call past 16 levels deep, raises `IndexError`.
- `chip8emu.input.key_index(key)` maps a pygame key code to its keypad
  index, or `None`. `handle_event(keypad, event)` updates the keypad from
  a pygame `KEYDOWN` or `KEYUP` event and returns the index it touched.
- `chip8emu.audio.square_wave(length, phase)` returns unsigned 8-bit
  square-wave samples (200 high, 200 low) and the next phase.
  `Beeper` loops that tone through the pygame mixer. Use `on()` and `off()`
  to start and stop it, and `close()` to shut the mixer down.
- `chip8emu.main.step_timers(chip8, beeper)` counts both timers down by
  one tick and switches the beeper on while the sound timer runs.

## Limits

The instruction speed, the window scale used by the command and the key
bindings are fixed. There are no command-line options to change them, and
there is no pause, reset or save-state support while a ROM is running.