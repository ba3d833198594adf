"""The CHIP-8 interpreter core: memory, registers and instruction execution."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import NamedTuple

from .display import HEIGHT, WIDTH, Framebuffer

log = logging.getLogger(__name__)

MEMORY_SIZE = 4096
REGISTER_COUNT = 16
STACK_SIZE = 16
KEYPAD_SIZE = 16
FONTSET_START_ADDRESS = 0x50
PROGRAM_START_ADDRESS = 0x200
MAX_ROM_SIZE = MEMORY_SIZE - PROGRAM_START_ADDRESS

FONTSET = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
])


class RomTooLargeError(ValueError):
    """Raised when a ROM does not fit in program memory."""


class _Instruction(NamedTuple):
    opcode: int
    x: int
    y: int
    n: int
    kk: int
    nnn: int

    @classmethod
    def decode(cls, opcode: int) -> "_Instruction":
        return cls(
            opcode,
            (opcode >> 8) & 0xF,
            (opcode >> 4) & 0xF,
            opcode & 0xF,
            opcode & 0xFF,
            opcode & 0xFFF,
        )


class Chip8:
    """CHIP-8 machine state; ``cycle`` executes one instruction."""

    def __init__(self, framebuffer=None):
        self.framebuffer = framebuffer if framebuffer is not None else Framebuffer()
        self.rng = random.Random()
        self._handlers = {
            0x0: self._op_system,
            0x1: self._op_jump,
            0x2: self._op_call,
            0x3: self._op_skip_eq_byte,
            0x4: self._op_skip_ne_byte,
            0x5: self._op_skip_eq_reg,
            0x6: self._op_load_byte,
            0x7: self._op_add_byte,
            0x8: self._op_alu,
            0x9: self._op_skip_ne_reg,
            0xA: self._op_load_index,
            0xB: self._op_jump_offset,
            0xC: self._op_random,
            0xD: self._op_draw,
            0xE: self._op_keys,
            0xF: self._op_misc,
        }
        self.reset()

    def reset(self):
        """Clear all state, load the font and blank the screen."""
        self.memory = bytearray(MEMORY_SIZE)
        self.v = bytearray(REGISTER_COUNT)
        self.i = 0
        self.pc = PROGRAM_START_ADDRESS
        self.delay_timer = 0
        self.sound_timer = 0
        self.stack: list[int] = []
        self.keypad = [False] * KEYPAD_SIZE
        self._waiting_for_key = False
        self._key_down: int | None = None
        start = FONTSET_START_ADDRESS
        self.memory[start:start + len(FONTSET)] = FONTSET
        self.framebuffer.clear()

    def load_rom(self, path):
        """Load the ROM file at ``path`` into program memory."""
        self.load_bytes(Path(path).read_bytes())

    def load_bytes(self, data):
        """Copy ``data`` into program memory at the program start address."""
        data = bytes(data)
        if len(data) > MAX_ROM_SIZE:
            raise RomTooLargeError(
                f"ROM of {len(data)} bytes exceeds {MAX_ROM_SIZE} bytes of program memory"
            )
        self.memory[PROGRAM_START_ADDRESS:PROGRAM_START_ADDRESS + len(data)] = data

    def cycle(self):
        """Fetch, decode and execute a single instruction."""
        opcode = self.memory[self.pc] << 8 | self.memory[self.pc + 1]
        ins = _Instruction.decode(opcode)
        next_pc = self._handlers[opcode >> 12](ins, self.pc + 2)
        self.pc = next_pc & 0xFFFF

    @staticmethod
    def _unknown(kind: str, opcode: int) -> None:
        log.warning("Unknown %sopcode: 0x%04X", kind, opcode)

    def _op_system(self, ins, next_pc):
        if ins.opcode == 0x00E0:
            self.framebuffer.clear()
        elif ins.opcode == 0x00EE:
            if not self.stack:
                raise IndexError("return with an empty call stack")
            next_pc = self.stack.pop()
        else:
            self._unknown("0x ", ins.opcode)
        return next_pc

    def _op_jump(self, ins, next_pc):
        return ins.nnn

    def _op_call(self, ins, next_pc):
        if len(self.stack) >= STACK_SIZE:
            raise IndexError("call stack overflow")
        self.stack.append(self.pc + 2)
        return ins.nnn

    def _op_skip_eq_byte(self, ins, next_pc):
        return next_pc + 2 if self.v[ins.x] == ins.kk else next_pc

    def _op_skip_ne_byte(self, ins, next_pc):
        return next_pc + 2 if self.v[ins.x] != ins.kk else next_pc

    def _op_skip_eq_reg(self, ins, next_pc):
        return next_pc + 2 if self.v[ins.x] == self.v[ins.y] else next_pc

    def _op_skip_ne_reg(self, ins, next_pc):
        return next_pc + 2 if self.v[ins.x] != self.v[ins.y] else next_pc

    def _op_load_byte(self, ins, next_pc):
        self.v[ins.x] = ins.kk
        return next_pc

    def _op_add_byte(self, ins, next_pc):
        self.v[ins.x] = (self.v[ins.x] + ins.kk) & 0xFF
        return next_pc

    def _op_alu(self, ins, next_pc):
        x, y, v = ins.x, ins.y, self.v
        vx, vy = v[x], v[y]
        match ins.n:
            case 0x0:
                v[x] = vy
            case 0x1:
                v[x] = vx | vy
                v[0xF] = 0
            case 0x2:
                v[x] = vx & vy
                v[0xF] = 0
            case 0x3:
                v[x] = vx ^ vy
                v[0xF] = 0
            case 0x4:
                total = vx + vy
                v[x] = total & 0xFF
                v[0xF] = int(total > 0xFF)
            case 0x5:
                v[x] = (vx - vy) & 0xFF
                v[0xF] = int(vx >= vy)
            case 0x6:
                v[x] = vy >> 1
                v[0xF] = vy & 0x1
            case 0x7:
                v[x] = (vy - vx) & 0xFF
                v[0xF] = int(vy >= vx)
            case 0xE:
                v[x] = (vy << 1) & 0xFF
                v[0xF] = (vy & 0x80) >> 7
            case _:
                self._unknown("8x ", ins.opcode)
        return next_pc

    def _op_load_index(self, ins, next_pc):
        self.i = ins.nnn
        return next_pc

    def _op_jump_offset(self, ins, next_pc):
        return self.v[0] + ins.nnn

    def _op_random(self, ins, next_pc):
        self.v[ins.x] = self.rng.randrange(256) & ins.kk
        return next_pc

    def _op_draw(self, ins, next_pc):
        x0 = self.v[ins.x] % WIDTH
        y0 = self.v[ins.y] % HEIGHT
        self.v[0xF] = 0
        for row in range(ins.n):
            y = y0 + row
            if y >= HEIGHT:
                break
            sprite = self.memory[self.i + row]
            for col in range(8):
                x = x0 + col
                if x >= WIDTH:
                    continue
                if self.framebuffer.xor_pixel(x, y, (sprite >> (7 - col)) & 1):
                    self.v[0xF] = 1
        return next_pc

    def _op_keys(self, ins, next_pc):
        pressed = self.keypad[self.v[ins.x] & 0xF]
        if ins.kk == 0x9E:
            return next_pc + 2 if pressed else next_pc
        if ins.kk == 0xA1:
            return next_pc if pressed else next_pc + 2
        self._unknown("Ex ", ins.opcode)
        return next_pc

    def _wait_for_key(self, x, next_pc):
        if not self._waiting_for_key:
            self._waiting_for_key = True
            self._key_down = None
            return self.pc
        if self._key_down is None:
            self._key_down = next(
                (key for key, down in enumerate(self.keypad) if down), None
            )
            return self.pc
        if self.keypad[self._key_down]:
            return self.pc
        self.v[x] = self._key_down
        self._waiting_for_key = False
        self._key_down = None
        return next_pc

    def _op_misc(self, ins, next_pc):
        x = ins.x
        match ins.kk:
            case 0x07:
                self.v[x] = self.delay_timer
            case 0x0A:
                return self._wait_for_key(x, next_pc)
            case 0x15:
                self.delay_timer = self.v[x]
            case 0x18:
                self.sound_timer = self.v[x]
            case 0x1E:
                self.i = (self.i + self.v[x]) & 0xFFFF
            case 0x29:
                self.i = FONTSET_START_ADDRESS + (self.v[x] & 0x0F) * 5
            case 0x33:
                value = self.v[x]
                self.memory[self.i:self.i + 3] = bytes(
                    (value // 100, value // 10 % 10, value % 10)
                )
            case 0x55:
                self.memory[self.i:self.i + x + 1] = self.v[:x + 1]
                self.i = (self.i + x + 1) & 0xFFFF
            case 0x65:
                self.v[:x + 1] = self.memory[self.i:self.i + x + 1]
                self.i = (self.i + x + 1) & 0xFFFF
            case _:
                self._unknown("Fx ", ins.opcode)
        return next_pc