"""CHIP-8 virtual machine package."""

from chip8vm.state import EmulatorState, create_state
from chip8vm.emulator import (
    execute, fetch, step, decrement_timers, load_glyph_table, load_program, load_rom,
    render, display_dirty, set_key,
)
from chip8vm.decode import DecodedInstruction, Op, decode
from chip8vm.constants import *
from chip8vm.errors import (
    Chip8Error, FatalErrorKind, GlyphTableSizeError, ProgramTooLargeError,
    StackOverflowError, StackUnderflowError, UnknownOpcodeError, MemoryAccessError,
    PixelAccessError, KeyIndexError, RomLoadError,
)

__all__ = [
    "EmulatorState",
    "create_state",
    "fetch",
    "execute",
    "step",
    "decrement_timers",
    "load_glyph_table",
    "load_program",
    "load_rom",
    "render",
    "display_dirty",
    "set_key",
    "DecodedInstruction",
    "Op",
    "decode",
    "PROGRAM_START",
    "FONT_START",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "Chip8Error",
    "FatalErrorKind",
    "GlyphTableSizeError",
    "ProgramTooLargeError",
    "StackOverflowError",
    "StackUnderflowError",
    "UnknownOpcodeError",
    "MemoryAccessError",
    "PixelAccessError",
    "KeyIndexError",
    "RomLoadError",
]
