"""CHIP-8 addressable memory.

Memory is a flat ``uint8`` array of :data:`MEMORY_SIZE` bytes. All functions
are pure: writers return a new array. Every access is bounds-checked because a
JAX gather with an out-of-range index clamps instead of failing.
"""

from typing import Sequence

import jax.numpy as jnp

from chip8vm.constants import (
    MEMORY_SIZE, PROGRAM_START, MAX_PROGRAM_SIZE, FONT_START, FONT_SIZE, FONT_CHAR_SIZE,
)
from chip8vm.errors import GlyphTableSizeError, ProgramTooLargeError, MemoryAccessError


def _as_bytes(data: bytes | Sequence[int]) -> jnp.ndarray:
    return jnp.array(list(data), dtype=jnp.uint8)


def check_address(address: int, length: int = 1) -> None:
    """Raise MemoryAccessError unless [address, address + length) is in memory."""
    address = int(address)
    if address < 0 or address + length > MEMORY_SIZE:
        raise MemoryAccessError(
            f"Memory access 0x{address:X}..0x{address + length - 1:X} outside 0x000..0x{MEMORY_SIZE - 1:X}"
        )


def load_glyph_table(memory: jnp.ndarray, glyphs: bytes | Sequence[int]) -> jnp.ndarray:
    """Write the 80-byte hexadecimal glyph table at FONT_START."""
    if len(glyphs) != FONT_SIZE:
        raise GlyphTableSizeError(f"Glyph table must be {FONT_SIZE} bytes, got {len(glyphs)}")
    return memory.at[FONT_START:FONT_START + FONT_SIZE].set(_as_bytes(glyphs))


def load_program(memory: jnp.ndarray, program: bytes | Sequence[int]) -> jnp.ndarray:
    """Write a program image starting at PROGRAM_START."""
    if len(program) > MAX_PROGRAM_SIZE:
        raise ProgramTooLargeError(
            f"Program is {len(program)} bytes, at most {MAX_PROGRAM_SIZE} fit in memory"
        )
    return memory.at[PROGRAM_START:PROGRAM_START + len(program)].set(_as_bytes(program))


def fetch_opcode(memory: jnp.ndarray, address: int) -> int:
    """Read the big-endian 16-bit instruction word at address."""
    address = int(address)
    check_address(address, 2)
    return (int(memory[address]) << 8) | int(memory[address + 1])


def glyph_address(digit: int) -> int:
    """Address of the 5-byte glyph for hexadecimal digit 0-F."""
    return FONT_START + int(digit) * FONT_CHAR_SIZE


def read(memory: jnp.ndarray, address: int) -> jnp.ndarray:
    check_address(address)
    return memory[int(address)]


def write(memory: jnp.ndarray, address: int, value) -> jnp.ndarray:
    check_address(address)
    return memory.at[int(address)].set(value)


def read_block(memory: jnp.ndarray, address: int, length: int) -> jnp.ndarray:
    """Read length consecutive bytes starting at address."""
    address = int(address)
    check_address(address, length)
    return memory[address:address + length]


def write_block(memory: jnp.ndarray, address: int, values: jnp.ndarray) -> jnp.ndarray:
    """Write values to consecutive bytes starting at address."""
    address = int(address)
    check_address(address, len(values))
    return memory.at[address:address + len(values)].set(jnp.astype(values, jnp.uint8))
