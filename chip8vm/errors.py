"""Fatal CHIP-8 error taxonomy.

Every condition the machine cannot continue from is raised as a subclass of
:class:`Chip8Error`. Each subclass carries a :class:`FatalErrorKind` so a host
can report the failure without matching on exception types.
"""

import enum


class FatalErrorKind(enum.Enum):
    GLYPH_TABLE_SIZE = "glyph table size"
    PROGRAM_TOO_LARGE = "program too large"
    STACK_OVERFLOW = "stack overflow"
    STACK_UNDERFLOW = "stack underflow"
    UNKNOWN_OPCODE = "unknown opcode"
    OUT_OF_BOUNDS = "out of bounds"
    ROM_READ = "rom read"


class Chip8Error(Exception):
    """Base class for unrecoverable emulator errors."""
    kind: FatalErrorKind


class GlyphTableSizeError(Chip8Error):
    kind = FatalErrorKind.GLYPH_TABLE_SIZE


class ProgramTooLargeError(Chip8Error):
    kind = FatalErrorKind.PROGRAM_TOO_LARGE


class StackOverflowError(Chip8Error):
    kind = FatalErrorKind.STACK_OVERFLOW


class StackUnderflowError(Chip8Error):
    kind = FatalErrorKind.STACK_UNDERFLOW


class UnknownOpcodeError(Chip8Error):
    kind = FatalErrorKind.UNKNOWN_OPCODE

    def __init__(self, opcode: int, address: int | None = None):
        self.opcode = opcode
        self.address = address
        where = f" at 0x{address:03X}" if address is not None else ""
        super().__init__(f"Unknown opcode 0x{opcode:04X}{where}")


class MemoryAccessError(Chip8Error):
    kind = FatalErrorKind.OUT_OF_BOUNDS


class PixelAccessError(Chip8Error):
    kind = FatalErrorKind.OUT_OF_BOUNDS


class KeyIndexError(Chip8Error):
    kind = FatalErrorKind.OUT_OF_BOUNDS


class RomLoadError(Chip8Error):
    kind = FatalErrorKind.ROM_READ
