"""CHIP-8 instruction decoding."""

import enum

from chex import dataclass

from chip8vm.errors import UnknownOpcodeError


class Op(enum.Enum):
    """Documented CHIP-8 instructions."""
    CLS = "00E0"
    RET = "00EE"
    JP = "1nnn"
    CALL = "2nnn"
    SE_BYTE = "3xkk"
    SNE_BYTE = "4xkk"
    SE_REG = "5xy0"
    LD_BYTE = "6xkk"
    ADD_BYTE = "7xkk"
    LD_REG = "8xy0"
    OR = "8xy1"
    AND = "8xy2"
    XOR = "8xy3"
    ADD_REG = "8xy4"
    SUB = "8xy5"
    SHR = "8xy6"
    SUBN = "8xy7"
    SHL = "8xyE"
    SNE_REG = "9xy0"
    LD_I = "Annn"
    JP_V0 = "Bnnn"
    RND = "Cxkk"
    DRW = "Dxyn"
    SKP = "Ex9E"
    SKNP = "ExA1"
    LD_VX_DT = "Fx07"
    LD_VX_K = "Fx0A"
    LD_DT_VX = "Fx15"
    LD_ST_VX = "Fx18"
    ADD_I_VX = "Fx1E"
    LD_F_VX = "Fx29"
    LD_B_VX = "Fx33"
    LD_MEM_VX = "Fx55"
    LD_VX_MEM = "Fx65"


# (mask, pattern, op): an opcode matches when opcode & mask == pattern
OPCODE_TABLE = (
    (0xFFFF, 0x00E0, Op.CLS),
    (0xFFFF, 0x00EE, Op.RET),
    (0xF000, 0x1000, Op.JP),
    (0xF000, 0x2000, Op.CALL),
    (0xF000, 0x3000, Op.SE_BYTE),
    (0xF000, 0x4000, Op.SNE_BYTE),
    (0xF00F, 0x5000, Op.SE_REG),
    (0xF000, 0x6000, Op.LD_BYTE),
    (0xF000, 0x7000, Op.ADD_BYTE),
    (0xF00F, 0x8000, Op.LD_REG),
    (0xF00F, 0x8001, Op.OR),
    (0xF00F, 0x8002, Op.AND),
    (0xF00F, 0x8003, Op.XOR),
    (0xF00F, 0x8004, Op.ADD_REG),
    (0xF00F, 0x8005, Op.SUB),
    (0xF00F, 0x8006, Op.SHR),
    (0xF00F, 0x8007, Op.SUBN),
    (0xF00F, 0x800E, Op.SHL),
    (0xF00F, 0x9000, Op.SNE_REG),
    (0xF000, 0xA000, Op.LD_I),
    (0xF000, 0xB000, Op.JP_V0),
    (0xF000, 0xC000, Op.RND),
    (0xF000, 0xD000, Op.DRW),
    (0xF0FF, 0xE09E, Op.SKP),
    (0xF0FF, 0xE0A1, Op.SKNP),
    (0xF0FF, 0xF007, Op.LD_VX_DT),
    (0xF0FF, 0xF00A, Op.LD_VX_K),
    (0xF0FF, 0xF015, Op.LD_DT_VX),
    (0xF0FF, 0xF018, Op.LD_ST_VX),
    (0xF0FF, 0xF01E, Op.ADD_I_VX),
    (0xF0FF, 0xF029, Op.LD_F_VX),
    (0xF0FF, 0xF033, Op.LD_B_VX),
    (0xF0FF, 0xF055, Op.LD_MEM_VX),
    (0xF0FF, 0xF065, Op.LD_VX_MEM),
)


@dataclass(frozen=True)
class DecodedInstruction:
    """Decoded CHIP-8 instruction with extracted operands."""
    raw: int
    op: Op
    x: int    # Second nibble (VX register)
    y: int    # Third nibble (VY register)
    n: int    # Fourth nibble (4-bit immediate)
    kk: int   # Last byte (8-bit immediate)
    nnn: int  # Last 12 bits (12-bit address)


def identify(instruction: int) -> Op:
    """Find the documented instruction an opcode word encodes."""
    for mask, pattern, op in OPCODE_TABLE:
        if instruction & mask == pattern:
            return op
    raise UnknownOpcodeError(instruction)


def decode(instruction: int) -> DecodedInstruction:
    """Decode 16-bit instruction into components."""
    instruction = int(instruction)
    return DecodedInstruction(
        raw=instruction,
        op=identify(instruction),
        x=(instruction & 0x0F00) >> 8,
        y=(instruction & 0x00F0) >> 4,
        n=instruction & 0x000F,
        kk=instruction & 0x00FF,
        nnn=instruction & 0x0FFF
    )
