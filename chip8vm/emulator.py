"""Main CHIP-8 emulator execution engine."""

from typing import Sequence

import jax.numpy as jnp
import numpy as np

from chip8vm import display, keypad, memory
from chip8vm.constants import ON_RGBA, OFF_RGBA
from chip8vm.decode import Op, decode
from chip8vm.errors import RomLoadError, UnknownOpcodeError
from chip8vm.state import EmulatorState
from chip8vm.instructions.system import execute_clear_screen, execute_return
from chip8vm.instructions.control_flow import (
    execute_jump, execute_call, execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate, execute_skip_if_equal_register,
    execute_skip_if_not_equal_register, execute_jump_with_offset,
    execute_skip_if_key, execute_skip_if_not_key
)
from chip8vm.instructions.alu import (
    execute_alu_set, execute_alu_or, execute_alu_and, execute_alu_xor, execute_alu_add,
    execute_alu_sub_xy, execute_alu_shift_right, execute_alu_sub_yx, execute_alu_shift_left
)
from chip8vm.instructions.memory import execute_set, execute_add, execute_set_index, execute_random
from chip8vm.instructions.display import execute_display
from chip8vm.instructions.misc import (
    execute_get_delay_timer, execute_wait_for_key, execute_set_delay_timer,
    execute_set_sound_timer, execute_add_to_index, execute_font_character,
    execute_bcd_conversion, execute_store_registers, execute_load_registers
)


INSTRUCTION_HANDLERS = {
    Op.CLS: execute_clear_screen,
    Op.RET: execute_return,
    Op.JP: execute_jump,
    Op.CALL: execute_call,
    Op.SE_BYTE: execute_skip_if_equal_immediate,
    Op.SNE_BYTE: execute_skip_if_not_equal_immediate,
    Op.SE_REG: execute_skip_if_equal_register,
    Op.LD_BYTE: execute_set,
    Op.ADD_BYTE: execute_add,
    Op.LD_REG: execute_alu_set,
    Op.OR: execute_alu_or,
    Op.AND: execute_alu_and,
    Op.XOR: execute_alu_xor,
    Op.ADD_REG: execute_alu_add,
    Op.SUB: execute_alu_sub_xy,
    Op.SHR: execute_alu_shift_right,
    Op.SUBN: execute_alu_sub_yx,
    Op.SHL: execute_alu_shift_left,
    Op.SNE_REG: execute_skip_if_not_equal_register,
    Op.LD_I: execute_set_index,
    Op.JP_V0: execute_jump_with_offset,
    Op.RND: execute_random,
    Op.DRW: execute_display,
    Op.SKP: execute_skip_if_key,
    Op.SKNP: execute_skip_if_not_key,
    Op.LD_VX_DT: execute_get_delay_timer,
    Op.LD_VX_K: execute_wait_for_key,
    Op.LD_DT_VX: execute_set_delay_timer,
    Op.LD_ST_VX: execute_set_sound_timer,
    Op.ADD_I_VX: execute_add_to_index,
    Op.LD_F_VX: execute_font_character,
    Op.LD_B_VX: execute_bcd_conversion,
    Op.LD_MEM_VX: execute_store_registers,
    Op.LD_VX_MEM: execute_load_registers,
}


def execute(state: EmulatorState, instruction: int) -> EmulatorState:
    """Execute single CHIP-8 instruction."""
    decoded_instruction = decode(instruction)
    return INSTRUCTION_HANDLERS[decoded_instruction.op](state, decoded_instruction)


def fetch(state: EmulatorState) -> tuple[EmulatorState, int]:
    """Fetch next instruction from memory and advance PC."""
    instruction = memory.fetch_opcode(state.memory, state.pc)
    return state.replace(pc=state.pc + 2), instruction


def decrement_timers(state: EmulatorState) -> EmulatorState:
    """Count both timers down by one, stopping at zero."""
    return state.replace(
        delay_timer=jnp.where(state.delay_timer > 0, state.delay_timer - 1, state.delay_timer),
        sound_timer=jnp.where(state.sound_timer > 0, state.sound_timer - 1, state.sound_timer),
    )


def step(state: EmulatorState, tick_timers: bool = True) -> EmulatorState:
    """Run one fetch-decode-execute cycle.

    Args:
        state: Current emulator state
        tick_timers: Decrement the delay and sound timers after the
            instruction. Pass False when timers are driven by a separate
            fixed-rate clock through decrement_timers.

    Returns:
        The state after the instruction
    """
    address = int(state.pc)
    state, instruction = fetch(state)
    try:
        state = execute(state, instruction)
    except UnknownOpcodeError:
        raise UnknownOpcodeError(instruction, address) from None
    if tick_timers:
        state = decrement_timers(state)
    return state


def load_glyph_table(state: EmulatorState, glyphs: bytes | Sequence[int]) -> EmulatorState:
    """Load an 80-byte hexadecimal glyph table."""
    return state.replace(memory=memory.load_glyph_table(state.memory, glyphs))


def load_program(state: EmulatorState, program: bytes | Sequence[int]) -> EmulatorState:
    """Load a program image at 0x200."""
    return state.replace(memory=memory.load_program(state.memory, program))


def load_rom(state: EmulatorState, filename: str) -> EmulatorState:
    """Load ROM data into CHIP-8 memory starting at 0x200."""
    try:
        with open(filename, 'rb') as f:
            rom_data = f.read()
    except OSError as e:
        raise RomLoadError(f"Cannot read ROM {filename}: {e}") from e
    return load_program(state, rom_data)


def render(
    state: EmulatorState,
    buffer: np.ndarray,
    on_color: Sequence[int] = ON_RGBA,
    off_color: Sequence[int] = OFF_RGBA,
) -> EmulatorState:
    """Copy the framebuffer into a caller-owned RGBA buffer and mark it clean."""
    return state.replace(display=display.render(state.display, buffer, on_color, off_color))


def display_dirty(state: EmulatorState) -> bool:
    """Whether the framebuffer changed since it was last rendered."""
    return display.is_dirty(state.display)


def set_key(state: EmulatorState, index: int, is_pressed: bool) -> EmulatorState:
    """Latch the pressed state of one keypad key."""
    update = keypad.press if is_pressed else keypad.release
    return state.replace(keypad=update(state.keypad, index))
