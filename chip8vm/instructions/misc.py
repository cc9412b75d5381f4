"""CHIP-8 miscellaneous instructions (Fxxx)."""

import jax.numpy as jnp
from chip8vm.state import EmulatorState
from chip8vm.decode import DecodedInstruction
from chip8vm.constants import FLAG_REGISTER
from chip8vm.memory import glyph_address, read_block, write_block
from chip8vm.keypad import first_pressed


def execute_get_delay_timer(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX07 - Set VX to delay timer value."""
    return state.replace(V=state.V.at[instruction.x].set(state.delay_timer))


def execute_set_delay_timer(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX15 - Set delay timer to VX."""
    return state.replace(delay_timer=state.V[instruction.x])


def execute_set_sound_timer(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX18 - Set sound timer to VX."""
    return state.replace(sound_timer=state.V[instruction.x])


def execute_add_to_index(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX1E - Add VX to I register.

    VF is set when the new index exceeds 0xFF. This is an 8-bit overflow check
    on a 16-bit register, kept for compatibility with existing programs.
    """
    new_i = jnp.astype(state.I + state.V[instruction.x], jnp.uint16)
    overflow_flag = jnp.astype(new_i > 0xFF, jnp.uint8)
    return state.replace(
        I=new_i,
        V=state.V.at[FLAG_REGISTER].set(overflow_flag)
    )


def execute_wait_for_key(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX0A - Wait for key press.

    With no key down the PC is rewound so the same instruction runs again on
    the next step; control still returns to the caller every step.
    """
    key = first_pressed(state.keypad)
    if key is None:
        return state.replace(pc=state.pc - 2)
    return state.replace(V=state.V.at[instruction.x].set(key))


def execute_font_character(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX29 - Set I to location of glyph for the hex digit in VX."""
    digit = int(state.V[instruction.x]) & 0xF
    return state.replace(I=jnp.astype(glyph_address(digit), jnp.uint16))


def execute_bcd_conversion(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX33 - Store BCD representation of VX at I, I+1, I+2."""
    value = state.V[instruction.x]

    digits = jnp.array([
        value // 100,
        (value // 10) % 10,
        value % 10
    ], dtype=jnp.uint8)

    return state.replace(memory=write_block(state.memory, state.I, digits))


def execute_store_registers(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX55 - Store V0 through VX in memory starting at I. I is unchanged."""
    registers = state.V[:instruction.x + 1]
    return state.replace(memory=write_block(state.memory, state.I, registers))


def execute_load_registers(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX65 - Load V0 through VX from memory starting at I. I is unchanged."""
    values = read_block(state.memory, state.I, instruction.x + 1)
    return state.replace(V=state.V.at[:instruction.x + 1].set(values))
