"""CHIP-8 immediate load and register operations."""

import jax.numpy as jnp
from chip8vm.state import EmulatorState
from chip8vm.decode import DecodedInstruction


def execute_set(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """6XKK - Set VX = KK."""
    return state.replace(V=state.V.at[instruction.x].set(instruction.kk))


def execute_add(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """7XKK - Add KK to VX, wrapping at 8 bits. VF is not touched."""
    return state.replace(V=state.V.at[instruction.x].add(instruction.kk))


def execute_set_index(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """ANNN - Set I = NNN."""
    return state.replace(I=jnp.astype(instruction.nnn, jnp.uint16))


def execute_random(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """CXKK - Set VX = random byte & KK."""
    rng, random_value = state.random_source(state.rng)
    masked = jnp.astype(random_value, jnp.uint8) & instruction.kk
    return state.replace(V=state.V.at[instruction.x].set(masked), rng=rng)
