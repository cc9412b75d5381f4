"""CHIP-8 display operations."""

import jax.numpy as jnp
from chip8vm.state import EmulatorState
from chip8vm.decode import DecodedInstruction
from chip8vm.constants import SCREEN_WIDTH, SCREEN_HEIGHT, FLAG_REGISTER
from chip8vm.memory import read_block
from chip8vm.display import xor_sprite

# Bit offsets within a sprite row, most significant bit first
BIT_OFFSETS = jnp.arange(8)


def execute_display(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """DXYN - Draw N-row sprite from I at (VX, VY), VF = collision.

    Both axes wrap around independently, per row and per column.
    """
    origin_x = jnp.astype(state.V[instruction.x], jnp.int32)
    origin_y = jnp.astype(state.V[instruction.y], jnp.int32)
    new_V = state.V.at[FLAG_REGISTER].set(0)

    if instruction.n == 0:
        return state.replace(V=new_V)

    sprite_bytes = read_block(state.memory, state.I, instruction.n)
    row_offsets = jnp.arange(instruction.n)

    # (n, 8) grids of destination coordinates and sprite bits
    xs = (origin_x + BIT_OFFSETS[None, :]) % SCREEN_WIDTH
    ys = (origin_y + row_offsets[:, None]) % SCREEN_HEIGHT
    xs, ys = jnp.broadcast_arrays(xs, ys)
    bits = (sprite_bytes[:, None] >> (7 - BIT_OFFSETS[None, :])) & 1

    display, collision = xor_sprite(state.display, xs, ys, bits)
    return state.replace(display=display, V=new_V.at[FLAG_REGISTER].set(collision))
