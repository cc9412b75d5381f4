"""CHIP-8 emulator state structures."""

from typing import Callable

import jax
import jax.numpy as jnp
from flax.struct import dataclass, PyTreeNode, field

from chip8vm.constants import (
    PROGRAM_START, FONT_DATA, SCREEN_WIDTH, SCREEN_HEIGHT, STACK_SIZE, KEYPAD_SIZE,
    MEMORY_SIZE, REGISTER_COUNT,
)
from chip8vm.memory import load_glyph_table


def jax_random_byte(rng: jnp.ndarray) -> tuple[jnp.ndarray, jnp.ndarray]:
    """Draw one uniformly distributed byte, returning the advanced key."""
    rng, subkey = jax.random.split(rng)
    return rng, jax.random.bits(subkey, dtype=jnp.uint8)


@dataclass(frozen=True)
class StackState:
    """Stack state for subroutine calls."""
    data: jnp.ndarray = field(default_factory=lambda: jnp.zeros(STACK_SIZE, dtype=jnp.uint16))
    pointer: int = 0


@dataclass(frozen=True)
class DisplayState:
    """Monochrome framebuffer indexed [x, y] with a change flag."""
    pixels: jnp.ndarray = field(default_factory=lambda: jnp.zeros((SCREEN_WIDTH, SCREEN_HEIGHT), dtype=jnp.bool_))
    dirty: bool = False


class EmulatorState(PyTreeNode):
    """Main CHIP-8 emulator state."""
    rng: jnp.ndarray
    memory: jnp.ndarray = field(default_factory=lambda: jnp.zeros(MEMORY_SIZE, dtype=jnp.uint8))
    pc: jnp.ndarray = field(default_factory=lambda: jnp.astype(PROGRAM_START, jnp.uint16))
    display: DisplayState = DisplayState()
    stack: StackState = StackState()
    delay_timer: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint8))
    sound_timer: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint8))
    keypad: jnp.ndarray = field(default_factory=lambda: jnp.zeros(KEYPAD_SIZE, dtype=jnp.bool_))
    V: jnp.ndarray = field(default_factory=lambda: jnp.zeros(REGISTER_COUNT, dtype=jnp.uint8))
    I: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint16))
    random_source: Callable[[jnp.ndarray], tuple[jnp.ndarray, jnp.ndarray]] = field(
        pytree_node=False, default=jax_random_byte
    )


def create_state(rng: jnp.ndarray | None = None, glyphs=FONT_DATA) -> EmulatorState:
    """Create initial emulator state with the glyph table loaded."""
    if rng is None:
        rng = jax.random.PRNGKey(0)
    state = EmulatorState(rng)
    return state.replace(memory=load_glyph_table(state.memory, glyphs))
