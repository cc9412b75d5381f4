"""Test configuration and fixtures for CHIP-8 emulator tests."""

import pytest
import jax.numpy as jnp
from chip8vm import create_state


@pytest.fixture
def fresh_state():
    """Provide a fresh emulator state for each test."""
    return create_state()


def setup_sprite_in_memory(state, address, sprite_bytes):
    """Helper to put sprite data in memory."""
    return state.replace(
        memory=state.memory.at[address:address+len(sprite_bytes)].set(
            jnp.array(sprite_bytes, dtype=jnp.uint8)
        )
    )


def fixed_random_source(*values):
    """Deterministic random source cycling through the given bytes."""
    sequence = list(values)

    def random_source(rng):
        value = sequence.pop(0)
        sequence.append(value)
        return rng, jnp.asarray(value, dtype=jnp.uint8)

    return random_source
