"""CHIP-8 16-key input latch."""

import jax.numpy as jnp

from chip8vm.constants import KEYPAD_SIZE
from chip8vm.errors import KeyIndexError


def _check_key(key: int) -> int:
    key = int(key)
    if not 0 <= key < KEYPAD_SIZE:
        raise KeyIndexError(f"Key {key} outside 0x0..0x{KEYPAD_SIZE - 1:X}")
    return key


def press(keypad: jnp.ndarray, key: int) -> jnp.ndarray:
    return keypad.at[_check_key(key)].set(True)


def release(keypad: jnp.ndarray, key: int) -> jnp.ndarray:
    return keypad.at[_check_key(key)].set(False)


def pressed(keypad: jnp.ndarray, key: int) -> bool:
    return bool(keypad[_check_key(key)])


def first_pressed(keypad: jnp.ndarray) -> int | None:
    """Lowest-numbered pressed key, or None when no key is down."""
    if not jnp.any(keypad):
        return None
    return int(jnp.argmax(keypad))
