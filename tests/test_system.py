"""Tests for system instructions and the call stack."""

import jax.numpy as jnp
import pytest
from chip8vm import execute, StackOverflowError, StackUnderflowError, FatalErrorKind


def test_execute_clear_screen(fresh_state):
    """Test 00E0 - Clear display."""
    display = fresh_state.display.replace(pixels=fresh_state.display.pixels.at[0, 0].set(True))
    state = fresh_state.replace(display=display)

    state = execute(state, 0x00E0)

    assert jnp.sum(state.display.pixels) == 0
    assert state.display.dirty


def test_execute_call_and_return(fresh_state):
    """Test 2NNN (call) and 00EE (return) together."""
    state = fresh_state
    initial_pc = state.pc

    # Call subroutine
    state = execute(state, 0x2300)  # Call 0x300
    assert state.pc == 0x300
    assert state.stack.data[state.stack.pointer - 1] == initial_pc

    # Return from subroutine
    state = execute(state, 0x00EE)  # Return
    assert state.pc == initial_pc


def test_nested_calls_return_in_lifo_order(fresh_state):
    state = execute(fresh_state, 0x2300)
    state = execute(state, 0x2400)
    state = execute(state, 0x2500)
    assert state.pc == 0x500

    state = execute(state, 0x00EE)
    assert state.pc == 0x400
    state = execute(state, 0x00EE)
    assert state.pc == 0x300
    state = execute(state, 0x00EE)
    assert state.pc == 0x200


def test_return_with_empty_stack(fresh_state):
    with pytest.raises(StackUnderflowError) as excinfo:
        execute(fresh_state, 0x00EE)
    assert excinfo.value.kind is FatalErrorKind.STACK_UNDERFLOW


def test_call_depth_limit(fresh_state):
    state = fresh_state
    for _ in range(16):
        state = execute(state, 0x2300)

    with pytest.raises(StackOverflowError):
        execute(state, 0x2300)
