"""Tests for immediate load, index and random operations."""

import jax.numpy as jnp
import pytest
from chip8vm import execute
from conftest import fixed_random_source


class TestBasicMemory:
    """Test basic register loads."""

    def test_set_basic(self, fresh_state):
        """6XKK - Set VX = KK."""
        state = execute(fresh_state, 0x600A)  # V0 = 0xA
        assert state.V[0] == 0xA

    @pytest.mark.parametrize("x,kk", [(0, 0x00), (3, 0x7F), (14, 0xFF), (15, 0x01)])
    def test_set_touches_only_target(self, fresh_state, x, kk):
        """6XKK - No other register or flag changes."""
        state = execute(fresh_state, 0x6000 | (x << 8) | kk)

        expected = fresh_state.V.at[x].set(kk)
        assert jnp.array_equal(state.V, expected)
        assert state.I == fresh_state.I
        assert state.pc == fresh_state.pc

    def test_add_basic(self, fresh_state):
        """7XKK - Add KK to VX."""
        state = fresh_state.replace(V=fresh_state.V.at[1].set(0x10))
        state = execute(state, 0x7105)  # V1 += 5
        assert state.V[1] == 0x15

    def test_add_wraps_without_flag(self, fresh_state):
        """7XKK - Overflow wraps and leaves VF alone."""
        state = fresh_state.replace(V=fresh_state.V.at[1].set(0xFE))
        state = execute(state, 0x7103)
        assert state.V[1] == 0x01
        assert state.V[15] == 0


class TestIndexRegister:
    """Test I register operations."""

    def test_set_index_basic(self, fresh_state):
        """ANNN - Set I register to NNN."""
        state = execute(fresh_state, 0xA123)  # I = 0x123
        assert state.I == 0x123

    def test_set_index_maximum(self, fresh_state):
        """ANNN - Set I register to maximum 12-bit value."""
        state = execute(fresh_state, 0xAFFF)  # I = 0xFFF
        assert state.I == 0xFFF

    def test_set_index_multiple_operations(self, fresh_state):
        """ANNN - Test multiple consecutive I register sets."""
        state = fresh_state

        state = execute(state, 0xA111)  # I = 0x111
        assert state.I == 0x111

        state = execute(state, 0xA000)  # I = 0x000
        assert state.I == 0x000


class TestRandom:
    """Test random number generation."""

    def test_random_zero_mask(self, fresh_state):
        """CXKK - Random AND with 0x00 should always be 0."""
        state = execute(fresh_state, 0xC000)  # V0 = random & 0x00
        assert state.V[0] == 0

    def test_random_bit_mask(self, fresh_state):
        """CXKK - Random AND with specific mask."""
        state = execute(fresh_state, 0xC20F)  # V2 = random & 0x0F
        assert 0 <= state.V[2] <= 15

    def test_random_advances_key(self, fresh_state):
        """CXKK - The PRNG key is consumed."""
        state = execute(fresh_state, 0xC0FF)
        assert not jnp.array_equal(state.rng, fresh_state.rng)

    def test_random_is_reproducible(self, fresh_state):
        """CXKK - Same key gives the same byte."""
        first = execute(fresh_state, 0xC0FF)
        second = execute(fresh_state, 0xC0FF)
        assert first.V[0] == second.V[0]

    def test_random_injected_source(self, fresh_state):
        """CXKK - A replaced random source is used and masked."""
        state = fresh_state.replace(random_source=fixed_random_source(0xAB, 0x3C))

        state = execute(state, 0xC1FF)
        assert state.V[1] == 0xAB

        state = execute(state, 0xC20F)
        assert state.V[2] == 0x0C

    def test_random_preserves_state(self, fresh_state):
        """CXKK - Verify other state is preserved."""
        state = fresh_state

        state = execute(state, 0x6142)  # V1 = 0x42
        state = execute(state, 0xA300)  # I = 0x300

        original_V1 = state.V[1]
        original_I = state.I

        state = execute(state, 0xC0FF)  # V0 = random & 0xFF

        assert state.V[1] == original_V1
        assert state.I == original_I
