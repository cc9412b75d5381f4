"""Tests for the addressable memory."""

import jax.numpy as jnp
import pytest
from chip8vm import create_state, load_glyph_table, load_program, FatalErrorKind
from chip8vm.constants import FONT_DATA, MEMORY_SIZE, MAX_PROGRAM_SIZE
from chip8vm.errors import GlyphTableSizeError, ProgramTooLargeError, MemoryAccessError
from chip8vm import memory


@pytest.fixture
def blank():
    return jnp.zeros(MEMORY_SIZE, dtype=jnp.uint8)


class TestLoading:

    def test_create_state_loads_glyphs(self, fresh_state):
        assert [int(b) for b in fresh_state.memory[0x50:0xA0]] == list(FONT_DATA)
        assert fresh_state.memory[0x4F] == 0
        assert fresh_state.memory[0xA0] == 0

    @pytest.mark.parametrize("size", [0, 79, 81])
    def test_glyph_table_size(self, blank, size):
        with pytest.raises(GlyphTableSizeError) as excinfo:
            memory.load_glyph_table(blank, bytes(size))
        assert excinfo.value.kind is FatalErrorKind.GLYPH_TABLE_SIZE

    def test_custom_glyph_table(self, fresh_state):
        state = load_glyph_table(fresh_state, bytes(range(80)))
        assert state.memory[0x50] == 0
        assert state.memory[0x9F] == 79

    def test_glyphs_passed_to_create_state(self):
        with pytest.raises(GlyphTableSizeError):
            create_state(glyphs=bytes(10))

    def test_program_round_trip(self, fresh_state):
        state = load_program(fresh_state, bytes([0x12, 0x34, 0x56]))
        assert memory.fetch_opcode(state.memory, 0x200) == 0x1234
        assert state.memory[0x202] == 0x56

    def test_program_max_size(self, blank):
        loaded = memory.load_program(blank, bytes([0xAB]) * MAX_PROGRAM_SIZE)
        assert loaded[0xFFF] == 0xAB
        assert loaded[0x1FF] == 0

    def test_program_too_large(self, blank):
        with pytest.raises(ProgramTooLargeError) as excinfo:
            memory.load_program(blank, bytes(MAX_PROGRAM_SIZE + 1))
        assert excinfo.value.kind is FatalErrorKind.PROGRAM_TOO_LARGE

    def test_empty_program(self, blank):
        assert jnp.array_equal(memory.load_program(blank, b""), blank)


class TestAccess:

    def test_read_write(self, blank):
        updated = memory.write(blank, 0xFFF, 0x7E)
        assert memory.read(updated, 0xFFF) == 0x7E
        assert memory.read(blank, 0xFFF) == 0

    def test_fetch_is_big_endian(self, blank):
        mem = memory.write_block(blank, 0x300, jnp.array([0xA2, 0xF0]))
        assert memory.fetch_opcode(mem, 0x300) == 0xA2F0

    def test_block_access(self, blank):
        mem = memory.write_block(blank, 0x400, jnp.array([1, 2, 3]))
        assert [int(b) for b in memory.read_block(mem, 0x400, 3)] == [1, 2, 3]

    def test_glyph_address(self):
        assert memory.glyph_address(0) == 0x50
        assert memory.glyph_address(0xF) == 0x50 + 75

    @pytest.mark.parametrize("address", [-1, MEMORY_SIZE, 0x1000 + 5])
    def test_out_of_bounds(self, blank, address):
        with pytest.raises(MemoryAccessError):
            memory.read(blank, address)
        with pytest.raises(MemoryAccessError):
            memory.write(blank, address, 1)

    def test_fetch_needs_two_bytes(self, blank):
        with pytest.raises(MemoryAccessError):
            memory.fetch_opcode(blank, 0xFFF)
