"""Tests for rendering helpers and console logging."""

import pytest
from chip8vm import display
from chip8vm.logging import ConsoleLogger
from chip8vm.rendering import create_color_scheme, create_rgba_scheme, display_to_text


def test_color_scheme_lookup():
    assert create_color_scheme("white") == ((255, 255, 255), (0, 0, 0))
    with pytest.raises(ValueError):
        create_color_scheme("plaid")


def test_rgba_scheme_is_opaque():
    on_color, off_color = create_rgba_scheme("amber")
    assert on_color == (255, 176, 0, 255)
    assert off_color == (0, 0, 0, 255)


def test_display_to_text(fresh_state):
    framebuffer = display.write(fresh_state.display, 2, 1, 1)
    lines = display_to_text(framebuffer).splitlines()

    assert len(lines) == 32
    assert all(len(line) == 64 for line in lines)
    assert lines[1][2] == "#"
    assert lines[1].count("#") == 1
    assert lines[0] == "." * 64


def test_logger_filters_levels(capsys):
    logger = ConsoleLogger(log_level="WARNING", use_colors=False, show_timestamps=False)
    logger.info("hidden")
    logger.error("shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "[   ERROR][chip8vm] shown" in out
