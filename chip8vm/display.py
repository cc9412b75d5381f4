"""CHIP-8 monochrome framebuffer."""

from typing import Sequence

import jax.numpy as jnp
import numpy as np

from chip8vm.constants import SCREEN_WIDTH, SCREEN_HEIGHT, ON_RGBA, OFF_RGBA
from chip8vm.errors import PixelAccessError
from chip8vm.state import DisplayState


def _check_pixel(x: int, y: int) -> None:
    if not (0 <= x < SCREEN_WIDTH and 0 <= y < SCREEN_HEIGHT):
        raise PixelAccessError(f"Pixel ({x}, {y}) outside {SCREEN_WIDTH}x{SCREEN_HEIGHT} display")


def clear(display: DisplayState) -> DisplayState:
    """Turn every pixel off."""
    return display.replace(pixels=jnp.zeros_like(display.pixels), dirty=True)


def read(display: DisplayState, x: int, y: int) -> int:
    _check_pixel(x, y)
    return int(display.pixels[x, y])


def write(display: DisplayState, x: int, y: int, value: int) -> DisplayState:
    _check_pixel(x, y)
    return display.replace(pixels=display.pixels.at[x, y].set(bool(value)), dirty=True)


def is_dirty(display: DisplayState) -> bool:
    return bool(display.dirty)


def xor_sprite(
    display: DisplayState, xs: jnp.ndarray, ys: jnp.ndarray, bits: jnp.ndarray
) -> tuple[DisplayState, jnp.ndarray]:
    """XOR sprite bits into the framebuffer at pre-wrapped coordinates.

    Returns the new display and a uint8 collision flag that is 1 when any
    lit pixel was turned off.
    """
    sprite = jnp.zeros_like(display.pixels).at[xs, ys].set(jnp.astype(bits, jnp.bool_))
    collision = jnp.astype(jnp.any(display.pixels & sprite), jnp.uint8)
    return display.replace(pixels=display.pixels ^ sprite, dirty=True), collision


def render(
    display: DisplayState,
    buffer: np.ndarray,
    on_color: Sequence[int] = ON_RGBA,
    off_color: Sequence[int] = OFF_RGBA,
) -> DisplayState:
    """Fill a caller-owned RGBA buffer and clear the dirty flag.

    Args:
        display: Framebuffer to present
        buffer: Writable uint8 array holding SCREEN_WIDTH * SCREEN_HEIGHT * 4
            values, row-major with 4 channels per pixel
        on_color: RGBA value for lit pixels
        off_color: RGBA value for unlit pixels

    Returns:
        The display with its dirty flag cleared
    """
    expected = SCREEN_WIDTH * SCREEN_HEIGHT * 4
    if buffer.size != expected:
        raise ValueError(f"Render buffer must hold {expected} values, got {buffer.size}")

    # (64 width, 32 height) -> (32 rows, 64 columns)
    pixels = np.array(display.pixels, dtype=np.bool_).T
    rgba = np.where(
        pixels[..., None],
        np.asarray(on_color, dtype=np.uint8),
        np.asarray(off_color, dtype=np.uint8),
    )
    np.copyto(buffer, rgba.reshape(buffer.shape))
    return display.replace(dirty=False)
