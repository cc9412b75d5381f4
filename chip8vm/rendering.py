"""CHIP-8 rendering utilities for presentation."""

from typing import Tuple

import numpy as np

from chip8vm.state import DisplayState


def create_color_scheme(
    scheme: str = "white",
) -> Tuple[Tuple[int, int, int], Tuple[int, int, int]]:
    """Get predefined color schemes for CHIP-8 rendering.

    Args:
        scheme: Color scheme name ("white", "classic", "amber", "blue", "retro")

    Returns:
        Tuple of (on_color, off_color) as RGB tuples
    """
    schemes = {
        "white": ((255, 255, 255), (0, 0, 0)),  # White on black
        "classic": ((0, 255, 0), (0, 0, 0)),  # Green on black
        "amber": ((255, 176, 0), (0, 0, 0)),  # Amber on black
        "blue": ((0, 255, 255), (0, 0, 64)),  # Cyan on dark blue
        "retro": ((255, 255, 0), (64, 0, 64)),  # Yellow on purple
    }

    if scheme not in schemes:
        raise ValueError(
            f"Unknown color scheme '{scheme}'. Available: {list(schemes.keys())}"
        )

    return schemes[scheme]


def create_rgba_scheme(
    scheme: str = "white",
) -> Tuple[Tuple[int, int, int, int], Tuple[int, int, int, int]]:
    """Opaque RGBA variant of a named color scheme, for render()."""
    on_color, off_color = create_color_scheme(scheme)
    return (*on_color, 255), (*off_color, 255)


def display_to_text(display: DisplayState, on: str = "#", off: str = ".") -> str:
    """Render the framebuffer as one text line per display row."""
    pixels = np.array(display.pixels, dtype=np.bool_).T
    return "\n".join("".join(on if pixel else off for pixel in row) for row in pixels)
