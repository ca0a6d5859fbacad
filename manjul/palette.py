"""
Palette generation for the escape-time renderer.

The palette is a lookup table indexed by escape iteration count. Its length
(levels³) is also the renderer's depth limit, so every count that can be
looked up is covered by an entry.

Each entry combines one red, one green and one blue level. A level `k` maps
to the channel value 256 // (levels - k), which gives a dark, steep ramp
rather than a linear gradient:

    levels = 6  ->  42, 51, 64, 85, 128, 255
"""

import numpy as np


COLOR_LEVELS = 6  # Shades per channel


def palette_size(levels=COLOR_LEVELS):
    """Number of palette entries (and depth limit) for a level count."""
    return levels ** 3


def channel_value(level, levels=COLOR_LEVELS):
    """Channel brightness for one level, clamped to the 8-bit range."""
    return min(255, 256 // (levels - level))


def make_palette(levels=COLOR_LEVELS):
    """
    Build the color lookup table.

    Args:
        levels: Number of shades per channel (default 6)

    Returns:
        Read-only numpy array of shape (levels³, 3) with uint8 RGB values.
        Entry rc + gc*levels + bc*levels² holds the red, green and blue
        shades rc, gc and bc.

    Raises:
        ValueError if levels < 1
    """
    if levels < 1:
        raise ValueError(f"levels must be positive, got {levels}")

    colors = np.zeros((palette_size(levels), 3), dtype=np.uint8)
    for rc in range(levels):
        for gc in range(levels):
            for bc in range(levels):
                index = rc + gc * levels + bc * levels * levels
                colors[index, 0] = channel_value(rc, levels)  # Red
                colors[index, 1] = channel_value(gc, levels)  # Green
                colors[index, 2] = channel_value(bc, levels)  # Blue

    colors.flags.writeable = False
    return colors
