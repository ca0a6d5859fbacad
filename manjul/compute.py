"""
Escape-time computation for the quadratic Mandelbrot and Julia maps.

The performance-critical loops are JIT-compiled with Numba. These functions
handle:
- One step of the recurrence z -> z² + c
- The escape-time count for a single starting point
- Painting a whole image from a viewport and a palette

Image layout: buffers have shape (width, height, 3) and are indexed
image[x, y], where x is the pixel along the plane's x axis.
"""

import logging
import time

import numpy as np
from numba import jit


logger = logging.getLogger(__name__)

JULIA_C = (-0.5, 0.6)      # Fixed constant for Julia mode
ESCAPE_RADIUS_SQ = 4.0     # |z|² threshold (radius 2)


@jit(nopython=True, cache=True)
def iterate_quadratic(zx, zy, cx, cy):
    """One step of z² + c, returning the new (real, imag) pair."""
    return zx * zx - zy * zy + cx, 2.0 * zx * zy + cy


@jit(nopython=True, cache=True)
def iterate_until_escape(zx, zy, cx, cy, max_depth):
    """
    Iterate z² + c until |z|² reaches the threshold or max_depth steps.

    Returns:
        (count, magnitude_sq): completed iterations and the final |z|²
    """
    count = 0
    mag_sq = zx * zx + zy * zy
    while mag_sq < ESCAPE_RADIUS_SQ and count < max_depth:
        zx, zy = iterate_quadratic(zx, zy, cx, cy)
        mag_sq = zx * zx + zy * zy
        count += 1
    return count, mag_sq


@jit(nopython=True, cache=True)
def escape_time(zx, zy, cx, cy, max_depth):
    """
    Count iterations of z² + c until |z|² reaches the threshold.

    Args:
        zx, zy: Starting value of z
        cx, cy: The constant c
        max_depth: Maximum number of iterations

    Returns:
        Number of completed iterations. A result equal to max_depth means
        the point did not escape.
    """
    return iterate_until_escape(zx, zy, cx, cy, max_depth)[0]


@jit(nopython=True, cache=True)
def pixel_to_plane(px, lo, hi, size):
    """Map a pixel index on one axis to its plane coordinate."""
    return px * (hi - lo) / size + lo


@jit(nopython=True, cache=True)
def render_fractal(x_min, x_max, y_min, y_max, mandel, cr, ci, palette, image):
    """
    Paint every pixel of image with its escape-time color.

    Args:
        x_min, x_max, y_min, y_max: Plane bounds
        mandel: True for Mandelbrot (z starts at 0, c is the pixel),
            False for Julia (z starts at the pixel, c is fixed)
        cr, ci: Julia constant (ignored in Mandelbrot mode)
        palette: Nx3 uint8 lookup table; N is also the depth limit
        image: Output RGB array of shape (width, height, 3), modified in place
    """
    width = image.shape[0]
    height = image.shape[1]
    max_depth = palette.shape[0]

    for y in range(height):
        py = pixel_to_plane(y, y_min, y_max, height)
        for x in range(width):
            px = pixel_to_plane(x, x_min, x_max, width)

            if mandel:
                count, mag_sq = iterate_until_escape(0.0, 0.0, px, py, max_depth)
            else:
                count, mag_sq = iterate_until_escape(px, py, cr, ci, max_depth)

            if count < max_depth and mag_sq > ESCAPE_RADIUS_SQ:
                # Escaped past the threshold: count is a valid palette index
                image[x, y, 0] = palette[count, 0]
                image[x, y, 1] = palette[count, 1]
                image[x, y, 2] = palette[count, 2]
            else:
                # Depth limit reached, or stopped exactly on the threshold
                image[x, y, 0] = 0
                image[x, y, 1] = 0
                image[x, y, 2] = 0


def new_image(width, height):
    """Allocate a black RGB buffer of shape (width, height, 3)."""
    return np.zeros((width, height, 3), dtype=np.uint8)


def render(viewport, palette, image, julia_c=JULIA_C):
    """
    Render a viewport into image.

    The depth limit is the palette length, so escaping pixels always index
    inside the palette.

    Args:
        viewport: Viewport to draw
        palette: Palette from make_palette()
        image: Buffer from new_image(), fully overwritten

    Returns:
        The same image object
    """
    assert palette.ndim == 2 and palette.shape[1] == 3 and palette.shape[0] > 0, \
        "palette must be a non-empty Nx3 array"
    assert image.ndim == 3 and image.shape[2] == 3, \
        "image must be a (width, height, 3) array"

    start = time.perf_counter()
    render_fractal(
        viewport.x_min, viewport.x_max, viewport.y_min, viewport.y_max,
        viewport.mandel, julia_c[0], julia_c[1],
        palette, image
    )
    logger.debug(
        "Rendered %s %dx%d in %.3fs",
        viewport.mode_name, image.shape[0], image.shape[1],
        time.perf_counter() - start
    )
    return image


def warmup_jit(palette):
    """
    Warm up JIT compilation with a tiny buffer.

    Call this once at startup to avoid a compile pause on the first frame.
    """
    dummy = new_image(4, 4)
    render_fractal(-2.0, 2.0, -2.0, 2.0, True, JULIA_C[0], JULIA_C[1], palette, dummy)
    render_fractal(-2.0, 2.0, -2.0, 2.0, False, JULIA_C[0], JULIA_C[1], palette, dummy)
