"""
Mandelbrot & Julia Explorer Package

A keyboard-driven escape-time fractal viewer using Pygame for display
and Numba for JIT-compiled computation.

Quick Start:
    from manjul import run
    run()

Or from command line:
    python -m manjul

Package Structure:
    - palette.py: Fixed color lookup table (levels³ entries)
    - viewport.py: Immutable view bounds and window title
    - compute.py: JIT-compiled escape-time rendering
    - keys.py: Key code translation and viewport commands
    - display.py: Pygame window and blocking key source
    - app.py: Main application and loop

Controls:
    - 8/2/4/6 or arrows: Pan
    - + / -: Zoom in/out
    - M: Toggle Mandelbrot/Julia
    - O: Reset to default view
    - ESC: Quit
"""

from .app import run, FractalApp
from .compute import render, new_image
from .keys import Command, apply_command, handle_key, translate_key
from .palette import make_palette
from .viewport import Viewport, format_title

__version__ = "1.0.0"
__all__ = [
    "run",
    "FractalApp",
    "render",
    "new_image",
    "Command",
    "apply_command",
    "handle_key",
    "translate_key",
    "make_palette",
    "Viewport",
    "format_title",
]
