"""
Main application module for the Mandelbrot & Julia explorer.

Contains the FractalApp class which handles:
- Ownership of the palette, image buffer and current viewport
- The render -> show -> title -> key loop
- Shutdown when an exit key is pressed
"""

import logging

from .compute import JULIA_C, new_image, render, warmup_jit
from .display import PygameDisplay
from .keys import handle_key, print_banner
from .palette import COLOR_LEVELS, make_palette
from .viewport import DEFAULT_BOUNDS, Viewport, format_title


logger = logging.getLogger(__name__)


class FractalApp:
    """
    Main application class for the explorer.

    Each frame is rendered in full, then the loop blocks on the key source.
    The display is any object with show(image), set_title(text), wait_key(),
    open() and close(); PygameDisplay is used when none is given.
    """

    # Default configuration
    DEFAULT_WIDTH = 800
    DEFAULT_HEIGHT = 800

    def __init__(self, width=None, height=None, color_levels=None, display=None,
                 julia_c=None):
        """
        Initialize the application.

        Args:
            width: Pixels along the plane's x axis (default 800)
            height: Pixels along the plane's y axis (default 800)
            color_levels: Shades per channel; depth limit is its cube (default 6)
            display: Display/key source (default: a PygameDisplay)
            julia_c: Constant for Julia mode (default (-0.5, 0.6))
        """
        self.width = width or self.DEFAULT_WIDTH
        self.height = height or self.DEFAULT_HEIGHT
        self.julia_c = julia_c or JULIA_C

        self.palette = make_palette(color_levels or COLOR_LEVELS)
        self.image = new_image(self.width, self.height)
        self.viewport = Viewport.default(DEFAULT_BOUNDS)

        self.display = display or PygameDisplay(self.width, self.height)
        self.frames = 0

    def draw(self):
        """Render the current viewport and push it to the display."""
        render(self.viewport, self.palette, self.image, self.julia_c)
        self.display.show(self.image)
        self.display.set_title(format_title(self.viewport))
        self.frames += 1

    def step(self, key):
        """Apply one key code; returns the new viewport."""
        self.viewport = handle_key(self.viewport, key)
        return self.viewport

    def run(self):
        """Run the application main loop."""
        print_banner()
        self.display.open()
        try:
            warmup_jit(self.palette)
            while True:
                self.draw()
                self.step(self.display.wait_key())
                if self.viewport.exit:
                    break
        finally:
            self.display.close()
        logger.debug("Exited after %d frames", self.frames)


def run(width=None, height=None, color_levels=None, julia_c=None):
    """
    Run the explorer.

    Args:
        width: Image width (default 800)
        height: Image height (default 800)
        color_levels: Shades per channel (default 6)
        julia_c: Constant for Julia mode (default (-0.5, 0.6))
    """
    app = FractalApp(width, height, color_levels, julia_c=julia_c)
    try:
        app.run()
    except KeyboardInterrupt:
        pass
