"""
Keyboard input handling.

Raw key codes are translated to a small set of commands in one place
(translate_key), and each command is applied to a Viewport by a pure
function (apply_command). Nothing here touches the display, so the
navigation logic can be exercised without a window.

Controls:
    - 8 / Up arrow / keypad 8: Move up
    - 2 / Down arrow / keypad 2: Move down
    - 4 / Left arrow / keypad 4: Move left
    - 6 / Right arrow / keypad 6: Move right
    - + or =: Zoom in
    - -: Zoom out
    - M: Toggle Mandelbrot/Julia
    - O: Original view
    - ESC: Quit
"""

import enum
import logging
from dataclasses import replace

import pygame

from .viewport import DEFAULT_BOUNDS


logger = logging.getLogger(__name__)

STEP_DIVISOR = 10  # Pan/zoom step is span / 10
MIN_SPAN = 1e-12   # Zoom-in stops before a span gets this small


class Command(enum.Enum):
    PAN_UP = "pan_up"
    PAN_DOWN = "pan_down"
    PAN_LEFT = "pan_left"
    PAN_RIGHT = "pan_right"
    ZOOM_IN = "zoom_in"
    ZOOM_OUT = "zoom_out"
    TOGGLE_MODE = "toggle_mode"
    RESET = "reset"
    EXIT = "exit"
    NOOP = "noop"


# Accepted raw codes per command. Besides the pygame codes, the 8-bit codes
# reported by OpenCV highgui for arrows (81-84), keypad digits (178-184) and
# keypad +/- (171/173) are kept, as are the shifted letters.
KEY_ALIASES = {
    Command.PAN_UP: (pygame.K_UP, pygame.K_8, pygame.K_KP8, 82, 184),
    Command.PAN_DOWN: (pygame.K_DOWN, pygame.K_2, pygame.K_KP2, 84, 178),
    Command.PAN_RIGHT: (pygame.K_RIGHT, pygame.K_6, pygame.K_KP6, 83, 182),
    Command.PAN_LEFT: (pygame.K_LEFT, pygame.K_4, pygame.K_KP4, 81, 180),
    Command.ZOOM_IN: (pygame.K_EQUALS, pygame.K_PLUS, pygame.K_KP_PLUS, 171),
    Command.ZOOM_OUT: (pygame.K_MINUS, pygame.K_KP_MINUS, 173),
    Command.TOGGLE_MODE: (pygame.K_m, ord('M')),
    Command.RESET: (pygame.K_o, ord('O')),
    Command.EXIT: (pygame.K_ESCAPE,),
}

_KEY_TO_COMMAND = {
    code: command
    for command, codes in KEY_ALIASES.items()
    for code in codes
}


BANNER = """\
-----------------------------------------
MANDELBROT & JULIA

Move up   = 8 or ^ , Move down  = 2 or V
Move left = 4 or < , Move right = 6 or >
Zoom in   = +      , Zoom out   = -
Toggle Mandelbrot/Julia         = m
Original values                 = o
Quit                            = ESC
-----------------------------------------"""


def print_banner():
    """Print the key help shown at startup."""
    print(BANNER)


def translate_key(code):
    """Map a raw key code to a Command; unknown codes give NOOP."""
    return _KEY_TO_COMMAND.get(code, Command.NOOP)


def apply_command(viewport, command, default_bounds=DEFAULT_BOUNDS, min_span=MIN_SPAN):
    """
    Apply one command to a viewport.

    Steps are a tenth of each axis span, measured before the command is
    applied, so both bounds of an axis move by the same amount.

    Args:
        viewport: Current Viewport
        command: Command to apply
        default_bounds: Bounds restored by RESET
        min_span: Smallest span ZOOM_IN may produce on either axis

    Returns:
        A new Viewport (or the same one for NOOP and rejected zooms)
    """
    x_min, x_max, y_min, y_max = viewport.bounds
    step_x = viewport.span_x / STEP_DIVISOR
    step_y = viewport.span_y / STEP_DIVISOR

    if command is Command.EXIT:
        return replace(viewport, exit=True)

    elif command is Command.PAN_UP:
        return viewport.with_bounds(x_min + step_x, x_max + step_x, y_min, y_max)

    elif command is Command.PAN_DOWN:
        return viewport.with_bounds(x_min - step_x, x_max - step_x, y_min, y_max)

    elif command is Command.PAN_RIGHT:
        return viewport.with_bounds(x_min, x_max, y_min - step_y, y_max - step_y)

    elif command is Command.PAN_LEFT:
        return viewport.with_bounds(x_min, x_max, y_min + step_y, y_max + step_y)

    elif command is Command.ZOOM_IN:
        if (viewport.span_x - 2 * step_x < min_span or
                viewport.span_y - 2 * step_y < min_span):
            logger.debug("Zoom in ignored: span floor %g reached", min_span)
            return viewport
        return viewport.with_bounds(
            x_min + step_x, x_max - step_x,
            y_min + step_y, y_max - step_y
        )

    elif command is Command.ZOOM_OUT:
        return viewport.with_bounds(
            x_min - step_x, x_max + step_x,
            y_min - step_y, y_max + step_y
        )

    elif command is Command.TOGGLE_MODE:
        return replace(viewport, mandel=not viewport.mandel)

    elif command is Command.RESET:
        return viewport.with_bounds(*(float(b) for b in default_bounds))

    return viewport


def handle_key(viewport, code):
    """Translate a raw key code and apply it to the viewport."""
    command = translate_key(code)
    logger.debug("Key %d -> %s", code, command.name)
    return apply_command(viewport, command)
