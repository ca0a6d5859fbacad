"""
Viewport state: the region of the complex plane being rendered.

A Viewport is immutable. Every key press produces a new one (see keys.py),
so each frame renders from its own snapshot.
"""

from dataclasses import dataclass, replace


# Default view: symmetric square around the origin
DEFAULT_BOUNDS = (-3.0, 3.0, -3.0, 3.0)  # x_min, x_max, y_min, y_max


@dataclass(frozen=True)
class Viewport:
    """Plane bounds plus the Mandelbrot/Julia switch and the exit request."""
    x_min: float = DEFAULT_BOUNDS[0]
    x_max: float = DEFAULT_BOUNDS[1]
    y_min: float = DEFAULT_BOUNDS[2]
    y_max: float = DEFAULT_BOUNDS[3]
    mandel: bool = True
    exit: bool = False

    @classmethod
    def default(cls, bounds=DEFAULT_BOUNDS):
        x_min, x_max, y_min, y_max = bounds
        return cls(float(x_min), float(x_max), float(y_min), float(y_max))

    @property
    def bounds(self):
        return (self.x_min, self.x_max, self.y_min, self.y_max)

    @property
    def span_x(self):
        return abs(self.x_max - self.x_min)

    @property
    def span_y(self):
        return abs(self.y_max - self.y_min)

    @property
    def mode_name(self):
        return "MANDELBROT" if self.mandel else "JULIA"

    def with_bounds(self, x_min, x_max, y_min, y_max):
        """Copy with new bounds; mode and exit flag are kept."""
        return replace(self, x_min=x_min, x_max=x_max, y_min=y_min, y_max=y_max)


def format_title(viewport):
    """
    Window title describing the current view.

    Example:
        MANDELBROT X: -3.00 min 3.00 max , Y: -3.00 min 3.00 max
    """
    return "{:<10s} X: {:.2f} min {:.2f} max , Y: {:.2f} min {:.2f} max".format(
        viewport.mode_name,
        viewport.x_min, viewport.x_max,
        viewport.y_min, viewport.y_max,
    )
