"""The viewport onto the complex plane and how input events change it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .fractals import FractalType, get_colour, julia_iterations, mandelbrot_iterations

WIDTH = 500
HEIGHT = 400
MAX_ITER = 100

PAN_STEP = 0.1
ZOOM_FACTOR = 1.1
ITER_STEP = 10
MIN_ITER_FOR_DECREASE = 50


class Key(IntEnum):
    """Key symbols and mouse buttons the viewer reacts to."""

    ESC = 65307
    C = 99
    LEFT = 65361
    RIGHT = 65363
    DOWN = 65364
    UP = 65362
    SCROLL_DOWN = 5
    SCROLL_UP = 4


@dataclass
class View:
    """State of a fractal view: what is drawn, where, and how."""

    fractal_type: FractalType = FractalType.MANDELBROT
    julia_c: complex = 0j
    max_iter: int = MAX_ITER
    color_mode: int = 0
    scale: float = 1.0
    offset_x: float = -0.5
    offset_y: float = 0.0
    width: int = WIDTH
    height: int = HEIGHT

    def _plane(self, x: float, y: float) -> complex:
        re = (x - self.width / 2.0) / (0.5 * self.scale * self.width)
        im = (y - self.height / 2.0) / (0.5 * self.scale * self.height)
        return complex(re, im)

    def to_complex(self, x: int, y: int) -> complex:
        """Map a pixel position to its point on the complex plane."""
        return self._plane(x, y) + complex(self.offset_x, self.offset_y)

    def zoom(self, x: int, y: int, direction: int) -> None:
        """Zoom in (direction > 0) or out (< 0), keeping the point under (x, y) fixed."""
        anchor = self.to_complex(x, y)
        if direction > 0:
            self.scale *= ZOOM_FACTOR
            self.max_iter += ITER_STEP
        elif direction < 0:
            self.scale /= ZOOM_FACTOR
            if self.max_iter > MIN_ITER_FOR_DECREASE:
                self.max_iter -= ITER_STEP
        shift = anchor - self._plane(x, y)
        self.offset_x = shift.real
        self.offset_y = shift.imag

    def handle_key(self, keycode: int) -> bool:
        """Apply a key press. Return False when the viewer should close."""
        step = PAN_STEP / self.scale
        if keycode == Key.ESC:
            return False
        if keycode == Key.LEFT:
            self.offset_x -= step
        elif keycode == Key.RIGHT:
            self.offset_x += step
        elif keycode == Key.UP:
            self.offset_y -= step
        elif keycode == Key.DOWN:
            self.offset_y += step
        elif keycode == Key.C:
            self.color_mode += 1
        return True

    def handle_mouse(self, button: int, x: int, y: int) -> bool:
        """Apply a mouse button event. Return True if the view changed."""
        if button == Key.SCROLL_UP:
            self.zoom(x, y, 1)
            return True
        if button == Key.SCROLL_DOWN:
            self.zoom(x, y, -1)
            return True
        return False

    def colour_at(self, x: int, y: int) -> int:
        """Return the 0xRRGGBB colour of the pixel at (x, y)."""
        point = self.to_complex(x, y)
        if self.fractal_type == FractalType.JULIA:
            count = julia_iterations(point, self.julia_c, self.max_iter)
        else:
            count = mandelbrot_iterations(point, self.max_iter, self.fractal_type)
        return get_colour(count, self.max_iter, self.color_mode)

    def render(self) -> list[list[int]]:
        """Return the whole image as rows of 0xRRGGBB colours, top row first."""
        return [
            [self.colour_at(x, y) for x in range(self.width)]
            for y in range(self.height)
        ]