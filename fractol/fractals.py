"""Escape-time iteration for the supported fractals and the colour palettes."""

from __future__ import annotations

import math
from enum import IntEnum

ESCAPE_RADIUS_SQUARED = 4.0


class FractalType(IntEnum):
    """The fractals that can be drawn."""

    MANDELBROT = 0
    JULIA = 1
    TRICORN = 2


def mandelbrot_iterations(c: complex, max_iter: int, fractal_type: int) -> int:
    """Count iterations from z = 0 before |z| exceeds 2, up to ``max_iter``.

    The imaginary part is updated with a factor of -2 for
    ``FractalType.MANDELBROT`` and +2 for every other type.
    """
    constant = -2.0 if fractal_type == FractalType.MANDELBROT else 2.0
    z_re = 0.0
    z_im = 0.0
    steps = max(max_iter, 0)
    for i in range(steps):
        new_re = z_re * z_re - z_im * z_im + c.real
        z_im = constant * z_re * z_im + c.imag
        z_re = new_re
        if z_re * z_re + z_im * z_im > ESCAPE_RADIUS_SQUARED:
            return i
    return steps


def julia_iterations(z: complex, c: complex, max_iter: int) -> int:
    """Count iterations of z*z + c from ``z`` before |z| exceeds 2."""
    steps = max(max_iter, 0)
    for i in range(steps):
        z = z * z + c
        if z.real * z.real + z.imag * z.imag > ESCAPE_RADIUS_SQUARED:
            return i
    return steps


def _rgb(r: float, g: float, b: float) -> int:
    channels = (int(min(max(v, 0.0), 1.0) * 255.0) for v in (r, g, b))
    red, green, blue = channels
    return (red << 16) | (green << 8) | blue


def _palette(t: float, mode: int) -> tuple[float, float, float]:
    remainder = mode % 3
    if remainder == 0:
        return (
            9 * (1 - t) * t * t * t,
            15 * (1 - t) * (1 - t) * t * t,
            8.5 * (1 - t) * (1 - t) * (1 - t) * t,
        )
    # Negative modes follow truncated-division remainders: only a zero
    # remainder selects the polynomial palette, the rest the cosine one.
    if remainder == 1 and mode > 0:
        return (math.sin(4 * t), math.sin(4 * t + 6), math.sin(4 * t + 12))
    return (math.cos(4 * t), math.cos(4 * t + 2), math.cos(4 * t + 4))


def get_colour(i: int, max_iter: int, mode: int) -> int:
    """Return the 0xRRGGBB colour for an escape count.

    Points that never escaped, and out-of-range counts, are black.
    """
    if max_iter <= 0 or i >= max_iter or i < 0:
        return 0x000000
    t = i / max_iter
    r, g, b = _palette(t, mode)
    return _rgb(abs(r), abs(g), abs(b))