"""Interactive Mandelbrot, Julia and Tricorn fractal explorer, with small text, buffer and I/O helpers."""

__version__ = "1.0.0"