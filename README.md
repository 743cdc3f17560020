# fractol

An interactive fractal explorer. It draws the Mandelbrot set, the Tricorn
or a Julia set in a 500 × 400 window. You can pan and zoom, and you can
switch between three colour palettes.

## Installation

```
pip install .
```

The package needs no third-party libraries. The window uses `tkinter`,
which comes with most Python installations.

## Running

```
fractol Mandelbrot
fractol Tricorn
fractol Julia
fractol Julia 0.32 0.42
```

`Julia` takes the real and imaginary parts of the constant *c*. Without
them it uses `-0.7 0.27015`. Each part must be a plain decimal number: an
optional sign, digits and at most one dot. If either part is malformed,
the command prints `Error: Julia parameters must be valid floats` to
standard error. Any other unusable arguments print `Error: Invalid
arguments` and the usage text. Running with no arguments prints only the
usage text. In all of these cases the command exits with status 1.

## Controls

| Input            | Action                                                        |
|------------------|---------------------------------------------------------------|
| Arrow keys       | Pan by 0.1 divided by the current zoom factor                 |
| `C`              | Switch to the next of the three colour palettes               |
| Scroll up        | Zoom in ×1.1 towards the cursor and add 10 iterations         |
| Scroll down      | Zoom out ÷1.1 from the cursor and remove 10 iterations while the limit is above 50 |
| `Esc` / close    | Quit                                                          |

The view starts at 100 iterations with a zoom factor of 1.0, centred on
(-0.5, 0). Points that never escape are drawn black.

## Using it as a library

You can use the escape-time and colouring routines on their own:

```python
from fractol.fractals import FractalType, get_colour, mandelbrot_iterations, julia_iterations
from fractol.numbers import parse_float, is_valid_float

is_valid_float("1.2.3")   # False
parse_float("  -1.5")     # -1.5
get_colour(100, 100, 0)   # 0: a count that reaches the limit is black
```

`fractol.view.View` is a dataclass that holds the state of a view: fractal
type, Julia constant, zoom factor (`scale`), offsets, iteration limit and
colour mode. Its methods are:

- `to_complex` maps a pixel to a point of the complex plane.
- `handle_key`, `handle_mouse` and `zoom` apply input. They use the
  `fractol.view.Key` codes. `handle_key` returns `False` for `Esc`.
- `colour_at` returns the 0xRRGGBB colour of one pixel.
- `render` returns the whole image as rows of colours.

`fractol.cli.parse_args` builds a `View` from command-line arguments. It
raises `fractol.cli.UsageError` when it cannot. `fractol.cli.run_window`
shows a view in a Tk window.

The package also includes some small helpers:

- `fractol.chars`: ASCII classification and case conversion.
- `fractol.textutils`: C-style string routines such as `strlcpy`,
  `split` and `strtrim`.
- `fractol.memory`: byte-buffer routines such as `memmove` and
  `calloc`.
- `fractol.linkedlist`: a singly linked `LinkedList`.
- `fractol.output`: a minimal `printf` and `format_printf`.
- `fractol.lines`: `LineReader` and `get_next_line`, which read input
  line by line.

## Limitations

The explorer only draws to the screen. It cannot save images, and the
window size is fixed.

## Tests

```
pip install ".[test]"
pytest
```