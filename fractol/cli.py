"""Command-line entry point: argument parsing and the interactive window."""

from __future__ import annotations

import sys
from typing import Sequence

from .fractals import FractalType
from .numbers import is_valid_float, parse_float
from .view import Key, View

USAGE = (
    "Usage:\n"
    "./fractol <Mandelbrot/Tricorn>\n"
    "./fractol Julia <real> <imag>\n"
    "Example: ./fractol Julia 0.32 0.42\n"
)

DEFAULT_JULIA_C = complex(-0.7, 0.27015)


class UsageError(Exception):
    """Raised for command-line arguments that cannot be used."""

    def __init__(self, message: str = "", show_usage: bool = True) -> None:
        super().__init__(message)
        self.message = message
        self.show_usage = show_usage


def parse_args(argv: Sequence[str]) -> View:
    """Build the initial view from the arguments after the program name."""
    args = list(argv)
    if not args:
        raise UsageError()
    name, rest = args[0], args[1:]
    if name == "Mandelbrot" and not rest:
        return View(fractal_type=FractalType.MANDELBROT)
    if name == "Tricorn" and not rest:
        return View(fractal_type=FractalType.TRICORN)
    if name == "Julia" and len(rest) in (0, 2):
        if not rest:
            return View(fractal_type=FractalType.JULIA, julia_c=DEFAULT_JULIA_C)
        real, imag = rest
        if not (is_valid_float(real) and is_valid_float(imag)):
            raise UsageError(
                "Error: Julia parameters must be valid floats", show_usage=False
            )
        return View(
            fractal_type=FractalType.JULIA,
            julia_c=complex(parse_float(real), parse_float(imag)),
        )
    raise UsageError("Error: Invalid arguments")


def _photo_data(image: list[list[int]]) -> str:
    return " ".join(
        "{" + " ".join(f"#{colour:06x}" for colour in row) + "}" for row in image
    )


def run_window(view: View) -> None:
    """Show ``view`` in a window and react to keys and the mouse wheel until closed."""
    import tkinter as tk

    root = tk.Tk()
    root.title("Fract-ol")
    root.resizable(False, False)
    canvas = tk.Canvas(
        root, width=view.width, height=view.height, highlightthickness=0
    )
    canvas.pack()
    photo = tk.PhotoImage(width=view.width, height=view.height)
    canvas.create_image(0, 0, image=photo, anchor="nw")

    def redraw() -> None:
        photo.put(_photo_data(view.render()), to=(0, 0))

    def on_key(event: tk.Event) -> None:
        if not view.handle_key(event.keysym_num):
            root.destroy()
            return
        redraw()

    def on_button(button: int, event: tk.Event) -> None:
        if view.handle_mouse(button, event.x, event.y):
            redraw()

    def on_wheel(event: tk.Event) -> None:
        button = Key.SCROLL_UP if event.delta > 0 else Key.SCROLL_DOWN
        on_button(button, event)

    root.bind("<Key>", on_key)
    root.bind("<Button-4>", lambda event: on_button(Key.SCROLL_UP, event))
    root.bind("<Button-5>", lambda event: on_button(Key.SCROLL_DOWN, event))
    root.bind("<MouseWheel>", on_wheel)
    root.protocol("WM_DELETE_WINDOW", root.destroy)
    redraw()
    root.mainloop()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, open the viewer and return an exit status."""
    args = sys.argv[1:] if argv is None else argv
    try:
        view = parse_args(args)
    except UsageError as error:
        if error.message:
            print(error.message, file=sys.stderr)
        if error.show_usage:
            sys.stdout.write(USAGE)
        return 1
    run_window(view)
    return 0


if __name__ == "__main__":
    sys.exit(main())