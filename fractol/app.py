"""Command-line entry points, input handling and the interactive window."""

from __future__ import annotations

import enum
import os
import sys
from typing import Sequence, Union

import numpy as np

from fractol.numbers import is_number, parse_float
from fractol.sets import FractalType
from fractol.view import CLASSIC_TITLE, MAX_ITER, TITLE, ClassicView, Direction, View

MOUSE_LEFT = 1
MOUSE_RIGHT = 3
MOUSE_SCROLL_UP = 4
MOUSE_SCROLL_DOWN = 5

ZOOM_IN = 1.1
ZOOM_OUT = 0.9
ITER_STEP = 10

AnyView = Union[View, ClassicView]


class Key(enum.IntEnum):
    """Keys the viewer reacts to, valued by their X11 key symbols."""

    SPACE = 32
    MINUS = 45
    PLUS = 52
    UNDERSCORE = 95
    C = 99
    F = 102
    R = 114
    ESCAPE = 65307
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364


_ARROWS = (Key.LEFT, Key.UP, Key.RIGHT, Key.DOWN)


class UsageError(Exception):
    """The command line does not name a fractal that can be drawn."""


def usage(extended: bool = False) -> str:
    """The usage text of the basic or the extended viewer."""
    program = "fractol_bonus" if extended else "fractol"
    lines = [
        f"Usage: {program} [fractal_type] [params]",
        "",
        "Fractal types:",
        "  mandelbrot   - Mandelbrot set",
        "  julia        - Julia set (optional params: real imag)",
    ]
    if extended:
        lines.append("  burning_ship - Burning Ship fractal")
    lines += [
        "",
        "Examples:",
        f"  {program} mandelbrot",
        f"  {program} julia",
        f"  {program} julia -0.7 0.27015",
    ]
    if extended:
        lines.append(f"  {program} burning_ship")
    return "\n".join(lines) + "\n"


def controls() -> str:
    """The help text describing the extended viewer's controls."""
    return (
        "\n==== Controls ====\n"
        "Mouse wheel      - Zoom in/out\n"
        "Mouse drag       - Pan view\n"
        "Right click      - Set Julia parameter (Julia only)\n"
        "C key            - Change color scheme\n"
        "F key            - Change fractal type\n"
        "R key            - Reset view\n"
        "SPACE key        - Reset iterations\n"
        "+/- keys         - Increase/decrease iterations\n"
        "Arrow keys       - Pan view\n"
        "ESC key          - Exit\n"
        "=================\n\n"
    )


def parse_args(argv: Sequence[str], extended: bool = False) -> AnyView:
    """Build the view named by the arguments (the program name excluded).

    Raises UsageError when no known fractal is named or when the Julia
    parameters are not numbers.
    """
    args = list(argv)
    if not args:
        raise UsageError()
    name, params = args[0], args[1:]
    factory = View if extended else ClassicView

    if name == "mandelbrot":
        if params:
            print("Note: Mandelbrot set doesn't use extra parameters")
        return factory(FractalType.MANDELBROT)
    if name == "julia":
        julia_c = None
        if len(params) >= 2:
            real, imag = params[:2]
            if not (is_number(real) and is_number(imag)):
                raise UsageError("Error: Invalid parameters for Julia set")
            julia_c = complex(parse_float(real), parse_float(imag))
        return factory(FractalType.JULIA, julia_c)
    if extended and name == "burning_ship":
        return View(FractalType.BURNING_SHIP)
    raise UsageError()


def handle_key(view: AnyView, key: int) -> bool:
    """Apply a key press; return True if the image must be redrawn.

    The escape key ends the program by raising SystemExit.
    """
    extended = isinstance(view, View)
    if extended:
        print(f"Key pressed: {int(key)}")
    if key == Key.ESCAPE:
        raise SystemExit(0)
    if key == Key.F:
        view.cycle_type()
        return True
    if key == Key.R:
        view.reset()
        return True
    if not extended:
        return False
    if key == Key.C:
        view.cycle_colors()
        return True
    if key in _ARROWS:
        view.nudge(Direction(int(key)))
        return True
    if key == Key.SPACE:
        view.max_iter = MAX_ITER
        return True
    if key == Key.PLUS:
        view.max_iter += ITER_STEP
        return True
    if key in (Key.MINUS, Key.UNDERSCORE) and view.max_iter > ITER_STEP:
        view.max_iter -= ITER_STEP
        return True
    return False


def handle_mouse(view: AnyView, button: int, x: int, y: int) -> bool:
    """Apply a mouse button press at (x, y); return True if a redraw is needed."""
    if button == MOUSE_SCROLL_UP:
        view.zoom_at(x, y, ZOOM_IN)
        return True
    if button == MOUSE_SCROLL_DOWN:
        view.zoom_at(x, y, ZOOM_OUT)
        return True
    if not isinstance(view, View):
        return False
    if button == MOUSE_LEFT:
        view.dragging = True
        view.drag_start = (x, y)
        return False
    if button == MOUSE_RIGHT and view.kind is FractalType.JULIA:
        view.julia_c = view.complex_at(x, y)
        return True
    return False


def handle_motion(view: AnyView, x: int, y: int) -> bool:
    """Pan the view while dragging; return True if it moved."""
    if not isinstance(view, View) or not view.dragging:
        return False
    start_x, start_y = view.drag_start
    dx = start_x - x
    dy = start_y - y
    if dx == 0 and dy == 0:
        return False
    view.pan(dx, -dy)
    view.drag_start = (x, y)
    return True


def handle_release(view: AnyView, button: int) -> None:
    """End a drag when the left button is released."""
    if isinstance(view, View) and button == MOUSE_LEFT:
        view.dragging = False


def _to_rgb(colors: np.ndarray) -> np.ndarray:
    """Turn a (height, width) array of 0xRRGGBB values into a (width, height, 3) array."""
    colors = np.asarray(colors, dtype=np.int64)
    rgb = np.stack(((colors >> 16) & 0xFF, (colors >> 8) & 0xFF, colors & 0xFF), axis=-1)
    return rgb.astype(np.uint8).swapaxes(0, 1)


def run(view: AnyView) -> None:
    """Open a window on *view* and process input until it is closed."""
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    special_keys = {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_UP: Key.UP,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_PLUS: Key.PLUS,
        pygame.K_KP_PLUS: Key.PLUS,
        pygame.K_KP_MINUS: Key.MINUS,
    }
    title = TITLE if isinstance(view, View) else CLASSIC_TITLE

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((view.width, view.height))
        except pygame.error:
            print("Error: Could not create window")
            raise SystemExit(1) from None
        pygame.display.set_caption(title)

        dirty = True
        while True:
            if dirty:
                pygame.surfarray.blit_array(screen, _to_rgb(view.render()))
                pygame.display.flip()
                dirty = False
            for event in [pygame.event.wait(), *pygame.event.get()]:
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.KEYDOWN:
                    key = special_keys.get(event.key, event.key)
                    dirty |= handle_key(view, key)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    dirty |= handle_mouse(view, event.button, *event.pos)
                elif event.type == pygame.MOUSEBUTTONUP:
                    handle_release(view, event.button)
                elif event.type == pygame.MOUSEMOTION:
                    dirty |= handle_motion(view, *event.pos)
    finally:
        pygame.quit()


def _start(argv: Sequence[str] | None, extended: bool) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        view = parse_args(args, extended)
    except UsageError as error:
        if str(error):
            print(error)
        print(usage(extended), end="")
        return 1
    if extended:
        print(controls(), end="")
    run(view)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the basic viewer: Mandelbrot and Julia sets."""
    return _start(argv, extended=False)


def bonus_main(argv: Sequence[str] | None = None) -> int:
    """Run the extended viewer: three fractals, colour schemes and panning."""
    return _start(argv, extended=True)