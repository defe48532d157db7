"""The viewport onto the complex plane and the images rendered from it."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

import numpy as np

from fractol.palettes import ColorScheme, colorize, colorize_classic
from fractol.sets import FractalType, escape_counts

MAX_ITER = 100
DEFAULT_JULIA_C = complex(-0.7, 0.27015)
PLANE_SPAN = 4.0
PAN_SPEED = 0.003
NUDGE_STEP = 0.1

WIDTH = 1920
HEIGHT = 1080
TITLE = "fractol bonus"

CLASSIC_WIDTH = 1600
CLASSIC_HEIGHT = 1400
CLASSIC_TITLE = "fractol"


class Direction(enum.IntEnum):
    """Arrow directions, valued by their X11 key symbols."""

    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364


def _check_size(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive, got {width}x{height}")


def _initial_julia_c(kind: FractalType, julia_c: complex | None) -> complex:
    if julia_c is not None:
        return complex(julia_c)
    return DEFAULT_JULIA_C if kind is FractalType.JULIA else 0j


@dataclass
class View:
    """Viewer state with three fractals, five colour schemes, panning and zoom."""

    kind: FractalType = FractalType.MANDELBROT
    julia_c: complex | None = None
    width: int = WIDTH
    height: int = HEIGHT
    max_iter: int = field(default=MAX_ITER, init=False)
    color_scheme: ColorScheme = field(default=ColorScheme.PASTEL, init=False)
    zoom: float = field(default=1.0, init=False)
    offset_x: float = field(default=0.0, init=False)
    offset_y: float = field(default=0.0, init=False)
    dragging: bool = field(default=False, init=False)
    drag_start: tuple[int, int] = field(default=(0, 0), init=False)

    def __post_init__(self) -> None:
        _check_size(self.width, self.height)
        self.kind = FractalType(self.kind)
        self.julia_c = _initial_julia_c(self.kind, self.julia_c)
        self.reset()

    def reset(self) -> None:
        """Restore the home position, iteration limit and colour scheme."""
        self.zoom = 1.0
        self.offset_x = 0.0
        self.offset_y = 0.0
        if self.kind is FractalType.MANDELBROT:
            self.offset_x = -0.5
        elif self.kind is FractalType.BURNING_SHIP:
            self.offset_x = -0.4
            self.offset_y = -0.5
        self.max_iter = MAX_ITER
        self.color_scheme = ColorScheme.PASTEL

    def complex_at(self, x: float, y: float) -> complex:
        """The point of the plane shown at pixel (x, y)."""
        scale = PLANE_SPAN / self.zoom
        real = (x / self.width - 0.5) * scale + self.offset_x
        imag = (y / self.height - 0.5) * scale + self.offset_y
        return complex(real, imag)

    def zoom_at(self, x: float, y: float, factor: float) -> None:
        """Multiply the zoom by *factor*, keeping the point under (x, y) in place."""
        anchor = self.complex_at(x, y)
        self.zoom *= factor
        scale = PLANE_SPAN / self.zoom
        self.offset_x = anchor.real - (x / self.width - 0.5) * scale
        self.offset_y = anchor.imag - (y / self.height - 0.5) * scale

    def pan(self, dx: float, dy: float) -> None:
        """Shift the view by a mouse movement of (dx, dy) pixels."""
        self.offset_x += dx * PAN_SPEED * self.zoom
        self.offset_y += dy * PAN_SPEED * self.zoom

    def nudge(self, direction) -> None:
        """Shift the view one step for an arrow key."""
        direction = Direction(direction)
        step = NUDGE_STEP * self.zoom
        if direction is Direction.LEFT:
            self.offset_x += step
        elif direction is Direction.RIGHT:
            self.offset_x -= step
        elif direction is Direction.UP:
            self.offset_y -= step
        else:
            self.offset_y += step

    def cycle_type(self) -> None:
        """Switch to the next fractal and return to its home view."""
        self.kind = FractalType((self.kind + 1) % len(FractalType))
        if self.kind is FractalType.JULIA:
            self.julia_c = DEFAULT_JULIA_C
        self.reset()

    def cycle_colors(self) -> None:
        """Switch to the next colour scheme."""
        self.color_scheme = ColorScheme((self.color_scheme + 1) % len(ColorScheme))

    def _axes(self) -> tuple[np.ndarray, np.ndarray]:
        scale = PLANE_SPAN / self.zoom
        xs = np.arange(self.width, dtype=np.float64)
        ys = np.arange(self.height, dtype=np.float64)
        real = (xs / self.width - 0.5) * scale + self.offset_x
        imag = (ys / self.height - 0.5) * scale + self.offset_y
        return real, imag

    def iteration_counts(self) -> np.ndarray:
        """Escape counts for every pixel, as a (height, width) array."""
        real, imag = self._axes()
        return escape_counts(
            self.kind, real[np.newaxis, :], imag[:, np.newaxis], self.max_iter, self.julia_c
        )

    def render(self) -> np.ndarray:
        """The image as a (height, width) array of 0xRRGGBB values."""
        return colorize(self.iteration_counts(), self.max_iter, self.color_scheme)


@dataclass
class ClassicView:
    """Viewer state with the Mandelbrot and Julia sets and centred zoom."""

    kind: FractalType = FractalType.MANDELBROT
    julia_c: complex | None = None
    width: int = CLASSIC_WIDTH
    height: int = CLASSIC_HEIGHT
    max_iter: int = field(default=MAX_ITER, init=False)
    zoom: float = field(default=1.0, init=False)
    offset_x: float = field(default=0.0, init=False)
    offset_y: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        _check_size(self.width, self.height)
        self.kind = FractalType(self.kind)
        if self.kind is FractalType.BURNING_SHIP:
            raise ValueError("the classic viewer draws only the Mandelbrot and Julia sets")
        self.julia_c = _initial_julia_c(self.kind, self.julia_c)
        self.reset()

    def reset(self) -> None:
        """Restore the home position; the iteration limit is kept."""
        self.zoom = 1.0
        self.offset_x = 0.0
        self.offset_y = 0.0
        if self.kind is FractalType.MANDELBROT:
            self.offset_x = -0.5

    def complex_at(self, x: float, y: float) -> complex:
        """The point of the plane shown at pixel (x, y)."""
        real = (PLANE_SPAN * (x / self.width - 0.5)) * self.zoom + self.offset_x
        imag = (PLANE_SPAN * (y / self.height - 0.5)) * self.zoom + self.offset_y
        return complex(real, imag)

    def zoom_at(self, x: float, y: float, factor: float) -> None:
        """Multiply the zoom by *factor* and rescale the offsets; (x, y) is ignored."""
        del x, y
        old_zoom = self.zoom
        self.zoom *= factor
        self.offset_x = self.offset_x * old_zoom / self.zoom
        self.offset_y = self.offset_y * old_zoom / self.zoom

    def cycle_type(self) -> None:
        """Toggle between the Mandelbrot and Julia sets and return home."""
        self.kind = FractalType((self.kind + 1) % 2)
        if self.kind is FractalType.JULIA:
            self.julia_c = DEFAULT_JULIA_C
        self.reset()

    def _axes(self) -> tuple[np.ndarray, np.ndarray]:
        xs = np.arange(self.width, dtype=np.float64)
        ys = np.arange(self.height, dtype=np.float64)
        real = (PLANE_SPAN * (xs / self.width - 0.5)) * self.zoom + self.offset_x
        imag = (PLANE_SPAN * (ys / self.height - 0.5)) * self.zoom + self.offset_y
        return real, imag

    def iteration_counts(self) -> np.ndarray:
        """Escape counts for every pixel, as a (height, width) array."""
        real, imag = self._axes()
        return escape_counts(
            self.kind, real[np.newaxis, :], imag[:, np.newaxis], self.max_iter, self.julia_c
        )

    def render(self) -> np.ndarray:
        """The image as a (height, width) array of 0xRRGGBB values."""
        return colorize_classic(self.iteration_counts(), self.max_iter)