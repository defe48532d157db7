"""Escape-time iteration for the Mandelbrot, Julia and Burning Ship sets."""

from __future__ import annotations

import enum

import numpy as np

ESCAPE_RADIUS_SQUARED = 4.0


class FractalType(enum.IntEnum):
    """The fractals that can be drawn."""

    MANDELBROT = 0
    JULIA = 1
    BURNING_SHIP = 2


def _iterate(zr: float, zi: float, cr: float, ci: float, max_iter: int, burning: bool) -> int:
    for iteration in range(max_iter):
        if zr * zr + zi * zi > ESCAPE_RADIUS_SQUARED:
            return iteration
        tmp = zr * zr - zi * zi + cr
        if burning:
            zi = abs(2.0 * zr * zi) + ci
            zr = abs(tmp)
        else:
            zi = 2.0 * zr * zi + ci
            zr = tmp
    return max(max_iter, 0)


def mandelbrot(real: float, imag: float, max_iter: int) -> int:
    """Iterations before z -> z**2 + c escapes, starting at z = 0, c = real + imag*i."""
    return _iterate(0.0, 0.0, float(real), float(imag), max_iter, burning=False)


def julia(real: float, imag: float, c: complex, max_iter: int) -> int:
    """Iterations before z -> z**2 + c escapes, starting at z = real + imag*i."""
    c = complex(c)
    return _iterate(float(real), float(imag), c.real, c.imag, max_iter, burning=False)


def burning_ship(real: float, imag: float, max_iter: int) -> int:
    """Iterations before the Burning Ship map escapes for c = real + imag*i."""
    return _iterate(0.0, 0.0, float(real), float(imag), max_iter, burning=True)


def escape_counts(kind, real, imag, max_iter: int, c: complex = 0j) -> np.ndarray:
    """Escape counts for whole arrays of points.

    *real* and *imag* are broadcast together; the result has their common
    shape and holds exactly what the scalar functions give per point.
    *c* is used only for the Julia set.
    """
    kind = FractalType(kind)
    re_part, im_part = np.broadcast_arrays(
        np.asarray(real, dtype=np.float64), np.asarray(imag, dtype=np.float64)
    )
    shape = re_part.shape
    re_flat = re_part.ravel()
    im_flat = im_part.ravel()
    size = re_flat.size
    counts = np.zeros(size, dtype=np.int64)

    if kind is FractalType.JULIA:
        c = complex(c)
        zr = re_flat.copy()
        zi = im_flat.copy()
        cr = np.full(size, c.real)
        ci = np.full(size, c.imag)
    else:
        zr = np.zeros(size)
        zi = np.zeros(size)
        cr = re_flat.copy()
        ci = im_flat.copy()

    burning = kind is FractalType.BURNING_SHIP
    active = np.arange(size)
    with np.errstate(over="ignore", invalid="ignore"):
        for _ in range(max_iter):
            keep = ~(zr * zr + zi * zi > ESCAPE_RADIUS_SQUARED)
            if not keep.all():
                active, zr, zi, cr, ci = active[keep], zr[keep], zi[keep], cr[keep], ci[keep]
            if active.size == 0:
                break
            tmp = zr * zr - zi * zi + cr
            if burning:
                zi = np.abs(2.0 * zr * zi) + ci
                zr = np.abs(tmp)
            else:
                zi = 2.0 * zr * zi + ci
                zr = tmp
            counts[active] += 1

    return counts.reshape(shape)