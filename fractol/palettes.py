"""Mapping escape counts to 0xRRGGBB colours."""

from __future__ import annotations

import enum
import math
from typing import NamedTuple

import numpy as np

BLACK = 0x000000


class ColorScheme(enum.IntEnum):
    """The colour schemes of the extended viewer, in cycling order."""

    PASTEL = 0
    SUNSET = 1
    OCEAN = 2
    FIRE = 3
    GALAXY = 4


class _Segment(NamedTuple):
    """One linear piece of a palette, used for ratios below *upper*."""

    upper: float
    offset: float
    scale: float
    red: tuple[float, float]
    green: tuple[float, float]
    blue: tuple[float, float]


_PALETTES: dict[ColorScheme, tuple[_Segment, ...]] = {
    ColorScheme.PASTEL: (
        _Segment(0.25, 0.0, 4, (180, 40), (200, -20), (255, 0)),
        _Segment(0.5, 0.25, 4, (220, 35), (180, -30), (255, -50)),
        _Segment(0.75, 0.5, 4, (255, -130), (150, 105), (205, -105)),
        _Segment(math.inf, 0.75, 4, (125, -25), (255, -55), (100, 155)),
    ),
    ColorScheme.SUNSET: (
        _Segment(0.2, 0.0, 5, (10, 200), (10, 30), (50, 70)),
        _Segment(0.4, 0.2, 5, (210, 45), (40, 20), (120, -20)),
        _Segment(0.6, 0.4, 5, (255, 0), (60, 60), (100, -80)),
        _Segment(0.8, 0.6, 5, (255, 0), (120, 100), (20, 40)),
        _Segment(math.inf, 0.8, 5, (255, 0), (220, 35), (60, 120)),
    ),
    ColorScheme.OCEAN: (
        _Segment(0.33, 0.0, 3, (0, 0), (0, 80), (70, 95)),
        _Segment(0.66, 0.33, 3, (0, 30), (80, 100), (165, 15)),
        _Segment(math.inf, 0.66, 3, (30, 30), (180, -60), (180, -115)),
    ),
    ColorScheme.FIRE: (
        _Segment(0.2, 0.0, 5, (0, 128), (0, 0), (0, 0)),
        _Segment(0.4, 0.2, 5, (128, 127), (0, 30), (0, 0)),
        _Segment(0.6, 0.4, 5, (255, 0), (30, 70), (0, 0)),
        _Segment(0.8, 0.6, 5, (255, 0), (100, 80), (0, 30)),
        _Segment(math.inf, 0.8, 5, (255, 0), (180, 75), (30, 50)),
    ),
    ColorScheme.GALAXY: (
        _Segment(0.2, 0.0, 5, (0, 80), (0, 0), (0, 140)),
        _Segment(0.4, 0.2, 5, (80, 175), (0, 20), (140, 50)),
        _Segment(0.6, 0.4, 5, (255, -200), (20, 130), (190, 65)),
        _Segment(0.8, 0.6, 5, (55, -55), (150, 105), (255, -125)),
        _Segment(math.inf, 0.8, 5, (0, 30), (255, -55), (130, 125)),
    ),
}


def _pack(red: int, green: int, blue: int) -> int:
    return (red << 16) | (green << 8) | blue


def _resolve(scheme) -> ColorScheme:
    """Schemes 0 to 3 are taken as given; any other value means galaxy."""
    try:
        resolved = ColorScheme(scheme)
    except ValueError:
        return ColorScheme.GALAXY
    return resolved


def _segment_color(segment: _Segment, ratio: float) -> int:
    t = (ratio - segment.offset) * segment.scale
    channels = (int(base + t * slope) for base, slope in (segment.red, segment.green, segment.blue))
    return _pack(*channels)


def _palette_color(scheme: ColorScheme, ratio: float) -> int:
    segments = _PALETTES[scheme]
    segment = next((s for s in segments if ratio < s.upper), segments[-1])
    return _segment_color(segment, ratio)


def classic_color(iteration: int, max_iter: int) -> int:
    """Colour of the basic viewer: a polynomial blend, black inside the set."""
    if iteration == max_iter:
        return BLACK
    ratio = iteration / max_iter
    red = int(9 * (1 - ratio) * ratio * ratio * ratio * 255)
    green = int(15 * (1 - ratio) * (1 - ratio) * ratio * ratio * 255)
    blue = int(8.5 * (1 - ratio) * (1 - ratio) * (1 - ratio) * ratio * 255)
    return _pack(red, green, blue)


def pastel(ratio: float) -> int:
    """Pastel palette colour for *ratio* in [0, 1]."""
    return _palette_color(ColorScheme.PASTEL, ratio)


def sunset(ratio: float) -> int:
    """Sunset palette colour for *ratio* in [0, 1]."""
    return _palette_color(ColorScheme.SUNSET, ratio)


def ocean(ratio: float) -> int:
    """Ocean palette colour for *ratio* in [0, 1]."""
    return _palette_color(ColorScheme.OCEAN, ratio)


def fire(ratio: float) -> int:
    """Fire palette colour for *ratio* in [0, 1]."""
    return _palette_color(ColorScheme.FIRE, ratio)


def galaxy(ratio: float) -> int:
    """Galaxy palette colour for *ratio* in [0, 1]."""
    return _palette_color(ColorScheme.GALAXY, ratio)


def scheme_color(scheme, ratio: float) -> int:
    """Colour of *ratio* in the given scheme; unknown schemes use galaxy."""
    return _palette_color(_resolve(scheme), ratio)


def get_color(iteration: int, max_iter: int, scheme) -> int:
    """Colour of an escape count in a scheme, black for points that never escaped."""
    if iteration == max_iter:
        return BLACK
    return scheme_color(scheme, iteration / max_iter)


def _ratios(counts, max_iter: int) -> tuple[np.ndarray, np.ndarray]:
    counts = np.asarray(counts)
    inside = counts == max_iter
    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = counts.astype(np.float64) / float(max_iter)
    return ratio, inside


def colorize(counts, max_iter: int, scheme) -> np.ndarray:
    """Colours for a whole array of escape counts, as int64 0xRRGGBB values.

    Each element equals what get_color gives for that count.
    """
    ratio, inside = _ratios(counts, max_iter)
    colors = np.zeros(ratio.shape, dtype=np.int64)
    pending = ~inside
    for segment in _PALETTES[_resolve(scheme)]:
        mask = pending & (ratio < segment.upper) if math.isfinite(segment.upper) else pending
        if not mask.any():
            continue
        t = (ratio[mask] - segment.offset) * segment.scale
        red, green, blue = (
            (base + t * slope).astype(np.int64)
            for base, slope in (segment.red, segment.green, segment.blue)
        )
        colors[mask] = (red << 16) | (green << 8) | blue
        pending &= ~mask
    return colors


def colorize_classic(counts, max_iter: int) -> np.ndarray:
    """Colours of the basic viewer for an array of escape counts."""
    ratio, inside = _ratios(counts, max_iter)
    with np.errstate(invalid="ignore", over="ignore"):
        inv = 1 - ratio
        red = 9 * inv * ratio * ratio * ratio * 255
        green = 15 * inv * inv * ratio * ratio * 255
        blue = 8.5 * inv * inv * inv * ratio * 255
    red, green, blue = (np.where(inside, 0.0, c).astype(np.int64) for c in (red, green, blue))
    colors = (red << 16) | (green << 8) | blue
    colors[inside] = BLACK
    return colors