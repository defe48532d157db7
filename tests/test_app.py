import pytest

from fractol.app import (
    Key,
    UsageError,
    bonus_main,
    controls,
    handle_key,
    handle_motion,
    handle_mouse,
    handle_release,
    main,
    parse_args,
    usage,
)
from fractol.numbers import parse_float
from fractol.palettes import ColorScheme
from fractol.sets import FractalType
from fractol.view import DEFAULT_JULIA_C, MAX_ITER, ClassicView, Direction, View


def small_view(kind=FractalType.MANDELBROT):
    return View(kind, width=8, height=6)


def small_classic(kind=FractalType.MANDELBROT):
    return ClassicView(kind, width=8, height=6)


# --- usage and controls ---------------------------------------------------


def test_usage_lists_burning_ship_only_when_extended():
    assert "burning_ship" in usage(True)
    assert "burning_ship" not in usage(False)


def test_usage_mentions_julia_example():
    assert "julia -0.7 0.27015" in usage(False)
    assert usage(False).startswith("Usage:")


def test_controls_text():
    text = controls()
    assert "==== Controls ====" in text
    assert "ESC key          - Exit\n" in text


# --- parse_args -----------------------------------------------------------


def test_parse_mandelbrot_classic():
    view = parse_args(["mandelbrot"], False)
    assert isinstance(view, ClassicView)
    assert view.kind is FractalType.MANDELBROT


def test_parse_mandelbrot_extra_params_prints_note(capsys):
    view = parse_args(["mandelbrot", "1", "2"], True)
    assert isinstance(view, View)
    assert "Note: Mandelbrot set doesn't use extra parameters" in capsys.readouterr().out


def test_parse_julia_default_parameter():
    view = parse_args(["julia"], True)
    assert view.kind is FractalType.JULIA
    assert view.julia_c == DEFAULT_JULIA_C


def test_parse_julia_single_parameter_is_ignored():
    view = parse_args(["julia", "0.5"], False)
    assert view.julia_c == DEFAULT_JULIA_C


def test_parse_julia_parameters():
    view = parse_args(["julia", "-0.7", "0.27015"], False)
    assert view.julia_c == complex(parse_float("-0.7"), parse_float("0.27015"))


@pytest.mark.parametrize("params", [["abc", "1"], ["1", ".5"], ["1.", "2"]])
def test_parse_julia_invalid_parameters(params):
    with pytest.raises(UsageError, match="Invalid parameters for Julia set"):
        parse_args(["julia", *params], True)


@pytest.mark.parametrize("args", [[], ["mandelbrotx"], ["Julia"], ["foo"]])
def test_parse_rejects_unknown(args):
    with pytest.raises(UsageError):
        parse_args(args, True)


def test_burning_ship_only_in_extended():
    with pytest.raises(UsageError):
        parse_args(["burning_ship"], False)
    view = parse_args(["burning_ship"], True)
    assert view.kind is FractalType.BURNING_SHIP


# --- main -----------------------------------------------------------------


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert out == usage(False)


def test_bonus_main_invalid_julia(capsys):
    assert bonus_main(["julia", "x", "y"]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Error: Invalid parameters for Julia set\n")
    assert out.endswith(usage(True))


# --- keys -----------------------------------------------------------------


@pytest.mark.parametrize("make", [small_view, small_classic])
def test_escape_exits(make):
    with pytest.raises(SystemExit) as info:
        handle_key(make(), Key.ESCAPE)
    assert info.value.code == 0


def test_classic_f_toggles_type():
    view = small_classic()
    assert handle_key(view, Key.F) is True
    assert view.kind is FractalType.JULIA
    assert view.julia_c == DEFAULT_JULIA_C
    handle_key(view, Key.F)
    assert view.kind is FractalType.MANDELBROT


def test_classic_ignores_extended_keys():
    view = small_classic()
    assert handle_key(view, Key.C) is False
    assert handle_key(view, Key.PLUS) is False
    assert view.max_iter == MAX_ITER


def test_extended_f_cycles_all_types():
    view = small_view()
    kinds = []
    for _ in range(3):
        handle_key(view, Key.F)
        kinds.append(view.kind)
    assert kinds == [FractalType.JULIA, FractalType.BURNING_SHIP, FractalType.MANDELBROT]


def test_extended_key_prints(capsys):
    handle_key(small_view(), Key.R)
    assert f"Key pressed: {int(Key.R)}" in capsys.readouterr().out


def test_c_cycles_colors():
    view = small_view()
    assert handle_key(view, Key.C) is True
    assert view.color_scheme is ColorScheme.SUNSET


def test_r_resets_view():
    view = small_view()
    fresh = small_view()
    view.zoom_at(1, 1, 2.0)
    view.max_iter = 40
    view.cycle_colors()
    assert handle_key(view, Key.R) is True
    assert (view.zoom, view.offset_x, view.offset_y) == (fresh.zoom, fresh.offset_x, fresh.offset_y)
    assert view.max_iter == MAX_ITER
    assert view.color_scheme is ColorScheme.PASTEL


@pytest.mark.parametrize("key", [Key.LEFT, Key.UP, Key.RIGHT, Key.DOWN])
def test_arrows_nudge(key):
    view = small_view()
    twin = small_view()
    assert handle_key(view, key) is True
    twin.nudge(Direction(int(key)))
    assert (view.offset_x, view.offset_y) == (twin.offset_x, twin.offset_y)


def test_plus_minus_space_change_iterations():
    view = small_view()
    handle_key(view, Key.PLUS)
    assert view.max_iter == MAX_ITER + 10
    handle_key(view, Key.MINUS)
    handle_key(view, Key.UNDERSCORE)
    assert view.max_iter == MAX_ITER - 10
    handle_key(view, Key.SPACE)
    assert view.max_iter == MAX_ITER


def test_minus_stops_at_lower_limit():
    view = small_view()
    view.max_iter = 10
    assert handle_key(view, Key.MINUS) is False
    assert view.max_iter == 10


def test_unknown_key_does_nothing():
    view = small_view()
    assert handle_key(view, 0) is False
    assert view.max_iter == MAX_ITER


# --- mouse ----------------------------------------------------------------


@pytest.mark.parametrize("button,factor", [(4, 1.1), (5, 0.9)])
def test_scroll_zooms_extended(button, factor):
    view = small_view()
    twin = small_view()
    assert handle_mouse(view, button, 2, 3) is True
    twin.zoom_at(2, 3, factor)
    assert (view.zoom, view.offset_x, view.offset_y) == (twin.zoom, twin.offset_x, twin.offset_y)


def test_scroll_zooms_classic():
    view = small_classic()
    twin = small_classic()
    handle_mouse(view, 4, 7, 1)
    twin.zoom_at(7, 1, 1.1)
    assert view.zoom == 1.1
    assert view.offset_x == twin.offset_x


def test_right_click_sets_julia_parameter():
    view = small_view(FractalType.JULIA)
    assert handle_mouse(view, 3, 2, 3) is True
    assert view.julia_c == view.complex_at(2, 3)


def test_right_click_ignored_outside_julia():
    view = small_view()
    before = view.julia_c
    assert handle_mouse(view, 3, 2, 3) is False
    assert view.julia_c == before


def test_drag_pans_view():
    view = small_view()
    twin = small_view()
    handle_mouse(view, 1, 5, 5)
    assert view.dragging is True
    assert handle_motion(view, 3, 4) is True
    twin.pan(2, -1)
    assert (view.offset_x, view.offset_y) == (twin.offset_x, twin.offset_y)
    assert view.drag_start == (3, 4)


def test_motion_without_movement_or_drag():
    view = small_view()
    assert handle_motion(view, 3, 4) is False
    handle_mouse(view, 1, 3, 4)
    assert handle_motion(view, 3, 4) is False


def test_release_ends_drag():
    view = small_view()
    handle_mouse(view, 1, 5, 5)
    handle_release(view, 1)
    assert view.dragging is False
    before = (view.offset_x, view.offset_y)
    assert handle_motion(view, 0, 0) is False
    assert (view.offset_x, view.offset_y) == before


def test_classic_motion_is_ignored():
    view = small_classic()
    assert handle_mouse(view, 1, 5, 5) is False
    assert handle_motion(view, 0, 0) is False
    assert view.offset_x == small_classic().offset_x