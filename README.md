# fractol

An interactive escape-time fractal viewer. It draws the Mandelbrot set, Julia
sets and, in the extended viewer, the Burning Ship fractal in a pygame window.
You can zoom, pan and recolour them with the mouse and keyboard.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running the viewer

Two commands are installed. Both take the fractal name as the first argument.
An unknown name, a missing name, or Julia parameters that are not numbers make
the command print a usage message and exit with status 1.

### `fractol`

The basic viewer has the Mandelbrot set and Julia sets. Its window is
1600×1400 pixels.

```
fractol mandelbrot
fractol julia
fractol julia -0.7 0.27015
```

For `julia`, two optional numbers set the real and imaginary parts of the
constant `c`. Without them `c = -0.7 + 0.27015i` is used. If only one number
is given, it is ignored. A number is a plain decimal with an optional sign,
such as `-0.8`, `0.156` or `+1`. Extra arguments after `mandelbrot` produce a
note and are otherwise ignored.

Controls:

| Input            | Action                                                   |
|------------------|----------------------------------------------------------|
| Mouse wheel      | Rescale about the view centre (wheel up widens the view) |
| F key            | Switch between Mandelbrot and Julia                      |
| R key            | Reset position and zoom                                  |
| ESC / close      | Exit                                                     |

### `fractol-bonus`

The extended viewer adds the following:

* the Burning Ship fractal;
* five colour schemes: pastel, sunset, ocean, fire and galaxy;
* zooming around the cursor;
* panning;
* live control of the iteration limit.

Its window is 1920×1080 pixels. It prints a summary of the controls at start-up and echoes every key code it receives.

```
fractol-bonus mandelbrot
fractol-bonus julia -0.7 0.27015
fractol-bonus burning_ship
```

Controls:

| Input                  | Action                                                 |
|------------------------|--------------------------------------------------------|
| Mouse wheel            | Zoom in (up) / out (down) around the cursor            |
| Left-button drag       | Pan view                                               |
| Right click            | Set the Julia constant to the point clicked (Julia only) |
| C key                  | Next colour scheme                                     |
| F key                  | Next fractal type                                      |
| R key                  | Reset position, zoom, iteration limit and colour scheme |
| SPACE key              | Reset the iteration limit to 100                       |
| `+` (keypad) or `4`    | Raise the iteration limit by 10                        |
| `-` or keypad `-`      | Lower the iteration limit by 10 (not below 10)         |
| Arrow keys             | Pan view                                               |
| ESC / close            | Exit                                                   |

## Using the library

You can use the computations without opening a window.

### Escape counts: `fractol.sets`

`fractol.sets` has three functions:

* `mandelbrot(real, imag, max_iter)`
* `julia(real, imag, c, max_iter)`
* `burning_ship(real, imag, max_iter)`

Each returns the number of iterations before the orbit leaves the circle of radius 2, capped at `max_iter`.

`escape_counts(kind, real, imag, max_iter, c)` does the same for whole NumPy arrays. `kind` is a `FractalType`: `MANDELBROT`, `JULIA` or `BURNING_SHIP`.

```python
from fractol.sets import mandelbrot

mandelbrot(-0.5, 0.0, 100)   # 100: the point lies inside the set
mandelbrot(2.0, 2.0, 100)    # 1: escapes at once
```

### Colours: `fractol.palettes`

`fractol.palettes` turns counts into packed `0xRRGGBB` integers. Points that never escape are black.

* `classic_color(iteration, max_iter)` gives the colours of the basic viewer.
* `get_color(iteration, max_iter, scheme)` gives the colours of the extended viewer. `scheme` is a `ColorScheme`; any other value is treated as galaxy.
* `pastel`, `sunset`, `ocean`, `fire`, `galaxy` and `scheme_color(scheme, ratio)` map a ratio in [0, 1] to a colour.
* `colorize(counts, max_iter, scheme)` and `colorize_classic(counts, max_iter)` colour whole arrays.

```python
from fractol.palettes import classic_color

classic_color(100, 100)      # 0x000000
```

### Argument checks: `fractol.numbers`

`fractol.numbers` holds the checks used by the commands:

* `is_number` validates a decimal string.
* `parse_float` converts the leading decimal number of a string.

### View state and frames: `fractol.view`

`fractol.view` has two classes, `View` (extended) and `ClassicView` (basic). They hold:

* the zoom and offsets;
* the fractal type;
* the iteration limit;
* the colour scheme (`View` only).

Their methods change the view and render frames:

* `complex_at` maps a pixel to the plane.
* `zoom_at`, `pan` and `nudge` move the view (`pan` and `nudge` are on `View` only).
* `cycle_type` switches the fractal type; `cycle_colors` switches the colour scheme (`View` only).
* `reset` goes back to the starting view.
* `iteration_counts` and `render` return `(height, width)` NumPy arrays of counts or colours.

### Input handling: `fractol.app`

`fractol.app` provides the input handlers `handle_key`, `handle_mouse`, `handle_motion` and `handle_release`. It also provides:

* `parse_args` and `UsageError`;
* `usage` and `controls`;
* `run(view)`, which opens the window;
* `main` and `bonus_main`, the two command entry points.

## What it does not do

The viewer only shows images on screen. It has no option to save a frame to an image file. `View.render` returns the pixel array, and you can save that array yourself.