"""Escape-time fractal viewer for the Mandelbrot, Julia and Burning Ship sets, with NumPy rendering and a pygame window."""

__version__ = "1.0.0"