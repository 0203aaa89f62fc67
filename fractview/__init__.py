"""Interactive viewer for Mandelbrot, Julia and Burning Ship fractals."""

__version__ = "0.1.0"