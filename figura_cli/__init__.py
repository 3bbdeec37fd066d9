"""
figura CLI - Command-line interface for decoding and writing shape records.

Usage:
    figura decode features.dat
    figura decode --test-mode
    figura decode features.dat --renderer raster --output render.png
    figura encode circle 1 2 3 -o features.dat
"""

__version__ = "1.0.0"
