"""Colors, styles, fonts, drawable elements and data series for pixel-based drawing backends."""

__version__ = "0.1.0"