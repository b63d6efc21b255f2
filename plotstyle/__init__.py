"""Colors, palettes, relative sizes, fonts and text styles for plotting."""

__version__ = "0.1.0"

__all__ = ["color", "palette", "size", "font", "text"]