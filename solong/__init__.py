"""A tile-based collect-and-escape puzzle game played on .ber map files."""

__version__ = "1.0.0"
__all__ = ["app", "colors", "game", "mapfile", "visual", "xpm"]