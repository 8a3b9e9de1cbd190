"""A tile-based collect-and-escape puzzle game with map validation and XPM loading."""

__version__ = "0.1.0"