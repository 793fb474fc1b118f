"""SeedShelf - category option editor for download clients."""

__version__ = "0.1.0"
