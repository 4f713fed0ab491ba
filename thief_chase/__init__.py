"""Police versus thieves pursuit game on a diagonal checkerboard"""

__version__ = "1.0.0"
