"""A turn-based kingdom simulation: the kingdom's parts, save files and a terminal game."""

__version__ = "0.1.0"