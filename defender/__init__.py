"""A tower defense game: place weapons and stop the enemies before they reach the base."""

__version__ = "1.0.0"