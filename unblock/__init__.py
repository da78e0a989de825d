"""A sliding-block puzzle game: board logic, pygame drawing and the windowed app."""

__version__ = "0.1.0"