"""Terminal snake game: grid simulation core plus curses and pygame front ends."""

__version__ = "0.1.0"
