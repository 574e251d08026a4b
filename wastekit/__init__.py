"""Sprites, fonts, palettes, message files and game time for an isometric role-playing game."""

__version__ = "0.1.0"