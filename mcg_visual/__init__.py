"""Cards, fields and screens for a visual multiplayer card game."""

__version__ = "0.1.0"