"""A tile-based puzzle game: map checking, game state, XPM textures and a pygame window."""

__version__ = "0.1.0"