"""Sea battle game: ships, fields, abilities, a terminal mode and a pygame window."""

__version__ = "0.1.0"