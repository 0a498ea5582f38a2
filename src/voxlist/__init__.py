"""voxlist: voice-driven shopping list command interpretation."""

__version__ = "0.1.0"
