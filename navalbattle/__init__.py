"""Game logic for a two-player naval battle game: board, computer players, messages, animation timing and UI state."""

__version__ = "0.1.0"