"""A falling-blocks puzzle game with a menu, music and a local leaderboard."""

__version__ = "0.1.0"