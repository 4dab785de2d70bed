"""Per-map leaderboard service for the flowfield game."""

__version__ = "0.1.0"
