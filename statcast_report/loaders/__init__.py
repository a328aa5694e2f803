"""Data ingestion loaders for the leaderboard CSV exports."""

from .leaderboards import load_statcast_stats, load_traditional_stats

__all__ = [
    "load_traditional_stats",
    "load_statcast_stats",
]
