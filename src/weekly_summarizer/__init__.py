"""Summarize a week of daily notes into a weekly note with Claude."""

__version__ = "0.1.0"
