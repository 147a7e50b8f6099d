"""Competitive-programming exercises and their command-line runner."""

__all__ = ["basics", "cli", "dp_paths", "dp_sets", "graphs"]