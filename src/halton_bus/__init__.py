"""Halton school bus delays and transportation status, with TTL caching."""

__version__ = "0.1.0"
