"""Typed account and user repositories over a partitioned document store."""

__version__ = "0.1.0"
