"""Kennel: a single named dog behind a swappable output sink."""

__version__ = "0.1.0"
