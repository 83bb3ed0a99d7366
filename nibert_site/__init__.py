"""Nibert Investments site backend: portfolio, contact intake, search."""

__version__ = "1.0.0"
