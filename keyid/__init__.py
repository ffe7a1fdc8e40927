"""Camelot-key track suggestions and playlist generation for DJs."""

__version__ = "0.1.0"