"""Transifex <-> GitHub translation sync bot."""

__version__ = "0.1.0"
