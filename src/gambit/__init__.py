"""Gambit - rules engine for a family of chess variants."""

__version__ = "0.1.0"
