"""Lumerical script command documentation extraction and lookup."""

__version__ = "0.1.0"
