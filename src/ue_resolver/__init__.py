"""Unreal Engine installation discovery and project engine resolution."""

__version__ = "0.1.0"
