"""Lazy, composable iterable adapters joined with the | operator, plus a demo command."""

__version__ = "0.1.0"
__all__ = ["adapters", "demo"]