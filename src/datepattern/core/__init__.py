"""Core types shared across syntax and runtime layers.

Exports:
    DateLike: Protocol for the date values the renderer reads

Python 3.13+.
"""

from .types import DateLike

__all__ = ["DateLike"]
