"""Core utilities shared across syntax, localization and runtime layers.

Exports:
    DepthGuard: Context manager for recursion depth limiting
    depth_clamp: Clamp a depth limit against the interpreter recursion limit
    unescape: Decode escape sequences in Key and Value text

Python 3.13+.
"""

from .depth_guard import DepthGuard, depth_clamp
from .escapes import unescape

__all__ = ["DepthGuard", "depth_clamp", "unescape"]
