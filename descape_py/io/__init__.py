"""
IO module for code point cursors.
"""

from .cursor import CodePointCursor

__all__ = ['CodePointCursor']
