"""
Unescape engine and its result types.
"""

from .output import Unescaped, Borrowed, Owned
from .unescaper import unescape, unescape_with

__all__ = ['Unescaped', 'Borrowed', 'Owned', 'unescape', 'unescape_with']
