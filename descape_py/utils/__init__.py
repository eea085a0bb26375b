"""
Utility functions and classes.
"""

from .string_utils import utf8_width, is_hex_digit, is_oct_digit, to_scalar

__all__ = ['utf8_width', 'is_hex_digit', 'is_oct_digit', 'to_scalar']
