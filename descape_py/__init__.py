"""
descape
Unescape backslash escape sequences, copying only when there is something
to unescape.
"""

__version__ = "0.1.0"
__author__ = "descape contributors"

from .config import Config
from .errors import UnescapeError
from .io.cursor import CodePointCursor
from .escapes import Replace, Elide, Reject, ELIDE, EscapeOutcome, EscapeResolver, DefaultResolver
from .engine import Unescaped, Borrowed, Owned, unescape, unescape_with

__all__ = [
    'unescape', 'unescape_with',
    'DefaultResolver', 'EscapeResolver', 'EscapeOutcome',
    'Replace', 'Elide', 'Reject', 'ELIDE',
    'Unescaped', 'Borrowed', 'Owned',
    'UnescapeError', 'CodePointCursor', 'Config',
    '__version__',
]
