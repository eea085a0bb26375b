"""
Escape resolution policies and their outcomes.
"""

from .outcome import Replace, Elide, Reject, ELIDE, EscapeOutcome
from .resolver import EscapeResolver, DefaultResolver

__all__ = [
    'Replace', 'Elide', 'Reject', 'ELIDE', 'EscapeOutcome',
    'EscapeResolver', 'DefaultResolver',
]
