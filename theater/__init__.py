"""
THEATER STATEMENT ENGINE

Prices theater performances and renders customer billing statements.
"""

from .errors import UnknownPlayError, UnknownPlayTypeError
from .models import Invoice, Performance, Play, PlayCatalog, PlayType
from .processor import StatementProcessor

__all__ = [
    'StatementProcessor',
    'Invoice',
    'Performance',
    'Play',
    'PlayCatalog',
    'PlayType',
    'UnknownPlayError',
    'UnknownPlayTypeError',
]
