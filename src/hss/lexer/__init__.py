"""Nested-context scanner for hybrid stylesheets.

Architecture:
lexer/
├── __init__.py          # Re-exports
├── source.py            # CharacterSource (line-tracked cursor)
├── scanner.py           # ScannerMixin (comments, strings, whitespace)
└── contexts.py          # Context, ContextKind (region stack entries)

The driver that ties these together is hss.transpiler.Transpiler.

Usage:
    >>> from hss.lexer import CharacterSource
    >>> src = CharacterSource("<<color>>")
    >>> src.peek(2)
    '<<'

"""

from hss.lexer.contexts import Context, ContextKind, escape_single_quoted
from hss.lexer.scanner import ScannerMixin
from hss.lexer.source import CharacterSource

__all__ = [
    "CharacterSource",
    "Context",
    "ContextKind",
    "ScannerMixin",
    "escape_single_quoted",
]
