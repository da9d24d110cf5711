"""String tokenizer for Cortado.

Architecture:
tokenizer/
├── __init__.py          # Re-exports StringTokenizer, TokenListView
├── core.py              # StringTokenizer (mixin composition + cache + lifecycle)
├── scanner.py           # Single-pass scan (delimiter/quote/ignored/trimmer)
├── cursor.py            # Bidirectional cursor
└── view.py              # Live read-only token view

Usage:
    >>> from cortado.tokenizer import StringTokenizer
    >>> tok = StringTokenizer("a b  c")
    >>> list(tok)
    ['a', 'b', 'c']

"""

from cortado.tokenizer.core import StringTokenizer
from cortado.tokenizer.scanner import Token
from cortado.tokenizer.view import TokenListView

__all__ = ["StringTokenizer", "Token", "TokenListView"]
