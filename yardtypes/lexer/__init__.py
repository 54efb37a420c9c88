"""
yardtypes Lexer Package

Tokenizer for the type-annotation grammar used in documentation comments.
Tokens are recognized by an ordered table of regular expressions where the
first match wins; whitespace is skipped.

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize_string
from .errors import Diagnostic, TypeSyntaxError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "TypeSyntaxError",
    "tokenize_string",
]
