"""
Token definitions for the yardtypes lexer.

The type grammar is tiny, so every token is described by a single regular
expression.  The order of ``TOKEN_PATTERNS`` is significant: the lexer tries
each pattern in turn and the first match wins.  The type-name pattern is broad
enough to shadow other tokens if it is moved around.

Author: xwest
"""

import re
from enum import Enum, auto
from dataclasses import dataclass
from typing import List, Optional, Pattern, Tuple


class TokenType(Enum):
    """Enumeration of all token types in the type grammar."""

    COLLECTION_START = auto()           # <
    COLLECTION_END = auto()             # >
    FIXED_COLLECTION_START = auto()     # (
    FIXED_COLLECTION_END = auto()       # )
    TYPE_NAME = auto()                  # String, A::B, #read, true, 4
    TYPE_NEXT = auto()                  # , or ;
    WHITESPACE = auto()                 # never emitted
    HASH_COLLECTION_START = auto()      # {
    HASH_COLLECTION_NEXT = auto()       # =>
    HASH_COLLECTION_END = auto()        # }
    EOF = auto()                        # end of input


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in a type-annotation string.

    ``offset`` is the 0-based scan position, ``line`` and ``column`` are
    1-based for human-readable diagnostics.
    """
    source: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.source}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """A lexical token: its type, raw text and where it was found."""
    type: TokenType
    lexeme: str
    location: SourceLocation

    def __str__(self) -> str:
        if self.type == TokenType.EOF:
            return "end of input"
        return f"'{self.lexeme}'"

    @property
    def is_terminator(self) -> bool:
        """Check if this token closes a type list."""
        return self.type in TERMINATORS


# Ordered (kind, pattern) table.  EOF has no pattern; it matches only when
# the scanner has consumed the whole input.
TOKEN_PATTERNS: List[Tuple[TokenType, Optional[Pattern[str]]]] = [
    (TokenType.COLLECTION_START, re.compile(r'<')),
    (TokenType.COLLECTION_END, re.compile(r'>')),
    (TokenType.FIXED_COLLECTION_START, re.compile(r'\(')),
    (TokenType.FIXED_COLLECTION_END, re.compile(r'\)')),
    (TokenType.TYPE_NAME, re.compile(r'#\w+|(?:(?:::)?\w+)+', re.ASCII)),
    (TokenType.TYPE_NEXT, re.compile(r'[,;]')),
    (TokenType.WHITESPACE, re.compile(r'\s+')),
    (TokenType.HASH_COLLECTION_START, re.compile(r'\{')),
    (TokenType.HASH_COLLECTION_NEXT, re.compile(r'=>')),
    (TokenType.HASH_COLLECTION_END, re.compile(r'\}')),
    (TokenType.EOF, None),
]

TERMINATORS = frozenset({
    TokenType.COLLECTION_END,
    TokenType.FIXED_COLLECTION_END,
    TokenType.HASH_COLLECTION_NEXT,
    TokenType.HASH_COLLECTION_END,
    TokenType.EOF,
})

TOKEN_TEXT = {
    TokenType.COLLECTION_START: "<",
    TokenType.COLLECTION_END: ">",
    TokenType.FIXED_COLLECTION_START: "(",
    TokenType.FIXED_COLLECTION_END: ")",
    TokenType.TYPE_NEXT: ",",
    TokenType.HASH_COLLECTION_START: "{",
    TokenType.HASH_COLLECTION_NEXT: "=>",
    TokenType.HASH_COLLECTION_END: "}",
    TokenType.EOF: "end of input",
}
