"""
yardtypes Lexer - scans a type annotation into tokens

The scanner walks the annotation left to right and tries every entry of
TOKEN_PATTERNS at the current position, in order.  Whitespace is consumed
silently.  The parser pulls tokens one at a time with next_token(), so nested
collections share the same cursor.

xwest
"""

import logging
from typing import List

from .tokens import Token, TokenType, SourceLocation, TOKEN_PATTERNS
from .errors import create_invalid_character_error


log = logging.getLogger("yardtypes.lexer")


class Lexer:
    """
    Type annotation lexical analyzer.

    Converts an annotation such as ``Array<String, #read>`` into a stream
    of tokens, tracking the scan position for error reporting.
    """

    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the lexer with an annotation string.

        Args:
            source: Type annotation text
            filename: Name used in diagnostics
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1

    def next_token(self) -> Token:
        """
        Scan and return the next token, advancing past it.

        Returns:
            The first token whose pattern matches at the current position.
            Once the input is exhausted every call returns an EOF token.

        Raises:
            TypeSyntaxError: If no pattern matches the current character
        """
        while True:
            location = self.current_location()

            for token_type, pattern in TOKEN_PATTERNS:
                if pattern is None:
                    if self.at_end():
                        return self._emit(Token(token_type, "", location))
                    continue

                match = pattern.match(self.source, self.pos)
                if match is None:
                    continue

                self._advance_by(match.group(0))
                if token_type == TokenType.WHITESPACE:
                    break
                return self._emit(Token(token_type, match.group(0), location))
            else:
                raise create_invalid_character_error(self.source[self.pos], location)

    def tokenize(self) -> List[Token]:
        """
        Tokenize the whole annotation.

        Returns:
            List of tokens including the trailing EOF token
        """
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                return tokens

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def current_location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _emit(self, token: Token) -> Token:
        if log.isEnabledFor(logging.DEBUG):
            log.debug("token %s %r at %d", token.type.name, token.lexeme, token.location.offset)
        return token

    def _advance_by(self, text: str):
        """Advance past text, updating line/column."""
        for char in text:
            if char == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
        self.pos += len(text)


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize an annotation string.

    Raises:
        TypeSyntaxError: If lexing fails
    """
    return Lexer(source, filename).tokenize()
