"""
Error helpers for the yardtypes parser.

The parser raises the same ``TypeSyntaxError`` as the lexer; these helpers
fill in the error code, help text and suggestions for each kind of
malformed annotation.

Author: xwest
"""

from typing import Sequence

from ..lexer.tokens import Token, TokenType, SourceLocation, TOKEN_TEXT
from ..lexer.errors import TypeSyntaxError


def _describe(token_types: Sequence[TokenType]) -> str:
    return " or ".join(f"'{TOKEN_TEXT[t]}'" if t != TokenType.EOF else TOKEN_TEXT[t]
                       for t in token_types)


def create_duplicate_name_error(pending: str, found: Token) -> TypeSyntaxError:
    """Create an error for two type names with no separator between them."""
    return TypeSyntaxError(
        message=f"expecting END, got name '{found.lexeme}'",
        location=found.location,
        code="P001",
        help_text=f"'{found.lexeme}' follows '{pending}' without a separator.",
        suggestions=[f"Separate the types with a comma: '{pending}, {found.lexeme}'"]
    )


def create_expecting_name_error(found: Token) -> TypeSyntaxError:
    """Create an error for a separator or terminator with no type before it."""
    return TypeSyntaxError(
        message=f"expecting name, got {found} at {found.location.offset}",
        location=found.location,
        code="P002",
        help_text="Every separator and closing bracket must follow a type.",
        suggestions=["Remove the extra separator", "Add the missing type name"]
    )


def create_mismatched_terminator_error(expected: Sequence[TokenType], found: Token) -> TypeSyntaxError:
    """Create an error for a closing token that does not match its opener."""
    return TypeSyntaxError(
        message=f"expecting {_describe(expected)}, got {found}",
        location=found.location,
        code="P003",
        help_text="Collections must be closed with the bracket that opened them.",
        suggestions=[f"Replace {found} with {_describe(expected)}"]
    )


def create_unclosed_collection_error(expected: Sequence[TokenType], found: Token) -> TypeSyntaxError:
    """Create an error for end of input inside an open collection."""
    return TypeSyntaxError(
        message=f"unexpected end of input, expecting {_describe(expected)}",
        location=found.location,
        code="P004",
        help_text="The annotation ended before every collection was closed.",
        suggestions=[f"Add the missing {_describe(expected)}"]
    )


def create_duplicate_suffix_error(name: str, found: Token) -> TypeSyntaxError:
    """Create an error for a second collection suffix on the same type."""
    return TypeSyntaxError(
        message=f"'{name}' already has a collection suffix, got {found}",
        location=found.location,
        code="P005",
        help_text="A type may have at most one '<...>', '(...)' or '{...}' suffix.",
        suggestions=["Separate the types with a comma"]
    )


def create_nesting_too_deep_error(location: SourceLocation) -> TypeSyntaxError:
    """Create an error for collections nested deeper than the interpreter stack allows."""
    return TypeSyntaxError(
        message="collections nested too deeply",
        location=location,
        code="P006",
        help_text="The annotation nests more collections than can be parsed.",
        suggestions=["Simplify the annotation"]
    )
