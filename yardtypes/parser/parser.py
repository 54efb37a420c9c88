"""
yardtypes recursive descent parser

Grammar:

    type_list         := type_spec (SEP type_spec)* END
    type_spec         := NAME? collection_suffix?
    collection_suffix := '<' type_list '>'
                       | '(' type_list ')'
                       | '{' type_list '=>' type_list '}'
    SEP               := ',' | ';'

Each bracket opens a nested call to _parse_type_list that shares the lexer
cursor and returns its own list of nodes.  A nested list must be closed by
the token matching its opener; the top level list is closed by end of input.

Author: xwest
"""

import logging
from typing import List, Optional

from ..lexer.lexer import Lexer
from ..lexer.tokens import Token, TokenType
from .ast_nodes import (
    TypeNode, SimpleType, CollectionType, FixedCollectionType, HashCollectionType,
    DEFAULT_COLLECTION_NAME, DEFAULT_HASH_NAME
)
from .errors import (
    create_duplicate_name_error, create_expecting_name_error,
    create_mismatched_terminator_error, create_unclosed_collection_error,
    create_duplicate_suffix_error, create_nesting_too_deep_error
)


log = logging.getLogger("yardtypes.parser")


class Parser:
    """
    Type annotation parser.

    Turns an annotation string into a list of type nodes.  Any syntax error
    is fatal and raised as TypeSyntaxError; no partial result is returned.
    """

    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the parser with an annotation string.

        Args:
            source: Type annotation text, e.g. ``Array<String, Symbol>``
            filename: Name used in diagnostics
        """
        self.source = source
        self.filename = filename
        self.lexer = Lexer(source, filename)

    def parse(self) -> List[TypeNode]:
        """
        Parse the annotation.

        Returns:
            Top level type nodes in source order

        Raises:
            TypeSyntaxError: If the annotation is malformed
        """
        self.lexer = Lexer(self.source, self.filename)
        try:
            return self._parse_type_list(TokenType.EOF)
        except RecursionError:
            raise create_nesting_too_deep_error(self.lexer.current_location()) from None

    def _parse_type_list(self, closer: TokenType) -> List[TypeNode]:
        """Parse type specs up to and including the closer token."""
        types: List[TypeNode] = []
        name: Optional[str] = None
        node: Optional[TypeNode] = None

        while True:
            token = self.lexer.next_token()

            if token.type == TokenType.TYPE_NAME:
                if name is not None:
                    raise create_duplicate_name_error(name, token)
                name = token.lexeme

            elif token.type == TokenType.TYPE_NEXT:
                types.append(self._finish_type(name, node, token))
                name = None
                node = None

            elif token.type == TokenType.COLLECTION_START:
                self._check_no_suffix(name, node, token)
                name = name or DEFAULT_COLLECTION_NAME
                node = CollectionType(name, self._parse_type_list(TokenType.COLLECTION_END))

            elif token.type == TokenType.FIXED_COLLECTION_START:
                self._check_no_suffix(name, node, token)
                name = name or DEFAULT_COLLECTION_NAME
                node = FixedCollectionType(name, self._parse_type_list(TokenType.FIXED_COLLECTION_END))

            elif token.type == TokenType.HASH_COLLECTION_START:
                self._check_no_suffix(name, node, token)
                name = name or DEFAULT_HASH_NAME
                key_types = self._parse_type_list(TokenType.HASH_COLLECTION_NEXT)
                value_types = self._parse_type_list(TokenType.HASH_COLLECTION_END)
                node = HashCollectionType(name, key_types, value_types)

            else:
                # Closing bracket, hash arrow or end of input
                types.append(self._finish_type(name, node, token))
                if token.type != closer:
                    if token.type == TokenType.EOF:
                        raise create_unclosed_collection_error([closer], token)
                    raise create_mismatched_terminator_error([closer], token)
                return types

    def _finish_type(self, name: Optional[str], node: Optional[TypeNode], token: Token) -> TypeNode:
        """Turn the pending name or collection into a finished node."""
        if name is None:
            raise create_expecting_name_error(token)
        if node is None:
            node = SimpleType(name)

        if log.isEnabledFor(logging.DEBUG):
            log.debug("parsed %s %r before %s", node.node_type.value, node.name, token)
        return node

    def _check_no_suffix(self, name: Optional[str], node: Optional[TypeNode], token: Token):
        if node is not None:
            raise create_duplicate_suffix_error(name, token)


def parse_string(source: str, filename: str = "<string>") -> List[TypeNode]:
    """
    Convenience function to parse an annotation string.

    Args:
        source: Type annotation text
        filename: Name used in diagnostics

    Returns:
        List of top level type nodes

    Raises:
        TypeSyntaxError: If parsing fails
    """
    return Parser(source, filename).parse()
