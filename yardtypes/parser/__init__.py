"""
yardtypes Parser Package

Recursive descent parser for type annotations.  Produces immutable type
nodes: plain references, collections, fixed (positional) collections and
hash collections.

Author: xwest
"""

from .ast_nodes import (
    ASTNode, ASTNodeType, ASTVisitor, TypeNode,
    SimpleType, CollectionType, FixedCollectionType, HashCollectionType,
    DEFAULT_COLLECTION_NAME, DEFAULT_HASH_NAME,
)
from .parser import Parser, parse_string

__all__ = [
    # Core parser
    "Parser",
    "parse_string",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor", "TypeNode",
    "SimpleType", "CollectionType", "FixedCollectionType", "HashCollectionType",
    "DEFAULT_COLLECTION_NAME", "DEFAULT_HASH_NAME",
]
