"""
yardtypes

Parses the small type-annotation grammar used in documentation comments
(``Array<String, Symbol>``, ``Hash{String => #read}``, ``(Integer, nil)``)
and renders it as English ("an Array of (Strings or Symbols)").

Architecture:
    yardtypes/
    ├── lexer/           # Tokenization of annotation strings
    ├── parser/          # Recursive descent parser and type nodes
    ├── prose/           # English rendering
    └── cli.py           # Command line front end

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from typing import List

from .lexer import Lexer, TypeSyntaxError
from .parser import (
    Parser, TypeNode, SimpleType, CollectionType, FixedCollectionType, HashCollectionType
)
from .prose import list_join, render, render_all


def parse(text: str) -> List[TypeNode]:
    """Parse a type annotation into its top level type nodes."""
    return Parser(text).parse()


def describe(text: str, separator: str = "; ", singular: bool = True) -> str:
    """Parse a type annotation and render it as English in one step."""
    return render_all(parse(text), separator, singular)


__all__ = [
    # Entry points
    "parse",
    "render",
    "describe",
    "list_join",
    "render_all",

    # Core classes
    "Lexer",
    "Parser",
    "TypeSyntaxError",
    "TypeNode",
    "SimpleType",
    "CollectionType",
    "FixedCollectionType",
    "HashCollectionType",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
