"""
English rendering of parsed type annotations.

Turns type nodes into prose for documentation, e.g. ``Array<String, Symbol>``
becomes "an Array of (Strings or Symbols)".

Rules:
- ``#meth`` is a duck type: "an object that responds to #meth", plural
  "objects that respond to #meth".
- A capitalized name takes "a"/"an" when singular; its plural appends "s",
  or "'s" when the name ends in a capital letter ("XYZ's").
- Anything else (``true``, ``nil``, ``4``) is a constant and is printed
  verbatim.
- Collection element types and hash key/value types are always rendered
  in the plural, fixed collection members in the singular.

Author: xwest
"""

from typing import Iterable, List

from ..parser.ast_nodes import (
    ASTVisitor, TypeNode, SimpleType, is_capital, CollectionType, FixedCollectionType, HashCollectionType
)
from .list_join import list_join


VOWELS = frozenset("aeiouAEIOU")


def article(name: str) -> str:
    """Return "an" when name starts with a vowel letter, otherwise "a"."""
    return "an" if name[:1] in VOWELS else "a"


class ProseRenderer(ASTVisitor):
    """
    Visitor that renders a type node as an English phrase.

    ``singular`` only affects simple types; collections always start with
    an article.
    """

    def __init__(self, singular: bool = True):
        self.singular = singular

    def render(self, node: TypeNode) -> str:
        return node.accept(self)

    def visit_simple(self, node: SimpleType) -> str:
        name = node.name
        if node.is_duck_type:
            if self.singular:
                return f"an object that responds to {name}"
            return f"objects that respond to {name}"
        if node.is_constant:
            return name
        if self.singular:
            return f"{article(name)} {name}"
        return f"{name}'s" if is_capital(name[-1]) else f"{name}s"

    def visit_collection(self, node: CollectionType) -> str:
        return f"{article(node.name)} {node.name} of ({list_join(_plural(node.types))})"

    def visit_fixed_collection(self, node: FixedCollectionType) -> str:
        members = " followed by ".join(render(t, singular=True) for t in node.types)
        return f"{article(node.name)} {node.name} containing ({members})"

    def visit_hash_collection(self, node: HashCollectionType) -> str:
        return (f"{article(node.name)} {node.name} with keys made of "
                f"({list_join(_plural(node.key_types))}) "
                f"and values of ({list_join(_plural(node.value_types))})")


def _plural(types: Iterable[TypeNode]) -> List[str]:
    return [render(t, singular=False) for t in types]


def render(node: TypeNode, singular: bool = True) -> str:
    """
    Render a type node as English.

    Args:
        node: Parsed type node
        singular: Render a simple type as one instance ("a String") rather
            than many ("Strings")

    Returns:
        The English description
    """
    return ProseRenderer(singular).render(node)


def render_all(nodes: Iterable[TypeNode], separator: str = "; ", singular: bool = True) -> str:
    """Render a parsed annotation, joining its top level types with separator."""
    return separator.join(render(node, singular) for node in nodes)
