"""
Abstract Syntax Tree node definitions for type annotations.

A parsed annotation is a sequence of type nodes.  There are four variants:
a plain type reference and three kinds of collections.  Nodes are frozen
dataclasses holding tuples, so a tree cannot change once the parser has
built it.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import Any, List, Tuple, Union
from dataclasses import dataclass
from enum import Enum


DEFAULT_COLLECTION_NAME = "Array"
DEFAULT_HASH_NAME = "Hash"


def is_capital(char: str) -> bool:
    """True for an ASCII capital letter."""
    return "A" <= char <= "Z"


class ASTNodeType(Enum):
    """Enumeration of all type node variants."""
    SIMPLE = "Simple"
    COLLECTION = "Collection"
    FIXED_COLLECTION = "FixedCollection"
    HASH_COLLECTION = "HashCollection"


class ASTVisitor(ABC):
    """
    Abstract visitor interface for type nodes.

    Every variant has its own abstract method, so a visitor that forgets a
    variant cannot be instantiated.
    """

    @abstractmethod
    def visit_simple(self, node: 'SimpleType') -> Any:
        pass

    @abstractmethod
    def visit_collection(self, node: 'CollectionType') -> Any:
        pass

    @abstractmethod
    def visit_fixed_collection(self, node: 'FixedCollectionType') -> Any:
        pass

    @abstractmethod
    def visit_hash_collection(self, node: 'HashCollectionType') -> Any:
        pass


class ASTNode(ABC):
    """Base class for all type nodes."""

    node_type: ASTNodeType

    @abstractmethod
    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""

    def walk(self):
        """Yield this node and all of its descendants, depth first."""
        yield self
        for child in self.children():
            yield from child.walk()


@dataclass(frozen=True)
class SimpleType(ASTNode):
    """A leaf type reference: a class name, '#method' or a literal constant."""
    name: str
    node_type = ASTNodeType.SIMPLE

    def __post_init__(self):
        if not self.name:
            raise ValueError("type name must not be empty")

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_simple(self)

    def children(self) -> List[ASTNode]:
        return []

    @property
    def is_duck_type(self) -> bool:
        return self.name.startswith("#")

    @property
    def is_constant(self) -> bool:
        return not self.is_duck_type and not is_capital(self.name[0])


@dataclass(frozen=True)
class CollectionType(ASTNode):
    """A collection whose element types are alternatives: ``Array<A, B>``."""
    name: str
    types: Tuple['TypeNode', ...]
    node_type = ASTNodeType.COLLECTION

    def __post_init__(self):
        if not self.name:
            raise ValueError("collection name must not be empty")
        object.__setattr__(self, "types", tuple(self.types))

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_collection(self)

    def children(self) -> List[ASTNode]:
        return list(self.types)


@dataclass(frozen=True)
class FixedCollectionType(CollectionType):
    """A positional collection whose element types apply in order: ``Array(A, B)``."""
    node_type = ASTNodeType.FIXED_COLLECTION

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_fixed_collection(self)


@dataclass(frozen=True)
class HashCollectionType(ASTNode):
    """A mapping with alternative key and value types: ``Hash{K => V}``."""
    name: str
    key_types: Tuple['TypeNode', ...]
    value_types: Tuple['TypeNode', ...]
    node_type = ASTNodeType.HASH_COLLECTION

    def __post_init__(self):
        if not self.name:
            raise ValueError("hash name must not be empty")
        object.__setattr__(self, "key_types", tuple(self.key_types))
        object.__setattr__(self, "value_types", tuple(self.value_types))

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_hash_collection(self)

    def children(self) -> List[ASTNode]:
        return list(self.key_types) + list(self.value_types)


TypeNode = Union[SimpleType, CollectionType, FixedCollectionType, HashCollectionType]
