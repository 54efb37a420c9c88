"""
Test suite for the yardtypes parser.

Tests cover:
- Simple, namespaced and listed type names
- Collection, fixed collection and hash collection suffixes
- Default collection names
- Syntax errors and their error codes

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from yardtypes.lexer import TypeSyntaxError
from yardtypes.lexer.errors import ERROR_CODES
from yardtypes.parser import (
    Parser, parse_string, ASTNodeType,
    SimpleType, CollectionType, FixedCollectionType, HashCollectionType
)


class TestParser(unittest.TestCase):
    """Test cases for well-formed annotations."""

    def test_regular_class_name(self):
        types = parse_string("MyClass")
        self.assertEqual(len(types), 1)
        self.assertIsInstance(types[0], SimpleType)
        self.assertEqual(types[0].name, "MyClass")

    def test_path_reference_name(self):
        types = parse_string("A::B")
        self.assertEqual(types, [SimpleType("A::B")])

    def test_list_of_simple_names(self):
        types = parse_string("A, B::C, D, E")
        self.assertEqual([t.name for t in types], ["A", "B::C", "D", "E"])
        self.assertTrue(all(isinstance(t, SimpleType) for t in types))

    def test_semicolon_separator(self):
        self.assertEqual(parse_string("A; B"), [SimpleType("A"), SimpleType("B")])

    def test_constants_and_duck_types(self):
        types = parse_string("#read, true, nil, 4")
        self.assertEqual([t.name for t in types], ["#read", "true", "nil", "4"])

    def test_collection_type(self):
        types = parse_string("MyList<String>")
        self.assertEqual(types, [CollectionType("MyList", [SimpleType("String")])])
        self.assertEqual(types[0].node_type, ASTNodeType.COLLECTION)

    def test_collection_without_name(self):
        self.assertEqual(parse_string("<String>")[0].name, "Array")

    def test_fixed_collection_without_name(self):
        types = parse_string("(String)")
        self.assertIsInstance(types[0], FixedCollectionType)
        self.assertEqual(types[0].name, "Array")

    def test_hash_collection_without_name(self):
        types = parse_string("{K=>V}")
        self.assertEqual(types, [HashCollectionType("Hash", [SimpleType("K")], [SimpleType("V")])])

    def test_hash_collection_with_lists(self):
        types = parse_string("Hash{String, Symbol => Symbol, Number}")
        hash_type = types[0]
        self.assertEqual([t.name for t in hash_type.key_types], ["String", "Symbol"])
        self.assertEqual([t.name for t in hash_type.value_types], ["Symbol", "Number"])

    def test_fixed_collection_preserves_order(self):
        types = parse_string("Array(String, Symbol, #to_s)")
        self.assertEqual([t.name for t in types[0].types], ["String", "Symbol", "#to_s"])

    def test_nested_collections(self):
        types = parse_string("Array<String, Array<Symbol, List(String, {K=>V})>>")
        self.assertEqual(len(types), 1)
        outer = types[0]
        inner = outer.types[1]
        self.assertIsInstance(inner, CollectionType)
        fixed = inner.types[1]
        self.assertIsInstance(fixed, FixedCollectionType)
        self.assertEqual(fixed.name, "List")
        self.assertIsInstance(fixed.types[1], HashCollectionType)

    def test_multiple_collections(self):
        types = parse_string("Array<Foo, Bar>, List(String), {Foo => Symbol}")
        self.assertEqual(
            [t.node_type for t in types],
            [ASTNodeType.COLLECTION, ASTNodeType.FIXED_COLLECTION, ASTNodeType.HASH_COLLECTION]
        )

    def test_whitespace_everywhere(self):
        self.assertEqual(parse_string("  Set < Number >  "),
                         [CollectionType("Set", [SimpleType("Number")])])

    def test_parse_is_repeatable(self):
        parser = Parser("A, B")
        self.assertEqual(parser.parse(), parser.parse())

    def test_walk_visits_every_node(self):
        types = parse_string("Array<String, Hash{K => V}>")
        names = [node.name for node in types[0].walk()]
        self.assertEqual(names, ["Array", "String", "Hash", "K", "V"])

    def test_nodes_are_immutable(self):
        node = parse_string("String")[0]
        with self.assertRaises(AttributeError):
            node.name = "Symbol"


class TestParserErrors(unittest.TestCase):
    """Test cases for malformed annotations."""

    def _fail(self, source: str) -> TypeSyntaxError:
        with self.assertRaises(TypeSyntaxError) as ctx:
            parse_string(source)
        self.assertIn(ctx.exception.code, ERROR_CODES)
        return ctx.exception

    def test_two_commas_in_a_row(self):
        self.assertEqual(self._fail("A,,B").code, "P002")

    def test_two_types_not_separated(self):
        error = self._fail("A B")
        self.assertEqual(error.code, "P001")
        self.assertEqual(error.position, 2)

    def test_comma_without_following_type(self):
        self.assertEqual(self._fail("A, ").code, "P002")

    def test_unrecognized_character(self):
        self.assertEqual(self._fail("$").code, "L001")

    def test_leading_separator(self):
        self.assertEqual(self._fail(", A").code, "P002")

    def test_empty_input(self):
        self.assertEqual(self._fail("").code, "P002")

    def test_empty_collection(self):
        self.assertEqual(self._fail("Array<>").code, "P002")

    def test_name_after_collection(self):
        self.assertEqual(self._fail("Array<String> Foo").code, "P001")

    def test_mismatched_brackets(self):
        self.assertEqual(self._fail("Array<String)").code, "P003")
        self.assertEqual(self._fail("Array(String>").code, "P003")
        self.assertEqual(self._fail("Hash{K}").code, "P003")

    def test_stray_closer_at_top_level(self):
        self.assertEqual(self._fail("A>").code, "P003")
        self.assertEqual(self._fail("A => B").code, "P003")

    def test_unclosed_collection(self):
        self.assertEqual(self._fail("Array<String").code, "P004")
        self.assertEqual(self._fail("Hash{K => V").code, "P004")

    def test_duplicate_suffix(self):
        self.assertEqual(self._fail("Array<String>(Symbol)").code, "P005")

    def test_non_ascii_names(self):
        self.assertEqual(self._fail("\u00c9lan, \u00dcber<\u00e4rger>").code, "L001")

    def test_deep_nesting_is_a_syntax_error(self):
        error = self._fail("<" * 5000 + "A" + ">" * 5000)
        self.assertEqual(error.code, "P006")
        self.assertIsNone(error.__cause__)

    def test_moderate_nesting_parses(self):
        types = parse_string("<" * 50 + "A" + ">" * 50)
        self.assertEqual(len(list(types[0].walk())), 51)

    def test_error_message_is_readable(self):
        error = self._fail("A, ")
        self.assertIn("expecting name", str(error))
        self.assertIn("help:", str(error))
        self.assertEqual(error.diagnostic.severity, "error")
        self.assertTrue(str(error).startswith("ERROR: [P002]"))


if __name__ == '__main__':
    unittest.main()
