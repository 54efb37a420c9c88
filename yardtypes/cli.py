"""Command line front end: describe type annotations in English."""

import logging
import sys
from typing import List, Optional

import click

from . import __version__
from .lexer import TypeSyntaxError
from .parser import Parser, TypeNode, HashCollectionType
from .prose import render_all


def format_tree(node: TypeNode, indent: int = 0) -> List[str]:
    """Render a node and its children as an indented outline."""
    pad = "  " * indent
    lines = [f"{pad}{node.node_type.value} {node.name}"]
    if isinstance(node, HashCollectionType):
        lines.append(f"{pad}  keys:")
        for child in node.key_types:
            lines.extend(format_tree(child, indent + 2))
        lines.append(f"{pad}  values:")
        for child in node.value_types:
            lines.extend(format_tree(child, indent + 2))
    else:
        for child in node.children():
            lines.extend(format_tree(child, indent + 1))
    return lines


def _describe_one(text: str, separator: str, plural: bool, tree: bool) -> str:
    nodes = Parser(text, "<argument>").parse()
    if tree:
        return "\n".join(line for node in nodes for line in format_tree(node))
    return render_all(nodes, separator, singular=not plural)


@click.command()
@click.version_option(version=__version__, prog_name="yardtypes")
@click.argument("types", nargs=-1)
@click.option("-s", "--separator", default="; ", show_default=True,
              help="Text placed between top level types.")
@click.option("--plural", is_flag=True, help="Render top level types in the plural.")
@click.option("--tree", is_flag=True, help="Print the parsed type tree instead of prose.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("-i", "--input", "input_file", type=click.File("r"), default="-",
              help="Read annotations from this file when no TYPES are given.")
def cli(types: tuple, separator: str, plural: bool, tree: bool, verbose: bool,
        input_file) -> None:
    """Describe TYPES annotations in English, one line each (stdin if none)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )

    inputs = list(types)
    if not inputs:
        inputs = [line.strip() for line in input_file if line.strip()]

    failed = False
    for text in inputs:
        try:
            click.echo(_describe_one(text, separator, plural, tree))
        except TypeSyntaxError as e:
            failed = True
            click.echo(f"{text}\n{e}", err=True, nl=False)

    if failed:
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    cli.main(args=argv, prog_name="yardtypes")
