# -*- coding: utf-8 -*-
"""
Go source scanner.

Parses one Go file with tree-sitter and feeds every call expression and
constant declaration through the patterns in :mod:`i18n_tool.scanner.patterns`.
Matches are added to a caller-supplied set, shared by every file of a run.

A file that does not parse aborts the run: tree-sitter recovers from syntax
errors, so we check the tree for ERROR/MISSING nodes and raise GoParseError
instead of extracting from a half-understood file.
"""
from __future__ import annotations

import os
from typing import Iterator, List, Mapping, Optional, Set, AbstractSet, Tuple, Union

from tree_sitter import Language, Node, Parser

from i18n_tool.exceptions import GoParseError
from i18n_tool.utils.logging import tool_logger

from .patterns import match_call, match_constant

PathLike = Union[str, "os.PathLike[str]"]

# Cached parser
_GO_PARSER: Optional[Parser] = None


def get_go_parser() -> Parser:
    """Lazy-load the Go parser."""
    global _GO_PARSER
    if _GO_PARSER is None:
        import tree_sitter_go as ts_go

        _GO_PARSER = Parser(Language(ts_go.language()))
    return _GO_PARSER


def iter_nodes(root: Node) -> Iterator[Node]:
    """Pre-order traversal of every node; iterative so deep files cannot overflow."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _first_error(root: Node) -> Optional[Node]:
    for node in iter_nodes(root):
        if node.type == "ERROR" or node.is_missing:
            return node
    return None


def _text(node: Node) -> str:
    return node.text.decode("utf-8", errors="replace")


def callee_name(call: Node) -> Optional[str]:
    """Terminal name of a call's callee: ``T`` for both ``T(...)`` and ``c.T(...)``.

    Other callee shapes (func literals, index expressions, parenthesized) have none.
    """
    fn = call.child_by_field_name("function")
    if fn is None:
        return None
    if fn.type == "identifier":
        return _text(fn)
    if fn.type == "selector_expression":
        field = fn.child_by_field_name("field")
        return _text(field) if field is not None else None
    return None


def call_arguments(call: Node) -> List[Node]:
    args = call.child_by_field_name("arguments")
    if args is None:
        return []
    return [a for a in args.named_children if a.type != "comment"]


def const_pairs(decl: Node) -> Iterator[Tuple[str, Node]]:
    """(name, value) pairs of a ``const`` declaration, grouped or not.

    Names and values pair by position; specs without values (iota
    continuation lines) yield nothing.
    """
    for spec in decl.named_children:
        if spec.type != "const_spec":
            continue
        names = [n for n in spec.children_by_field_name("name") if n.type != ","]
        value_list = spec.child_by_field_name("value")
        if value_list is None:
            continue
        values = [v for v in value_list.named_children if v.type != "comment"]
        for name, value in zip(names, values):
            yield _text(name), value


def scan_tree(
    root: Node,
    ids: Set[str],
    rules: Optional[Mapping[str, int]] = None,
    constants: Optional[AbstractSet[str]] = None,
) -> int:
    """Add every identifier found under ``root`` to ``ids``; returns the match count."""
    matches = 0
    for node in iter_nodes(root):
        if node.type == "call_expression":
            found = match_call(callee_name(node), call_arguments(node), rules)
            if found is not None:
                ids.add(found)
                matches += 1
        elif node.type == "const_declaration":
            for name, value in const_pairs(node):
                found = match_constant(name, value, constants)
                if found is not None:
                    ids.add(found)
                    matches += 1
    return matches


def parse_source(source: bytes, path: Optional[PathLike] = None) -> Node:
    """Parse Go source and return the root node; raise GoParseError on syntax errors.

    Go source must be valid UTF-8; a stray byte is reported at its line and
    byte column, like the Go parser does.
    """
    where = os.fspath(path) if path is not None else None
    try:
        source.decode("utf-8")
    except UnicodeDecodeError as e:
        line = source.count(b"\n", 0, e.start) + 1
        column = e.start - (source.rfind(b"\n", 0, e.start) + 1) + 1
        raise GoParseError(where, line, column, "illegal UTF-8 encoding") from e

    tree = get_go_parser().parse(source)
    root = tree.root_node
    if root.has_error:
        bad = _first_error(root) or root
        line, column = bad.start_point[0] + 1, bad.start_point[1] + 1
        detail = f"missing {bad.type}" if bad.is_missing else "syntax error"
        raise GoParseError(where, line, column, detail)
    return root


def scan_source(
    source: Union[bytes, str],
    ids: Set[str],
    path: Optional[PathLike] = None,
    rules: Optional[Mapping[str, int]] = None,
    constants: Optional[AbstractSet[str]] = None,
) -> int:
    if isinstance(source, str):
        source = source.encode("utf-8")
    root = parse_source(source, path)
    return scan_tree(root, ids, rules, constants)


def scan_file(
    path: PathLike,
    ids: Set[str],
    rules: Optional[Mapping[str, int]] = None,
    constants: Optional[AbstractSet[str]] = None,
) -> int:
    """Scan one file on disk. OSError from reading is left to the caller."""
    with open(path, "rb") as f:
        source = f.read()
    matches = scan_source(source, ids, path, rules, constants)
    tool_logger.debug("Scanned %s: %d match(es)", os.fspath(path), matches)
    return matches
