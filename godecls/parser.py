"""Tree-sitter backed parsing of Go source files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import tree_sitter_go
from tree_sitter import Language, Parser, Tree

from .logging import get_logger

_SNIPPET_LIMIT = 20
_TOP_LEVEL_NODES = {
    "import_declaration",
    "function_declaration",
    "method_declaration",
    "type_declaration",
    "var_declaration",
    "const_declaration",
}


class ParseError(Exception):
    """A source file could not be turned into a usable syntax tree."""


class GoSyntaxError(ParseError):
    """The source text is not valid Go syntax."""

    def __init__(self, line: int, column: int, detail: str) -> None:
        super().__init__(f"{line}:{column}: syntax error: {detail}")
        self.line = line
        self.column = column
        self.detail = detail


class SourceReadError(ParseError):
    """The source file could not be read from disk."""


@dataclass
class ParsedFile:
    """A parsed file: its path, raw bytes and tree-sitter tree."""

    path: Path
    source: bytes
    tree: Tree

    @property
    def root_node(self) -> Any:
        return self.tree.root_node


class GoParser:
    """Parses Go source into tree-sitter trees, rejecting trees with syntax errors."""

    def __init__(self) -> None:
        self._parser: Optional[Parser] = None
        self.logger = get_logger("parser")

    def parse_file(self, path: Path) -> ParsedFile:
        try:
            source = path.read_bytes()
        except OSError as exc:
            raise SourceReadError(exc.strerror or str(exc)) from exc
        return self.parse(path, source)

    def parse(self, path: Path, source: bytes) -> ParsedFile:
        tree = self._get_parser().parse(source)
        root = tree.root_node
        if root.has_error:
            raise _syntax_error(root, source)
        _check_top_level(root)
        self.logger.debug("Parsed %s (%d bytes)", path, len(source))
        return ParsedFile(path=path, source=source, tree=tree)

    def _get_parser(self) -> Parser:
        if self._parser is None:
            self._parser = Parser(Language(tree_sitter_go.language()))
        return self._parser


def _check_top_level(root: Any) -> None:
    """Reject file-scope shapes the grammar tolerates but Go does not."""
    children = [child for child in root.named_children if child.type != "comment"]
    if not children or children[0].type != "package_clause":
        node = children[0] if children else root
        line, column = node.start_point[0] + 1, node.start_point[1] + 1
        raise GoSyntaxError(line, column, "expected 'package' clause")
    for child in children[1:]:
        if child.type not in _TOP_LEVEL_NODES:
            line, column = child.start_point[0] + 1, child.start_point[1] + 1
            raise GoSyntaxError(line, column, "non-declaration statement outside function body")


def _first_error_node(root: Any) -> Any:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        if node.has_error:
            stack.extend(reversed(node.children))
    return root


def _syntax_error(root: Any, source: bytes) -> GoSyntaxError:
    node = _first_error_node(root)
    line, column = node.start_point[0] + 1, node.start_point[1] + 1
    if node.is_missing:
        return GoSyntaxError(line, column, f"missing {node.type}")
    snippet = source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")
    snippet = " ".join(snippet.split())
    if len(snippet) > _SNIPPET_LIMIT:
        snippet = snippet[:_SNIPPET_LIMIT] + "..."
    if not snippet:
        return GoSyntaxError(line, column, "unexpected end of input")
    return GoSyntaxError(line, column, f"unexpected {snippet!r}")


__all__ = ["GoParser", "GoSyntaxError", "ParseError", "ParsedFile", "SourceReadError"]
