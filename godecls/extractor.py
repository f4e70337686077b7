"""Top-level declaration extraction from parsed Go files."""

from __future__ import annotations

import re
from typing import Any, Iterator, List

from .models import Declaration, FunctionDeclaration, RecordDeclaration, VariableDeclaration
from .parser import ParsedFile

_FUNCTION_NODES = {"function_declaration", "method_declaration"}
_LINE_BREAK = re.compile(r"\s*\n\s*")


def _node_text(node: Any, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def _flat_text(node: Any, source: bytes) -> str:
    """Source text of ``node`` folded onto one line."""
    return _LINE_BREAK.sub(" ", _node_text(node, source).strip())


def _specs(node: Any, spec_type: str) -> Iterator[Any]:
    """Yield ``spec_type`` children, looking through parenthesised groups."""
    for child in node.named_children:
        if child.type == spec_type:
            yield child
        elif child.type.endswith("_list"):
            yield from _specs(child, spec_type)


class DeclarationExtractor:
    """Yields functions, struct types and package-level variables in source order."""

    def extract(self, parsed: ParsedFile) -> Iterator[Declaration]:
        source = parsed.source
        for node in parsed.root_node.named_children:
            if node.type in _FUNCTION_NODES:
                function = self._function(node, source)
                if function is not None:
                    yield function
            elif node.type == "type_declaration":
                yield from self._records(node, source)
            elif node.type == "var_declaration":
                yield from self._variables(node, source)

    def _function(self, node: Any, source: bytes) -> FunctionDeclaration | None:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None
        params: List[str] = []
        parameters = node.child_by_field_name("parameters")
        if parameters is not None:
            for param in parameters.named_children:
                for ident in param.children_by_field_name("name"):
                    params.append(_node_text(ident, source))
        return FunctionDeclaration(
            name=_node_text(name_node, source),
            params=tuple(params),
            results=tuple(self._results(node.child_by_field_name("result"), source)),
        )

    @staticmethod
    def _results(result: Any, source: bytes) -> Iterator[str]:
        if result is None:
            return
        if result.type == "type_identifier":
            yield _node_text(result, source)
            return
        if result.type != "parameter_list":
            return
        for entry in result.named_children:
            result_type = entry.child_by_field_name("type")
            if result_type is not None and result_type.type == "type_identifier":
                yield _node_text(result_type, source)

    def _records(self, node: Any, source: bytes) -> Iterator[RecordDeclaration]:
        for spec in _specs(node, "type_spec"):
            name_node = spec.child_by_field_name("name")
            shape = spec.child_by_field_name("type")
            if name_node is None or shape is None or shape.type != "struct_type":
                continue
            yield RecordDeclaration(
                name=_node_text(name_node, source),
                fields=tuple(self._field_names(shape, source)),
            )

    @staticmethod
    def _field_names(struct: Any, source: bytes) -> Iterator[str]:
        for field_list in struct.named_children:
            if field_list.type != "field_declaration_list":
                continue
            for field_decl in field_list.named_children:
                if field_decl.type != "field_declaration":
                    continue
                # Embedded fields carry only a type.
                for ident in field_decl.children_by_field_name("name"):
                    yield _node_text(ident, source)

    def _variables(self, node: Any, source: bytes) -> Iterator[VariableDeclaration]:
        for spec in _specs(node, "var_spec"):
            names = tuple(_node_text(ident, source) for ident in spec.children_by_field_name("name"))
            if not names:
                continue
            type_node = spec.child_by_field_name("type")
            value_node = spec.child_by_field_name("value")
            yield VariableDeclaration(
                names=names,
                type_text=_flat_text(type_node, source) if type_node is not None else "",
                value_text=self._value_text(value_node, source),
            )

    @staticmethod
    def _value_text(values: Any, source: bytes) -> str:
        if values is None:
            return ""
        expressions = [
            _flat_text(expr, source) for expr in values.named_children if expr.type != "comment"
        ]
        return ", ".join(expressions)


__all__ = ["DeclarationExtractor"]
