"""Canonical one-line signatures for extracted declarations."""

from __future__ import annotations

from .models import Declaration, FunctionDeclaration, RecordDeclaration, VariableDeclaration


def render_signature(declaration: Declaration) -> str:
    """Render ``declaration`` as the line used both for output and for deduplication.

    Functions render as ``function NAME(P1, P2) R1 R2``, structs as
    ``struct NAME { F1, F2 }`` and variables as ``var N1, N2 TYPE = V1, V2``.
    Empty trailing parts are dropped together with their separator, except the
    struct field list which always keeps its braces. A variable spec without
    names renders as the empty string.
    """
    if isinstance(declaration, FunctionDeclaration):
        return _render_function(declaration)
    if isinstance(declaration, RecordDeclaration):
        return f"struct {declaration.name} {{ {', '.join(declaration.fields)} }}"
    if isinstance(declaration, VariableDeclaration):
        return _render_variable(declaration)
    raise TypeError(f"Unsupported declaration type: {type(declaration).__name__}")


def _render_function(function: FunctionDeclaration) -> str:
    signature = f"function {function.name}({', '.join(function.params)})"
    if function.results:
        signature += " " + " ".join(function.results)
    return signature


def _render_variable(variable: VariableDeclaration) -> str:
    if not variable.names:
        return ""
    parts = ["var", ", ".join(variable.names)]
    if variable.type_text:
        parts.append(variable.type_text)
    if variable.value_text:
        parts.append(f"= {variable.value_text}")
    return " ".join(parts)


__all__ = ["render_signature"]
