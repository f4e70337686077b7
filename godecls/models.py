"""Core data models shared across godecls components."""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class FunctionDeclaration:
    """A free function or method declared at file scope."""

    name: str
    params: Tuple[str, ...] = ()
    results: Tuple[str, ...] = ()


@dataclass(frozen=True)
class RecordDeclaration:
    """A named struct type and the names of its fields."""

    name: str
    fields: Tuple[str, ...] = ()


@dataclass(frozen=True)
class VariableDeclaration:
    """One package-level ``var`` spec, possibly declaring several names."""

    names: Tuple[str, ...]
    type_text: str = ""
    value_text: str = ""


Declaration = Union[FunctionDeclaration, RecordDeclaration, VariableDeclaration]


@dataclass
class ScanSummary:
    """Counters collected over one run."""

    files_scanned: int = 0
    files_failed: int = 0
    declarations_emitted: int = 0
