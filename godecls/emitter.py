"""Report and diagnostic sinks."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, Set, TextIO


class DeduplicatingEmitter:
    """Writes each distinct signature of a file once, in first-seen order."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def emit_file(self, path: Path | str, signatures: Iterable[str]) -> int:
        """Write ``PATH: SIGNATURE`` lines for one file and return how many were written.

        Deduplication state lives only for this call, so identical signatures
        in different files are all reported.
        """
        emitted: Set[str] = set()
        written = 0
        for signature in signatures:
            if not signature or signature in emitted:
                continue
            emitted.add(signature)
            self.stream.write(f"{path}: {signature}\n")
            written += 1
        return written


class DiagnosticWriter:
    """Error channel for per-file failures."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def report(self, path: Path | str, error: BaseException) -> None:
        self.stream.write(f"{path}: {error}\n")

    def report_walk_error(self, error: BaseException) -> None:
        self.stream.write(f"{error}\n")


__all__ = ["DeduplicatingEmitter", "DiagnosticWriter"]
