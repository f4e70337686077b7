"""Pipeline orchestration for declaration scans."""

from __future__ import annotations

from .config import ScanConfig
from .emitter import DeduplicatingEmitter, DiagnosticWriter
from .extractor import DeclarationExtractor
from .logging import get_logger
from .models import ScanSummary
from .parser import GoParser, ParseError
from .renderer import render_signature
from .walker import SourceWalker


class Orchestrator:
    """Runs walk, parse, extract, render and emit over every discovered file."""

    def __init__(
        self,
        parser: GoParser | None = None,
        extractor: DeclarationExtractor | None = None,
        emitter: DeduplicatingEmitter | None = None,
        diagnostics: DiagnosticWriter | None = None,
    ) -> None:
        self.parser = parser or GoParser()
        self.extractor = extractor or DeclarationExtractor()
        self.emitter = emitter or DeduplicatingEmitter()
        self.diagnostics = diagnostics or DiagnosticWriter()
        self.logger = get_logger("orchestrator")

    def run(self, config: ScanConfig) -> ScanSummary:
        """Scan ``config.root`` and report the declarations of every file."""
        self.logger.info("Scanning %s", config.root)
        summary = ScanSummary()
        walker = SourceWalker(config, on_error=self.diagnostics.report_walk_error)

        for path in walker.walk():
            summary.files_scanned += 1
            try:
                parsed = self.parser.parse_file(path)
            except ParseError as exc:
                summary.files_failed += 1
                self.logger.debug("Skipping %s: %s", path, exc)
                self.diagnostics.report(path, exc)
                continue

            signatures = (render_signature(decl) for decl in self.extractor.extract(parsed))
            written = self.emitter.emit_file(path, signatures)
            summary.declarations_emitted += written
            self.logger.debug("%s: %d declarations", path, written)

        self.logger.info(
            "Scanned %d files (%d failed), %d declarations reported",
            summary.files_scanned,
            summary.files_failed,
            summary.declarations_emitted,
        )
        return summary


__all__ = ["Orchestrator"]
