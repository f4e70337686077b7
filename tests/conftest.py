from __future__ import annotations

import logging
from pathlib import Path

import pytest

from godecls.parser import GoParser, ParsedFile
from tests._fixtures.source_tree import SourceTreeBuilder


@pytest.fixture
def source_tree(tmp_path: Path) -> SourceTreeBuilder:
    """Provide a reusable source tree builder rooted at the pytest tmp_path."""
    return SourceTreeBuilder(tmp_path)


@pytest.fixture
def parse_go():
    """Parse an in-memory Go snippet."""
    parser = GoParser()

    def _parse(source: str, path: str = "sample.go") -> ParsedFile:
        return parser.parse(Path(path), source.encode("utf-8"))

    return _parse


@pytest.fixture(autouse=True)
def _reset_godecls_logger():
    """Drop handlers installed by configure_logging so they never outlive a test's streams."""
    yield
    logger = logging.getLogger("godecls")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
