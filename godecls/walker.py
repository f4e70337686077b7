"""Source file discovery for godecls scans."""

from __future__ import annotations

import os
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Callable, Iterator, Sequence

from .config import ScanConfig
from .logging import get_logger

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
}

WalkErrorHandler = Callable[[OSError], None]


def _matches_any(rel_path: str, patterns: Sequence[str]) -> bool:
    for pattern in patterns:
        pattern = pattern.strip().rstrip("/")
        if not pattern:
            continue
        if fnmatchcase(rel_path, pattern):
            return True
        if "/" not in pattern and any(fnmatchcase(part, pattern) for part in rel_path.split("/")):
            return True
    return False


class SourceWalker:
    """Yields candidate source files under the configured root, in lexical order."""

    def __init__(self, config: ScanConfig, on_error: WalkErrorHandler | None = None) -> None:
        self.config = config
        self._on_error = on_error
        self.logger = get_logger("walker")

    def walk(self) -> Iterator[Path]:
        root = self.config.root
        self.logger.debug("Walking %s for *%s files", root, self.config.extension)
        for dirpath, dirnames, filenames in os.walk(root, onerror=self._handle_error):
            current_dir = Path(dirpath)
            rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

            kept_dirs = []
            for name in sorted(dirnames):
                if name in _EXCLUDED_DIRS:
                    continue
                rel_path = f"{rel_dir}/{name}" if rel_dir else name
                if _matches_any(rel_path, self.config.exclude_paths):
                    self.logger.debug("Skipping excluded directory %s", rel_path)
                    continue
                kept_dirs.append(name)
            dirnames[:] = kept_dirs

            for filename in sorted(filenames):
                if not filename.endswith(self.config.extension):
                    continue
                rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
                if _matches_any(rel_path, self.config.exclude_paths):
                    self.logger.debug("Skipping excluded file %s", rel_path)
                    continue
                yield current_dir / filename

    def _handle_error(self, error: OSError) -> None:
        self.logger.debug("Skipping unreadable path: %s", error)
        if self._on_error is not None:
            self._on_error(error)


__all__ = ["SourceWalker", "WalkErrorHandler"]
