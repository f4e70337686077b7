"""CLI entrypoint for godecls."""

from __future__ import annotations

import argparse
import sys

from .config import ConfigError, apply_overrides, load_config
from .logging import LOG_FORMATS, configure_logging, get_logger
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="godecls",
        description="List the top-level functions, structs and variables of Go source trees.",
    )
    parser.add_argument(
        "-r",
        "--root",
        default=".",
        help="Specify the root directory (defaults to current directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Show verbose debug information, each -v bumps log level.",
    )
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Log record format written to stderr (default: text).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML config file (defaults to ROOT/.godecls.yml when present).",
    )
    parser.add_argument(
        "--extension",
        default=None,
        help="Source file suffix to scan (default: .go).",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        action="append",
        dest="excludes",
        metavar="GLOB",
        help="Skip paths matching GLOB; may be repeated.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for godecls."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.root, args.config)
        config = apply_overrides(
            config,
            extension=args.extension,
            exclude_paths=config.exclude_paths + args.excludes if args.excludes else None,
            log_format=args.log_format,
            verbosity=args.verbose,
        )
    except ConfigError as exc:
        parser.exit(1, f"godecls: {exc}\n")

    configure_logging(verbosity=config.verbosity, log_format=config.log_format)

    try:
        Orchestrator().run(config)
    except Exception as exc:  # pragma: no cover - defensive guard
        get_logger().error("run failed: %s", exc, exc_info=config.verbosity > 1)
        parser.exit(1, f"godecls run failed: {exc}\nRun with -vv for more details.\n")


if __name__ == "__main__":
    main(sys.argv[1:])
