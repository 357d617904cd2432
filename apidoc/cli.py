"""CLI entrypoint for apidoc."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict

from .config import ConfigError, GenerationConfig, find_config_file, load_config
from .diagnostics import report_error
from .errors import ApidocError, ExtractionError, PluginError, PublishError
from .logging import configure_logging
from .pipeline import Generator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apidoc",
        description="Generate API documentation data from JavaScript sources.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML or JSON config file (defaults to .apidoc.yml/.apidoc.json).",
    )
    parser.add_argument("--source", help="Source directory to document.")
    parser.add_argument("--destination", help="Output directory for index.json and ASTs.")
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Enable debug output for this run (same as `debug: true`).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )
    return parser


def _load(args: argparse.Namespace) -> GenerationConfig:
    config_path = args.config
    if config_path is None:
        config_path = find_config_file(Path.cwd())

    config = load_config(config_path) if config_path is not None else GenerationConfig()

    overrides: Dict[str, object] = {}
    if args.source:
        overrides["source"] = args.source
    if args.destination:
        overrides["destination"] = args.destination
    if args.debug is not None:
        overrides["debug"] = args.debug
    for key, value in overrides.items():
        setattr(config, key, value)
    return config


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for apidoc."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = _load(args)
        result = Generator().run(config)
    except ConfigError as exc:
        parser.exit(1, f"apidoc: configuration error: {exc}\n")
    except PluginError as exc:
        parser.exit(1, f"apidoc: plugin error: {exc}\n")
    except ExtractionError as exc:
        report_error(exc)
        parser.exit(1, f"apidoc: extraction failed: {exc}\nRun with --verbose for more details.\n")
    except PublishError as exc:
        report_error(exc)
        parser.exit(1, f"apidoc: publish failed: {exc}\n")
    except ApidocError as exc:  # pragma: no cover - future error kinds
        parser.exit(1, f"apidoc failed: {exc}\n")

    print(f"Generated {len(result.docs)} docs ({len(result.skipped)} file(s) skipped)")


if __name__ == "__main__":
    main(sys.argv[1:])
